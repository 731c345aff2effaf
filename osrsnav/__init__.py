# osrsnav/__init__.py
from .client import NavClient
from .edges import Door, Edge, GameObjectEdge, ItemTeleport, SpellTeleport, Step, decode_path, encode_path
from .errors import (
    MalformedEdge,
    NavError,
    TransportFailure,
    UnexpectedStatus,
    UnknownSkill,
    UnsupportedEdge,
    UnsupportedEncoding,
)
from .models import Coordinate, DataSelection, GameState, PathGenerationRequest
from .state import build_game_state
from .webpath import WebPath, convert

__all__ = [
    "Coordinate",
    "DataSelection",
    "Door",
    "Edge",
    "GameObjectEdge",
    "GameState",
    "ItemTeleport",
    "MalformedEdge",
    "NavClient",
    "NavError",
    "PathGenerationRequest",
    "SpellTeleport",
    "Step",
    "TransportFailure",
    "UnexpectedStatus",
    "UnknownSkill",
    "UnsupportedEdge",
    "UnsupportedEncoding",
    "WebPath",
    "build_game_state",
    "convert",
    "decode_path",
    "encode_path",
]
