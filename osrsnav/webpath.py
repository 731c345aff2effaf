# osrsnav/webpath.py
"""Conversion of decoded edges into the automation client's path vertices."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from .edges import Door, Edge, GameObjectEdge, ItemTeleport, SpellTeleport, Step
from .errors import UnsupportedEdge
from .models import Coordinate

if TYPE_CHECKING:
    from .host import GameClient

# Teleports have no fixed origin tile.
ANYWHERE = Coordinate(x=0, y=0, plane=0)


class ItemOrigin(Enum):
    INVENTORY = "inventory"
    EQUIPMENT = "equipment"


@dataclass(frozen=True)
class Vertex:
    position: Coordinate
    requirements: tuple[str, ...] = field(default=(), kw_only=True)


@dataclass(frozen=True)
class CoordinateVertex(Vertex):
    pass


@dataclass(frozen=True)
class BasicObjectVertex(Vertex):
    name: str | None
    action: str


@dataclass(frozen=True)
class BasicItemTeleportVertex(Vertex):
    origin: ItemOrigin
    item: str
    action: str


@dataclass(frozen=True)
class TeleportSpellVertex(Vertex):
    spell: str


@dataclass(frozen=True)
class WebPath:
    vertices: list[Vertex]
    cost: float

    def __len__(self) -> int:
        return len(self.vertices)


def spell_key(spell: str) -> str:
    """``"Varrock Teleport"`` -> ``"VARROCK_TELEPORT"``."""
    return spell.upper().replace(" ", "_")


def to_vertex(edge: Edge, game: GameClient) -> Vertex:
    if isinstance(edge, Step):
        return CoordinateVertex(edge.position)
    if isinstance(edge, (Door, GameObjectEdge)):
        return BasicObjectVertex(edge.position, game.object_name(edge.id), edge.action)
    if isinstance(edge, ItemTeleport):
        return BasicItemTeleportVertex(ANYWHERE, ItemOrigin.INVENTORY, edge.item, edge.action)
    if isinstance(edge, SpellTeleport):
        return TeleportSpellVertex(ANYWHERE, spell_key(edge.spell))
    raise UnsupportedEdge(f"No vertex mapping for {type(edge).__name__}")


def convert(path: Sequence[Edge], game: GameClient) -> WebPath:
    """Map a decoded path onto native vertices, preserving order."""
    return WebPath([to_vertex(edge, game) for edge in path], float(len(path)))
