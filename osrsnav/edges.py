# osrsnav/edges.py
"""Path edges and their tagged-union wire encoding.

Each edge is serialized as a JSON object carrying a ``type`` discriminator
next to the variant's own fields::

    {"type": "Door", "position": {"x": 3213, "y": 3221, "plane": 0}, "id": 1543, "action": "Open"}

The discriminator is looked up in a central registry, never derived from
whatever the class happens to be called at runtime. The default tag is the
class name at registration time; ``GameObjectEdge`` travels as ``"GameObject"``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from pydantic import StrictInt, StrictStr, ValidationError

from .errors import MalformedEdge
from .models import Coordinate, WireModel
from .patterns import token_kind

TYPE_FIELD = "type"

_TAG_TO_TYPE: dict[str, type[Edge]] = {}
_TYPE_TO_TAG: dict[type[Edge], str] = {}

E = TypeVar("E", bound="type[Edge]")


class Edge(WireModel):
    """One step of a computed path."""


def register_edge(tag: str | None = None) -> Callable[[E], E]:
    """Class decorator adding an Edge subclass to the wire registry."""

    def decorator(cls: E) -> E:
        label = tag or cls.__name__
        if label in _TAG_TO_TYPE:
            raise ValueError(f"Edge tag {label!r} already registered to {_TAG_TO_TYPE[label].__name__}")
        if cls in _TYPE_TO_TAG:
            raise ValueError(f"{cls.__name__} already registered as {_TYPE_TO_TAG[cls]!r}")
        _TAG_TO_TYPE[label] = cls
        _TYPE_TO_TAG[cls] = label
        return cls

    return decorator


@register_edge()
class Step(Edge):
    """Walk to a tile."""

    position: Coordinate


@register_edge()
class Door(Edge):
    """Pass through a door or gate object."""

    position: Coordinate
    id: StrictInt
    action: StrictStr


@register_edge("GameObject")
class GameObjectEdge(Edge):
    """Interact with any other game object (stairs, ladders, shortcuts)."""

    position: Coordinate
    id: StrictInt
    action: StrictStr


@register_edge()
class SpellTeleport(Edge):
    """Cast a teleport spell."""

    spell: StrictStr


@register_edge()
class ItemTeleport(Edge):
    """Use an item from the inventory ("Rub", "Break", ...)."""

    item: StrictStr
    action: StrictStr


def edge_types() -> list[type[Edge]]:
    """Registered edge classes in registration order."""
    return list(_TYPE_TO_TAG)


def edge_tag(edge: Edge | type[Edge]) -> str:
    cls = edge if isinstance(edge, type) else type(edge)
    try:
        return _TYPE_TO_TAG[cls]
    except KeyError:
        raise MalformedEdge(f"{cls.__name__} is not a registered edge type") from None


def encode_edge(edge: Edge) -> dict[str, Any]:
    return {TYPE_FIELD: edge_tag(edge), **edge.to_wire()}


def encode_path(path: Iterable[Edge]) -> list[dict[str, Any]]:
    return [encode_edge(edge) for edge in path]


def decode_edge(obj: Any) -> Edge:
    """Decode one tagged edge object, dispatching on its ``type`` field."""
    if not isinstance(obj, dict):
        raise MalformedEdge(f"Edge must be a JSON object, got {token_kind(obj)}")
    if TYPE_FIELD not in obj:
        raise MalformedEdge(f"Edge is missing its '{TYPE_FIELD}' field: {obj!r}")

    tag = obj[TYPE_FIELD]
    if not isinstance(tag, str):
        raise MalformedEdge(f"Edge '{TYPE_FIELD}' must be a string, got {token_kind(tag)}")

    cls = _TAG_TO_TYPE.get(tag)
    if cls is None:
        raise MalformedEdge(f"Unknown edge type {tag!r}")

    fields = {k: v for k, v in obj.items() if k != TYPE_FIELD}
    try:
        return cls.model_validate(fields)
    except ValidationError as e:
        raise MalformedEdge(f"Invalid {tag} edge: {e}") from e


def decode_path(payload: Any) -> list[Edge]:
    """Decode a JSON array of edges. One bad edge fails the whole path."""
    if not isinstance(payload, list):
        raise MalformedEdge(f"Path must be a JSON array, got {token_kind(payload)}")

    path: list[Edge] = []
    for index, obj in enumerate(payload):
        try:
            path.append(decode_edge(obj))
        except MalformedEdge as e:
            raise MalformedEdge(f"Edge {index}: {e}") from e
    return path
