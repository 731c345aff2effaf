# osrsnav/models.py
"""Pydantic models for the nav service requests/responses."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr
from pydantic.alias_generators import to_snake

from .patterns import PatternValue


class WireModel(BaseModel):
    """Base for everything that crosses the wire.

    Field names are always rendered lower-case with underscores.
    """

    model_config = ConfigDict(alias_generator=to_snake, frozen=True)

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class Coordinate(WireModel):
    """A world tile: x, y and plane."""

    x: StrictInt
    y: StrictInt
    plane: StrictInt

    @classmethod
    def parse(cls, text: str) -> Coordinate:
        """Parse ``"x,y[,plane]"`` as typed on a command line."""
        parts = [p.strip() for p in text.split(",")]
        if len(parts) not in (2, 3):
            raise ValueError(f"Expected 'x,y' or 'x,y,plane', got {text!r}")
        values = [int(p) for p in parts]
        return cls(x=values[0], y=values[1], plane=values[2] if len(values) == 3 else 0)


class DataSelection(WireModel):
    """Server-declared subset of game state it wants reported."""

    varps: list[StrictInt] = []
    varbits: list[StrictInt] = []
    items: list[PatternValue] = []
    skills: list[StrictStr] = []


class GameState(WireModel):
    """Point-in-time snapshot of flags, items and skill levels."""

    varps: dict[int, int] = {}
    varbits: dict[int, int] = {}
    items: dict[str, int] = {}
    skills: dict[str, int] = {}


class PathGenerationRequest(WireModel):
    """Body of ``POST /path``."""

    start: Coordinate
    end: Coordinate
    game_state: GameState
