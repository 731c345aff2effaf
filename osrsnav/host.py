# osrsnav/host.py
"""Interface to the live game, as exposed by the automation client."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from .skills import Skill


@dataclass(frozen=True)
class HeldItem:
    """An inventory or equipment slot. ``name`` is None for unknown definitions."""

    name: str | None
    quantity: int


class GameClient(Protocol):
    """
    Read-only view of game state used to build snapshots and native paths.

    Implementations wrap the automation client's API. Calls must come from
    the thread that owns that API.
    """

    def varp(self, varp_id: int) -> int:
        """Current value of a varp."""
        ...

    def varbit(self, varbit_id: int) -> int | None:
        """Current value of a varbit, or None if it cannot be loaded."""
        ...

    def inventory(self) -> Sequence[HeldItem]: ...

    def equipment(self) -> Sequence[HeldItem]: ...

    def skill_level(self, skill: Skill) -> int:
        """Current level; negative when unavailable."""
        ...

    def object_name(self, object_id: int) -> str | None:
        """Definition name of a game object, or None if unknown."""
        ...
