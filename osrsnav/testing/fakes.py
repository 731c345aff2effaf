# osrsnav/testing/fakes.py
"""
In-memory GameClient for unit tests and offline CLI runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..host import GameClient, HeldItem
from ..skills import Skill


@dataclass
class FakeGame(GameClient):
    """
    Scriptable game state.

    - varps default to 0 when not set, like unset varps in game.
    - varbits not listed cannot be loaded (None).
    - skills not listed report -1.
    - Every call is counted in ``reads`` so tests can assert read-only access.
    """

    varps: dict[int, int] = field(default_factory=dict)
    varbits: dict[int, int] = field(default_factory=dict)
    inventory_items: list[HeldItem] = field(default_factory=list)
    equipment_items: list[HeldItem] = field(default_factory=list)
    levels: dict[Skill, int] = field(default_factory=dict)
    object_names: dict[int, str] = field(default_factory=dict)
    reads: int = 0

    def varp(self, varp_id: int) -> int:
        self.reads += 1
        return self.varps.get(varp_id, 0)

    def varbit(self, varbit_id: int) -> int | None:
        self.reads += 1
        return self.varbits.get(varbit_id)

    def inventory(self) -> list[HeldItem]:
        self.reads += 1
        return list(self.inventory_items)

    def equipment(self) -> list[HeldItem]:
        self.reads += 1
        return list(self.equipment_items)

    def skill_level(self, skill: Skill) -> int:
        self.reads += 1
        return self.levels.get(skill, -1)

    def object_name(self, object_id: int) -> str | None:
        self.reads += 1
        return self.object_names.get(object_id)
