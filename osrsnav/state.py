# osrsnav/state.py
"""Game state snapshots shaped by the server's data selection."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Literal

from .config import settings
from .models import DataSelection, GameState
from .skills import Skill

if TYPE_CHECKING:
    from .host import GameClient, HeldItem

logger = logging.getLogger("osrsnav.state")

ItemMerge = Literal["overwrite", "sum"]


def _matches_any(name: str | None, patterns: Sequence[re.Pattern[str] | None]) -> bool:
    if name is None:
        return False
    return any(p is not None and p.fullmatch(name) for p in patterns)


def _held_items(game: GameClient, patterns: Sequence[re.Pattern[str] | None] | None) -> list[HeldItem]:
    """Inventory then equipment, optionally filtered by name patterns."""
    held = [*game.inventory(), *game.equipment()]
    if patterns is None:
        return held
    return [item for item in held if _matches_any(item.name, patterns)]


def _item_mapping(held: Iterable[HeldItem], merge: ItemMerge) -> dict[str, int]:
    items: dict[str, int] = {}
    for item in held:
        key = item.name if item.name is not None else "null"
        if merge == "sum":
            items[key] = items.get(key, 0) + item.quantity
        else:
            items[key] = item.quantity
    return items


def _varbit_mapping(game: GameClient, varbit_ids: Iterable[int]) -> dict[int, int]:
    varbits: dict[int, int] = {}
    for varbit_id in varbit_ids:
        value = game.varbit(varbit_id)
        if value is None:
            logger.debug(f"Varbit {varbit_id} could not be loaded, skipping")
            continue
        varbits[varbit_id] = value
    return varbits


def build_game_state(
    game: GameClient,
    selection: DataSelection | None = None,
    *,
    item_merge: ItemMerge | None = None,
) -> GameState:
    """
    Read a snapshot of the live game.

    Without a selection every held item and every skill with a valid level
    is reported; flags are left empty since they cannot be enumerated. With
    a selection each category is restricted to exactly the requested keys.

    Raises:
        UnknownSkill: the selection names a skill that does not exist.
    """
    merge = item_merge or settings.ITEM_MERGE

    if selection is None:
        skills = {}
        for skill in Skill:
            level = game.skill_level(skill)
            if level >= 0:
                skills[skill.name] = level
        return GameState(
            varps={},
            varbits={},
            items=_item_mapping(_held_items(game, None), merge),
            skills=skills,
        )

    return GameState(
        varps={varp_id: game.varp(varp_id) for varp_id in selection.varps},
        varbits=_varbit_mapping(game, selection.varbits),
        items=_item_mapping(_held_items(game, selection.items), merge),
        skills={name: game.skill_level(Skill.from_name(name)) for name in selection.skills},
    )
