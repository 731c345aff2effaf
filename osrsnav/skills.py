# osrsnav/skills.py
"""Known skills, named the way the automation client names them."""

from __future__ import annotations

from enum import Enum

from .errors import UnknownSkill


class Skill(Enum):
    ATTACK = "Attack"
    DEFENCE = "Defence"
    STRENGTH = "Strength"
    HITPOINTS = "Hitpoints"
    RANGED = "Ranged"
    PRAYER = "Prayer"
    MAGIC = "Magic"
    COOKING = "Cooking"
    WOODCUTTING = "Woodcutting"
    FLETCHING = "Fletching"
    FISHING = "Fishing"
    FIREMAKING = "Firemaking"
    CRAFTING = "Crafting"
    SMITHING = "Smithing"
    MINING = "Mining"
    HERBLORE = "Herblore"
    AGILITY = "Agility"
    THIEVING = "Thieving"
    SLAYER = "Slayer"
    FARMING = "Farming"
    RUNECRAFTING = "Runecrafting"
    HUNTER = "Hunter"
    CONSTRUCTION = "Construction"

    @classmethod
    def from_name(cls, name: str) -> Skill:
        """Resolve an exact member name such as ``"WOODCUTTING"``."""
        try:
            return cls[name]
        except KeyError:
            raise UnknownSkill(f"Unknown skill {name!r}") from None
