"""
npcgen: derived combat statistics for tabletop-RPG non-player characters.

This package combines a base stat block, a racial template and equipped items
into one NPC and computes its armor class, hit points, proficiency bonus,
attack modifiers, features and actions on demand.
"""

from .character import NPC, ACMod, RaceTraits, StatBlock
from .items import Item

__all__ = [
    "NPC",
    "ACMod",
    "RaceTraits",
    "StatBlock",
    "Item",
]
