"""
Character system module for npcgen.

This module handles NPC composition and the derived-stat engine: ability
scores and stat blocks, armor class methods, racial templates, stat
derivation, trait aggregation and serialization.
"""

from .armor_class import (
    BASE_AC,
    AbilityCap,
    AbilityCaps,
    ACMod,
    calculate_ac,
    resolve_ac_method,
)
from .main import NPC
from .npc_serialization import load_npc, load_npcs, npc_from_dict, npc_to_dict
from .npc_stats import NPCStats
from .npc_traits import NPCTraits
from .race import RaceTraits
from .stat_block import AbilityScores, StatBlock, combine_stat_blocks

__all__ = [
    # Import from armor_class.py
    "BASE_AC",
    "AbilityCap",
    "AbilityCaps",
    "ACMod",
    "calculate_ac",
    "resolve_ac_method",
    # Import from main.py
    "NPC",
    # Import from npc_serialization.py
    "load_npc",
    "load_npcs",
    "npc_from_dict",
    "npc_to_dict",
    # Import from npc_stats.py
    "NPCStats",
    # Import from npc_traits.py
    "NPCTraits",
    # Import from race.py
    "RaceTraits",
    # Import from stat_block.py
    "AbilityScores",
    "StatBlock",
    "combine_stat_blocks",
]
