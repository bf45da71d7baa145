"""
Core system module for npcgen.

This module contains the fundamental components shared by the rest of the
package: rule constants and enumerations, the dice expression value type,
logging setup and console utilities.

The content repository (core.content) and the sheet printers (core.sheets)
depend on the character and item models, so they are imported from their own
modules rather than re-exported here.
"""

from .constants import (
    BASE_ARMOR_CLASS,
    BASE_PROFICIENCY_BONUS,
    GLOBAL_VERBOSE_LEVEL,
    LEVELS_PER_PROFICIENCY_STEP,
    SPELLCASTING_PLACEHOLDER,
    UNLIMITED_CAP_SENTINEL,
    Ability,
    ActionType,
    CapKind,
    DamageType,
)
from .dice import DiceFunction
from .logging import get_logger, setup_logging
from .utils import (
    Singleton,
    cprint,
    crule,
    get_stat_modifier,
    signed,
)

__all__ = [
    # Import from constants.py
    "BASE_ARMOR_CLASS",
    "BASE_PROFICIENCY_BONUS",
    "GLOBAL_VERBOSE_LEVEL",
    "LEVELS_PER_PROFICIENCY_STEP",
    "SPELLCASTING_PLACEHOLDER",
    "UNLIMITED_CAP_SENTINEL",
    "Ability",
    "ActionType",
    "CapKind",
    "DamageType",
    # Import from dice.py
    "DiceFunction",
    # Import from logging.py
    "get_logger",
    "setup_logging",
    # Import from utils.py
    "Singleton",
    "cprint",
    "crule",
    "get_stat_modifier",
    "signed",
]
