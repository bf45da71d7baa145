"""
Constants and enumerations for npcgen.

Defines the rule constants used by the derived-stat engine together with the
enumerations for abilities, AC caps, action types and damage types.
"""

from enum import Enum

# Global verbose level for sheet output:
# 0 - Minimal (name, race, HP and AC only)
# 1 - Moderate (adds ability scores and features)
# 2 - Full detail (adds per-action attack, range and damage lines)
GLOBAL_VERBOSE_LEVEL = 2

# Armor class of an unarmored character before ability modifiers.
BASE_ARMOR_CLASS = 10

# Proficiency bonus of a first level character.
BASE_PROFICIENCY_BONUS = 2

# Number of hit dice (levels) between two proficiency bonus increases.
LEVELS_PER_PROFICIENCY_STEP = 4

# Integer used in data files to mark an AC cap as unlimited.
UNLIMITED_CAP_SENTINEL = -1

# Value returned by the spellcasting stubs.
SPELLCASTING_PLACEHOLDER = 0


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.lower().replace("_", " ").capitalize()


class Ability(NiceEnum):
    """Defines the six ability scores."""

    STRENGTH = "STRENGTH"
    DEXTERITY = "DEXTERITY"
    CONSTITUTION = "CONSTITUTION"
    INTELLIGENCE = "INTELLIGENCE"
    WISDOM = "WISDOM"
    CHARISMA = "CHARISMA"

    @property
    def short_name(self) -> str:
        """Returns the 3-letter abbreviation for the ability."""
        return self.name[:3]

    @property
    def field_name(self) -> str:
        """Returns the name of the matching field on ability-shaped records."""
        return self.name.lower()


class CapKind(NiceEnum):
    """Defines how much of an ability modifier an AC method may add."""

    ZERO = "ZERO"
    UNLIMITED = "UNLIMITED"
    CAPPED = "CAPPED"


class ActionType(NiceEnum):
    """Defines the kind of an action, as printed on a stat block."""

    MELEE_WEAPON_ATTACK = "MELEE_WEAPON_ATTACK"
    RANGED_WEAPON_ATTACK = "RANGED_WEAPON_ATTACK"
    MELEE_OR_RANGED_WEAPON_ATTACK = "MELEE_OR_RANGED_WEAPON_ATTACK"
    OTHER = "OTHER"

    @property
    def is_attack(self) -> bool:
        """Returns True if actions of this type make an attack roll."""
        return self != ActionType.OTHER

    @property
    def is_melee(self) -> bool:
        return self in (
            ActionType.MELEE_WEAPON_ATTACK,
            ActionType.MELEE_OR_RANGED_WEAPON_ATTACK,
        )

    @property
    def is_ranged(self) -> bool:
        return self in (
            ActionType.RANGED_WEAPON_ATTACK,
            ActionType.MELEE_OR_RANGED_WEAPON_ATTACK,
        )

    @property
    def label(self) -> str:
        """Returns the italic label used in front of an attack line."""
        return {
            ActionType.MELEE_WEAPON_ATTACK: "Melee Weapon Attack",
            ActionType.RANGED_WEAPON_ATTACK: "Ranged Weapon Attack",
            ActionType.MELEE_OR_RANGED_WEAPON_ATTACK: "Melee or Ranged Weapon Attack",
        }.get(self, "")


class DamageType(NiceEnum):
    """Defines various types of damage that can be inflicted."""

    PIERCING = "PIERCING"
    SLASHING = "SLASHING"
    BLUDGEONING = "BLUDGEONING"
    FIRE = "FIRE"
    COLD = "COLD"
    LIGHTNING = "LIGHTNING"
    THUNDER = "THUNDER"
    POISON = "POISON"
    NECROTIC = "NECROTIC"
    RADIANT = "RADIANT"
    PSYCHIC = "PSYCHIC"
    FORCE = "FORCE"
    ACID = "ACID"
