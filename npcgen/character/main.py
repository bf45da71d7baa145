"""
NPC module for npcgen.

Defines the NPC class, the aggregate root holding a base stat block, a race,
hit dice, an authored proficiency adjustment and equipped items. All derived
values (AC, HP, proficiency, attack modifiers, features and actions) are
computed on demand by the NPC's management modules.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from npcgen.actions.action import Action
from npcgen.actions.feature import Feature
from npcgen.core.dice import DiceFunction

from .armor_class import ACMod
from .npc_stats import NPCStats
from .npc_traits import NPCTraits
from .race import RaceTraits
from .stat_block import StatBlock

if TYPE_CHECKING:
    from npcgen.items.item import Item


class NPC:
    """
    Represents a non-player character built from composable trait sources.

    Attributes:
        name (str):
            The name of the NPC.
        base_stat_block (StatBlock):
            The stat block before racial modifiers.
        race (RaceTraits):
            The racial template of the NPC.
        hit_points (DiceFunction):
            The hit dice, before the Constitution bonus.
        constant_proficiency_modifier (int):
            An authored difficulty adjustment added to the proficiency bonus.
        items (tuple[Item, ...]):
            The equipped items, in display order.

    """

    # === Static properties ===

    name: str
    base_stat_block: StatBlock
    race: RaceTraits
    hit_points: DiceFunction
    constant_proficiency_modifier: int
    items: tuple[Item, ...]

    # === Management Modules ===

    stats: NPCStats
    traits: NPCTraits

    def __init__(
        self,
        name: str,
        base_stat_block: StatBlock,
        race: RaceTraits,
        hit_points: DiceFunction,
        constant_proficiency_modifier: int = 0,
        items: Iterable[Item] = (),
    ) -> None:
        # Initialize static properties.
        self.name = name
        self.base_stat_block = base_stat_block
        self.race = race
        self.hit_points = hit_points
        self.constant_proficiency_modifier = constant_proficiency_modifier
        self.items = tuple(items)

        # Initialize modules.
        self.stats = NPCStats(owner=self)
        self.traits = NPCTraits(owner=self)

    def __repr__(self) -> str:
        return (
            f"NPC(name={self.name!r}, race={self.race.name!r}, "
            f"hit_points='{self.hit_points}', items={len(self.items)})"
        )

    # ============================================================================
    # DELEGATED STAT PROPERTIES
    # ============================================================================
    # These properties delegate to the stats module for calculation

    def stat_block(self) -> StatBlock:
        """Returns the final stat block (base combined with race)."""
        return self.stats.stat_block()

    @property
    def STR(self) -> int:
        """Returns the D&D strength modifier."""
        return self.stats.STR

    @property
    def DEX(self) -> int:
        """Returns the D&D dexterity modifier."""
        return self.stats.DEX

    @property
    def CON(self) -> int:
        """Returns the D&D constitution modifier."""
        return self.stats.CON

    @property
    def INT(self) -> int:
        """Returns the D&D intelligence modifier."""
        return self.stats.INT

    @property
    def WIS(self) -> int:
        """Returns the D&D wisdom modifier."""
        return self.stats.WIS

    @property
    def CHA(self) -> int:
        """Returns the D&D charisma modifier."""
        return self.stats.CHA

    @property
    def AC(self) -> int:
        """Calculates Armor Class (AC) from the resolved AC method."""
        return self.stats.AC

    def calculate_ac(self, method: ACMod) -> int:
        """Calculates the AC this NPC would have with the given method."""
        return self.stats.calculate_ac(method)

    @property
    def HP(self) -> DiceFunction:
        """Returns the hit points, Constitution bonus included."""
        return self.stats.HP

    @property
    def PROFICIENCY_BONUS(self) -> int:
        """Returns the proficiency bonus estimated from the hit dice."""
        return self.stats.PROFICIENCY_BONUS

    @property
    def SPELL_SAVE_DC(self) -> int:
        """Returns the spell save DC (placeholder)."""
        return self.stats.SPELL_SAVE_DC

    def str_attack_modifier(self, add_proficiency: bool) -> int:
        """Returns the strength-based attack modifier."""
        return self.stats.str_attack_modifier(add_proficiency)

    def dex_attack_modifier(self, add_proficiency: bool) -> int:
        """Returns the dexterity-based attack modifier."""
        return self.stats.dex_attack_modifier(add_proficiency)

    def spell_attack_modifier(self, add_proficiency: bool) -> int:
        """Returns the spell attack modifier (placeholder)."""
        return self.stats.spell_attack_modifier(add_proficiency)

    # ============================================================================
    # DELEGATED TRAIT METHODS
    # ============================================================================

    def get_all_features(self) -> list[Feature]:
        """Returns racial features followed by item features."""
        return self.traits.get_all_features()

    def get_all_actions(self) -> list[Action]:
        """Returns the actions of every feature, in feature order."""
        return self.traits.get_all_actions()

    def get_all_reactions(self) -> list[Action]:
        """Returns the reactions of every feature, in feature order."""
        return self.traits.get_all_reactions()
