"""
NPC stats module for npcgen.

Handles all derived stat calculations for an NPC: the final stat block,
ability modifiers, armor class, hit points, proficiency bonus and attack
modifiers. Nothing is cached: every property is recomputed from the owner's
current data on each access.
"""

from typing import Any

from npcgen.core.constants import (
    BASE_PROFICIENCY_BONUS,
    LEVELS_PER_PROFICIENCY_STEP,
    SPELLCASTING_PLACEHOLDER,
)
from npcgen.core.dice import DiceFunction
from npcgen.core.logging import log_debug

from .armor_class import BASE_AC, ACMod, calculate_ac, resolve_ac_method
from .stat_block import StatBlock, combine_stat_blocks


class NPCStats:
    """
    Handles all stat calculations and derived properties for an NPC.

    Attributes:
        owner (Any):
            The NPC instance that owns this NPCStats.

    """

    def __init__(self, owner: Any) -> None:
        """
        Initializes the NPCStats with a reference to its owner.

        Args:
            owner (Any):
                The NPC instance that owns this NPCStats.

        """
        self.owner: Any = owner

    # ============================================================================
    # STAT BLOCK
    # ============================================================================

    def stat_block(self) -> StatBlock:
        """
        Returns the final stat block of the NPC.

        The base stat block is combined with the racial modifiers. Items may
        declare stat changes, but those are not applied.

        Returns:
            StatBlock: The combined stat block.

        """
        stats = combine_stat_blocks(
            self.owner.base_stat_block, self.owner.race.stat_block_mods
        )
        for item in self.owner.items:
            if item.modifies_stats:
                log_debug(
                    "Item stat changes are not applied",
                    {"npc": self.owner.name, "item": item.name},
                )
        return stats

    # ============================================================================
    # ABILITY SCORE MODIFIERS
    # ============================================================================

    @property
    def STR(self) -> int:
        """Returns the final strength modifier."""
        return self.stat_block().STR

    @property
    def DEX(self) -> int:
        """Returns the final dexterity modifier."""
        return self.stat_block().DEX

    @property
    def CON(self) -> int:
        """Returns the final constitution modifier."""
        return self.stat_block().CON

    @property
    def INT(self) -> int:
        """Returns the final intelligence modifier."""
        return self.stat_block().INT

    @property
    def WIS(self) -> int:
        """Returns the final wisdom modifier."""
        return self.stat_block().WIS

    @property
    def CHA(self) -> int:
        """Returns the final charisma modifier."""
        return self.stat_block().CHA

    # ============================================================================
    # DERIVED STATS (AC, HP, PROFICIENCY)
    # ============================================================================

    def ac_methods(self) -> list[ACMod]:
        """
        Returns the candidate AC methods, from most inherent to most specific.

        Only BASE_AC is a candidate for now. Armor, spells and class features
        will be appended here once their layering rules are in place.

        Returns:
            list[ACMod]: The priority-ordered candidates.

        """
        for item in self.owner.items:
            if item.modifies_ac:
                log_debug(
                    "Item AC methods are not applied",
                    {"npc": self.owner.name, "item": item.name},
                )
        return [BASE_AC]

    def ac_bonuses(self) -> int:
        """
        Returns the addition-only AC bonus stacked on top of the resolved
        method, such as a shield or a ring of protection.

        No source of such bonuses is integrated yet, so this is always 0.

        Returns:
            int: The stacked bonus.

        """
        return 0

    def calculate_ac(self, method: ACMod) -> int:
        """
        Calculates the AC of the NPC using a specific AC method.

        Args:
            method (ACMod): The AC method.

        Returns:
            int: The resulting AC.

        """
        return calculate_ac(self.stat_block(), method)

    @property
    def AC(self) -> int:
        """
        Calculates the final Armor Class (AC) of the NPC.

        Returns:
            int: The total AC value.

        """
        method = resolve_ac_method(self.ac_methods())
        return self.calculate_ac(method) + self.ac_bonuses()

    @property
    def HP(self) -> DiceFunction:
        """
        Returns the hit point expression with the Constitution bonus applied.

        Every hit die adds the Constitution modifier to the constant. The dice
        themselves are unchanged.

        Returns:
            DiceFunction: The final hit points.

        """
        hit_points = self.owner.hit_points
        return hit_points.with_constant_added(hit_points.num_dice * self.CON)

    @property
    def PROFICIENCY_BONUS(self) -> int:
        """
        Estimates the proficiency bonus from the number of hit dice.

        One hit die is taken as one level. Zero hit dice give one less than
        the base bonus, since (0 - 1) // 4 is -1.

        Returns:
            int: The proficiency bonus.

        """
        num_hit_dice = self.owner.hit_points.num_dice
        return (
            BASE_PROFICIENCY_BONUS
            + (num_hit_dice - 1) // LEVELS_PER_PROFICIENCY_STEP
            + self.owner.constant_proficiency_modifier
        )

    # ============================================================================
    # ATTACK MODIFIERS
    # ============================================================================

    def _proficiency(self, add_proficiency: bool) -> int:
        return self.PROFICIENCY_BONUS if add_proficiency else 0

    def str_attack_modifier(self, add_proficiency: bool) -> int:
        """
        Returns the strength-based attack modifier.

        Args:
            add_proficiency (bool): Whether to add the proficiency bonus.

        Returns:
            int: The attack modifier.

        """
        return self.STR + self._proficiency(add_proficiency)

    def dex_attack_modifier(self, add_proficiency: bool) -> int:
        """
        Returns the dexterity-based attack modifier.

        Args:
            add_proficiency (bool): Whether to add the proficiency bonus.

        Returns:
            int: The attack modifier.

        """
        return self.DEX + self._proficiency(add_proficiency)

    @property
    def SPELL_SAVE_DC(self) -> int:
        """
        Returns the spell save DC. Spellcasting is not modelled, so this is
        always SPELLCASTING_PLACEHOLDER.
        """
        return SPELLCASTING_PLACEHOLDER

    def spell_attack_modifier(self, add_proficiency: bool) -> int:
        """
        Returns the spell attack modifier. Spellcasting is not modelled, so
        this is always SPELLCASTING_PLACEHOLDER whatever ``add_proficiency``.
        """
        return SPELLCASTING_PLACEHOLDER
