"""
Action module for npcgen.

Defines the Action record: something an NPC can do on its turn (or as a
reaction), with the attack, range and damage data a stat block prints.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from npcgen.core.constants import Ability, ActionType, DamageType
from npcgen.core.dice import DiceFunction


class Action(BaseModel):
    """
    A combat-usable capability granted by a feature.

    Attack actions add the NPC's Strength or Dexterity modifier to the attack
    roll (plus the proficiency bonus when proficient) and the same modifier
    to the damage roll.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        description="The name of the action.",
    )
    description: str = Field(
        default="",
        description="Free text printed after the attack line, or alone.",
    )
    action_type: ActionType = Field(
        default=ActionType.OTHER,
        description="The kind of action (melee weapon attack, ...).",
    )
    attack_ability: Ability = Field(
        default=Ability.STRENGTH,
        description="The ability used for attack and damage rolls.",
    )
    proficient: bool = Field(
        default=True,
        description="Whether the proficiency bonus is added to the attack.",
    )
    reach: int = Field(
        default=5,
        ge=0,
        description="Melee reach in feet.",
    )
    normal_range: int = Field(
        default=0,
        ge=0,
        description="Normal range in feet for ranged attacks.",
    )
    long_range: int = Field(
        default=0,
        ge=0,
        description="Long range in feet for ranged attacks (0 if none).",
    )
    damage: DiceFunction | None = Field(
        default=None,
        description="The damage dice, before the ability modifier.",
    )
    damage_type: DamageType | None = Field(
        default=None,
        description="The type of damage dealt.",
    )

    def model_post_init(self, _: Any) -> None:
        """Validates fields after model initialization."""
        if not self.name:
            raise ValueError("Action name must not be empty.")
        if self.action_type.is_attack and self.attack_ability not in (
            Ability.STRENGTH,
            Ability.DEXTERITY,
        ):
            raise ValueError(
                f"Attack '{self.name}' must use STRENGTH or DEXTERITY, "
                f"got {self.attack_ability}."
            )
        if self.action_type.is_ranged and self.normal_range <= 0:
            raise ValueError(f"Ranged attack '{self.name}' needs a normal range.")
        if self.long_range and self.long_range < self.normal_range:
            raise ValueError(
                f"Long range of '{self.name}' is shorter than its normal range."
            )
        if (self.damage is None) != (self.damage_type is None):
            raise ValueError(
                f"Action '{self.name}' must set both damage and damage_type, or neither."
            )

    def attack_modifier(self, npc: Any) -> int:
        """
        Returns the attack roll modifier of this action for the given NPC.

        Args:
            npc (Any): The NPC performing the action.

        Returns:
            int: The attack modifier.

        """
        if self.attack_ability == Ability.DEXTERITY:
            return npc.dex_attack_modifier(self.proficient)
        return npc.str_attack_modifier(self.proficient)

    def damage_modifier(self, npc: Any) -> int:
        """
        Returns the value added to the damage roll of this action.

        Args:
            npc (Any): The NPC performing the action.

        Returns:
            int: The damage modifier.

        """
        if self.attack_ability == Ability.DEXTERITY:
            return npc.dex_attack_modifier(False)
        return npc.str_attack_modifier(False)

    def damage_roll(self, npc: Any) -> DiceFunction | None:
        """
        Returns the damage dice with the ability modifier folded in.

        Args:
            npc (Any): The NPC performing the action.

        Returns:
            DiceFunction | None: The damage roll, or None if the action
            deals no damage.

        """
        if self.damage is None:
            return None
        return self.damage.with_constant_added(self.damage_modifier(npc))
