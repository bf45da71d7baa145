"""
Stat block module for npcgen.

Defines the ability score record, the stat block built on top of it and the
additive rule used to layer one stat block over another.
"""

from pydantic import BaseModel, ConfigDict, Field

from npcgen.core.constants import Ability
from npcgen.core.utils import get_stat_modifier


class AbilityScores(BaseModel):
    """
    The six ability scores of a character.

    Every score defaults to 0 so that an empty record can be used as a
    modifier that changes nothing when combined with another record.
    """

    model_config = ConfigDict(frozen=True)

    strength: int = Field(default=0, description="Strength score.")
    dexterity: int = Field(default=0, description="Dexterity score.")
    constitution: int = Field(default=0, description="Constitution score.")
    intelligence: int = Field(default=0, description="Intelligence score.")
    wisdom: int = Field(default=0, description="Wisdom score.")
    charisma: int = Field(default=0, description="Charisma score.")

    def score(self, ability: Ability) -> int:
        """
        Returns the raw score of the given ability.

        Args:
            ability (Ability): The ability to read.

        Returns:
            int: The ability score.

        """
        return getattr(self, ability.field_name)

    def modifier(self, ability: Ability) -> int:
        """
        Returns the modifier of the given ability.

        Args:
            ability (Ability): The ability to read.

        Returns:
            int: The ability modifier.

        """
        return get_stat_modifier(self.score(ability))

    def __add__(self, other: "AbilityScores") -> "AbilityScores":
        if not isinstance(other, AbilityScores):
            return NotImplemented
        return AbilityScores(
            **{
                ability.field_name: self.score(ability) + other.score(ability)
                for ability in Ability
            }
        )


class StatBlock(BaseModel):
    """
    A character's ability scores plus other character-level numeric stats.

    Only the ability scores take part in layering; the other stats of a
    combined block come from the base block.
    """

    model_config = ConfigDict(frozen=True)

    ability_scores: AbilityScores = Field(
        default_factory=AbilityScores,
        description="The six ability scores.",
    )
    speed: int = Field(
        default=30,
        ge=0,
        description="Walking speed in feet.",
    )

    @property
    def STR(self) -> int:
        """Returns the strength modifier."""
        return self.ability_scores.modifier(Ability.STRENGTH)

    @property
    def DEX(self) -> int:
        """Returns the dexterity modifier."""
        return self.ability_scores.modifier(Ability.DEXTERITY)

    @property
    def CON(self) -> int:
        """Returns the constitution modifier."""
        return self.ability_scores.modifier(Ability.CONSTITUTION)

    @property
    def INT(self) -> int:
        """Returns the intelligence modifier."""
        return self.ability_scores.modifier(Ability.INTELLIGENCE)

    @property
    def WIS(self) -> int:
        """Returns the wisdom modifier."""
        return self.ability_scores.modifier(Ability.WISDOM)

    @property
    def CHA(self) -> int:
        """Returns the charisma modifier."""
        return self.ability_scores.modifier(Ability.CHARISMA)


def combine_stat_blocks(base: StatBlock, mod: StatBlock) -> StatBlock:
    """
    Layers a modifier stat block over a base stat block.

    Each ability score of the result is the sum of the two inputs' scores.
    Every other stat is taken from ``base``.

    Args:
        base (StatBlock): The stat block being modified.
        mod (StatBlock): The stat block holding the additive modifiers.

    Returns:
        StatBlock: A new, combined stat block.

    """
    return base.model_copy(
        update={"ability_scores": base.ability_scores + mod.ability_scores}
    )
