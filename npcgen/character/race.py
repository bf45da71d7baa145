from pydantic import BaseModel, ConfigDict, Field

from npcgen.actions.feature import Feature

from .stat_block import StatBlock


class RaceTraits(BaseModel):
    """
    Represents a racial template: ability score changes plus racial features.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        description="The name of the race",
    )
    stat_block_mods: StatBlock = Field(
        default_factory=StatBlock,
        description="Ability score changes added to the base stat block",
    )
    racial_features: tuple[Feature, ...] = Field(
        default=(),
        description="Features every member of the race has, in display order",
    )

    def __hash__(self) -> int:
        """
        Hash the race based on its name.

        Returns:
            int:
                The hash value of the race.

        """
        return hash(self.name)
