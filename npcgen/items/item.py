"""
Item module for npcgen.

Defines the Item record: a piece of equipment carried by an NPC. Items grant
features (and through them actions) and may declare stat and AC changes.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from npcgen.actions.feature import Feature
from npcgen.character.armor_class import ACMod
from npcgen.character.stat_block import StatBlock


class Item(BaseModel):
    """
    A piece of equipment carried by an NPC.

    ``stat_block_mods`` and ``ac_mod`` describe how the item would change
    the wearer's ability scores and armor class. Neither is applied yet by
    the derived-stat engine: the stacking rule against features and spells
    is still to be decided.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        description="The name of the item.",
    )
    description: str = Field(
        default="",
        description="A brief description of the item.",
    )
    features: tuple[Feature, ...] = Field(
        default=(),
        description="Features granted by the item, in display order.",
    )
    stat_block_mods: StatBlock | None = Field(
        default=None,
        description="Ability score changes granted while carried.",
    )
    ac_mod: ACMod | None = Field(
        default=None,
        description="The AC method (armor) or bonus provided by the item.",
    )

    def model_post_init(self, _: Any) -> None:
        """Validates fields after model initialization."""
        if not self.name:
            raise ValueError("Item name must not be empty.")

    @property
    def modifies_ac(self) -> bool:
        """Returns True if the item declares an AC method or bonus."""
        return self.ac_mod is not None

    @property
    def modifies_stats(self) -> bool:
        """Returns True if the item declares ability score changes."""
        return self.stat_block_mods is not None
