"""
Feature module for npcgen.

A feature is a named capability (racial, item-granted or class-granted). It
may grant actions and reactions, or be purely descriptive.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .action import Action


class Feature(BaseModel):
    """A named capability that may grant actions and reactions."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        description="The name of the feature.",
    )
    description: str = Field(
        default="",
        description="The rules text of the feature.",
    )
    actions: tuple[Action, ...] = Field(
        default=(),
        description="Actions granted by this feature, in display order.",
    )
    reactions: tuple[Action, ...] = Field(
        default=(),
        description="Reactions granted by this feature, in display order.",
    )

    def model_post_init(self, _: Any) -> None:
        """Validates fields after model initialization."""
        if not self.name:
            raise ValueError("Feature name must not be empty.")
