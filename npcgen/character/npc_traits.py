"""
NPC traits module for npcgen.

Collects the features an NPC has from its race and items, and the actions and
reactions those features grant, keeping the order in which they are listed.
"""

from typing import Any

from npcgen.actions.action import Action
from npcgen.actions.feature import Feature


class NPCTraits:
    """
    Aggregates features, actions and reactions for an NPC.

    Attributes:
        owner (Any):
            The NPC instance this aggregator belongs to.

    """

    def __init__(self, owner: Any) -> None:
        """
        Initialize the NPCTraits with the owning NPC.

        Args:
            owner (Any):
                The NPC instance this aggregator belongs to.

        """
        self.owner: Any = owner

    def get_all_features(self) -> list[Feature]:
        """
        Returns every feature of the NPC.

        Racial features come first, then the features of each item in item
        order. Duplicates are kept.

        Returns:
            list[Feature]: The features, in display order.

        """
        features: list[Feature] = list(self.owner.race.racial_features)
        for item in self.owner.items:
            features.extend(item.features)
        return features

    def get_all_actions(self) -> list[Action]:
        """
        Returns every action granted by the NPC's features.

        Returns:
            list[Action]: The actions, in feature order.

        """
        actions: list[Action] = []
        for feature in self.get_all_features():
            actions.extend(feature.actions)
        return actions

    def get_all_reactions(self) -> list[Action]:
        """
        Returns every reaction granted by the NPC's features.

        Returns:
            list[Action]: The reactions, in feature order.

        """
        reactions: list[Action] = []
        for feature in self.get_all_features():
            reactions.extend(feature.reactions)
        return reactions
