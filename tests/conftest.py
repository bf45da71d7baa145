"""
Shared fixtures for the npcgen tests.
"""

import pytest

from npcgen.actions import Action, Feature
from npcgen.character import NPC, AbilityScores, RaceTraits, StatBlock
from npcgen.core.constants import Ability, ActionType, DamageType
from npcgen.core.content import ContentRepository
from npcgen.core.dice import DiceFunction
from npcgen.items import Item
from npcgen.main import DATA_DIR


@pytest.fixture
def data_dir():
    return DATA_DIR


@pytest.fixture
def repo():
    """The shared content repository, reloaded from the bundled data."""
    repository = ContentRepository(DATA_DIR)
    repository.reload(DATA_DIR)
    return repository


@pytest.fixture
def sword_action():
    return Action(
        name="Longsword",
        action_type=ActionType.MELEE_WEAPON_ATTACK,
        attack_ability=Ability.STRENGTH,
        damage=DiceFunction.parse("1d8"),
        damage_type=DamageType.SLASHING,
    )


@pytest.fixture
def bow_action():
    return Action(
        name="Longbow",
        action_type=ActionType.RANGED_WEAPON_ATTACK,
        attack_ability=Ability.DEXTERITY,
        normal_range=150,
        long_range=600,
        damage=DiceFunction.parse("1d8"),
        damage_type=DamageType.PIERCING,
    )


@pytest.fixture
def parry_reaction():
    return Action(name="Parry", description="Adds 2 to AC against one melee attack.")


@pytest.fixture
def make_npc():
    """Returns a factory building NPCs from plain values."""

    def _make_npc(
        stats: dict[str, int] | None = None,
        race_mods: dict[str, int] | None = None,
        racial_features: tuple[Feature, ...] = (),
        hit_points: str = "3d8",
        constant_proficiency_modifier: int = 0,
        items: tuple[Item, ...] = (),
    ) -> NPC:
        scores = {ability.field_name: 10 for ability in Ability}
        scores.update(stats or {})
        race = RaceTraits(
            name="Test Race",
            stat_block_mods=StatBlock(ability_scores=AbilityScores(**(race_mods or {}))),
            racial_features=racial_features,
        )
        return NPC(
            name="Test NPC",
            base_stat_block=StatBlock(ability_scores=AbilityScores(**scores)),
            race=race,
            hit_points=DiceFunction.parse(hit_points),
            constant_proficiency_modifier=constant_proficiency_modifier,
            items=items,
        )

    return _make_npc
