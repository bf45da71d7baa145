"""
Tests for AC methods, ability caps and AC method resolution.
"""

import pytest
from pydantic import ValidationError

from npcgen.character.armor_class import (
    BASE_AC,
    AbilityCap,
    AbilityCaps,
    ACMod,
    calculate_ac,
    resolve_ac_method,
)
from npcgen.character.stat_block import AbilityScores, StatBlock
from npcgen.core.constants import UNLIMITED_CAP_SENTINEL, CapKind


def stats(**scores: int) -> StatBlock:
    values = {
        "strength": 10,
        "dexterity": 10,
        "constitution": 10,
        "intelligence": 10,
        "wisdom": 10,
        "charisma": 10,
    }
    values.update(scores)
    return StatBlock(ability_scores=AbilityScores(**values))


@pytest.fixture
def studded_leather():
    return ACMod(
        name="Studded Leather",
        set=12,
        add_max_ability_scores=AbilityCaps(dexterity=AbilityCap.unlimited()),
    )


@pytest.fixture
def plate():
    return ACMod(name="Plate", set=18)


# ---- Ability caps ----


@pytest.mark.parametrize(
    "raw, kind, value",
    [
        (0, CapKind.ZERO, 0),
        (-1, CapKind.UNLIMITED, 0),
        (-7, CapKind.UNLIMITED, 0),
        (1, CapKind.CAPPED, 1),
        (3, CapKind.CAPPED, 3),
    ],
)
def test_cap_from_integer(raw, kind, value):
    """Test the integer form of caps used in data files."""
    cap = AbilityCap.model_validate(raw)
    assert cap.kind == kind
    assert cap.value == value


def test_cap_integer_form_round_trip():
    """Test that caps convert back to the data file integers."""
    assert AbilityCap.unlimited().as_int() == UNLIMITED_CAP_SENTINEL
    assert AbilityCap.zero().as_int() == 0
    assert AbilityCap.capped(2).as_int() == 2


def test_capped_cap_needs_positive_value():
    """Test that CAPPED caps reject non-positive bounds."""
    with pytest.raises(ValueError):
        AbilityCap(kind=CapKind.CAPPED, value=0)


def test_uncapped_kinds_reject_values():
    """Test that ZERO and UNLIMITED caps cannot carry a bound."""
    with pytest.raises(ValueError):
        AbilityCap(kind=CapKind.ZERO, value=2)
    with pytest.raises(ValueError):
        AbilityCap(kind=CapKind.UNLIMITED, value=2)


def test_boolean_cap_rejected():
    """Test that booleans are not mistaken for integer caps."""
    with pytest.raises(ValidationError):
        AbilityCap.model_validate(True)


@pytest.mark.parametrize(
    "cap, modifier, expected",
    [
        (AbilityCap.zero(), 3, 0),
        (AbilityCap.zero(), -2, 0),
        (AbilityCap.unlimited(), 3, 3),
        (AbilityCap.unlimited(), -2, -2),
        (AbilityCap.capped(1), 3, 1),
        (AbilityCap.capped(2), 2, 2),
        (AbilityCap.capped(1), -2, -2),
    ],
)
def test_cap_contribution(cap, modifier, expected):
    """Test how much of a modifier each kind of cap lets through."""
    assert cap.contribution(modifier) == expected


def test_caps_default_to_zero():
    """Test that unspecified abilities contribute nothing."""
    caps = AbilityCaps(dexterity=AbilityCap.unlimited())
    assert caps.strength == AbilityCap.zero()
    assert caps.wisdom.kind == CapKind.ZERO


def test_ac_mod_from_data():
    """Test building an AC method from data file values."""
    hide = ACMod.model_validate(
        {"name": "Hide", "set": 12, "add_max_ability_scores": {"dexterity": 2}}
    )
    assert hide.add_max_ability_scores.dexterity == AbilityCap.capped(2)
    assert hide.add_max_ability_scores.strength == AbilityCap.zero()
    assert hide.addition == 0


# ---- AC calculation ----


def test_base_ac_reproduces_ten_plus_dex():
    """Test the unarmored method."""
    assert BASE_AC.set == 10
    assert BASE_AC.addition == 0
    assert BASE_AC.add_max_ability_scores.dexterity.kind == CapKind.UNLIMITED
    assert calculate_ac(stats(), BASE_AC) == 10
    assert calculate_ac(stats(dexterity=16), BASE_AC) == 13
    assert calculate_ac(stats(dexterity=6), BASE_AC) == 8


def test_base_ac_ignores_other_abilities():
    """Test that only Dexterity feeds the unarmored method."""
    assert calculate_ac(stats(strength=20, wisdom=20, constitution=3), BASE_AC) == 10


def test_capped_dex_limits_positive_modifier():
    """Test that a Dex cap of 1 turns +3 into +1."""
    method = ACMod(set=10, add_max_ability_scores=AbilityCaps(dexterity=AbilityCap.capped(1)))
    assert calculate_ac(stats(dexterity=16), method) == 11


def test_capped_dex_does_not_raise_negative_modifier():
    """Test that a positive cap lets a negative modifier through."""
    method = ACMod(set=10, add_max_ability_scores=AbilityCaps(dexterity=AbilityCap.capped(1)))
    assert calculate_ac(stats(dexterity=6), method) == 8


def test_zero_dex_cap_ignores_dexterity(plate):
    """Test that heavy armor ignores Dexterity in both directions."""
    assert calculate_ac(stats(dexterity=18), plate) == 18
    assert calculate_ac(stats(dexterity=6), plate) == 18


def test_several_abilities_contribute():
    """Test a method adding two ability modifiers (unarmored defense)."""
    unarmored_defense = ACMod(
        name="Unarmored Defense",
        set=10,
        add_max_ability_scores=AbilityCaps(
            dexterity=AbilityCap.unlimited(),
            wisdom=AbilityCap.unlimited(),
        ),
    )
    assert calculate_ac(stats(dexterity=16, wisdom=14), unarmored_defense) == 15


def test_addition_is_added_unconditionally():
    """Test that the flat bonus stacks on set and abilities."""
    method = ACMod(
        set=12,
        addition=1,
        add_max_ability_scores=AbilityCaps(dexterity=AbilityCap.capped(2)),
    )
    assert calculate_ac(stats(dexterity=18), method) == 15


def test_light_armor(studded_leather):
    assert calculate_ac(stats(dexterity=16), studded_leather) == 15


# ---- Method resolution ----


def test_resolve_empty_falls_back_to_base_ac():
    assert resolve_ac_method([]) is BASE_AC


def test_resolve_single_method():
    assert resolve_ac_method([BASE_AC]) is BASE_AC


def test_resolve_picks_most_specific(studded_leather, plate):
    """Test that the last (most specific) candidate wins."""
    assert resolve_ac_method([BASE_AC, studded_leather]) is studded_leather
    assert resolve_ac_method([BASE_AC, studded_leather, plate]) is plate
