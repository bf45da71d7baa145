"""
Tests for the stat block strings and sheet printing.
"""

import json

import pytest

from npcgen.actions import Action
from npcgen.character import npc_from_dict
from npcgen.core import sheets
from npcgen.core.constants import ActionType
from npcgen.core.dice import DiceFunction


@pytest.fixture
def bandit(repo):
    return npc_from_dict(
        {
            "name": "Bandit Captain",
            "race": "Human",
            "stats": {
                "strength": 14,
                "dexterity": 15,
                "constitution": 13,
                "intelligence": 13,
                "wisdom": 10,
                "charisma": 13,
            },
            "hit_points": "10d8",
            "constant_proficiency_modifier": -2,
            "items": ["Scimitar", "Dagger", "Studded Leather Armor", "Shortbow"],
        },
        repo,
    )


@pytest.fixture
def actions(bandit):
    return {action.name: action for action in bandit.get_all_actions()}


def test_dice_to_string():
    assert sheets.dice_to_string(DiceFunction.parse("10d8+20")) == "65 (10d8+20)"
    assert sheets.dice_to_string(DiceFunction.parse("4")) == "4"


def test_attack_string(bandit, actions):
    assert sheets.attack_string(actions["Scimitar"], bandit) == "Melee Weapon Attack: +5 to hit"
    assert (
        sheets.attack_string(actions["Dagger"], bandit)
        == "Melee or Ranged Weapon Attack: +5 to hit"
    )


def test_range_string(bandit, actions):
    assert sheets.range_string(actions["Scimitar"], bandit) == "reach 5 ft."
    assert sheets.range_string(actions["Dagger"], bandit) == "reach 5 ft. or range 20/60 ft."
    assert sheets.range_string(actions["Shortbow"], bandit) == "range 80/320 ft."


def test_range_without_long_range(bandit):
    javelin = Action(
        name="Javelin",
        action_type=ActionType.RANGED_WEAPON_ATTACK,
        normal_range=30,
    )
    assert sheets.range_string(javelin, bandit) == "range 30 ft."


def test_damage_strings(bandit, actions):
    assert sheets.damage_string(actions["Scimitar"], bandit) == "6 (1d6+3)"
    assert sheets.damage_string(actions["Dagger"], bandit) == "5 (1d4+3)"
    assert sheets.damage_type_string(actions["Scimitar"], bandit) == "slashing damage"
    assert sheets.damage_type_string(actions["Dagger"], bandit) == "piercing damage"


def test_non_attack_strings_are_empty(bandit):
    parry = bandit.get_all_reactions()[0]
    assert sheets.attack_string(parry, bandit) == ""
    assert sheets.range_string(parry, bandit) == ""
    assert sheets.damage_string(parry, bandit) == ""
    assert sheets.damage_type_string(parry, bandit) == ""


def test_action_to_string(bandit, actions):
    assert sheets.action_to_string(actions["Scimitar"], bandit) == (
        "Scimitar. Melee Weapon Attack: +5 to hit, reach 5 ft., one target. "
        "Hit: 6 (1d6+3) slashing damage."
    )


def test_reaction_to_string(bandit):
    parry = bandit.get_all_reactions()[0]
    assert sheets.action_to_string(parry, bandit) == f"Parry. {parry.description}"


def test_npc_to_string(bandit):
    text = sheets.npc_to_string(bandit)
    summary = "Name: Bandit Captain\nRace: Human\nHP: 65 (10d8+20)\nAC: 13\n"

    assert text.startswith(summary)
    record = json.loads(text[len(summary):])
    assert record["name"] == "Bandit Captain"
    assert record["hit_points"] == "10d8"
    assert record["items"] == ["Scimitar", "Dagger", "Studded Leather Armor", "Shortbow"]
    assert '\n    "race": "Human"' in text


def test_print_npc_sheet(bandit, mocker):
    cprint = mocker.patch("npcgen.core.sheets.cprint")
    crule = mocker.patch("npcgen.core.sheets.crule")

    sheets.print_npc_sheet(bandit)

    crule.assert_any_call("[bold]Bandit Captain[/]", style="bold blue")
    crule.assert_any_call("Actions", style="dim white")
    crule.assert_any_call("Reactions", style="dim white")
    printed = [str(call.args[0]) for call in cprint.call_args_list]
    assert "[bold]Armor Class[/] 13" in printed
    assert "[bold]Hit Points[/] 65 (10d8+20)" in printed


def test_print_npc_sheet_minimal(bandit, mocker):
    cprint = mocker.patch("npcgen.core.sheets.cprint")
    crule = mocker.patch("npcgen.core.sheets.crule")

    sheets.print_npc_sheet(bandit, verbose=0)

    crule.assert_called_once()
    assert cprint.call_count == 4
