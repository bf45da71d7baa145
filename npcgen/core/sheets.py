"""
Module for printing NPC stat blocks and their actions in a formatted way.
"""

import json

from rich.padding import Padding

from npcgen.actions.action import Action
from npcgen.character.main import NPC
from npcgen.character.npc_serialization import npc_to_dict
from npcgen.core.constants import GLOBAL_VERBOSE_LEVEL, Ability
from npcgen.core.dice import DiceFunction
from npcgen.core.utils import cprint, crule, signed


def dice_to_string(dice: DiceFunction) -> str:
    """
    Formats a dice expression the way stat blocks do, e.g. "65 (10d8+20)".

    Args:
        dice (DiceFunction): The dice expression.

    Returns:
        str: The average followed by the expression, or only the value when
        there are no dice.

    """
    if not dice.num_dice:
        return str(dice.constant)
    return f"{dice.average()} ({dice})"


def attack_string(action: Action, npc: NPC) -> str:
    """
    Returns the attack part of an action line, e.g. "Melee Weapon Attack: +5 to hit".

    Args:
        action (Action): The action to describe.
        npc (NPC): The NPC performing the action.

    Returns:
        str: The attack string, empty for actions without an attack roll.

    """
    if not action.action_type.is_attack:
        return ""
    return f"{action.action_type.label}: {signed(action.attack_modifier(npc))} to hit"


def range_string(action: Action, npc: NPC) -> str:
    """
    Returns the reach and range of an action, e.g. "reach 5 ft. or range 20/60 ft.".

    Args:
        action (Action): The action to describe.
        npc (NPC): The NPC performing the action.

    Returns:
        str: The range string, empty for actions without an attack roll.

    """
    parts: list[str] = []
    if action.action_type.is_melee:
        parts.append(f"reach {action.reach} ft.")
    if action.action_type.is_ranged:
        if action.long_range:
            parts.append(f"range {action.normal_range}/{action.long_range} ft.")
        else:
            parts.append(f"range {action.normal_range} ft.")
    return " or ".join(parts)


def damage_string(action: Action, npc: NPC) -> str:
    """
    Returns the damage of an action, e.g. "6 (1d6+3)".

    Args:
        action (Action): The action to describe.
        npc (NPC): The NPC performing the action.

    Returns:
        str: The damage string, empty for actions dealing no damage.

    """
    damage = action.damage_roll(npc)
    if damage is None:
        return ""
    return dice_to_string(damage)


def damage_type_string(action: Action, npc: NPC) -> str:
    """
    Returns the damage type of an action, e.g. "slashing damage".

    Args:
        action (Action): The action to describe.
        npc (NPC): The NPC performing the action.

    Returns:
        str: The damage type string, empty for actions dealing no damage.

    """
    if action.damage_type is None:
        return ""
    return f"{action.damage_type.name.lower()} damage"


def action_to_string(action: Action, npc: NPC) -> str:
    """
    Builds the full stat block line of an action.

    Args:
        action (Action): The action to describe.
        npc (NPC): The NPC performing the action.

    Returns:
        str: The action line.

    """
    sentences: list[str] = []
    if action.action_type.is_attack:
        sentences.append(
            f"{attack_string(action, npc)}, {range_string(action, npc)}, one target."
        )
    if action.damage is not None:
        sentences.append(
            f"Hit: {damage_string(action, npc)} {damage_type_string(action, npc)}."
        )
    if action.description:
        sentences.append(action.description)
    return f"{action.name}. " + " ".join(sentences)


def npc_to_string(npc: NPC) -> str:
    """
    Returns the plain-text summary of an NPC: name, race, HP and AC, followed
    by the NPC record as indented JSON.

    Args:
        npc (NPC): The NPC to describe.

    Returns:
        str: The summary, one field per line, then the JSON record.

    """
    return (
        f"Name: {npc.name}\n"
        f"Race: {npc.race.name}\n"
        f"HP: {dice_to_string(npc.HP)}\n"
        f"AC: {npc.AC}\n"
        f"{json.dumps(npc_to_dict(npc), indent=4)}\n"
    )


def print_npc_sheet(npc: NPC, verbose: int = GLOBAL_VERBOSE_LEVEL) -> None:
    """
    Prints the stat block of an NPC.

    Args:
        npc (NPC): The NPC to display.
        verbose (int): The amount of detail, see GLOBAL_VERBOSE_LEVEL.

    """
    crule(f"[bold]{npc.name}[/]", style="bold blue")
    cprint(f"[italic]{npc.race.name}[/]")
    cprint(f"[bold]Armor Class[/] {npc.AC}")
    cprint(f"[bold]Hit Points[/] {dice_to_string(npc.HP)}")
    cprint(f"[bold]Speed[/] {npc.stat_block().speed} ft.")
    if verbose < 1:
        return

    stats = npc.stat_block().ability_scores
    cprint(
        "  ".join(
            f"[bold]{ability.short_name}[/] {stats.score(ability)} "
            f"({signed(stats.modifier(ability))})"
            for ability in Ability
        )
    )
    cprint(f"[bold]Proficiency Bonus[/] {signed(npc.PROFICIENCY_BONUS)}")

    for feature in npc.get_all_features():
        if feature.description:
            cprint(Padding(f"[bold italic]{feature.name}.[/] {feature.description}", (0, 2)))
    if verbose < 2:
        return

    actions = npc.get_all_actions()
    if actions:
        crule("Actions", style="dim white")
        for action in actions:
            cprint(Padding(action_to_string(action, npc), (0, 2)))

    reactions = npc.get_all_reactions()
    if reactions:
        crule("Reactions", style="dim white")
        for reaction in reactions:
            cprint(Padding(action_to_string(reaction, npc), (0, 2)))
