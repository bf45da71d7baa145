"""
NPC serialization and deserialization functions.

This module provides functions to build NPC instances from dictionaries and
JSON files, where races and items are referenced by name and looked up in the
content repository, and to turn an NPC back into such a dictionary.
"""

import json
from pathlib import Path
from typing import Any

from npcgen.core.dice import DiceFunction
from npcgen.core.logging import log_error

from .main import NPC
from .stat_block import AbilityScores, StatBlock


def npc_from_dict(data: dict[str, Any], repo: Any = None) -> NPC:
    """
    Creates an NPC instance from a dictionary of data.

    Args:
        data (dict[str, Any]):
            The dictionary containing NPC data.
        repo (ContentRepository | None):
            The repository used to resolve races and items. Defaults to the
            shared ContentRepository instance.

    Raises:
        ValueError:
            If the race or an item is unknown, or a field is invalid.

    Returns:
        NPC:
            The created NPC instance.

    """
    from npcgen.core.content import ContentRepository

    if repo is None:
        repo = ContentRepository()

    name = data.get("name")
    if not name:
        raise ValueError("NPC name missing.")

    # Get the race.
    race_name: str = data.get("race", "")
    race = repo.get_race(race_name)
    if not race:
        raise ValueError(f"Race '{race_name}' not found.")

    # Get the items, keeping their order.
    items = []
    for item_name in data.get("items", []):
        item = repo.get_item(item_name)
        if not item:
            raise ValueError(f"Item '{item_name}' not found.")
        items.append(item)

    base_stat_block = StatBlock(
        ability_scores=AbilityScores(**data.get("stats", {})),
        speed=data.get("speed", 30),
    )

    return NPC(
        name=name,
        base_stat_block=base_stat_block,
        race=race,
        hit_points=DiceFunction.model_validate(data.get("hit_points", "0")),
        constant_proficiency_modifier=data.get("constant_proficiency_modifier", 0),
        items=items,
    )


def npc_to_dict(npc: NPC) -> dict[str, Any]:
    """
    Converts an NPC instance to a dictionary, referencing race and items by
    name.

    Args:
        npc (NPC):
            The NPC to convert.

    Returns:
        dict[str, Any]:
            The dictionary representation of the NPC.

    """
    return {
        "name": npc.name,
        "race": npc.race.name,
        "stats": npc.base_stat_block.ability_scores.model_dump(),
        "speed": npc.base_stat_block.speed,
        "hit_points": str(npc.hit_points),
        "constant_proficiency_modifier": npc.constant_proficiency_modifier,
        "items": [item.name for item in npc.items],
    }


def load_npc(file_path: Path) -> NPC | None:
    """
    Loads an NPC from a JSON file.

    Args:
        file_path (Path): The path to the JSON file containing NPC data.

    Returns:
        NPC | None: An NPC instance if the file is valid, None otherwise.

    """
    try:
        with open(file_path, encoding="utf-8") as f:
            return npc_from_dict(json.load(f))
    except (FileNotFoundError, json.JSONDecodeError) as e:
        log_error(
            f"Failed to load NPC from {file_path}: {e}",
            {
                "file_path": str(file_path),
                "error": str(e),
                "context": "npc_file_loading",
            },
        )
        return None


def load_npcs(file_path: Path) -> dict[str, NPC]:
    """
    Loads NPCs from a JSON file holding a list of NPCs.

    Args:
        file_path (Path):
            The path to the JSON file containing NPC data.

    Returns:
        dict[str, NPC]: A dictionary mapping NPC names to NPC instances.

    """
    npcs: dict[str, NPC] = {}
    try:
        with open(file_path, encoding="utf-8") as f:
            npc_list = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        log_error(
            f"Failed to load NPCs from {file_path}: {e}",
            {
                "file_path": str(file_path),
                "error": str(e),
                "context": "npc_file_loading",
            },
        )
        return npcs

    if not isinstance(npc_list, list):
        log_error(
            f"NPC data in {file_path} is not a list.",
            {
                "file_path": str(file_path),
                "error": "Invalid format",
                "context": "npc_file_loading",
            },
        )
        return npcs

    for npc_data in npc_list:
        npc = npc_from_dict(npc_data)
        npcs[npc.name] = npc
    return npcs
