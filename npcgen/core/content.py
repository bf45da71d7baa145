import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

from catchery import log_warning

from npcgen.character.race import RaceTraits
from npcgen.items.item import Item

from npcgen.core.logging import log_info
from npcgen.core.utils import Singleton


class ContentRepository(metaclass=Singleton):
    """
    One-stop registry for the static race and item records, by name.
    """

    races: dict[str, RaceTraits]
    items: dict[str, Item]

    def __init__(self, data_dir: Path | None = None) -> None:
        """
        Initialize the ContentRepository.

        Args:
            data_dir (Path | None):
                The directory containing data files to load.

        """
        if data_dir:
            self.reload(data_dir)
            self.loaded = True
        elif not hasattr(self, "loaded"):
            raise ValueError(
                "ContentRepository must be initialized with a valid data_dir on first use."
            )

    def reload(self, root: Path) -> None:
        """
        (Re)load all JSON assets from disk.

        Both files are parsed before anything is replaced, so a failed
        reload leaves the previous content in place.

        Args:
            root (Path):
                The directory containing data files to load.

        Raises:
            ValueError: If either file is missing or holds invalid records.
        """
        races = _load_json_file(root / "races.json", self._load_races, "races")
        items = _load_json_file(root / "items.json", self._load_items, "items")
        self.races = races
        self.items = items

    def _lookup(self, kind: str, entries: dict[str, Any], name: str) -> Any | None:
        entry = entries.get(name)
        if entry is None:
            log_warning(
                f"Unknown {kind} '{name}'.",
                {"kind": kind, "name": name, "known": len(entries)},
            )
        return entry

    def get_race(self, name: str) -> RaceTraits | None:
        """Get a race by name, or None if not found."""
        return self._lookup("race", self.races, name)

    def get_item(self, name: str) -> Item | None:
        """Get an item by name, or None if not found."""
        return self._lookup("item", self.items, name)

    @staticmethod
    def _load_races(data: list[dict]) -> dict[str, RaceTraits]:
        """
        Load races from JSON data.

        Args:
            data (list[dict]): List of race data dictionaries.

        Returns:
            dict[str, RaceTraits]: Dictionary mapping race names to RaceTraits objects.

        Raises:
            ValueError: If duplicate race names are found.

        """
        races: dict[str, RaceTraits] = {}
        for race_data in data:
            race = RaceTraits(**race_data)
            if race.name in races:
                raise ValueError(f"Duplicate race name: {race.name}")
            races[race.name] = race
        return races

    @staticmethod
    def _load_items(data: list[dict]) -> dict[str, Item]:
        """
        Load items from JSON data.

        Args:
            data (list[dict]): List of item data dictionaries.

        Returns:
            dict[str, Item]: Dictionary mapping item names to Item objects.

        Raises:
            ValueError: If duplicate item names are found.

        """
        items: dict[str, Item] = {}
        for item_data in data:
            item = Item(**item_data)
            if item.name in items:
                raise ValueError(f"Duplicate item name: {item.name}")
            items[item.name] = item
        return items


def _load_json_file(
    filepath: Path,
    loader_func: Callable[[list[dict]], dict[str, Any]],
    description: str,
) -> dict[str, Any]:
    """
    Reads a JSON list of records and hands it to ``loader_func``.

    Every failure, from a missing file to a record pydantic rejects, is
    reported as a ValueError naming the file.
    """
    log_info(f"Loading {description}", {"file": str(filepath)})
    if not filepath.is_file():
        raise ValueError(f"File {filepath} raised an error: File not found")
    try:
        data = json.loads(filepath.read_text(encoding="utf-8"))
        if not isinstance(data, list):
            raise ValueError(f"Expected list, got {type(data).__name__}")
        if not data:
            raise ValueError("Empty data list")
        return loader_func(data)
    except (json.JSONDecodeError, ValueError) as e:
        raise ValueError(f"File {filepath} raised an error: {e}") from e
