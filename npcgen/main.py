"""
Main entry point for npcgen.

Loads the bundled races and items, builds the NPCs described in
npcgen/data/npcs.json and prints their stat blocks. The log level can be set with
the NPCGEN_LOG_LEVEL environment variable.
"""

from pathlib import Path

from npcgen.character import load_npcs
from npcgen.core.content import ContentRepository
from npcgen.core.logging import level_from_env, setup_logging
from npcgen.core.sheets import print_npc_sheet
from npcgen.core.utils import cprint, crule

# The bundled data folder, shipped inside the package.
DATA_DIR = Path(__file__).resolve().parent / "data"


def main(data_dir: Path = DATA_DIR) -> None:
    """
    Loads content and NPCs from ``data_dir`` and prints every NPC.

    Args:
        data_dir (Path): The directory holding races.json, items.json and
            npcs.json.

    """
    setup_logging(level_from_env())

    crule("NPC Generator", style="bold green")

    cprint("Loading repository...", style="bold green")
    ContentRepository(data_dir)

    cprint("Loading NPCs...", style="bold green")
    npcs = load_npcs(data_dir / "npcs.json")

    for npc in npcs.values():
        print_npc_sheet(npc)


if __name__ == "__main__":
    main()
