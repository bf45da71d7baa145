"""
Tests for the npcgen entry point.
"""

from npcgen import main as npcgen_main


def test_bundled_data_ships_inside_package():
    assert npcgen_main.DATA_DIR.parent.name == "npcgen"
    for name in ("races.json", "items.json", "npcs.json"):
        assert (npcgen_main.DATA_DIR / name).is_file()


def test_main_prints_every_bundled_npc(repo, mocker):
    mocker.patch.object(npcgen_main, "setup_logging")
    mocker.patch.object(npcgen_main, "cprint")
    mocker.patch.object(npcgen_main, "crule")
    print_npc_sheet = mocker.patch.object(npcgen_main, "print_npc_sheet")

    npcgen_main.main()

    printed = [call.args[0].name for call in print_npc_sheet.call_args_list]
    assert printed == ["Bandit Captain", "Orc War Chief", "Goblin Scout"]
