import io
import random
import sys

import pytest

from rdpquest.console import Console
from rdpquest.game import game_menu, main, start_game
from rdpquest.player import CLASSES, Player
from rdpquest.save import load_save, make_save_dirs, save_game, save_path, save_folder_path


@pytest.fixture(autouse=True)
def save_home(tmp_path, monkeypatch):
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    make_save_dirs()
    return tmp_path


def make_console(text):
    out = io.StringIO()
    return Console(io.StringIO(text), out, delay=False), out


def fresh_player(name="Bob"):
    return Player.from_class(name, CLASSES[1])


def test_start_game_back_to_menu():
    console, out = make_console("0\n")
    player = fresh_player()
    start_game(player, console, random.Random(1))
    assert "Inspect [Bob]" in out.getvalue()
    assert player.life == CLASSES[1].life


def test_start_game_dead_player_does_nothing():
    console, out = make_console("")
    player = fresh_player()
    player.life = 0
    start_game(player, console, random.Random(1))
    assert out.getvalue() == ""


def test_start_game_inspect_shows_level():
    console, out = make_console("3\n\n0\n")
    start_game(fresh_player(), console, random.Random(1))
    assert "| Level: 1" in out.getvalue()


def test_start_game_run_from_battle_keeps_life():
    console, out = make_console("1\n2\n0\n")
    player = fresh_player()
    start_game(player, console, random.Random(3))
    assert "You choose run.... What a noob." in out.getvalue()
    assert player.life == CLASSES[1].life


def test_start_game_flee_dungeon():
    console, out = make_console("2\n2\n0\n")
    start_game(fresh_player(), console, random.Random(4))
    assert "You fled the dungeon." in out.getvalue()


def test_start_game_saves_progress():
    console, out = make_console("4\n3\n0\n")
    start_game(fresh_player("Zed"), console, random.Random(1))
    assert save_path(3).exists()
    loaded = load_save(3, make_console("")[0])
    assert loaded.name == "Zed"
    assert loaded.level == 1


def test_start_game_ignores_unknown_option():
    console, out = make_console("x\n7\n0\n")
    start_game(fresh_player(), console, random.Random(1))
    assert out.getvalue().count("<< Prompt Rogue >>") == 3


def test_game_menu_new_game_returns_one():
    console, out = make_console("1\nhero\n1\n0\n")
    assert game_menu(console, random.Random(1)) == 1
    assert "Assigning the warrior class to Hero." in out.getvalue()


def test_game_menu_invalid_then_exit():
    console, out = make_console("abc\n0\n")
    with pytest.raises(SystemExit) as caught:
        game_menu(console, random.Random(1))
    assert caught.value.code == 0
    assert "Invalid option." in out.getvalue()
    assert "Closing game" in out.getvalue()


def test_game_menu_load_screen_back():
    console, out = make_console("2\n0\n")
    assert game_menu(console, random.Random(1)) == 0
    assert "Your Saves:" in out.getvalue()


def test_game_menu_invalid_slot_retries():
    console, out = make_console("2\n9\n2\n0\n")
    assert game_menu(console, random.Random(1)) == 0
    assert "Invalid slot." in out.getvalue()


def test_game_menu_missing_slot():
    console, out = make_console("2\n4\n2\n0\n")
    assert game_menu(console, random.Random(1)) == 0
    assert "ERROR: Save 4 does not exist." in out.getvalue()


def test_game_menu_loads_save_and_plays():
    save_game(fresh_player("Bob"), 1, make_console("")[0])
    console, out = make_console("2\n1\n0\n2\n0\n")
    assert game_menu(console, random.Random(1)) == 0
    text = out.getvalue()
    assert "Save 1 loaded!" in text
    assert "Inspect [Bob]" in text


def test_main_exit_choice(monkeypatch, tmp_path):
    monkeypatch.setattr(sys, "stdin", io.StringIO("0\n"))
    monkeypatch.setattr(sys, "stdout", io.StringIO())
    with pytest.raises(SystemExit) as caught:
        main(["--no-delay", "--seed", "5"])
    assert caught.value.code == 0
    assert save_folder_path().is_dir()


def test_main_end_of_input(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    monkeypatch.setattr(sys, "stdout", io.StringIO())
    assert main(["--no-delay"]) == 0