import io
from pathlib import Path

import pytest

from rdpquest.console import Console
from rdpquest.player import CLASSES, Player, find_class
from rdpquest.save import (
    SAVE_SLOTS,
    SaveSummary,
    load_save,
    make_save_dirs,
    read_summary,
    save_folder_path,
    save_game,
    save_path,
    saves_list,
)


@pytest.fixture
def save_home(tmp_path, monkeypatch):
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    make_save_dirs()
    return tmp_path


def make_console():
    out = io.StringIO()
    return Console(stdin=io.StringIO(""), stdout=out, delay=False), out


def hero():
    player = Player.from_class("Hero", find_class("warrior"))
    player.life = 123.45
    player.attack = 31.5
    player.level = 3
    player.xp = 17
    player.max_xp = 250
    return player


def test_folder_under_user_profile(tmp_path, monkeypatch):
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    assert save_folder_path() == tmp_path / ".RDPQuest" / "saves"


def test_folder_without_user_profile(monkeypatch):
    monkeypatch.delenv("USERPROFILE", raising=False)
    assert save_folder_path() == Path("saves")


def test_make_save_dirs_creates_folder(tmp_path, monkeypatch):
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    console, _ = make_console()
    assert save_game(hero(), 1, console) is None
    make_save_dirs()
    path = save_game(hero(), 1, console)
    assert path == tmp_path / ".RDPQuest" / "saves" / "save01.sav"
    assert path.is_file()


def test_save_path_names_slot(save_home):
    assert save_path(2).name == "save02.sav"
    assert save_path(2).parent == save_folder_path()


def test_save_file_format(save_home):
    console, out = make_console()
    path = save_game(hero(), 1, console)
    assert path == save_path(1)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "#Name<Hero>"
    assert lines[1] == "#Class<warrior>"
    assert lines[4] == "#Deffense<20.00>"
    assert lines[5] == "#Level<3>"
    assert "Saved!" in out.getvalue()


def test_round_trip(save_home):
    console, out = make_console()
    original = hero()
    save_game(original, 4, console)
    loaded = load_save(4, console)
    assert loaded is not None
    assert loaded.name == original.name
    assert loaded.character_class == CLASSES[1]
    assert loaded.life == pytest.approx(original.life)
    assert loaded.life_max == pytest.approx(original.life_max)
    assert loaded.attack == pytest.approx(original.attack)
    assert loaded.defense == pytest.approx(original.defense)
    assert (loaded.level, loaded.xp, loaded.max_xp) == (original.level, original.xp, original.max_xp)
    assert "Save 4 loaded!" in out.getvalue()


def test_load_missing_slot(save_home):
    console, out = make_console()
    assert load_save(3, console) is None
    assert "ERROR: Save 3 does not exist." in out.getvalue()


def test_load_corrupted_slot(save_home):
    save_path(2).write_text("#Level<4>\n", encoding="utf-8")
    console, out = make_console()
    assert load_save(2, console) is None
    assert "ERROR: Save 2 is corrupted." in out.getvalue()


def test_summary_defaults(save_home):
    path = save_path(5)
    path.write_text("#Name<Solo>\n", encoding="utf-8")
    assert read_summary(path) == SaveSummary(name="Solo")


def test_saves_list_shows_slots(save_home):
    console, out = make_console()
    save_game(hero(), 1, console)
    summaries = saves_list(console)
    assert len(summaries) == SAVE_SLOTS
    assert summaries[0] == SaveSummary("Hero", 3, "warrior")
    assert summaries[1:] == [None] * (SAVE_SLOTS - 1)
    text = out.getvalue()
    assert "[1] - Hero[3] (warrior)" in text
    assert "[2] - Empty Slot" in text
    assert "You have 0 saves." not in text


def test_saves_list_empty(save_home):
    console, out = make_console()
    assert saves_list(console) == [None] * SAVE_SLOTS
    assert "You have 0 saves." in out.getvalue()


def test_save_fails_without_folder(tmp_path, monkeypatch):
    monkeypatch.setenv("USERPROFILE", str(tmp_path / "missing"))
    console, out = make_console()
    assert save_game(hero(), 1, console) is None
    assert "ERROR 0001: Could not create save file" in out.getvalue()