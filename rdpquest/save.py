"""Save slots: writing, listing and loading player progress."""

from __future__ import annotations

import os
import re
import sys
from dataclasses import dataclass
from pathlib import Path

from rdpquest.console import Console
from rdpquest.player import CLASSES, CharacterClass, Player

SAVE_SLOTS = 5
_NUMBER = r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
_INTEGER = r"\s*([+-]?\d+)"
_TEXT = r"([^>]+)"
_NO_CLASS = CharacterClass("", 0.0, 0.0, 0.0)


@dataclass
class SaveSummary:
    """What the save list shows for one slot."""

    name: str = "Empty"
    level: int = 0
    class_name: str = "Unknown"


def save_folder_path() -> Path:
    """Return the folder that holds the save files."""
    user = os.environ.get("USERPROFILE")
    if user:
        return Path(user) / ".RDPQuest" / "saves"
    return Path("saves")


def make_save_dirs() -> Path:
    """Create the save folder if it is missing and return it."""
    folder = save_folder_path()
    try:
        folder.mkdir(parents=True, exist_ok=True)
    except OSError as error:
        print(f"Error creating save directory: {error}", file=sys.stderr)
    return folder


def save_path(slot: int) -> Path:
    """Return the file used for a save slot."""
    return save_folder_path() / f"save0{slot}.sav"


def _fields(line: str, tag: str, *patterns: str) -> list[str]:
    """Match ``#tag<a/b...>`` from the start of the line; return the leading values matched."""
    prefix = f"#{tag}<"
    if not line.startswith(prefix):
        return []
    rest = line[len(prefix):]
    found: list[str] = []
    for index, pattern in enumerate(patterns):
        if index:
            if not rest.startswith("/"):
                break
            rest = rest[1:]
        match = re.match(pattern, rest)
        if match is None:
            break
        found.append(match.group(1))
        rest = rest[match.end():]
    return found


def _lines(path: Path) -> list[str]:
    with path.open(encoding="utf-8", errors="replace") as handle:
        return [line.rstrip("\r\n") for line in handle]


def read_summary(path: Path) -> SaveSummary:
    """Read the name, level and class from a save file."""
    summary = SaveSummary()
    for line in _lines(path):
        if "#Name<" in line:
            for value in _fields(line, "Name", _TEXT):
                summary.name = value
        elif "#Level<" in line:
            for value in _fields(line, "Level", _INTEGER):
                summary.level = int(value)
        elif "#Class<" in line:
            for value in _fields(line, "Class", _TEXT):
                summary.class_name = value
    return summary


def saves_list(console: Console) -> list[SaveSummary | None]:
    """Print every slot and return its summary, or None for an empty slot."""
    console.clear(0)
    console.write("Your Saves:\n------------\n")
    summaries: list[SaveSummary | None] = []
    for slot in range(1, SAVE_SLOTS + 1):
        try:
            summary = read_summary(save_path(slot))
        except OSError:
            summaries.append(None)
            console.write(f"[{slot}] - Empty Slot\n")
            continue
        summaries.append(summary)
        console.write(f"[{slot}] - {summary.name}[{summary.level}] ({summary.class_name})\n")
    if all(summary is None for summary in summaries):
        console.write("You have 0 saves.\n")
    console.write("------------\n")
    return summaries


def save_game(player: Player, slot: int, console: Console) -> Path | None:
    """Write the player to a slot; return the file, or None if it could not be written."""
    path = save_path(slot)
    content = (
        f"#Name<{player.name}>\n"
        f"#Class<{player.character_class.name}>\n"
        f"#Life<{player.life:.2f}/{player.life_max:.2f}>\n"
        f"#Attack<{player.attack:.2f}>\n"
        f"#Deffense<{player.defense:.2f}>\n"
        f"#Level<{player.level}>\n"
        f"#XP<{player.xp}/{player.max_xp}>\n"
    )
    try:
        path.write_text(content, encoding="utf-8")
    except OSError:
        console.write("Saving")
        console.loading(5, "%", 0)
        console.write("ERROR 0001: Could not create save file\n")
        return None
    console.write(f"Saved!\n{path}\n")
    console.clear(2)
    return path


def _find_saved_class(name: str) -> CharacterClass | None:
    wanted = name.lower()
    return next((option for option in CLASSES if option.name.lower() == wanted), None)


def load_save(slot: int, console: Console) -> Player | None:
    """Load the player in a slot; None if the slot is empty or has no name."""
    try:
        lines = _lines(save_path(slot))
    except OSError:
        console.write(f"ERROR: Save {slot} does not exist.\n")
        return None

    player = Player(
        name="",
        character_class=_NO_CLASS,
        life=0.0,
        attack=0.0,
        defense=0.0,
        life_max=0.0,
        attack_max=0.0,
        defense_max=0.0,
        level=0,
        xp=0,
        max_xp=0,
    )
    for line in lines:
        if "#Name<" in line:
            for value in _fields(line, "Name", _TEXT):
                player.name = value
        elif "#Class<" in line:
            for value in _fields(line, "Class", _TEXT):
                found = _find_saved_class(value)
                if found is not None:
                    player.character_class = found
        elif "#Life<" in line:
            values = _fields(line, "Life", _NUMBER, _NUMBER)
            if values:
                player.life = float(values[0])
            if len(values) > 1:
                player.life_max = float(values[1])
        elif "#Attack<" in line:
            for value in _fields(line, "Attack", _NUMBER):
                player.attack = float(value)
        elif "#Deffense<" in line:
            for value in _fields(line, "Deffense", _NUMBER):
                player.defense = float(value)
        elif "#Level<" in line:
            for value in _fields(line, "Level", _INTEGER):
                player.level = int(value)
        elif "#XP<" in line:
            values = _fields(line, "XP", _INTEGER, _INTEGER)
            if values:
                player.xp = int(values[0])
            if len(values) > 1:
                player.max_xp = int(values[1])

    if not player.name:
        console.write(f"ERROR: Save {slot} is corrupted.\n")
        return None
    console.write(f"Save {slot} loaded!\n")
    return player