"""Save slots for the Portuguese game: writing, listing and loading."""

from __future__ import annotations

import os
import re
import sys
from pathlib import Path

from rdpquest.console import Console
from rdpquest.pt.player import CLASSES, CharacterClass, Player

SAVE_SLOTS = 5
DEFAULT_NAME = "Indigente"
DEFAULT_CLASS = "Plebeu"
_NUMBER = r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
_TEXT = r"([^>]+)"
_NO_CLASS = CharacterClass("", 0.0, 0.0, 0.0)

__all__ = [
    "load_save",
    "make_save_dirs",
    "save_folder_path",
    "save_game",
    "save_path",
    "saves_list",
]


def save_folder_path() -> Path:
    """Return the save folder: under USERPROFILE when set, else ./saves."""
    user = os.environ.get("USERPROFILE")
    if user:
        return Path(user) / ".RDPQuest" / "saves"
    return Path("saves")


def save_path(slot: int) -> Path:
    """Return the file that holds the given save slot."""
    return save_folder_path() / f"save0{slot}.sav"


def make_save_dirs() -> Path:
    """Create the save folder if it is missing and return it."""
    folder = save_folder_path()
    try:
        folder.mkdir(parents=True, exist_ok=True)
    except OSError as error:
        print(f"Erro criando diretorio de saves: {error}", file=sys.stderr)
    return folder


def _fields(line: str, tag: str, *patterns: str) -> list[str]:
    """Match ``#tag<a/b...>`` from the line's start; return the leading values matched."""
    prefix = f"#{tag}<"
    if not line.startswith(prefix):
        return []
    rest = line[len(prefix):]
    found: list[str] = []
    for position, pattern in enumerate(patterns):
        if position:
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


def saves_list(console: Console) -> list[tuple[str, str] | None]:
    """Print every slot; return (name, class) for each used slot and None for free ones."""
    console.write("Seus saves:\n------------\n")
    entries: list[tuple[str, str] | None] = []
    for slot in range(1, SAVE_SLOTS + 1):
        try:
            lines = _lines(save_path(slot))
        except OSError:
            entries.append(None)
            console.write(f"[{slot}] - Disponivel\n")
            continue
        name, class_name = DEFAULT_NAME, DEFAULT_CLASS
        for line in lines:
            if "#Nome<" in line:
                for value in _fields(line, "Nome", _TEXT):
                    name = value
            elif "#Classe<" in line:
                for value in _fields(line, "Classe", _TEXT):
                    class_name = value
        entries.append((name, class_name))
        console.write(f"[{slot}] - {name} ({class_name})\n")
    if all(entry is None for entry in entries):
        console.write("ERRO 0001: Nao foi possivel criar o arquivo\n")
    console.write("------------\n")
    return entries


def save_game(player: Player, slot: int, console: Console) -> Path | None:
    """Write the player to a slot; return the file, or None if it could not be written."""
    path = save_path(slot)
    content = (
        f"#Nome<{player.name}>\n"
        f"#Classe<{player.character_class.name}>\n"
        f"#Vida<{player.life:.2f}/{player.life_max:.2f}>\n"
        f"#Ataque<{player.attack:.2f}>\n"
        f"#Defesa<{player.defense:.2f}>\n"
    )
    try:
        path.write_text(content, encoding="utf-8")
    except OSError:
        console.write("Salvando")
        console.loading(5, "%", 0)
        console.write("ERRO 0001: Nao foi possivel criar o arquivo\n")
        return None
    console.write(f"Salvo!\n{path}\n")
    return path


def load_save(slot: int, console: Console) -> Player | None:
    """Load the player in a slot; None if the slot is empty or has no name.

    The class is restored only when its saved name matches a class exactly.
    """
    try:
        lines = _lines(save_path(slot))
    except OSError:
        console.write(f"ERRO: Save {slot} nao existe.\n")
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
    )
    for line in lines:
        if "#Nome<" in line:
            for value in _fields(line, "Nome", _TEXT):
                player.name = value
        elif "#Classe<" in line:
            for value in _fields(line, "Classe", _TEXT):
                found = next((option for option in CLASSES if option.name == value), None)
                if found is not None:
                    player.character_class = found
        elif "#Vida<" in line:
            values = _fields(line, "Vida", _NUMBER, _NUMBER)
            if values:
                player.life = float(values[0])
            if len(values) > 1:
                player.life_max = float(values[1])
        elif "#Ataque<" in line:
            for value in _fields(line, "Ataque", _NUMBER):
                player.attack = float(value)
        elif "#Defesa<" in line:
            for value in _fields(line, "Defesa", _NUMBER):
                player.defense = float(value)

    if not player.name:
        console.write(f"ERRO: Save {slot} esta corrompido.\n")
        return None
    console.write(f"Save {slot} carregado!\n")
    return player