"""Personagens jogáveis e suas classes."""

from __future__ import annotations

from dataclasses import dataclass, replace

from rdpquest.console import Console
from rdpquest.pt.display import health_bar

NAME_LIMIT = 49
CLASS_CHOICE_LIMIT = 19
_DIGITS = "0123456789"


@dataclass(frozen=True)
class CharacterClass:
    """A playable class and its base stats."""

    name: str
    life: float
    attack: float
    defense: float


CLASSES: tuple[CharacterClass, ...] = (
    CharacterClass("supreme_adm", 1000.0, 1000.0, 1000.0),
    CharacterClass("Guerreiro", 120.0, 20.0, 15.0),
    CharacterClass("Bruxo", 80.0, 30.0, 5.0),
    CharacterClass("Arqueiro", 100.0, 25.0, 10.0),
    CharacterClass("Paladino", 130.0, 18.0, 20.0),
    CharacterClass("Barbaro", 160.0, 28.0, 12.0),
    CharacterClass("Ladino", 90.0, 22.0, 8.0),
)


@dataclass
class Player:
    """A player character and its current stats."""

    name: str
    character_class: CharacterClass
    life: float
    attack: float
    defense: float
    life_max: float
    attack_max: float
    defense_max: float

    @classmethod
    def from_class(cls, name: str, character_class: CharacterClass) -> Player:
        """Create a player with the class's base stats."""
        return cls(
            name=name,
            character_class=character_class,
            life=character_class.life,
            attack=character_class.attack,
            defense=character_class.defense,
            life_max=character_class.life,
            attack_max=character_class.attack,
            defense_max=character_class.defense,
        )


def _leading_int(text: str) -> int | None:
    digits = ""
    for char in text:
        if char not in _DIGITS:
            break
        digits += char
    return int(digits) if digits else None


def find_class(choice: str) -> CharacterClass | None:
    """Find a class by name (any case) or by its number; None if nothing matches.

    The returned class has its name's first letter in lower case.
    """
    number = _leading_int(choice)
    wanted = choice.lower()
    for index, option in enumerate(CLASSES):
        if wanted == option.name.lower() or number == index:
            return replace(option, name=option.name[:1].lower() + option.name[1:])
    return None


def generate_player(console: Console) -> Player:
    """Ask for a name and a class and build a new player."""
    console.clear(0)
    console.write("Criacao de personagem:\n")
    name = console.read_line("Nome -> ")[:NAME_LIMIT]
    name = name[:1].upper() + name[1:]

    console.clear(0)
    console.write(f"{name} esta nascendo.\n")
    console.loading(10, ".", 1)

    console.write(f"Escolha a classe de {name}:\n")
    for index, option in enumerate(CLASSES[1:], start=1):
        console.write(
            f"[{index}] {option.name} | HP: {option.life:.2f} | "
            f"ATQ: {option.attack:.2f} | DEF: {option.defense:.2f}\n"
        )

    while True:
        chosen = find_class(console.read_line("Eu escolho ser ")[:CLASS_CHOICE_LIMIT])
        if chosen is not None:
            break
        console.write("Classe invalida.\n")

    console.clear(1)
    console.write(f"Atribuindo a classe {chosen.name} a {name}.\n")
    console.loading(10, ".", 1)
    console.write(f"{name} agora e {chosen.name}.\n")
    console.clear(2)
    return Player.from_class(name, chosen)


def show_stats(player: Player, console: Console) -> bool:
    """Print the player's sheet and ask about the backpack; return True if it was opened."""
    console.clear(0)
    console.write(f"\nNome: {player.name}")
    console.write(f"\nClasse: {player.character_class.name}")
    console.write("\nNivel: <level>")
    console.write(health_bar("\nVida", player.life, player.character_class.life))
    console.write(f"\nAtaque: {player.attack:.2f}")
    console.write(f"\nDefesa: {player.defense:.2f}")

    console.write("Abrir mochila? (s | n) ")
    answer = ""
    while not answer:
        answer = console.read_line().lstrip()
    opened = answer[0].lower() != "n"
    if opened:
        console.write("<abrir inventario>\n")
    return opened