"""Player characters, their classes and experience."""

from __future__ import annotations

from dataclasses import dataclass, replace

from rdpquest.console import Console, health_bar, xp_bar

NAME_LIMIT = 49
STARTING_MAX_XP = 50
MAX_XP_STEP = 100
LEVEL_UP_PAUSE = 3


@dataclass(frozen=True)
class CharacterClass:
    """A playable class and its base stats."""

    name: str
    life: float
    attack: float
    defense: float


CLASSES: tuple[CharacterClass, ...] = (
    CharacterClass("supreme_adm", 999.9, 999.9, 999.9),
    CharacterClass("Warrior", 160.0, 25.0, 20.0),
    CharacterClass("Wizard", 100.0, 40.0, 8.0),
    CharacterClass("Archer", 120.0, 32.0, 12.0),
    CharacterClass("Paladin", 180.0, 22.0, 28.0),
    CharacterClass("Barbarian", 200.0, 30.0, 10.0),
    CharacterClass("Rogue", 110.0, 28.0, 10.0),
    CharacterClass("Necromancer", 90.0, 38.0, 9.0),
    CharacterClass("Knight", 170.0, 24.0, 25.0),
    CharacterClass("Assassin", 100.0, 35.0, 8.0),
    CharacterClass("Monk", 130.0, 26.0, 18.0),
)


@dataclass
class Player:
    """A player character and its current state."""

    name: str
    character_class: CharacterClass
    life: float
    attack: float
    defense: float
    life_max: float
    attack_max: float
    defense_max: float
    level: int = 1
    xp: int = 0
    max_xp: int = STARTING_MAX_XP

    @classmethod
    def from_class(cls, name: str, character_class: CharacterClass) -> Player:
        """Create a fresh level 1 player with the class's base stats."""
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

    def give_xp(self, amount: int, console: Console | None = None) -> int:
        """Add experience, levelling up as often as it allows; return levels gained."""
        self.xp += amount
        gained = 0
        while self.xp >= self.max_xp:
            self.xp -= self.max_xp
            self.level += 1
            self.max_xp += MAX_XP_STEP
            self.defense += 2
            self.attack += 3
            self.life_max += 5
            self.life = self.life_max
            gained += 1
            if console is not None:
                console.write(f"LEVEL UP! >> {self.name} is now on level {self.level}.\n")
                console.loading(0, "", LEVEL_UP_PAUSE)
        return gained


def _leading_int(text: str) -> int | None:
    digits = ""
    for char in text:
        if not char.isdigit():
            break
        digits += char
    return int(digits) if digits else None


def find_class(choice: str) -> CharacterClass | None:
    """Find a class by name (any case) or by its number in the list.

    The returned class has its name's first letter in lower case.
    Returns None when nothing matches.
    """
    number = _leading_int(choice) if choice[:1].isdigit() else None
    for index, character_class in enumerate(CLASSES):
        if choice.lower() == character_class.name.lower() or number == index:
            name = character_class.name
            return replace(character_class, name=name[:1].lower() + name[1:])
    return None


def generate_player(console: Console) -> Player:
    """Ask for a name and a class and build a new player."""
    console.clear(0)
    console.write("Player building:\n")
    name = console.read_line("Name -> ")[:NAME_LIMIT]
    name = name[:1].upper() + name[1:]

    console.clear(0)
    console.write(f"{name} is comming to life.\n")
    console.loading(10, ".", 1)
    console.clear(0)

    console.write(f"Choose {name}'s class:\n")
    for index, option in enumerate(CLASSES[1:], start=1):
        console.write(
            f"[{index}] {option.name} | HP: {option.life:.2f} | "
            f"ATK: {option.attack:.2f} | DEF: {option.defense:.2f}\n"
        )

    while True:
        chosen = find_class(console.read_line("\n>>> I wanna be a "))
        if chosen is not None:
            break
        console.write("Invalid class.\n")

    console.clear(1)
    console.write(f"Assigning the {chosen.name} class to {name}.\n")
    console.loading(10, ".", 1)
    console.clear(1)
    return Player.from_class(name, chosen)


def show_stats(player: Player, console: Console) -> None:
    """Print the player's sheet and wait for ENTER."""
    console.clear(0)
    console.write(f"\n| Name: {player.name}")
    console.write(f"\n| Class: {player.character_class.name}")
    console.write(f"\n| Level: {player.level}")
    console.write(xp_bar("\n| XP", player.xp, player.max_xp) + "\n")
    console.write(health_bar("\n| Life", player.life, player.character_class.life) + "\n")
    console.write(f"| Attack: {player.attack:.2f}")
    console.write(f"\n| Defense: {player.defense:.2f}")
    console.write("\n| [ENTER]")
    console.discard_line()
    console.clear(0)