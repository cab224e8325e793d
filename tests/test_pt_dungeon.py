import io

import pytest

from rdpquest.console import Console
from rdpquest.pt.dungeon import DG_FLOORS, Dungeon, join_dungeon
from rdpquest.pt.enemy import Enemy, GameOver
from rdpquest.pt.player import CLASSES, Player


class FixedRandom:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def make_console(text=""):
    out = io.StringIO()
    return Console(io.StringIO(text), out, delay=False), out


def weak_dungeon():
    return Dungeon(
        current_floor=0,
        active=True,
        enemies=[Enemy(f"Rato {n}", 1.0, 1.0, 0.0, 1.0) for n in range(DG_FLOORS)],
    )


def test_clearing_all_floors_rewards_player():
    console, out = make_console("1\n" * DG_FLOORS)
    player = Player.from_class("Heroi", CLASSES[1])
    base_attack = player.attack
    dungeon = weak_dungeon()
    join_dungeon(player, dungeon, console)
    assert dungeon.current_floor == DG_FLOORS
    assert dungeon.active is False
    assert player.attack == base_attack + 5
    assert player.life == player.character_class.life
    assert "Voce completou a masmorra!" in out.getvalue()


def test_fresh_dungeon_builds_scaled_enemies():
    console, _ = make_console("1\n" * DG_FLOORS)
    player = Player.from_class("Chefe", CLASSES[0])
    dungeon = Dungeon()
    join_dungeon(player, dungeon, console, FixedRandom(0.0))
    assert len(dungeon.enemies) == DG_FLOORS
    assert {enemy.name for enemy in dungeon.enemies} == {"Esqueleto"}
    assert all(enemy.life == 0 for enemy in dungeon.enemies)
    attacks = [enemy.attack for enemy in dungeon.enemies]
    assert attacks == sorted(attacks)
    assert attacks[-1] > attacks[0]


def test_running_repeats_the_floor():
    console, out = make_console("2\n" + "1\n" * DG_FLOORS)
    player = Player.from_class("Heroi", CLASSES[1])
    dungeon = weak_dungeon()
    join_dungeon(player, dungeon, console)
    assert out.getvalue().count("Explorando o 1 andar") == 2
    assert dungeon.current_floor == DG_FLOORS


def test_death_in_dungeon_ends_game():
    console, _ = make_console("1\n")
    player = Player.from_class("Heroi", CLASSES[6])
    player.life = 1.0
    dungeon = weak_dungeon()
    dungeon.enemies[0] = Enemy("Dragao", 500.0, 100.0, 0.0, 1.0)
    with pytest.raises(GameOver):
        join_dungeon(player, dungeon, console)
    assert dungeon.current_floor == 0