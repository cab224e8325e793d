"""Enemies for the Portuguese game, how they are drawn and how battles are fought."""

from __future__ import annotations

import random
from dataclasses import dataclass, replace
from typing import Protocol

from rdpquest.combat import BattleResult
from rdpquest.console import Console
from rdpquest.pt.display import health_bar
from rdpquest.pt.player import Player

MIN_DAMAGE = 1.0
RECOVERY_RATIO = 0.3
FLOOR_DIFFICULTY_STEP = 0.3

__all__ = [
    "ENEMIES",
    "Enemy",
    "GameOver",
    "create_dungeon_enemy",
    "create_enemy",
    "start_battle",
]


class _RandomSource(Protocol):
    def random(self) -> float: ...


@dataclass
class Enemy:
    """A foe with its fighting stats and how often it appears."""

    name: str
    life: float
    attack: float
    defense: float
    appearing_rate: float


class GameOver(SystemExit):
    """Raised when the player falls in battle; it ends the game with status 0."""

    def __init__(self, enemy_name: str) -> None:
        super().__init__(0)
        self.enemy_name = enemy_name


ENEMIES: tuple[Enemy, ...] = (
    Enemy("Esqueleto", 50.0, 10.0, 5.0, 25.0),
    Enemy("Esqueleto Guerreiro", 80.0, 15.0, 8.0, 15.0),
    Enemy("Orc", 120.0, 20.0, 10.0, 20.0),
    Enemy("Chefe Orc", 200.0, 30.0, 15.0, 5.0),
    Enemy("Goblin", 40.0, 12.0, 4.0, 25.0),
    Enemy("Chefe Goblin", 90.0, 18.0, 6.0, 10.0),
    Enemy("Dragao Jovem", 300.0, 40.0, 20.0, 3.0),
    Enemy("Dragao Anciao", 600.0, 70.0, 35.0, 1.0),
    Enemy("Slime", 30.0, 8.0, 2.0, 30.0),
    Enemy("Rei Slime", 150.0, 18.0, 10.0, 5.0),
    Enemy("Demonio", 100.0, 25.0, 10.0, 7.0),
    Enemy("Lorde Demonio", 500.0, 50.0, 25.0, 0.5),
)


def create_enemy(rng: _RandomSource | None = None) -> Enemy:
    """Draw a fresh enemy, weighted by appearing rate."""
    source = rng if rng is not None else random
    total = sum(enemy.appearing_rate for enemy in ENEMIES)
    draft = source.random() * total
    cumulative = 0.0
    for enemy in ENEMIES:
        cumulative += enemy.appearing_rate
        if draft <= cumulative:
            return replace(enemy)
    return replace(ENEMIES[0])


def create_dungeon_enemy(floor: int, rng: _RandomSource | None = None) -> Enemy:
    """Draw an enemy scaled up for the given dungeon floor (counted from 0)."""
    enemy = create_enemy(rng)
    difficulty = 1.0 + floor * FLOOR_DIFFICULTY_STEP
    enemy.life *= difficulty
    enemy.attack *= difficulty
    enemy.defense *= difficulty
    return enemy


def _show_fighters(player: Player, enemy: Enemy, player_max: float,
                   enemy_max: float, console: Console) -> None:
    console.write(health_bar(player.name, player.life, player_max))
    console.write("VS.:\n")
    console.write(health_bar(enemy.name, enemy.life, enemy_max))


def _is_choice(choice: str, word: str, number: str) -> bool:
    return choice.lower() == word or choice == number


def start_battle(player: Player, enemy: Enemy, console: Console) -> BattleResult:
    """Fight ``enemy`` until one side falls or the player runs away.

    Both fighters are changed in place. Returns WON or FLED; a lost battle
    raises GameOver.
    """
    player_max = player.character_class.life
    enemy_max = enemy.life

    console.clear(1)
    console.write("Procurando por inimigos\n")
    console.loading(10, ".", 1)
    console.write("Inimigo a frente.\n")
    console.write("Iniciando combate\n")
    console.loading(10, ".", 1)
    console.clear(1)

    _show_fighters(player, enemy, player_max, enemy_max, console)

    player_damage = max(player.attack - enemy.defense, MIN_DAMAGE)
    enemy_damage = max(enemy.attack - player.defense, MIN_DAMAGE)

    while player.life > 0 and enemy.life > 0:
        console.write("[1] Atacar\n")
        console.write("[2] Correr\n")

        while True:
            choice = console.read_line("Eu escolho ")
            if _is_choice(choice, "atacar", "1"):
                console.write(f"Atacando {enemy.name} [")
                console.loading(7, ">", 0)
                console.write("]\n")

                enemy.life = max(enemy.life - player_damage, 0)
                console.clear(1)
                _show_fighters(player, enemy, player_max, enemy_max, console)
                console.write(
                    f"{player.name} atacou {enemy.name} dando {player_damage:.2f} de dano.\n"
                )

                if enemy.life > 0:
                    console.write(f"{enemy.name} esta te atando [")
                    console.loading(7, ">", 0)
                    console.write("]\n")

                    player.life = max(player.life - enemy_damage, 0)
                    console.clear(1)
                    _show_fighters(player, enemy, player_max, enemy_max, console)
                    console.write(
                        f"{enemy.name} atacou voce dando {enemy_damage:.2f} de dano.\n"
                    )
                break
            if _is_choice(choice, "correr", "2"):
                console.write("Voce escolheu correr.... Que fracote.\n")
                console.loading(3, "|", 0)
                console.clear(1)
                return BattleResult.FLED
            console.write("Escolha invalida. Voce so pode ATACAR ou CORRER\n")

        if enemy.life <= 0:
            perk = player.character_class.life * RECOVERY_RATIO
            player.life = min(player.life + perk, player.character_class.life)
            console.write(f"{perk:.2f} de vida recuperada\n")
            console.write(f"Voce venceu o combate contra {enemy.name}!\n")
            console.clear(2)
            return BattleResult.WON
        if player.life <= 0:
            console.write(f"Voce perdeu a batalha contra {enemy.name}...\n")
            console.clear(2)
            console.write("Fim de jogo\n")
            console.clear(2)
            raise GameOver(enemy.name)

    return BattleResult.FLED