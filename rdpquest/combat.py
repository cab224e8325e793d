"""Turn-based battles between the player and an enemy."""

from __future__ import annotations

import random
from enum import IntEnum

from rdpquest.console import Console, health_bar
from rdpquest.enemy import Enemy
from rdpquest.items import drop_item
from rdpquest.player import Player

MIN_DAMAGE = 1.0
RECOVERY_RATIO = 0.3
BATTLE_XP_MIN = 5
BATTLE_XP_MAX = 20

_ATTACK_NUMBER = "1"
_RUN_NUMBER = "2"


class BattleResult(IntEnum):
    """How a battle ended."""

    LOST = -1
    FLED = 0
    WON = 1


def _show_fighters(player: Player, enemy: Enemy, player_max: float,
                   enemy_max: float, console: Console) -> None:
    console.write(health_bar(player.name, player.life, player_max) + "\n")
    console.write("VS.:\n")
    console.write(health_bar(enemy.name, enemy.life, enemy_max) + "\n")


def _is_choice(choice: str, word: str, number: str) -> bool:
    return choice.lower() == word or choice == number


def start_battle(player: Player, enemy: Enemy, console: Console,
                 rng: random.Random | None = None) -> BattleResult:
    """Fight ``enemy`` until one side falls or the player runs away.

    Both fighters are changed in place. A win heals the player a little,
    drops loot and grants experience.
    """
    source = rng if rng is not None else random
    player_max = player.character_class.life
    enemy_max = enemy.life

    console.clear(0)
    console.write("Searching for enemies\n")
    console.loading(10, ".", 1)
    console.write("\nEnemy ahead.\n")
    console.write("Starting battle\n")
    console.loading(10, ".", 1)
    console.clear(1)

    _show_fighters(player, enemy, player_max, enemy_max, console)

    player_damage = max(player.attack - enemy.defense, MIN_DAMAGE)
    enemy_damage = max(enemy.attack - player.defense, MIN_DAMAGE)

    while player.life > 0 and enemy.life > 0:
        console.write("\n[1] Atacck\n")
        console.write("[2] Run\n")

        while True:
            choice = console.read_line("I'll ")
            if _is_choice(choice, "attack", _ATTACK_NUMBER):
                console.write(f"\nAttacking {enemy.name} [")
                console.loading(7, ">", 0)
                console.write("]\n")

                enemy.life = max(enemy.life - player_damage, 0)
                console.clear(1)
                _show_fighters(player, enemy, player_max, enemy_max, console)
                console.write(
                    f"{player.name} attacked {enemy.name} dealing {player_damage:.2f} damage.\n"
                )

                if enemy.life > 0:
                    console.write(f"\n{enemy.name} is attacking you [")
                    console.loading(7, ">", 0)
                    console.write("]\n")

                    player.life = max(player.life - enemy_damage, 0)
                    console.clear(1)
                    _show_fighters(player, enemy, player_max, enemy_max, console)
                    console.write(f"{enemy.name} attacked you dealing {enemy_damage:.2f} damage.\n")
                break
            if _is_choice(choice, "run", _RUN_NUMBER):
                console.write("You choose run.... What a noob.\n")
                console.loading(3, "|", 0)
                console.clear(1)
                return BattleResult.FLED
            console.write("Invalid choise.\nYou can either ATTACK or RUN\n")

        if enemy.life <= 0:
            perk = player.character_class.life * RECOVERY_RATIO
            player.life = min(player.life + perk, player.character_class.life)
            console.write(f"{perk:.2f} of life recovered\n")

            console.write(f"\n| You won the battle againts {enemy.name}!\n")
            loot = drop_item(source)
            console.write(f"| [LOOT] {player.name} have found a {loot.name}!\n")
            xp = source.randint(BATTLE_XP_MIN, BATTLE_XP_MAX)
            player.give_xp(xp, console)
            console.write(f"| [XP] +{xp}\n")
            console.clear(3)
            return BattleResult.WON
        if player.life <= 0:
            console.write(f"You lost the battle against {enemy.name}...\n")
            console.clear(2)
            console.write("Game Over\n")
            console.clear(2)
            return BattleResult.LOST

    return BattleResult.FLED