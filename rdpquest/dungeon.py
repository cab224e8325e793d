"""Multi-floor dungeons fought one enemy per floor."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from rdpquest.combat import RECOVERY_RATIO, BattleResult, start_battle
from rdpquest.console import Console
from rdpquest.enemy import Enemy, create_dungeon_enemy
from rdpquest.items import drop_item
from rdpquest.player import Player

DG_FLOORS = 5
FLOOR_XP_MIN = 10
FLOOR_XP_MAX = 25
CLEAR_XP_MIN = 25
CLEAR_XP_MAX = 50
CLEAR_ATTACK_BONUS = 5


@dataclass
class Dungeon:
    """Progress through a dungeon and the enemy waiting on each floor."""

    current_floor: int = 0
    completed_floors: int = 0
    active: bool = False
    enemies: list[Enemy] = field(default_factory=list)


def join_dungeon(player: Player, dungeon: Dungeon, console: Console,
                 rng: random.Random | None = None) -> None:
    """Enter (or resume) ``dungeon`` and fight floor by floor until done, fled or dead."""
    source = rng if rng is not None else random

    if not dungeon.active:
        dungeon.active = True
        dungeon.current_floor = 0
        dungeon.completed_floors = 0
        dungeon.enemies = [create_dungeon_enemy(floor, source) for floor in range(DG_FLOORS)]

        console.write("Entering the dungeon\n")
        console.loading(10, ".", 0)
        console.clear(1)
        console.write("Be cautious...\n")

    while dungeon.current_floor < DG_FLOORS and dungeon.active:
        console.write(f"Prospecting the {dungeon.current_floor + 1} floor\n")
        console.loading(10, ".", 0)

        enemy = dungeon.enemies[dungeon.current_floor]
        result = start_battle(player, enemy, console, source)

        if result is BattleResult.WON:
            console.write(
                f"{player.name} defeated the {dungeon.current_floor + 1} floor enemy!\n"
            )
            dungeon.current_floor += 1

            perk = player.character_class.life * RECOVERY_RATIO
            player.life = min(player.life + perk, player.character_class.life)
            console.write(f"{perk:.2f} of life recovered.\n")
            loot = drop_item(source)
            console.write(f"[LOOT] {player.name} have found a {loot.name}!\n")
            xp = source.randint(FLOOR_XP_MIN, FLOOR_XP_MAX)
            player.give_xp(xp, console)
            console.write(f"[XP] +{xp}\n")
            console.clear(2)
        elif result is BattleResult.FLED:
            dungeon.active = False
            console.write("You fled the dungeon.\n")
            return
        else:
            dungeon.active = False
            return

    if dungeon.current_floor >= DG_FLOORS:
        console.write("You beated the dungeon!\n")
        console.write(f"Life fully recovered\n+{CLEAR_ATTACK_BONUS} atk points\n")
        dungeon.active = False
        player.life = player.life_max
        player.attack += CLEAR_ATTACK_BONUS
        loot = drop_item(source)
        console.write(f"[LOOT] {player.name} have found a {loot.name}!\n")
        xp = source.randint(CLEAR_XP_MIN, CLEAR_XP_MAX)
        player.give_xp(xp, console)
        console.write(f"[XP] +{xp}\n")