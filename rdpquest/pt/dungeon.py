"""Multi-floor dungeons for the Portuguese game."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from rdpquest.combat import BattleResult
from rdpquest.console import Console
from rdpquest.pt.enemy import RECOVERY_RATIO, Enemy, create_dungeon_enemy, start_battle
from rdpquest.pt.player import Player

DG_FLOORS = 5
CLEAR_ATTACK_BONUS = 5

__all__ = ["DG_FLOORS", "Dungeon", "join_dungeon"]


@dataclass
class Dungeon:
    """Progress through a dungeon: the floor reached and each floor's enemy."""

    current_floor: int = 0
    completed_floors: int = 0
    active: bool = False
    enemies: list[Enemy] = field(default_factory=list)


def join_dungeon(player: Player, dungeon: Dungeon, console: Console,
                 rng: random.Random | None = None) -> None:
    """Enter (or resume) ``dungeon`` and fight floor by floor until it is cleared.

    Running away from a floor's enemy only starts that floor's fight again.
    A lost battle raises GameOver.
    """
    source = rng if rng is not None else random

    if not dungeon.active:
        dungeon.active = True
        dungeon.current_floor = 0
        dungeon.completed_floors = 0
        dungeon.enemies = [create_dungeon_enemy(floor, source) for floor in range(DG_FLOORS)]

        console.write("Entrando na masmorra\n")
        console.loading(10, ".", 0)
        console.clear(1)
        console.write("Tenha cuidado...\n")

    while dungeon.current_floor < DG_FLOORS and dungeon.active:
        console.write(f"Explorando o {dungeon.current_floor + 1} andar\n")
        console.loading(10, ".", 0)
        console.write("Inimigo a frente!\n")

        enemy = dungeon.enemies[dungeon.current_floor]
        result = start_battle(player, enemy, console)

        if result is BattleResult.WON and player.life > 0:
            console.write(
                f"{player.name} derrotou o inimigo do {dungeon.current_floor + 1} andar!\n"
            )
            dungeon.current_floor += 1

            perk = player.character_class.life * RECOVERY_RATIO
            player.life = min(player.life + perk, player.character_class.life)
            console.write(f"{perk:.2f} de vida recuperada.\n")
            console.clear(1)
        elif player.life <= 0:
            dungeon.active = False
            return

    if dungeon.current_floor >= DG_FLOORS:
        console.write("Voce completou a masmorra!\n")
        console.write(f"Vida restaurada\n+{CLEAR_ATTACK_BONUS} pontos de ataque\n")
        dungeon.active = False
        player.life = player.character_class.life
        player.attack += CLEAR_ATTACK_BONUS