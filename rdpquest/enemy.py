"""Enemies and how they are drawn."""

from __future__ import annotations

import random
from dataclasses import dataclass, replace
from typing import Protocol


class _RandomSource(Protocol):
    def random(self) -> float: ...


@dataclass
class Enemy:
    """An enemy with its combat stats and how often it appears."""

    name: str
    life: float
    attack: float
    defense: float
    appearing_rate: float


ENEMIES: tuple[Enemy, ...] = (
    # Common
    Enemy("Skeleton", 50.0, 10.0, 5.0, 15.0),
    Enemy("Goblin", 40.0, 12.0, 4.0, 15.0),
    Enemy("Slime", 30.0, 8.0, 2.0, 12.0),
    # Medium
    Enemy("Warrior Skeleton", 80.0, 15.0, 8.0, 8.0),
    Enemy("Orc", 120.0, 20.0, 10.0, 7.0),
    Enemy("Goblin Chief", 90.0, 18.0, 6.0, 7.0),
    Enemy("King Slime", 150.0, 18.0, 10.0, 6.0),
    Enemy("Demon", 100.0, 25.0, 10.0, 6.0),
    # Rare
    Enemy("Orc Chief", 200.0, 30.0, 15.0, 4.0),
    Enemy("Wraith", 90.0, 25.0, 5.0, 3.5),
    Enemy("Fire Elemental", 120.0, 35.0, 10.0, 3.0),
    Enemy("Dark Knight", 180.0, 40.0, 20.0, 2.5),
    Enemy("Young Dragon", 300.0, 40.0, 20.0, 2.0),
    Enemy("Lich", 250.0, 50.0, 15.0, 1.5),
    # Epic / legendary
    Enemy("Elder Dragon", 600.0, 70.0, 35.0, 0.7),
    Enemy("Lord Demon", 500.0, 50.0, 25.0, 0.5),
    Enemy("Ancient Golem", 700.0, 55.0, 40.0, 0.8),
    Enemy("Death Reaper", 400.0, 80.0, 30.0, 0.5),
)

FLOOR_DIFFICULTY_STEP = 0.3


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