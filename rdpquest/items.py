"""Loot items and drops."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Protocol


class _RandomSource(Protocol):
    def random(self) -> float: ...


@dataclass(frozen=True)
class Item:
    """A loot item with its buffs and how often it drops."""

    name: str
    life_buff: float
    attack_buff: float
    defense_buff: float
    xp_given: int
    drop_rate: float


ITEMS: tuple[Item, ...] = (
    # Potions
    Item("Elixir of Life", 50, 0, 0, 0, 15.0),
    Item("Greater Elixir of Life", 120, 0, 0, 0, 10.0),
    Item("Shielding Draught", 0, 0, 5, 0, 12.0),
    Item("Berserker's Fury Potion", 0, 7, -2, 0, 8.0),
    Item("Experience Bottle", 0, 0, 0, 20, 15.0),
    Item("Greater Exp. Bottle", 0, 0, 0, 40, 9.8),
    Item("Legendary Exp. Bottle", 0, 0, 0, 100, 1.05),
    # Weapons
    Item("Bonecrusher Sword", 0, 6, 0, 0, 14.0),
    Item("Orcish War Axe", 0, 8, -1, 0, 10.0),
    Item("Shadowfang Dagger", 0, 5, 0, 0, 13.0),
    Item("Demon's Fang Blade", 0, 10, -3, 0, 6.0),
    Item("Dragon Talon Claw", 0, 9, 1, 0, 1.7),
    Item("Slimebound Staff", 10, 4, 2, 0, 11.0),
    # Helmets
    Item("Skullcap of the Fallen", 15, 0, 3, 0, 14.0),
    Item("Ironhide Helm", 20, 0, 5, 0, 12.0),
    Item("Warlord's Iron Helmet", 25, 2, 4, 0, 10.0),
    Item("Phantom Hood", 10, 3, 1, 0, 1.0),
    Item("Shadow Veil", 5, 1, 3, 0, 1.5),
    Item("Hellfire Helm", 30, 4, 5, 0, 1.5),
    Item("Demonic Crown", 35, 5, 6, 0, 1.4),
    Item("Dragon Scale Helm", 40, 3, 7, 0, 1.6),
    Item("Cursed Warlord's Helm", 45, 6, 8, 0, 1.3),
    # Chestplates
    Item("Boneplate Armor", 40, 0, 6, 0, 12.0),
    Item("Ironhide Chestplate", 50, 0, 8, 0, 10.0),
    Item("Rogue's Shadow Cape", 20, 4, 4, 0, 1.9),
    Item("Hellfire Chestplate", 60, 3, 9, 0, 1.7),
    Item("Demonic Chestguard", 70, 6, 10, 0, 1.5),
    Item("Dragon Scale Armor", 80, 5, 12, 0, 1.4),
    # Amulets
    Item("Amulet of Vitality", 50, 0, 0, 0, 2.1),
    Item("Amulet of the Berserker", 0, 8, -2, 0, 1.8),
    Item("Amulet of the Guardian", 30, 0, 6, 0, 1.9),
    Item("Amulet of Arcane Power", 0, 7, 0, 0, 1.7),
    Item("Amulet of Shadows", 10, 3, 3, 0, 1.6),
    Item("Amulet of the Dragon", 40, 5, 5, 0, 1.5),
)

_FALLBACK_ITEM = ITEMS[4]


def drop_item(rng: _RandomSource | None = None) -> Item:
    """Draw a loot item, weighted by drop rate."""
    source = rng if rng is not None else random
    total = sum(item.drop_rate for item in ITEMS)
    draft = source.random() * total
    cumulative = 0.0
    for item in ITEMS:
        cumulative += item.drop_rate
        if draft <= cumulative:
            return item
    return _FALLBACK_ITEM