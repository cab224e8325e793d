# rdpquest

A small turn-based role-playing game that runs in your terminal. Create a
hero, choose a class, hunt monsters, clear five-floor dungeons, find loot,
level up and keep your progress in one of five save slots. It comes in an
English edition and a Portuguese edition.

## Installing

    pip install .

## Playing

Start the English edition:

    rdpquest

Start the Portuguese edition:

    rdpquest-pt

Both commands take two options:

- `--no-delay` skips the pauses and loading animations.
- `--seed N` seeds the random number generator, so that enemies, loot and
  experience come out the same each time.

Before the menu appears, the save folder is created if it is missing. The
game ends when you choose `0` in the main menu, at the end of input, or on
Ctrl-C.

### English edition

From the main menu you can start a new game, load a saved one (or press `0`
to go back) or quit. When you start a new game you enter a name and choose a
class by name or by number. In a game you can:

1. Search for enemies: fight a random monster. Type `attack` (or `1`) to
   strike or `run` (or `2`) to flee.
2. Look for dungeons: face five enemies in a row, each floor's enemy
   stronger than the one before. Running away leaves the dungeon. Clearing
   it restores your life, adds 5 attack, drops an item and grants
   experience.
3. Inspect your hero: show class, level, experience, life, attack and
   defense, then wait for ENTER.
4. Save progression: write your hero to a slot from 1 to 5.
0. Back to the main menu.

Winning a battle heals you by 30% of your class's life, drops an item and
grants 5 to 20 experience; each dungeon floor grants 10 to 25 more. Every
level raises attack by 3, defense by 2 and maximum life by 5, and heals you
fully. Losing a battle ends the game and returns you to the main menu.

### Portuguese edition

The same menus in Portuguese, with its own classes and enemies. Type
`atacar` (or `1`) or `correr` (or `2`) in battle. This edition has no
levels, experience or loot. Running away from a dungeon floor only starts
that floor's fight again, and losing any battle ends the program.

## Save files

Saves are plain text files named `save01.sav` to `save05.sav`. When the
`USERPROFILE` environment variable is set they are kept in
`$USERPROFILE/.RDPQuest/saves/`, otherwise in `./saves/` under the current
directory. The English edition stores name, class, life, attack, defense,
level and experience; the Portuguese edition stores name, class, life,
attack and defense. The two editions use different field names and cannot
load each other's saves.

## What it does not do

Items found as loot are only announced: they are not kept, there is no
inventory, and their buffs and experience are never applied to the hero. In
the Portuguese edition, inspecting the hero shows a placeholder for the
level and asks about a backpack that is not there.

## Using it as a library

The game logic can be driven from code. `rdpquest.console.Console` takes any
input and output streams and a delay switch, so a whole battle can be played
from scripted input:

    import io
    import random

    from rdpquest.console import Console
    from rdpquest.player import Player, find_class
    from rdpquest.enemy import create_enemy
    from rdpquest.combat import start_battle

    console = Console(io.StringIO("attack\n" * 50), io.StringIO(), delay=False)
    hero = Player.from_class("Ayla", find_class("Warrior"))
    rng = random.Random(1)
    result = start_battle(hero, create_enemy(rng), console, rng)
    print(result)

`start_battle` returns a `BattleResult` (`WON`, `FLED` or `LOST`) and changes
both fighters in place. Other entry points include `rdpquest.dungeon.join_dungeon`,
`rdpquest.items.drop_item`, `rdpquest.save.save_game`, `rdpquest.save.load_save`
and the text bars `rdpquest.console.health_bar` and `rdpquest.console.xp_bar`.
The Portuguese edition lives under `rdpquest.pt`; its `start_battle` raises
`rdpquest.pt.enemy.GameOver` when the hero falls.

## Running the tests

    pip install .[test]
    pytest