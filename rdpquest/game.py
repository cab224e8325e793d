"""Main menu and the in-game action loop."""

from __future__ import annotations

import argparse
import random

from rdpquest.combat import start_battle
from rdpquest.console import Console
from rdpquest.dungeon import Dungeon, join_dungeon
from rdpquest.enemy import create_enemy
from rdpquest.player import Player, generate_player, show_stats
from rdpquest.save import SAVE_SLOTS, load_save, make_save_dirs, save_game, saves_list


def _ask_int(console: Console, prompt: str) -> int | None:
    try:
        return console.read_int(prompt)
    except ValueError:
        return None


def game_menu(console: Console, rng: random.Random | None = None) -> int:
    """Show the title menu until a game is started or the player backs out.

    Returns 1 after a new game ends and 0 when the load screen is left.
    Choosing exit raises SystemExit(0).
    """
    while True:
        console.clear(0)
        console.write("-= Prompt Rogue =-\n")
        console.write("1. New Game\n")
        console.write("2. Load Save\n")
        console.write("0. Exit\n")
        choice = _ask_int(console, " --> ")
        if choice not in (0, 1, 2):
            console.write("Invalid option.\n")
            continue

        if choice == 0:
            console.write("Closing game\n")
            console.loading(3, ".", 1)
            raise SystemExit(0)

        if choice == 1:
            console.clear(0)
            console.write("Generatin World\n")
            console.write("Progres: [")
            console.loading(10, "#", 0)
            console.write("]\n")
            start_game(generate_player(console), console, rng)
            return 1

        console.clear(0)
        saves_list(console)
        slot = _ask_int(console, "Choose your save (1 - 5)\nPress '0' to return ")
        if slot is None or not 0 <= slot <= SAVE_SLOTS:
            console.write("Invalid slot.\n")
            continue
        if slot == 0:
            return 0

        console.clear(0)
        console.write("Loading save\n")
        console.write("Progress: [")
        console.loading(10, "#", 0)
        console.write("]\n")
        player = load_save(slot, console)
        if player is not None:
            console.clear(1)
            start_game(player, console, rng)


def start_game(player: Player, console: Console, rng: random.Random | None = None) -> None:
    """Run the action menu while the player is alive, until they go back."""
    while player.life > 0:
        console.write("<< Prompt Rogue >>\n")
        console.write("| 1. Search for enemies\n")
        console.write("| 2. Look for dungeons\n")
        console.write(f"| 3. Inspect [{player.name}]\n")
        console.write("| 4. Save progression\n")
        console.write("| 0. Back to menu\n")
        option = _ask_int(console, "| -> ")

        if option == 0:
            return
        if option == 1:
            start_battle(player, create_enemy(rng), console, rng)
        elif option == 2:
            join_dungeon(player, Dungeon(), console, rng)
        elif option == 3:
            show_stats(player, console)
        elif option == 4:
            saves_list(console)
            slot = _ask_int(console, "Chose the save slot (1-5): ")
            if slot is not None:
                save_game(player, slot, console)


def main(argv: list[str] | None = None) -> int:
    """Start the game from the command line."""
    parser = argparse.ArgumentParser(prog="rdpquest", description="A small terminal role-playing game.")
    parser.add_argument("--no-delay", action="store_true", help="skip pauses and loading animations")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random number generator")
    args = parser.parse_args(argv)

    make_save_dirs()
    console = Console(delay=not args.no_delay)
    rng = random.Random(args.seed)
    try:
        while True:
            game_menu(console, rng)
    except (EOFError, KeyboardInterrupt):
        console.write("\n")
        return 0