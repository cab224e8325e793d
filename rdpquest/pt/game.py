"""Main menu and the in-game action loop for the Portuguese game."""

from __future__ import annotations

import argparse
import random

from rdpquest.console import Console
from rdpquest.pt.dungeon import Dungeon, join_dungeon
from rdpquest.pt.enemy import GameOver, create_enemy, start_battle
from rdpquest.pt.player import Player, generate_player, show_stats
from rdpquest.pt.saves import load_save, make_save_dirs, save_game, saves_list

SAVE_SLOTS = 5


def _ask_int(console: Console, prompt: str) -> int | None:
    try:
        return console.read_int(prompt)
    except ValueError:
        return None


def game_menu(console: Console, rng: random.Random | None = None) -> int:
    """Show the title menu until a new game ends.

    Returns 1 after a new game ends. Choosing exit raises SystemExit(0).
    """
    while True:
        console.clear(0)
        console.write("-= Prompt Rogue =-\n")
        console.write("1. Novo Jogo\n")
        console.write("2. Carregar Save\n")
        console.write("0. Sair\n")
        choice = _ask_int(console, " --> ")
        if choice not in (0, 1, 2):
            console.write("Opcao invalida.\n")
            continue

        if choice == 0:
            console.write("Fechando o jogo\n")
            console.loading(3, ".", 1)
            raise SystemExit(0)

        if choice == 1:
            console.clear(0)
            console.write("Carregando o mundo\n")
            console.write("Progresso: [")
            console.loading(10, "#", 0)
            console.write("]\n")
            start_game(generate_player(console), console, rng)
            return 1

        console.clear(0)
        saves_list(console)
        slot = _ask_int(console, "Escolha um save (1 - 5): ")
        if slot is None or not 1 <= slot <= SAVE_SLOTS:
            console.write("Slot invalido.\n")
            continue

        console.clear(0)
        console.write("Carregando save\n")
        console.write("Progresso: [")
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
        console.write("| 1. Procurar por inimigos\n")
        console.write("| 2. Procurar masmorras\n")
        console.write(f"| 3. Inspecionar [{player.name}]\n")
        console.write("| 4. Salvar progresso\n")
        console.write("| 0. Voltar ao menu\n")
        option = _ask_int(console, "\t-> ")

        if option == 0:
            return
        if option == 1:
            start_battle(player, create_enemy(rng), console)
        elif option == 2:
            join_dungeon(player, Dungeon(), console, rng)
        elif option == 3:
            show_stats(player, console)
        elif option == 4:
            saves_list(console)
            slot = _ask_int(console, "Escolha o save (1-5): ")
            if slot is not None:
                save_game(player, slot, console)


def main(argv: list[str] | None = None) -> int:
    """Start the game from the command line."""
    parser = argparse.ArgumentParser(prog="rdpquest-pt", description="Um pequeno RPG de terminal.")
    parser.add_argument("--no-delay", action="store_true", help="sem pausas nem animacoes")
    parser.add_argument("--seed", type=int, default=None, help="semente do gerador aleatorio")
    args = parser.parse_args(argv)

    make_save_dirs()
    console = Console(delay=not args.no_delay)
    rng = random.Random(args.seed)
    try:
        while True:
            game_menu(console, rng)
    except GameOver:
        return 0
    except (EOFError, KeyboardInterrupt):
        console.write("\n")
        return 0