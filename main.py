#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Run from a checkout, or after `pip install -e .`:

Usage:
    python main.py play [--difficulty {easy,medium,hard}] [--seed N]
    python main.py simulate [--size N] [--games N] [--seed N]
"""
import argparse
import sys
from pathlib import Path

import numpy as np

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent / "src"))

from minefield import BoardConfig, DIFFICULTIES, MinesweeperEnv
from minefield.environment import render_ansi, run_random_episode
from presentation import GameShell, Screen
from presentation.shell import SPLASH_SECONDS


HELP = "Commands: r COL ROW (reveal), f COL ROW (flag), n (new board), q (quit)"


def print_board(shell: GameShell) -> None:
    """Print the board with column and row indices."""
    session = shell.session
    header = "   " + " ".join(str(col % 10) for col in range(session.size))
    print(header)
    board = render_ansi(session.observation()).split("\n")
    for row, line in enumerate(board):
        print(f"{row:>2} {line}")
    print(
        f"Flags: {session.grid.flag_total} | "
        f"State: {session.game_state.name}"
    )


def parse_cell(parts, size: int):
    """Parse "COL ROW" arguments, or None if malformed or off the board."""
    if len(parts) != 2:
        return None
    try:
        col, row = int(parts[0]), int(parts[1])
    except ValueError:
        return None
    if not (0 <= col < size and 0 <= row < size):
        return None
    return col, row


def choose_difficulty(shell: GameShell, default: str) -> bool:
    """Ask for a difficulty on the title screen; False to quit."""
    choices = "/".join(sorted(DIFFICULTIES))
    try:
        name = input(f"Difficulty ({choices}) [{default}]: ").strip().lower()
    except EOFError:
        return False
    name = name or default
    if name == "q":
        return False
    if name not in DIFFICULTIES:
        name = default
    shell.choose_difficulty(name)
    size = shell.session.size
    print(f"Difficulty: {name} ({size}x{size})")
    print(HELP)
    print_board(shell)
    return True


def play(args: argparse.Namespace) -> None:
    """Play an interactive game in the terminal."""
    shell = GameShell(rng=args.seed)

    print("MINESWEEPER")
    shell.update(SPLASH_SECONDS + 0.1)

    while True:
        if shell.screen == Screen.TITLE:
            if not choose_difficulty(shell, args.difficulty):
                break
            continue

        try:
            line = input("> ").strip().split()
        except EOFError:
            break
        if not line:
            continue

        command, rest = line[0].lower(), line[1:]
        if command == "q":
            break
        if command == "n":
            if shell.session.is_playing:
                print("Finish or quit the current game first.")
                continue
            shell.secondary_click(0.0, 0.0)
            if shell.screen == Screen.TITLE:
                continue
        elif command in ("r", "f"):
            cell = parse_cell(rest, shell.session.size)
            if cell is None:
                print(HELP)
                continue
            if command == "r":
                outcome = shell.reveal_cell(*cell)
            else:
                outcome = shell.flag_cell(*cell)
            if outcome.is_noop:
                print("Nothing happens.")
        else:
            print(HELP)
            continue

        print_board(shell)
        if shell.session.is_won:
            print("\n*** You Win! ***  (n: back to title)")
        elif shell.session.is_lost:
            print("\n*** Game Over! ***  (n: new board)")


def simulate(args: argparse.Namespace) -> None:
    """Play random games through the gymnasium environment."""
    config = BoardConfig(args.size)
    env = MinesweeperEnv(config=config)
    rng = np.random.default_rng(args.seed)

    wins = 0
    total_steps = 0
    total_revealed = 0

    print(
        f"Simulating {args.games} random games on "
        f"{config.size}x{config.size} with {config.num_mines} mines..."
    )
    for game in range(args.games):
        seed = None if args.seed is None else args.seed + game
        env.reset(seed=seed)
        info = run_random_episode(env, rng, args.max_steps)

        if info.get("game_state") == "WON":
            wins += 1
        total_steps += info.get("steps", 0)
        total_revealed += info.get("revealed", 0)

    print(f"Results over {args.games} games:")
    print(f"  Win rate: {wins / args.games:.1%}")
    print(f"  Avg steps: {total_steps / args.games:.1f}")
    print(f"  Avg revealed: {total_revealed / args.games:.1f} cells")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - play in the terminal or simulate games"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument(
        "--difficulty",
        choices=sorted(DIFFICULTIES),
        default="easy",
        help="Board size preset",
    )
    play_parser.add_argument(
        "--seed", type=int, default=None, help="Random seed"
    )

    # Simulate command
    sim_parser = subparsers.add_parser(
        "simulate", help="Play random games through the environment"
    )
    sim_parser.add_argument(
        "--size", type=int, default=8, help="Board size (NxN)"
    )
    sim_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    sim_parser.add_argument(
        "--max-steps", type=int, default=1000, help="Step limit per game"
    )
    sim_parser.add_argument(
        "--seed", type=int, default=None, help="Random seed"
    )

    args = parser.parse_args()

    if args.command == "play":
        play(args)
    elif args.command == "simulate":
        simulate(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
