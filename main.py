#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--level {beginner,intermediate,expert}]
                        [--width W --height H --fraction F] [--seed N]
    python main.py difficulty [--boards N] [--seed N]
"""
import argparse
import logging
import time
from typing import Optional, Tuple

import numpy as np

from src.game.board import (
    Board,
    BoardConfig,
    GameStatus,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
)
from src.game.display import render_board, format_elapsed
from src.game.errors import ConfigError

LEVELS = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}


def build_config(args: argparse.Namespace) -> BoardConfig:
    """Combine a preset level with any explicit overrides."""
    preset = LEVELS[args.level]
    return BoardConfig(
        width=args.width if args.width is not None else preset.width,
        height=args.height if args.height is not None else preset.height,
        mine_fraction=(
            args.fraction if args.fraction is not None else preset.mine_fraction
        ),
        seed=args.seed,
    )


def parse_move(line: str) -> Optional[Tuple[str, int, int]]:
    """
    Parse a player command.

    "x y" reveals, "m x y" toggles a mark, "q" quits (returns None).

    Raises:
        ValueError: If the command is malformed.
    """
    parts = line.split()
    if parts and parts[0].lower() == "q":
        return None
    action = "reveal"
    if parts and parts[0].lower() == "m":
        action = "mark"
        parts = parts[1:]
    if len(parts) != 2:
        raise ValueError(f"Expected two coordinates, got: {line!r}")
    return action, int(parts[0]), int(parts[1])


def play(args: argparse.Namespace) -> None:
    """Play one game in the terminal."""
    board = Board(build_config(args))

    print(f"Board: {board.width}x{board.height} with {board.mines_count} mines")
    print("Enter 'x y' to reveal, 'm x y' to mark, 'q' to quit.\n")

    start_time = time.monotonic()
    status = GameStatus.CONTINUING

    while status == GameStatus.CONTINUING:
        print(render_board(board))
        try:
            move = parse_move(input("\nMove: "))
        except ValueError as error:
            print(f"Invalid move: {error}")
            continue
        if move is None:
            print("Game abandoned.")
            return

        action, x, y = move
        if action == "mark":
            if not board.mark(x, y):
                print("Cannot mark a revealed cell.")
            continue
        status = board.update(x, y)
        if status == GameStatus.CONTINUING and board.all_safe_revealed:
            print("Every safe cell is open. Select any open cell to finish.")

    elapsed = int(time.monotonic() - start_time)

    print()
    print(render_board(board))
    if status == GameStatus.WON:
        print("\n*** You won! ***")
    else:
        print("\n*** You stepped on a mine! ***")
    print(f"Time taken: {format_elapsed(elapsed)}")
    print(f"3BV: {board.difficulty_value()} | Clicks: {board.move_count}")
    print(f"Click score: {board.click_score():.2f} (lower is better)")
    print(f"Score: {board.presentable_score(elapsed)} (lower is better)")


def difficulty(args: argparse.Namespace) -> None:
    """Sample random layouts and report their 3BV statistics."""
    config = build_config(args)
    seeds = np.random.default_rng(args.seed).integers(0, 2**31 - 1, args.boards)

    values = []
    for seed in seeds:
        board = Board(BoardConfig(
            config.width, config.height, config.mine_fraction, int(seed)
        ))
        board.plant_mines((board.width // 2, board.height // 2))
        values.append(board.difficulty_value())

    values = np.array(values)
    print(
        f"{config.width}x{config.height}, {config.mines_count} mines, "
        f"{args.boards} boards"
    )
    print(f"  3BV min: {values.min()}")
    print(f"  3BV mean: {values.mean():.1f}")
    print(f"  3BV max: {values.max()}")


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    """Board size options shared by all commands."""
    parser.add_argument(
        "--level", choices=sorted(LEVELS), default="beginner",
        help="Preset board size and density",
    )
    parser.add_argument("--width", type=int, default=None, help="Board width")
    parser.add_argument("--height", type=int, default=None, help="Board height")
    parser.add_argument(
        "--fraction", type=float, default=None, help="Fraction of cells with mines"
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minesweeper on a wrap-around board"
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play a game")
    add_board_arguments(play_parser)

    difficulty_parser = subparsers.add_parser(
        "difficulty", help="Report 3BV statistics for random boards"
    )
    add_board_arguments(difficulty_parser)
    difficulty_parser.add_argument(
        "--boards", type=int, default=100, help="Number of boards to sample"
    )

    args = parser.parse_args()
    logging.basicConfig(level=args.log_level)

    try:
        if args.command == "play":
            play(args)
        elif args.command == "difficulty":
            difficulty(args)
        else:
            parser.print_help()
    except ConfigError as error:
        parser.error(str(error))


if __name__ == "__main__":
    main()
