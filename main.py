#!/usr/bin/env python3
"""
Minesweeper - command line front end.

Run from the repository root after `pip install -e .`:

Usage:
    python main.py play [--preset NAME | --rows R --columns C --mines M]
    python main.py demo [--games N] [--delay SECONDS]
"""
import argparse
import logging
import random
import sys
import time
from typing import List, Optional, TextIO

import numpy as np

from minefield import (
    Action,
    BoardConfig,
    ButtonState,
    GameSession,
    InvalidConfiguration,
    MinesweeperEnv,
    MouseButton,
    PointerEvent,
    PRESETS,
    render_observation,
)

PLAY_HELP = """Commands:
  r ROW COL            reveal a cell
  f ROW COL            toggle a flag
  c ROW COL            chord a numbered cell
  click X Y [BUTTON]   click a world point (left, right or middle)
  new                  start a new game
  q                    quit"""

COMMAND_ACTIONS = {"r": Action.REVEAL, "f": Action.FLAG, "c": Action.CHORD}


def build_config(args: argparse.Namespace) -> BoardConfig:
    """Board configuration from a preset or explicit dimensions."""
    if args.preset:
        return PRESETS[args.preset]
    return BoardConfig(rows=args.rows, columns=args.columns, mine_count=args.mines)


def print_board(session: GameSession) -> None:
    board = session.board
    print(render_observation(board.get_observation()))
    print(f"Mines remaining: {board.mines_remaining} | {board.game_state.name}")


def run_command(session: GameSession, words: List[str]) -> Optional[List]:
    """Apply one parsed command. Returns changed cells, or None if unknown."""
    verb = words[0].lower()
    if verb in COMMAND_ACTIONS and len(words) == 3:
        return session.dispatch(COMMAND_ACTIONS[verb], int(words[1]), int(words[2]))
    if verb == "click" and len(words) in (3, 4):
        button = MouseButton[words[3].upper()] if len(words) == 4 else MouseButton.LEFT
        x, y = float(words[1]), float(words[2])
        session.handle_pointer(PointerEvent(button, ButtonState.PRESSED, x, y))
        return session.handle_pointer(PointerEvent(button, ButtonState.RELEASED, x, y))
    return None


def play(args: argparse.Namespace, stdin: TextIO = sys.stdin) -> None:
    """Play interactively with text commands."""
    config = build_config(args)
    rng = random.Random(args.seed)
    session = GameSession(config, rng=rng)

    print(f"Board: {config.rows}x{config.columns} with {config.mine_count} mines")
    print(PLAY_HELP)
    print_board(session)

    for line in stdin:
        words = line.split()
        if not words:
            continue
        if words[0] == "q":
            break
        if words[0] == "new":
            session.new_game()
            print_board(session)
            continue

        try:
            changed = run_command(session, words)
        except (ValueError, KeyError):
            changed = None
        if changed is None:
            print(PLAY_HELP)
            continue

        print_board(session)
        if session.board.is_won:
            print("*** WIN! ***  (type 'new' to play again)")
        elif session.board.is_lost:
            print("*** LOST (hit mine) ***  (type 'new' to play again)")


def demo(args: argparse.Namespace) -> None:
    """Watch random valid reveals play out."""
    config = build_config(args)
    env = MinesweeperEnv(config=config, render_mode="ansi")
    rng = np.random.default_rng(args.seed)

    wins = 0
    for game in range(args.games):
        obs, info = env.reset(seed=None if args.seed is None else args.seed + game)
        done = False
        step = 0

        while not done:
            action = rng.choice(np.flatnonzero(env.get_action_mask()))
            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            row, col = divmod(int(action), config.columns)
            print(f"=== Game {game + 1}/{args.games} | Step {step} ===")
            print(f"Last move: ({row}, {col})\n")
            print(env.render())
            time.sleep(args.delay)

        if info["game_state"] == "WON":
            wins += 1
            print("\n*** WIN! ***")
        else:
            print("\n*** LOST (hit mine) ***")

    print(f"\n=== Final: {wins}/{args.games} wins ===")


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--preset", choices=sorted(PRESETS), help="Named board configuration"
    )
    parser.add_argument("--rows", type=int, default=9, help="Number of rows")
    parser.add_argument("--columns", type=int, default=9, help="Number of columns")
    parser.add_argument("--mines", type=int, default=10, help="Number of mines")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--verbose", action="store_true", help="Log board events to stderr"
    )


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    add_board_arguments(play_parser)

    demo_parser = subparsers.add_parser("demo", help="Watch random play")
    add_board_arguments(demo_parser)
    demo_parser.add_argument(
        "--games", type=int, default=3, help="Number of games"
    )
    demo_parser.add_argument(
        "--delay", type=float, default=0.3, help="Delay between moves"
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        return

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "play":
            play(args)
        else:
            demo(args)
    except InvalidConfiguration as exc:
        print(f"Invalid board: {exc}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
