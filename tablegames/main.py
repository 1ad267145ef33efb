"""Main entry point for the terminal games."""

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import Iterator, TextIO

import yaml

from tablegames.config import BlackjackConfig, Config, GomokuConfig, load_config
from tablegames.errors import InvalidMoveError, TableGameError
from tablegames.game.blackjack import BlackjackSession
from tablegames.game.gomoku import GomokuSession
from tablegames.logging import GameLogConfig, GameLogger
from tablegames.utils.logger import PLAYER_LABELS, GameDisplay, setup_logging

logger = logging.getLogger(__name__)

QUIT_COMMANDS = ("q", "quit", "exit")


def _next_command(lines: Iterator[str]) -> str | None:
    """Read the next line, lower-cased. None at end of input or on quit."""
    line = next(lines, None)
    if line is None:
        return None
    command = line.strip().lower()
    if command in QUIT_COMMANDS:
        return None
    return command


def run_blackjack(
    session: BlackjackSession,
    display: GameDisplay,
    lines: Iterator[str],
) -> None:
    """Play Blackjack rounds until the player quits or runs out of money.

    Args:
        session: Blackjack session to drive
        display: Output display
        lines: Input lines (bets, then "h"/"s" during a round)
    """
    while not session.is_broke():
        display.print_prompt_bet(session.money, session.config.default_bet)
        command = _next_command(lines)
        if command is None:
            break

        try:
            bet = int(command) if command else None
        except ValueError:
            display.print_message("The bet amount must be a legal positive integer.")
            continue

        try:
            outcome = session.start(bet)
        except TableGameError as e:
            display.print_message(str(e))
            continue

        display.print_round_start(session)
        display.print_table(session)

        while outcome is None:
            display.print_message(
                f"You have {session.player_hand.blackjack_value()}. Hit or stand? (h/s)"
            )
            command = _next_command(lines)
            if command is None:
                return
            if command in ("h", "hit"):
                outcome = session.hit()
                if outcome is None:
                    display.print_table(session)
            elif command in ("s", "stand"):
                outcome = session.stand()
            else:
                display.print_message('Please enter "h" to hit or "s" to stand.')

        display.print_table(session)
        display.print_outcome(outcome, session.money)

    if session.is_broke():
        display.print_message("You are out of money. Game over.")


def _parse_square(command: str) -> tuple[int, int] | None:
    parts = command.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def run_gomoku(
    session: GomokuSession,
    display: GameDisplay,
    lines: Iterator[str],
) -> None:
    """Play five-in-a-row between two players sharing the terminal.

    Args:
        session: Session to drive
        display: Output display
        lines: Input lines ("row col", "resign", "new")
    """
    session.new_game()
    display.print_board(session)
    display.print_message(f"{PLAYER_LABELS[session.current_player]}: make your move.")

    while True:
        command = _next_command(lines)
        if command is None:
            break
        if not command:
            continue

        if command == "new":
            try:
                session.new_game()
            except InvalidMoveError as e:
                display.print_message(f"{e}!")
                continue
            display.print_board(session)
            display.print_message(
                f"{PLAYER_LABELS[session.current_player]}: make your move."
            )
            continue

        if command == "resign":
            result = session.resign()
        else:
            square = _parse_square(command)
            if square is None:
                display.print_message('Enter a move as "row col", or "resign", "new", "q".')
                continue
            result = session.place(*square)

        if result.accepted:
            display.print_board(session)
        display.print_move_result(session, result)
        if result.accepted and session.status.is_over:
            display.print_message('Type "new" to play again or "q" to quit.')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Blackjack and five-in-a-row in the terminal"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Append game events to this JSONL file",
    )

    subparsers = parser.add_subparsers(dest="game", required=True)

    blackjack = subparsers.add_parser("blackjack", help="Play Blackjack against the dealer")
    blackjack.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducible shuffles",
    )
    blackjack.add_argument(
        "--money",
        type=int,
        help="Starting money (overrides config)",
    )

    gomoku = subparsers.add_parser("gomoku", help="Play five in a row (two players)")
    gomoku.add_argument(
        "--size",
        type=int,
        help="Board size (overrides config)",
    )
    gomoku.add_argument(
        "--hide-board",
        action="store_true",
        help="Don't redraw the board after each move",
    )

    return parser


def apply_overrides(config: Config, args: argparse.Namespace) -> Config:
    """Apply command-line overrides to the loaded config."""
    if args.verbose:
        config.logging.level = "DEBUG"
    if args.game_log:
        config.game_log = GameLogConfig(enabled=True, output_path=str(args.game_log))
    if getattr(args, "money", None) is not None:
        config.blackjack = BlackjackConfig.model_validate(
            {**config.blackjack.model_dump(), "starting_money": args.money}
        )
    if getattr(args, "size", None) is not None:
        # Re-validate so the win length still fits on the board
        config.gomoku = GomokuConfig.model_validate(
            {**config.gomoku.model_dump(), "board_size": args.size}
        )
    if getattr(args, "hide_board", False):
        config.logging.show_board = False
    return config


def main(argv: list[str] | None = None, stdin: TextIO | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    args = build_parser().parse_args(argv)

    try:
        config = apply_overrides(load_config(args.config), args)
    except (ValueError, yaml.YAMLError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    setup_logging(config.logging.level)

    display = GameDisplay(show_board=config.logging.show_board)
    lines = iter(stdin or sys.stdin)

    try:
        with GameLogger(config.game_log) as game_logger:
            if args.game == "blackjack":
                rng = random.Random(args.seed) if args.seed is not None else None
                session = BlackjackSession(config.blackjack, rng, game_logger)
                run_blackjack(session, display, lines)
            else:
                session = GomokuSession(config.gomoku, game_logger)
                run_gomoku(session, display, lines)
        return 0

    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 1
    except Exception as e:
        logger.exception(f"Game error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
