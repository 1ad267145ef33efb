"""Logging utilities and game state display."""

import logging
import sys
from typing import TYPE_CHECKING, TextIO

from tablegames.game.gomoku import GameStatus
from tablegames.models.board import CELL_SYMBOLS, Cell

if TYPE_CHECKING:
    from tablegames.game.blackjack import BlackjackSession, RoundOutcome
    from tablegames.game.gomoku import GomokuSession, MoveResult
    from tablegames.models.hand import BlackjackHand


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


PLAYER_LABELS = {
    Cell.PLAYER_A: "BLACK (X)",
    Cell.PLAYER_B: "WHITE (O)",
}


class GameDisplay:
    """Display game state to a text stream."""

    def __init__(self, show_board: bool = True, out: TextIO | None = None):
        """Initialize display.

        Args:
            show_board: Whether to redraw the board after every move
            out: Stream to write to (stdout if not provided)
        """
        self.show_board = show_board
        self.out = out or sys.stdout

    def print_message(self, text: str = "") -> None:
        """Print a line of text."""
        print(text, file=self.out)

    def print_separator(self) -> None:
        """Print a separator line."""
        self.print_message("=" * 60)

    # Blackjack

    def print_hand(self, label: str, hand: "BlackjackHand", hide_first: bool = False) -> None:
        """Print a hand, optionally with the first card face down."""
        if hide_first and hand.count() > 0:
            shown = ["??"] + [str(c) for c in hand.to_list()[1:]]
            self.print_message(f"{label}: {', '.join(shown)}")
        else:
            self.print_message(f"{label}: {hand} ({hand.blackjack_value()})")

    def print_table(self, session: "BlackjackSession") -> None:
        """Print both hands; the dealer's first card stays hidden during play."""
        self.print_hand("Dealer", session.dealer_hand, hide_first=session.in_round)
        self.print_hand("You", session.player_hand)

    def print_round_start(self, session: "BlackjackSession") -> None:
        self.print_separator()
        self.print_message(f"ROUND {session.round_number}: bet {session.bet}, you have {session.money}")
        self.print_separator()

    def print_outcome(self, outcome: "RoundOutcome", money: int) -> None:
        """Print round result and remaining money."""
        self.print_message(str(outcome))
        self.print_message(f"You have {money}.")

    def print_prompt_bet(self, money: int, default_bet: int) -> None:
        self.print_message(f"You have {money}. Bet amount [{default_bet}] (q to quit):")

    # Five in a row

    def print_board(self, session: "GomokuSession") -> None:
        """Print the board with row and column numbers."""
        if not self.show_board:
            return

        board = session.board
        self.print_message("   " + "".join(f"{c % 10}" for c in range(board.size)))
        for r, row in enumerate(board.rows()):
            self.print_message(f"{r:2d} " + "".join(CELL_SYMBOLS[c] for c in row))

    def print_move_result(self, session: "GomokuSession", result: "MoveResult") -> None:
        """Print what a placement or resignation did to the game."""
        if not result.accepted:
            self.print_message(f"Move rejected: {result.reason.value}")
            return

        if result.win:
            (r1, c1), (r2, c2) = result.endpoints
            self.print_message(
                f"{PLAYER_LABELS[result.winner]} wins the game! "
                f"Five in a row from ({r1}, {c1}) to ({r2}, {c2})."
            )
        elif session.status == GameStatus.DRAW:
            self.print_message("The game ends in a draw.")
        elif session.status == GameStatus.RESIGNED:
            self.print_message(
                f"{PLAYER_LABELS[result.winner.opponent()]} resigns. "
                f"{PLAYER_LABELS[result.winner]} wins."
            )
        else:
            self.print_message(f"{PLAYER_LABELS[session.current_player]}: make your move.")
