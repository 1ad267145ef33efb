"""Game logger for detailed game replay."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, TextIO

from pydantic import BaseModel

from tablegames.models.board import Board, Cell
from tablegames.models.hand import BlackjackHand

from .formatters import format_board, format_hand


class GameLogConfig(BaseModel):
    """Configuration for game logging."""

    enabled: bool = False
    output_path: str = "game_log.jsonl"


# Cell to string mapping for log output
PLAYER_NAMES: dict[Cell, str] = {
    Cell.PLAYER_A: "a",
    Cell.PLAYER_B: "b",
}


def _player_name(player: Cell | None) -> str | None:
    return PLAYER_NAMES.get(player) if player is not None else None


class GameLogger:
    """Logger for detailed game events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    This allows step-by-step replay of the game.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize game logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> "GameLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        """Write an event to the log file.

        Args:
            event: Event dictionary to write as JSON.
        """
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    # Five in a row

    def log_game_start(self, game_num: int, board_size: int, first_player: Cell) -> None:
        """Log the start of a five-in-a-row game.

        Args:
            game_num: Game number within the session.
            board_size: Rows (and columns) of the board.
            first_player: Player who moves first.
        """
        self._write({
            "type": "game_start",
            "timestamp": datetime.now().isoformat(),
            "game": game_num,
            "board_size": board_size,
            "first_player": _player_name(first_player),
        })

    def log_move(
        self,
        game_num: int,
        move_num: int,
        player: Cell,
        row: int,
        col: int,
        status: str,
    ) -> None:
        """Log an accepted placement.

        Args:
            game_num: Game number.
            move_num: Placement number within the game (1-based).
            player: Player who placed the piece.
            row: Row of the piece.
            col: Column of the piece.
            status: Game status after the move.
        """
        self._write({
            "type": "move",
            "game": game_num,
            "move": move_num,
            "player": _player_name(player),
            "row": row,
            "col": col,
            "status": status,
        })

    def log_rejected(
        self,
        game_num: int,
        player: Cell | None,
        action: str,
        reason: str,
        square: tuple[int, int] | None = None,
    ) -> None:
        """Log a rejected placement or resignation."""
        record: dict[str, Any] = {
            "type": "rejected",
            "game": game_num,
            "player": _player_name(player),
            "action": action,
            "reason": reason,
        }
        if square is not None:
            record["square"] = list(square)
        self._write(record)

    def log_game_end(
        self,
        game_num: int,
        status: str,
        winner: Cell | None,
        board: Board,
        endpoints: tuple[tuple[int, int], tuple[int, int]] | None = None,
    ) -> None:
        """Log game end with the final board.

        Args:
            game_num: Game number.
            status: Terminal status (won_a, won_b, draw, resigned).
            winner: Winning player, None for a draw.
            board: Final board.
            endpoints: Ends of the winning run, if the game was won on the board.
        """
        record: dict[str, Any] = {
            "type": "game_end",
            "game": game_num,
            "status": status,
            "winner": _player_name(winner),
            "board": format_board(board),
        }
        if endpoints is not None:
            record["endpoints"] = [list(endpoints[0]), list(endpoints[1])]
        self._write(record)

    # Blackjack

    def log_round_start(
        self,
        round_num: int,
        bet: int,
        money: int,
        player_hand: BlackjackHand,
        dealer_hand: BlackjackHand,
    ) -> None:
        """Log the initial deal of a Blackjack round.

        Args:
            round_num: Round number within the session.
            bet: Amount bet on the round.
            money: Bankroll before the round is settled.
            player_hand: Player's two cards.
            dealer_hand: Dealer's two cards.
        """
        self._write({
            "type": "round_start",
            "timestamp": datetime.now().isoformat(),
            "round": round_num,
            "bet": bet,
            "money": money,
            "player_hand": format_hand(player_hand),
            "dealer_hand": format_hand(dealer_hand),
        })

    def log_hit(self, round_num: int, hand: BlackjackHand) -> None:
        """Log the player's hand after taking a card."""
        self._write({
            "type": "hit",
            "round": round_num,
            "hand": format_hand(hand),
            "value": hand.blackjack_value(),
        })

    def log_dealer_draw(self, round_num: int, hand: BlackjackHand) -> None:
        """Log the dealer's hand after drawing a card."""
        self._write({
            "type": "dealer_draw",
            "round": round_num,
            "hand": format_hand(hand),
            "value": hand.blackjack_value(),
        })

    def log_round_end(
        self,
        round_num: int,
        player_won: bool,
        reason: str,
        player_hand: BlackjackHand,
        dealer_hand: BlackjackHand,
        money: int,
    ) -> None:
        """Log the result of a Blackjack round.

        Args:
            round_num: Round number.
            player_won: Whether the player won the bet.
            reason: How the round ended (e.g., "dealer_bust").
            player_hand: Player's final hand.
            dealer_hand: Dealer's final hand.
            money: Bankroll after settling the bet.
        """
        self._write({
            "type": "round_end",
            "round": round_num,
            "player_won": player_won,
            "reason": reason,
            "player_hand": format_hand(player_hand),
            "player_value": player_hand.blackjack_value(),
            "dealer_hand": format_hand(dealer_hand),
            "dealer_value": dealer_hand.blackjack_value(),
            "money": money,
        })
