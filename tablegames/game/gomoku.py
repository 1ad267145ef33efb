"""Five-in-a-row game session."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from tablegames.config import GomokuConfig
from tablegames.errors import InvalidMoveError
from tablegames.logging import GameLogger
from tablegames.models.board import Board, Cell

from .win_detector import Square, WinningRun, find_winning_run

logger = logging.getLogger(__name__)


class GameStatus(str, Enum):
    """Lifecycle of one game."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    WON_A = "won_a"
    WON_B = "won_b"
    DRAW = "draw"
    RESIGNED = "resigned"

    @property
    def is_over(self) -> bool:
        return self not in (GameStatus.NOT_STARTED, GameStatus.IN_PROGRESS)


class RejectReason(str, Enum):
    """Why an action was refused."""

    OCCUPIED = "occupied"
    OUT_OF_BOUNDS = "out_of_bounds"
    NOT_IN_PROGRESS = "not_in_progress"
    NOT_YOUR_TURN = "not_your_turn"
    GAME_IN_PROGRESS = "game_in_progress"


WIN_STATUS = {
    Cell.PLAYER_A: GameStatus.WON_A,
    Cell.PLAYER_B: GameStatus.WON_B,
}


@dataclass
class MoveResult:
    """Result of a placement or resignation."""

    accepted: bool
    status: GameStatus
    win: bool = False
    endpoints: tuple[Square, Square] | None = None
    winner: Cell | None = None
    reason: RejectReason | None = None

    @classmethod
    def accept(
        cls,
        status: GameStatus,
        winner: Cell | None = None,
        run: WinningRun | None = None,
    ) -> MoveResult:
        return cls(
            accepted=True,
            status=status,
            win=run is not None,
            endpoints=run.endpoints if run else None,
            winner=winner,
        )

    @classmethod
    def reject(cls, reason: RejectReason, status: GameStatus) -> MoveResult:
        return cls(accepted=False, status=status, reason=reason)

    def raise_for_rejection(self) -> None:
        """Raise InvalidMoveError if the action was rejected."""
        if not self.accepted:
            raise InvalidMoveError(f"Move rejected: {self.reason.value}", self.reason)


class GomokuSession:
    """One five-in-a-row table.

    PLAYER_A moves first in every game. A session is a plain object owned by
    its caller; it is not safe to share between threads without a lock.
    """

    def __init__(
        self,
        config: GomokuConfig | None = None,
        game_logger: GameLogger | None = None,
    ):
        """Initialize session.

        Args:
            config: Board size and run length (uses defaults if not provided)
            game_logger: GameLogger instance for detailed logging
        """
        self.config = config or GomokuConfig()
        self.game_logger = game_logger

        self.board = Board(self.config.board_size)
        self.status = GameStatus.NOT_STARTED
        self.current_player = Cell.PLAYER_A
        self.winner: Cell | None = None
        self.winning_run: WinningRun | None = None
        self.game_number = 0
        self.move_count = 0

    @property
    def in_progress(self) -> bool:
        return self.status == GameStatus.IN_PROGRESS

    def new_game(self) -> None:
        """Clear the board and start a game with PLAYER_A to move.

        Raises:
            InvalidMoveError: If a game is already in progress.
        """
        if self.in_progress:
            raise InvalidMoveError(
                "Finish the current game first", RejectReason.GAME_IN_PROGRESS
            )

        self.board.clear()
        self.current_player = Cell.PLAYER_A
        self.winner = None
        self.winning_run = None
        self.move_count = 0
        self.game_number += 1
        self.status = GameStatus.IN_PROGRESS

        logger.info(f"Starting game {self.game_number}")
        if self.game_logger:
            self.game_logger.log_game_start(
                self.game_number, self.board.size, self.current_player
            )

    def place(self, row: int, col: int, player: Cell | None = None) -> MoveResult:
        """Place a piece for player at (row, col).

        Args:
            row: Board row.
            col: Board column.
            player: Player making the move. Defaults to the player to move.

        Returns:
            MoveResult. Rejected moves leave the board and turn unchanged.
        """
        player = self.current_player if player is None else Cell(player)

        reason = self._check_placement(row, col, player)
        if reason is not None:
            return self._reject(reason, player, "place", (row, col))

        self.board.set(row, col, player)
        self.move_count += 1
        logger.debug(f"{player.name} placed at ({row}, {col})")

        run = find_winning_run(
            self.board, row, col, player, win_length=self.config.win_length
        )
        if run is not None:
            status, winner = WIN_STATUS[player], player
        elif self.board.is_full():
            status, winner = GameStatus.DRAW, None
        else:
            status, winner = GameStatus.IN_PROGRESS, None

        if self.game_logger:
            self.game_logger.log_move(
                self.game_number, self.move_count, player, row, col, status.value
            )

        if status == GameStatus.IN_PROGRESS:
            self.current_player = player.opponent()
        else:
            self.winning_run = run
            self._finish(status, winner)

        return MoveResult.accept(self.status, self.winner, run)

    def resign(self, player: Cell | None = None) -> MoveResult:
        """Resign the game for player. The opponent is credited the win.

        Args:
            player: Resigning player. Defaults to the player to move.
        """
        player = self.current_player if player is None else Cell(player)
        if not self.in_progress:
            return self._reject(RejectReason.NOT_IN_PROGRESS, player, "resign")
        if player == Cell.EMPTY:
            return self._reject(RejectReason.NOT_YOUR_TURN, player, "resign")

        logger.info(f"{player.name} resigns")
        self._finish(GameStatus.RESIGNED, player.opponent())
        return MoveResult.accept(self.status, self.winner)

    def _check_placement(self, row: int, col: int, player: Cell) -> RejectReason | None:
        if not self.in_progress:
            return RejectReason.NOT_IN_PROGRESS
        if player != self.current_player:
            return RejectReason.NOT_YOUR_TURN
        if not self.board.in_bounds(row, col):
            return RejectReason.OUT_OF_BOUNDS
        if self.board.get(row, col) != Cell.EMPTY:
            return RejectReason.OCCUPIED
        return None

    def _reject(
        self,
        reason: RejectReason,
        player: Cell,
        action: str,
        square: Square | None = None,
    ) -> MoveResult:
        logger.warning(f"Rejected {action} by {player.name}: {reason.value}")
        if self.game_logger:
            self.game_logger.log_rejected(
                self.game_number, player, action, reason.value, square
            )
        return MoveResult.reject(reason, self.status)

    def _finish(self, status: GameStatus, winner: Cell | None) -> None:
        self.status = status
        self.winner = winner

        if winner is None:
            logger.info(f"Game {self.game_number} ends in a draw")
        else:
            logger.info(f"Game {self.game_number} won by {winner.name} ({status.value})")

        if self.game_logger:
            endpoints = self.winning_run.endpoints if self.winning_run else None
            self.game_logger.log_game_end(
                self.game_number, status.value, winner, self.board, endpoints
            )

    def __str__(self) -> str:
        parts = [f"Game {self.game_number}, Move {self.move_count}"]
        if self.in_progress:
            parts.append(f"{self.current_player.name} to move")
        else:
            parts.append(f"[{self.status.value.upper()}]")
        return " ".join(parts)
