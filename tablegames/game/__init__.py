"""Game logic."""

from .blackjack import BlackjackSession, OutcomeReason, RoundOutcome, RoundStatus
from .gomoku import GameStatus, GomokuSession, MoveResult, RejectReason
from .win_detector import DIRECTIONS, WinningRun, count_run, find_winning_run

__all__ = [
    "BlackjackSession",
    "OutcomeReason",
    "RoundOutcome",
    "RoundStatus",
    "GameStatus",
    "GomokuSession",
    "MoveResult",
    "RejectReason",
    "DIRECTIONS",
    "WinningRun",
    "count_run",
    "find_winning_run",
]
