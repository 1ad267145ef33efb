"""Exceptions raised by the game cores."""


class TableGameError(Exception):
    """Base class for precondition violations in the game cores."""


class ExhaustedDeckError(TableGameError):
    """Raised when dealing from a deck with no cards left."""


class HandIndexError(TableGameError, IndexError):
    """Raised when reading a hand position that does not exist."""


class InvalidMoveError(TableGameError):
    """Raised for an action that is not allowed in the current game state."""

    def __init__(self, message: str, reason: object = None):
        super().__init__(message)
        self.reason = reason


class InvalidBetError(InvalidMoveError):
    """Raised when a Blackjack bet is not a positive amount within the bankroll."""
