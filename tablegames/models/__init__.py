"""Game models."""

from .board import Board, Cell
from .card import Card, Deck, Rank, Suit
from .hand import BlackjackHand, Hand

__all__ = [
    "Board",
    "Cell",
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "Hand",
    "BlackjackHand",
]
