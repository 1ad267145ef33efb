"""Formatters for game log output."""

from tablegames.models.board import CELL_SYMBOLS, Board
from tablegames.models.card import Card, Rank, Suit
from tablegames.models.hand import Hand

# Suit codes for log output
SUIT_CODES: dict[Suit, str] = {
    Suit.SPADES: "S",
    Suit.HEARTS: "H",
    Suit.DIAMONDS: "D",
    Suit.CLUBS: "C",
}

RANK_CODES: dict[Rank, str] = {
    Rank.ACE: "A",
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}


def format_card(card: Card) -> str:
    """Format a single card to string.

    Args:
        card: Card to format.

    Returns:
        Formatted string (e.g., "SA" for the Ace of Spades, "H10").
    """
    return f"{SUIT_CODES[card.suit]}{RANK_CODES[card.rank]}"


def format_hand(hand: Hand) -> str:
    """Format a hand to comma-separated string.

    Returns:
        Comma-separated card strings in hand order (e.g., "SA,DK").
        Empty string if no cards.
    """
    return ",".join(format_card(c) for c in hand)


def format_board(board: Board) -> list[str]:
    """Format a board to one string per row ("." empty, "X" A, "O" B)."""
    return ["".join(CELL_SYMBOLS[c] for c in row) for row in board.rows()]
