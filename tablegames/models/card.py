"""Card and Deck models."""

import random
from enum import IntEnum
from typing import Iterator

from pydantic import BaseModel

from tablegames.errors import ExhaustedDeckError


class Suit(IntEnum):
    """Card suit (fresh decks are built in this order)."""

    SPADES = 0
    HEARTS = 1
    DIAMONDS = 2
    CLUBS = 3


class Rank(IntEnum):
    """Card rank. Value is the face value, with Ace low."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13


# Map rank to display string
RANK_NAMES = {
    Rank.ACE: "Ace",
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "Jack",
    Rank.QUEEN: "Queen",
    Rank.KING: "King",
}

SUIT_NAMES = {
    Suit.SPADES: "Spades",
    Suit.HEARTS: "Hearts",
    Suit.DIAMONDS: "Diamonds",
    Suit.CLUBS: "Clubs",
}

DECK_SIZE = len(Suit) * len(Rank)


class Card(BaseModel, frozen=True):
    """Single playing card."""

    suit: Suit
    rank: Rank

    @property
    def rank_name(self) -> str:
        return RANK_NAMES[self.rank]

    @property
    def suit_name(self) -> str:
        return SUIT_NAMES[self.suit]

    def __str__(self) -> str:
        return f"{self.rank_name} of {self.suit_name}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"


class Deck:
    """Standard 52-card deck dealt from a cursor.

    A new deck is in suit order, Ace to King within each suit. Cards are
    dealt without replacement until the deck is exhausted or reshuffled.
    """

    def __init__(self, rng: random.Random | None = None):
        """Initialize deck.

        Args:
            rng: Random source used by shuffle(). Defaults to a fresh
                random.Random, pass a seeded one for reproducible games.
        """
        self._rng = rng or random.Random()
        self._cards: list[Card] = [
            Card(suit=suit, rank=rank) for suit in Suit for rank in Rank
        ]
        self._dealt = 0

    def shuffle(self) -> None:
        """Put all 52 cards back and reorder them uniformly at random."""
        # random.shuffle is a Fisher-Yates shuffle
        self._rng.shuffle(self._cards)
        self._dealt = 0

    def deal_card(self) -> Card:
        """Deal the next card.

        Raises:
            ExhaustedDeckError: If all 52 cards have been dealt.
        """
        if self._dealt >= DECK_SIZE:
            raise ExhaustedDeckError("No cards are left in the deck")
        card = self._cards[self._dealt]
        self._dealt += 1
        return card

    def cards_left(self) -> int:
        """Get number of cards not yet dealt."""
        return DECK_SIZE - self._dealt

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Deck(cards_left={self.cards_left()})"
