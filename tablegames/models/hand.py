"""Hand models."""

from typing import Iterator

from tablegames.errors import HandIndexError

from .card import Card, Rank

BLACKJACK = 21


class Hand:
    """Ordered cards held by one player for a round."""

    def __init__(self, cards: list[Card] | None = None):
        """Initialize hand.

        Args:
            cards: Initial cards, in order.
        """
        self._cards: list[Card] = list(cards) if cards else []

    def add_card(self, card: Card) -> None:
        """Add a card to the end of the hand."""
        if card is None:
            raise TypeError("Can't add a null card to a hand")
        self._cards.append(card)

    def remove_card(self, card: Card) -> None:
        """Remove a card from the hand, if present."""
        if card in self._cards:
            self._cards.remove(card)

    def remove_card_at(self, position: int) -> Card:
        """Remove and return the card at the given position."""
        self._check_position(position)
        return self._cards.pop(position)

    def clear(self) -> None:
        """Remove all cards."""
        self._cards.clear()

    def count(self) -> int:
        """Get number of cards."""
        return len(self._cards)

    def get_card(self, position: int) -> Card:
        """Get the card at a position (0 is the first card added).

        Raises:
            HandIndexError: If position is outside [0, count).
        """
        self._check_position(position)
        return self._cards[position]

    def sort_by_suit(self) -> None:
        """Sort cards by suit, then by rank within a suit."""
        self._cards.sort(key=lambda c: (c.suit, c.rank))

    def sort_by_value(self) -> None:
        """Sort cards by rank, then by suit for equal ranks."""
        self._cards.sort(key=lambda c: (c.rank, c.suit))

    def to_list(self) -> list[Card]:
        """Get cards as a list, in hand order."""
        return list(self._cards)

    def _check_position(self, position: int) -> None:
        if position < 0 or position >= len(self._cards):
            raise HandIndexError(f"Position does not exist in hand: {position}")

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, card: Card) -> bool:
        return card in self._cards

    def __str__(self) -> str:
        if not self._cards:
            return "[]"
        return "[" + ", ".join(str(c) for c in self._cards) + "]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._cards!r})"


def card_points(card: Card) -> int:
    """Blackjack points for a card, counting an Ace as 1."""
    return min(int(card.rank), 10)


class BlackjackHand(Hand):
    """Hand scored by Blackjack rules."""

    def _soft_aces(self) -> tuple[int, int]:
        """Get the best total and how many Aces still count as 11."""
        total = 0
        aces = 0
        for card in self._cards:
            if card.rank == Rank.ACE:
                aces += 1
                total += 11
            else:
                total += card_points(card)

        # Downgrade one Ace at a time to 1 until the total fits
        while total > BLACKJACK and aces > 0:
            total -= 10
            aces -= 1
        return total, aces

    def blackjack_value(self) -> int:
        """Compute the Blackjack value of the hand.

        Cards 2-10 count at face value and face cards count 10. Each Ace
        counts 11 unless that would take the total over 21, in which case
        Aces are counted as 1 one at a time until the total is 21 or less.
        A busted hand is still returned as its plain sum.
        """
        total, _ = self._soft_aces()
        return total

    def is_soft(self) -> bool:
        """Check if an Ace is currently counted as 11."""
        _, aces = self._soft_aces()
        return aces > 0

    def is_bust(self) -> bool:
        return self.blackjack_value() > BLACKJACK

    def is_blackjack(self) -> bool:
        """Check for a two-card 21."""
        return self.count() == 2 and self.blackjack_value() == BLACKJACK
