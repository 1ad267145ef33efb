"""Tests for hand models."""

import pytest

from tablegames.errors import HandIndexError, TableGameError
from tablegames.models.card import Card, Rank, Suit
from tablegames.models.hand import BlackjackHand, Hand


def blackjack_hand(*ranks: int) -> BlackjackHand:
    """Build a hand from ranks, cycling suits so cards stay distinct."""
    hand = BlackjackHand()
    for i, rank in enumerate(ranks):
        hand.add_card(Card(suit=Suit(i % 4), rank=Rank(rank)))
    return hand


class TestHand:
    """Tests for Hand class."""

    def test_empty_hand(self):
        """Test empty hand."""
        hand = Hand()
        assert hand.count() == 0
        assert len(hand) == 0
        assert str(hand) == "[]"

    def test_add_keeps_order(self, card):
        """Test that cards come back in insertion order."""
        hand = Hand()
        cards = [card(5), card(1, Suit.HEARTS), card(13, Suit.CLUBS)]
        for c in cards:
            hand.add_card(c)

        assert hand.count() == 3
        assert [hand.get_card(i) for i in range(3)] == cards
        assert list(hand) == cards

    def test_add_none(self):
        """Test that None is not a card."""
        with pytest.raises(TypeError):
            Hand().add_card(None)

    def test_no_size_limit(self, card):
        """Test that the hand enforces no upper bound."""
        hand = Hand()
        for rank in range(1, 14):
            hand.add_card(card(rank))
        assert hand.count() == 13

    @pytest.mark.parametrize("position", [-1, 2, 100])
    def test_get_card_out_of_range(self, card, position):
        """Test reading a position that doesn't exist."""
        hand = Hand([card(2), card(3)])
        with pytest.raises(HandIndexError):
            hand.get_card(position)

    def test_index_error_taxonomy(self):
        """Test that HandIndexError is both a game error and an IndexError."""
        assert issubclass(HandIndexError, TableGameError)
        assert issubclass(HandIndexError, IndexError)

    def test_remove_card(self, card):
        """Test removing by card and by position."""
        hand = Hand([card(2), card(3), card(4)])

        hand.remove_card(card(3))
        assert hand.to_list() == [card(2), card(4)]

        removed = hand.remove_card_at(0)
        assert removed == card(2)
        assert hand.to_list() == [card(4)]

        with pytest.raises(HandIndexError):
            hand.remove_card_at(5)

    def test_remove_missing_card(self, card):
        """Test that removing an absent card is a no-op."""
        hand = Hand([card(2)])
        hand.remove_card(card(9))
        assert hand.count() == 1

    def test_clear(self, card):
        """Test clearing the hand."""
        hand = Hand([card(2), card(3)])
        hand.clear()
        assert hand.count() == 0

    def test_sort_by_suit(self, card):
        """Test sorting by suit then rank."""
        hand = Hand([card(9, Suit.CLUBS), card(4, Suit.SPADES), card(2, Suit.CLUBS)])
        hand.sort_by_suit()
        assert hand.to_list() == [
            card(4, Suit.SPADES),
            card(2, Suit.CLUBS),
            card(9, Suit.CLUBS),
        ]

    def test_sort_by_value(self, card):
        """Test sorting by rank then suit."""
        hand = Hand([card(9, Suit.CLUBS), card(4, Suit.HEARTS), card(4, Suit.SPADES)])
        hand.sort_by_value()
        assert hand.to_list() == [
            card(4, Suit.SPADES),
            card(4, Suit.HEARTS),
            card(9, Suit.CLUBS),
        ]


class TestBlackjackHand:
    """Tests for Blackjack scoring."""

    @pytest.mark.parametrize(
        "ranks,expected",
        [
            ((1, 1, 9), 21),
            ((1, 1, 1, 8), 21),
            ((1, 13), 21),
            ((10, 9, 5), 24),
            ((11, 12), 20),
            ((1,), 11),
            ((1, 1), 12),
            ((1, 5, 10), 16),
            ((1, 1, 1, 1), 14),
            ((), 0),
        ],
    )
    def test_blackjack_value(self, ranks, expected):
        """Test ace-high/low scoring."""
        assert blackjack_hand(*ranks).blackjack_value() == expected

    def test_soft_and_hard(self):
        """Test soft total detection."""
        assert blackjack_hand(1, 6).is_soft()
        assert not blackjack_hand(1, 6, 10).is_soft()
        assert not blackjack_hand(10, 7).is_soft()
        assert blackjack_hand(1, 1, 9).is_soft()

    def test_bust(self):
        """Test bust detection."""
        assert blackjack_hand(10, 9, 5).is_bust()
        assert not blackjack_hand(10, 1, 10).is_bust()

    def test_is_blackjack(self):
        """Test two-card 21."""
        assert blackjack_hand(1, 12).is_blackjack()
        assert not blackjack_hand(7, 7, 7).is_blackjack()
        assert not blackjack_hand(10, 9).is_blackjack()
