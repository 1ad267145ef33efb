"""Shared fixtures."""

import random

import pytest

from tablegames.models.card import Card, Rank, Suit


def make_card(rank: int, suit: Suit = Suit.SPADES) -> Card:
    return Card(suit=suit, rank=Rank(rank))


class StackedRandom(random.Random):
    """Random source whose shuffle puts chosen cards on top, in order."""

    def __init__(self, top: list[Card]):
        super().__init__(0)
        self.top = list(top)

    def shuffle(self, x):
        rest = [c for c in x if c not in self.top]
        x[:] = self.top + rest


@pytest.fixture
def card():
    return make_card


@pytest.fixture
def stacked_rng():
    return StackedRandom
