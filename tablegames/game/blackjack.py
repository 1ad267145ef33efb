"""Blackjack against a dealer, with a bankroll."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum

from tablegames.config import BlackjackConfig
from tablegames.errors import InvalidBetError, InvalidMoveError
from tablegames.logging import GameLogger
from tablegames.models.card import Deck
from tablegames.models.hand import BLACKJACK, BlackjackHand

logger = logging.getLogger(__name__)


class RoundStatus(str, Enum):
    """State of the current round."""

    NOT_STARTED = "not_started"
    PLAYER_TURN = "player_turn"
    FINISHED = "finished"


class OutcomeReason(str, Enum):
    """How a round was decided."""

    DEALER_BLACKJACK = "dealer_blackjack"
    PLAYER_BLACKJACK = "player_blackjack"
    PLAYER_BUST = "player_bust"
    PLAYER_MAX_CARDS = "player_max_cards"  # Took the card limit without busting
    DEALER_BUST = "dealer_bust"
    DEALER_MAX_CARDS = "dealer_max_cards"
    DEALER_HIGHER = "dealer_higher"
    TIE = "tie"  # Ties go to the dealer
    PLAYER_HIGHER = "player_higher"


@dataclass
class RoundOutcome:
    """Result of a finished round."""

    player_won: bool
    reason: OutcomeReason
    player_value: int
    dealer_value: int
    bet: int

    def __str__(self) -> str:
        verdict = "You win" if self.player_won else "You lose"
        return (
            f"{verdict} ({self.reason.value}): "
            f"{self.player_value} to {self.dealer_value}"
        )


class BlackjackSession:
    """A player's run of Blackjack rounds against the dealer.

    Each round gets a freshly shuffled deck. The dealer is dealt first, two
    cards each. The player then hits or stands; a player who takes
    max_hand_size cards without going over 21 wins, and so does a dealer.
    """

    def __init__(
        self,
        config: BlackjackConfig | None = None,
        rng: random.Random | None = None,
        game_logger: GameLogger | None = None,
    ):
        """Initialize session.

        Args:
            config: Table rules and starting money (uses defaults if not provided)
            rng: Random source for shuffling each round's deck
            game_logger: GameLogger instance for detailed logging
        """
        self.config = config or BlackjackConfig()
        self.game_logger = game_logger
        self._rng = rng or random.Random()

        self.money = self.config.starting_money
        self.status = RoundStatus.NOT_STARTED
        self.round_number = 0
        self.bet = 0
        self.deck: Deck | None = None
        self.player_hand = BlackjackHand()
        self.dealer_hand = BlackjackHand()
        self.outcome: RoundOutcome | None = None

    @property
    def in_round(self) -> bool:
        return self.status == RoundStatus.PLAYER_TURN

    def is_broke(self) -> bool:
        """Check if the player has no money left to bet."""
        return self.money <= 0

    def start(self, bet: int | None = None) -> RoundOutcome | None:
        """Place a bet and deal a new round.

        Args:
            bet: Amount to bet. Defaults to the configured default bet.

        Returns:
            RoundOutcome if either side was dealt 21, otherwise None and the
            player is to act.

        Raises:
            InvalidMoveError: If a round is already in progress.
            InvalidBetError: If the bet is not a positive amount the player can cover.
        """
        if self.in_round:
            raise InvalidMoveError("You still have to finish this round")

        if bet is None:
            bet = self.config.default_bet
        self._check_bet(bet)

        self.round_number += 1
        self.bet = bet
        self.outcome = None
        self.deck = Deck(self._rng)
        self.deck.shuffle()
        self.player_hand = BlackjackHand()
        self.dealer_hand = BlackjackHand()

        self.dealer_hand.add_card(self.deck.deal_card())
        self.dealer_hand.add_card(self.deck.deal_card())
        self.player_hand.add_card(self.deck.deal_card())
        self.player_hand.add_card(self.deck.deal_card())
        self.status = RoundStatus.PLAYER_TURN

        logger.info(f"Round {self.round_number}: bet {bet}, money {self.money}")
        logger.debug(f"Dealer: {self.dealer_hand}, player: {self.player_hand}")
        if self.game_logger:
            self.game_logger.log_round_start(
                self.round_number, bet, self.money, self.player_hand, self.dealer_hand
            )

        if self.dealer_hand.blackjack_value() == BLACKJACK:
            return self._finish(False, OutcomeReason.DEALER_BLACKJACK)
        if self.player_hand.blackjack_value() == BLACKJACK:
            return self._finish(True, OutcomeReason.PLAYER_BLACKJACK)
        return None

    def hit(self) -> RoundOutcome | None:
        """Deal the player another card.

        Returns:
            RoundOutcome if the card ended the round, otherwise None.

        Raises:
            InvalidMoveError: If no round is in progress.
        """
        self._require_round("hit")
        self.player_hand.add_card(self.deck.deal_card())

        value = self.player_hand.blackjack_value()
        logger.debug(f"Player hits: {self.player_hand} ({value})")
        if self.game_logger:
            self.game_logger.log_hit(self.round_number, self.player_hand)

        if value > BLACKJACK:
            return self._finish(False, OutcomeReason.PLAYER_BUST)
        if self.player_hand.count() >= self.config.max_hand_size:
            return self._finish(True, OutcomeReason.PLAYER_MAX_CARDS)
        return None

    def stand(self) -> RoundOutcome:
        """End the player's turn, play out the dealer and settle the bet.

        Raises:
            InvalidMoveError: If no round is in progress.
        """
        self._require_round("stand")

        while (
            self.dealer_hand.blackjack_value() <= self.config.dealer_hits_on
            and self.dealer_hand.count() < self.config.max_hand_size
        ):
            self.dealer_hand.add_card(self.deck.deal_card())
            logger.debug(f"Dealer draws: {self.dealer_hand}")
            if self.game_logger:
                self.game_logger.log_dealer_draw(self.round_number, self.dealer_hand)

        dealer_value = self.dealer_hand.blackjack_value()
        player_value = self.player_hand.blackjack_value()

        if dealer_value > BLACKJACK:
            return self._finish(True, OutcomeReason.DEALER_BUST)
        if self.dealer_hand.count() >= self.config.max_hand_size:
            return self._finish(False, OutcomeReason.DEALER_MAX_CARDS)
        if dealer_value > player_value:
            return self._finish(False, OutcomeReason.DEALER_HIGHER)
        if dealer_value == player_value:
            return self._finish(False, OutcomeReason.TIE)
        return self._finish(True, OutcomeReason.PLAYER_HIGHER)

    def _check_bet(self, bet: int) -> None:
        if isinstance(bet, bool) or not isinstance(bet, int):
            raise InvalidBetError("The bet amount must be an integer")
        if bet <= 0:
            raise InvalidBetError("The bet amount must be a positive integer")
        if bet > self.money:
            raise InvalidBetError("You can't bet more money than you have")

    def _require_round(self, action: str) -> None:
        if not self.in_round:
            logger.warning(f"Rejected {action}: no round in progress")
            raise InvalidMoveError(f"Can't {action}: no round in progress")

    def _finish(self, player_won: bool, reason: OutcomeReason) -> RoundOutcome:
        self.money += self.bet if player_won else -self.bet
        self.status = RoundStatus.FINISHED
        self.outcome = RoundOutcome(
            player_won=player_won,
            reason=reason,
            player_value=self.player_hand.blackjack_value(),
            dealer_value=self.dealer_hand.blackjack_value(),
            bet=self.bet,
        )

        logger.info(f"Round {self.round_number}: {self.outcome}, money {self.money}")
        if self.game_logger:
            self.game_logger.log_round_end(
                self.round_number,
                player_won,
                reason.value,
                self.player_hand,
                self.dealer_hand,
                self.money,
            )
        return self.outcome
