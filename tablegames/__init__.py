"""Card and board game cores: deck, hands, Blackjack and five in a row."""

__version__ = "0.1.0"
