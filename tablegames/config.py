"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, model_validator

from tablegames.logging.game_logger import GameLogConfig


class BlackjackConfig(BaseModel):
    """Blackjack table configuration."""

    starting_money: int = Field(default=100, gt=0)
    default_bet: int = Field(default=10, gt=0)
    dealer_hits_on: int = 16  # Dealer draws while at or below this total
    max_hand_size: int = Field(default=5, ge=2)  # Five cards without busting wins


class GomokuConfig(BaseModel):
    """Five-in-a-row configuration."""

    board_size: int = Field(default=13, ge=5)
    win_length: int = Field(default=5, ge=3)

    @model_validator(mode="after")
    def _check_win_length(self) -> "GomokuConfig":
        if self.win_length > self.board_size:
            raise ValueError(
                f"win_length {self.win_length} does not fit on a "
                f"{self.board_size}x{self.board_size} board"
            )
        return self


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    show_board: bool = True


class Config(BaseModel):
    """Root configuration."""

    blackjack: BlackjackConfig = BlackjackConfig()
    gomoku: GomokuConfig = GomokuConfig()
    logging: LoggingConfig = LoggingConfig()
    game_log: GameLogConfig = GameLogConfig()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.

    Raises:
        ValueError: If the file does not hold a valid configuration.
        yaml.YAMLError: If the file is not valid YAML.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    if not data:
        return Config()
    if not isinstance(data, dict):
        raise ValueError(f"{config_path}: top level must be a mapping of sections")
    return Config(**data)
