"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field


class GameConfig(BaseModel):
    """Game configuration."""

    model_config = ConfigDict(validate_assignment=True)

    hand_size: int = Field(default=7, ge=1, le=23)
    seed: int | None = None


class OpponentConfig(BaseModel):
    """Computer opponent configuration."""

    strategy: str = "first_legal"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"


class GameLogConfig(BaseModel):
    """Configuration for the JSONL game log."""

    enabled: bool = False
    output_path: str = "logs"


class Config(BaseModel):
    """Root configuration."""

    game: GameConfig = Field(default_factory=GameConfig)
    opponent: OpponentConfig = Field(default_factory=OpponentConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    game_log: GameLogConfig = Field(default_factory=GameLogConfig)


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
