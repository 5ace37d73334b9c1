"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field


class GameConfig(BaseModel):
    """Game configuration."""

    # Hand size, which is also the size of the open pile
    card_slots: int = Field(default=3, ge=1)
    seed: int | None = None


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    show_hands: bool = False


class GameLogConfig(BaseModel):
    """JSONL game log configuration."""

    enabled: bool = False
    output_path: str = "game_log.jsonl"


class Config(BaseModel):
    """Root configuration."""

    game: GameConfig = GameConfig()
    logging: LoggingConfig = LoggingConfig()
    game_log: GameLogConfig = GameLogConfig()


def load_config(path: Path | str | None = None) -> Config:
    """Load game, logging and game_log settings from a YAML file.

    Sections missing from the file keep their defaults. A missing or empty
    file gives the default config.

    Args:
        path: Path to config file, or None for defaults.

    Raises:
        pydantic.ValidationError: A setting has an invalid value.
    """
    if path is None or not Path(path).exists():
        return Config()

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return Config.model_validate(data)
