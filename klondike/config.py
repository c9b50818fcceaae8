"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel


class GameConfig(BaseModel):
    """Game configuration."""

    seed: int | None = None  # None picks a random deck key
    num_games: int = 1
    max_redeals: int | None = None  # None allows redeals while they help


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    show_board: bool = False


class Config(BaseModel):
    """Root configuration."""

    game: GameConfig = GameConfig()
    logging: LoggingConfig = LoggingConfig()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.

    Raises:
        ValueError: If the file does not contain a YAML mapping.
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
        raise ValueError(
            f"Config file {config_path} must contain a mapping, got {type(data).__name__}"
        )

    return Config(**data)
