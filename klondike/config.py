"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from klondike.logging.game_logger import GameLogConfig


class GameConfig(BaseModel):
    """Game configuration."""

    seed: int | None = None


class RulesConfig(BaseModel):
    """Rules configuration."""

    draw_count: int = Field(default=3, ge=1, le=3)


class DisplayConfig(BaseModel):
    """Console display configuration."""

    color: bool = True
    clear_screen: bool = False
    waste_visible: int = Field(default=3, ge=1)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"


class Config(BaseModel):
    """Root configuration."""

    game: GameConfig = GameConfig()
    rules: RulesConfig = RulesConfig()
    display: DisplayConfig = DisplayConfig()
    logging: LoggingConfig = LoggingConfig()
    game_log: GameLogConfig = GameLogConfig()


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

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
