"""
Runtime settings for the snake game, read from the environment (and a
.env file if present).
"""

import logging
import os
from dataclasses import dataclass, replace
from typing import Optional

from dotenv import load_dotenv

from domain.constants import GRID_SIZE, TICK_INTERVAL_MS

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


@dataclass(frozen=True)
class Settings:
    grid_size: int = GRID_SIZE
    tick_ms: int = TICK_INTERVAL_MS
    seed: Optional[int] = None
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    @property
    def tick_interval(self) -> float:
        return self.tick_ms / 1000.0

    def validate(self) -> "Settings":
        if self.grid_size < 2:
            raise ValueError(f"Grid size must be at least 2, got {self.grid_size}.")
        if self.tick_ms <= 0:
            raise ValueError(f"Tick interval must be positive, got {self.tick_ms}ms.")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level '{self.log_level}'.")
        return self

    def override(self, **changes) -> "Settings":
        """Return a copy with every non-None change applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None}).validate()


def _int_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'.") from None


def load_settings() -> Settings:
    """Build settings from SNAKE_* environment variables."""
    load_dotenv()
    return Settings(
        grid_size=_int_env("SNAKE_GRID_SIZE", GRID_SIZE),
        tick_ms=_int_env("SNAKE_TICK_MS", TICK_INTERVAL_MS),
        seed=_int_env("SNAKE_SEED", None),
        log_level=os.getenv("SNAKE_LOG_LEVEL", "WARNING").strip() or "WARNING",
        log_file=os.getenv("SNAKE_LOG_FILE") or None,
    ).validate()


def configure_logging(settings: Settings) -> None:
    """
    Send log records to the configured file. Without a log file nothing is
    emitted, since curses owns the terminal while the game runs.
    """
    if settings.log_file:
        logging.basicConfig(
            level=settings.log_level.upper(),
            format=LOG_FORMAT,
            filename=settings.log_file,
        )
    else:
        logging.getLogger().addHandler(logging.NullHandler())
