"""Environment-based configuration."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings

from spellscan.constants import (
    DEBOUNCE_SECONDS,
    DEFAULT_DICTIONARY_URL,
    FETCH_TIMEOUT_SECONDS,
    NEAR_EMPTY_DICTIONARY_THRESHOLD,
    WATCH_POLL_SECONDS,
)

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Reads from .env file and environment variables."""

    # Dictionary source (a local path wins over the URL)
    dictionary_url: str = DEFAULT_DICTIONARY_URL
    dictionary_path: Path | None = None
    fetch_timeout_seconds: float = FETCH_TIMEOUT_SECONDS
    near_empty_dictionary_threshold: int = NEAR_EMPTY_DICTIONARY_THRESHOLD

    # Scanning
    debounce_seconds: float = DEBOUNCE_SECONDS
    ascii_word_chars: bool = True
    watch_poll_seconds: float = WATCH_POLL_SECONDS

    # Logging
    log_level: str = "INFO"
    log_dir: Path = Path("logs")
    debug_mode: bool = False

    @field_validator(
        "debounce_seconds",
        "fetch_timeout_seconds",
        "watch_poll_seconds",
    )
    @classmethod
    def _positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("must be greater than zero")
        return v

    @field_validator("log_level")
    @classmethod
    def _validate_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(_LOG_LEVELS)}"
            )
        return level

    @property
    def dictionary_source(self) -> str:
        """Human-readable description of where words come from."""
        if self.dictionary_path is not None:
            return str(self.dictionary_path)
        return self.dictionary_url

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "",
        "extra": "ignore",
    }
