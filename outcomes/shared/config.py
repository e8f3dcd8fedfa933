"""Configuration management using Pydantic Settings.

Loads configuration from ``OUTCOMES_``-prefixed environment variables with validation.
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    # Logging
    log_level: str = Field(
        default="WARNING", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_captured_exceptions: bool = Field(
        default=True,
        description="Log exceptions that Ok.map converts into Err values (at DEBUG level)",
    )

    model_config = SettingsConfigDict(
        env_prefix="OUTCOMES_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LEVEL_NAMES:
            raise ValueError(f"log_level must be one of {', '.join(_LEVEL_NAMES)}, got {value!r}")
        return level

    @property
    def numeric_log_level(self) -> int:
        return getattr(logging, self.log_level)


@lru_cache
def get_settings() -> Settings:
    """Get library settings (singleton).

    Cached so the environment is read once; call ``get_settings.cache_clear()``
    to pick up changes.

    Returns:
        Library settings
    """
    return Settings()
