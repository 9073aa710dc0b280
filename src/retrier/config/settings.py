"""Environment-based configuration using pydantic-settings.

Example:
    >>> from retrier.config import get_settings
    >>> get_settings().retry.conflict_max_tries
    5

    # Or with environment variables:
    # RETRIER_RETRY_CONFLICT_MAX_TRIES=10
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CONFLICT_TRIES = 5


class RetrySettings(BaseSettings):
    """Default retry configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RETRIER_RETRY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    conflict_max_tries: PositiveInt = Field(
        default=DEFAULT_CONFLICT_TRIES,
        description="Attempts made by on_conflict before giving up",
    )


class RetrierSettings(BaseSettings):
    """Root settings, loaded from RETRIER_* environment variables and .env."""

    model_config = SettingsConfigDict(
        env_prefix="RETRIER_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    retry: RetrySettings = Field(default_factory=RetrySettings)


@lru_cache(maxsize=1)
def get_settings() -> RetrierSettings:
    """Get the global settings instance (cached)."""
    return RetrierSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next get_settings() rereads the environment."""
    get_settings.cache_clear()
