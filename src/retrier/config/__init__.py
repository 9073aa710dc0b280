"""Configuration management using pydantic-settings."""

from .settings import (
    DEFAULT_CONFLICT_TRIES,
    RetrierSettings,
    RetrySettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "DEFAULT_CONFLICT_TRIES",
    "RetrierSettings",
    "RetrySettings",
    "clear_settings_cache",
    "get_settings",
]
