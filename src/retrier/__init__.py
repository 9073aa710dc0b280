"""Retrier - retry primitives for transient failures.

Run an action until it succeeds, its error is judged not worth retrying, or
an attempt-count or time budget runs out. The last error is always the
action's own exception, never a synthesized one.

Quick Start:
    >>> from retrier import on_error, on_error_with_limit, on_conflict, always_retry
    >>>
    >>> on_error(3, always_retry, flaky_call)            # at most 3 attempts
    >>> on_error_with_limit(2.0, always_retry, poll)     # keep trying for ~2s
    >>> on_conflict(read_modify_write)                   # retry version conflicts

Marker errors:
    >>> from retrier import RetryableError, is_retryable_error
    >>>
    >>> def call() -> None:
    ...     try:
    ...         client.send()
    ...     except ConnectionError as e:
    ...         raise RetryableError(e) from e
    >>> on_error(5, is_retryable_error, call)
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import RetrierSettings, RetrySettings, clear_settings_cache, get_settings
from .errors import (
    RetryableError,
    Status,
    StatusError,
    StatusReason,
    is_conflict,
    is_retryable_error,
    reason_for_error,
)
from .retry import Retrier, RetryPredicate, always_retry, on_conflict, on_error, on_error_with_limit

__all__ = [
    "__version__",
    # Retry
    "Retrier", "RetryPredicate", "always_retry", "on_error", "on_error_with_limit", "on_conflict",
    # Errors
    "RetryableError", "is_retryable_error",
    "Status", "StatusError", "StatusReason", "is_conflict", "reason_for_error",
    # Config
    "RetrierSettings", "RetrySettings", "get_settings", "clear_settings_cache",
]
