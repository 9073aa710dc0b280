"""Retry loops bounded by attempt count or elapsed time.

Example:
    >>> from retrier.retry import on_error, always_retry
    >>> from retrier.errors import is_retryable_error
    >>>
    >>> on_error(3, always_retry, flaky_call)
    >>> on_error_with_limit(2.0, is_retryable_error, poll_status)
    >>> on_conflict(update_deployment)
"""

from .conflict import on_conflict
from .policy import Retrier, on_error, on_error_with_limit
from .predicate import RetryPredicate, always_retry

__all__ = [
    # Predicates
    "RetryPredicate",
    "always_retry",
    # Loops
    "Retrier",
    "on_error",
    "on_error_with_limit",
    "on_conflict",
]
