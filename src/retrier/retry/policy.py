"""Budgeted retry loop.

A Retrier repeatedly invokes a zero-argument action until it succeeds, the
predicate declines the failure, or the budget (attempt count or elapsed time)
is spent. Failures surface as the last action's own exception, re-raised
unmodified, so callers can still inspect type and cause chain.

The budget is checked only between attempts. A running action is never
interrupted, so a time-bounded loop may overrun its limit by one attempt.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from datetime import timedelta
from functools import wraps
from typing import ParamSpec, Self, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .predicate import RetryPredicate, always_retry

logger = logging.getLogger("retrier.retry")

P = ParamSpec("P")
T = TypeVar("T")


class Retrier(BaseModel):
    """Retry configuration with exactly one budget.

    Attributes:
        max_tries: Maximum number of attempts; values <= 0 mean one attempt
        limit: Maximum elapsed time before giving up; checked between attempts
        predicate: Decides whether a failure may be retried
        on_retry: Optional hook called with (failed attempt number, error)
            before each re-attempt

    Example:
        >>> retrier = Retrier(max_tries=3, predicate=is_retryable_error)
        >>> retrier.run(lambda: client.update(obj))

        >>> @Retrier(limit=timedelta(seconds=5)).wrap
        ... def fetch(url: str) -> bytes: ...
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
        extra="forbid",
        revalidate_instances="never",
    )

    max_tries: int | None = None
    limit: timedelta | None = None
    predicate: RetryPredicate = Field(default=always_retry, repr=False)
    on_retry: Callable[[int, Exception], None] | None = Field(default=None, exclude=True, repr=False)

    @model_validator(mode="after")
    def _one_budget(self) -> Self:
        if (self.max_tries is None) == (self.limit is None):
            raise ValueError("exactly one of max_tries or limit must be set")
        return self

    def _exhausted(self, attempts: int, started: float) -> bool:
        """Whether the budget forbids another attempt."""
        if self.limit is not None:
            return time.monotonic() - started >= self.limit.total_seconds()
        return attempts >= (self.max_tries or 0)

    def run(self, action: Callable[[], T]) -> T:
        """Invoke action until it succeeds or retrying stops.

        Returns the action's result. Re-raises the last exception when the
        predicate rejects it or the budget is exhausted.
        """
        started = time.monotonic()
        attempts = 0
        while True:
            attempts += 1
            try:
                return action()
            except Exception as exc:
                if not self.predicate(exc):
                    logger.debug(f"Attempt {attempts} failed with non-retryable {type(exc).__name__}: {exc}")
                    raise
                if self._exhausted(attempts, started):
                    logger.debug(f"Retry budget exhausted after {attempts} attempt(s): {exc}")
                    raise
                logger.debug(f"Attempt {attempts} failed, retrying ({type(exc).__name__}: {exc})")
                if self.on_retry:
                    self.on_retry(attempts, exc)

    def wrap(self, fn: Callable[P, T]) -> Callable[P, T]:
        """Decorate fn so every call runs through this retrier."""
        @wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            return self.run(lambda: fn(*args, **kwargs))
        return wrapper


def on_error(
    max_tries: int,
    predicate: RetryPredicate,
    action: Callable[[], T],
) -> T:
    """Run action up to max_tries times while predicate accepts its errors.

    No delay is inserted between attempts. max_tries <= 0 means one attempt.
    """
    return Retrier(max_tries=max_tries, predicate=predicate).run(action)


def on_error_with_limit(
    limit: timedelta | float,
    predicate: RetryPredicate,
    action: Callable[[], T],
) -> T:
    """Run action until limit (timedelta or seconds) has elapsed.

    The limit is checked before each new attempt. A limit <= 0 still allows
    one attempt.
    """
    return Retrier(limit=limit, predicate=predicate).run(action)
