"""Retry predicates: decide from an error whether another attempt is allowed."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class RetryPredicate(Protocol):
    """Protocol for retry eligibility checks.

    Implementations must return False for None (nothing to retry) and
    should not raise; an exception from a predicate ends the retry loop.
    """

    def __call__(self, err: BaseException | None, /) -> bool: ...


def always_retry(err: BaseException | None) -> bool:
    """Retry every error. Leaves termination to the budget."""
    return err is not None
