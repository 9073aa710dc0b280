"""Retry on optimistic-concurrency conflicts.

Read-modify-write updates against a versioned resource API fail with a
Conflict status when another writer got there first. Re-running the whole
read-modify-write action usually succeeds.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from retrier.config import get_settings
from retrier.errors import is_conflict

from .policy import Retrier

T = TypeVar("T")


def on_conflict(action: Callable[[], T], *, max_tries: int | None = None) -> T:
    """Run action, retrying only while it fails with a conflict.

    Any other error is raised after the attempt that produced it.

    Args:
        action: Zero-argument callable, typically a full read-modify-write cycle
        max_tries: Attempt bound; defaults to settings.retry.conflict_max_tries (5)

    Example:
        >>> def bump() -> None:
        ...     obj = api.get("cfg")
        ...     obj.replicas += 1
        ...     api.update(obj)
        >>> on_conflict(bump)
    """
    tries = max_tries if max_tries is not None else get_settings().retry.conflict_max_tries
    return Retrier(max_tries=tries, predicate=is_conflict).run(action)
