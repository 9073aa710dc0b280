"""Error types and classifiers for retry decisions.

- RetryableError/is_retryable_error: marker wrapper recognized by type
- Status/StatusError/StatusReason: structured API failures
- is_conflict/reason_for_error: status classification helpers
"""

from .errors import (
    RetryableError,
    Status,
    StatusError,
    StatusReason,
    is_conflict,
    is_retryable_error,
    reason_for_error,
)

__all__ = [
    # Marker
    "RetryableError", "is_retryable_error",
    # API status
    "Status", "StatusError", "StatusReason",
    # Classification
    "is_conflict", "reason_for_error",
]
