"""Error types that drive retry decisions.

Classification is by type and structured fields, never by message text:
- RetryableError: marker wrapper tagging an error as retry-eligible
- StatusError: API failure carrying a structured Status (reason + code)
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RetryableError(Exception):
    """Marks an error as eligible for another attempt.

    Wraps an existing error; the string form is the wrapped error's.

    Example:
        >>> err = RetryableError(ConnectionResetError("peer reset"))
        >>> str(err)
        'peer reset'
        >>> is_retryable_error(err)
        True
    """

    def __init__(self, err: BaseException) -> None:
        super().__init__(err)
        self.err = err

    def __str__(self) -> str:
        return str(self.err)

    def __repr__(self) -> str:
        return f"RetryableError({self.err!r})"


def is_retryable_error(err: BaseException | None) -> bool:
    """True only when err is exactly a RetryableError, whatever its message."""
    return type(err) is RetryableError


class StatusReason(StrEnum):
    """Machine-readable reasons reported in API status responses."""
    UNKNOWN = ""
    UNAUTHORIZED = "Unauthorized"
    FORBIDDEN = "Forbidden"
    NOT_FOUND = "NotFound"
    ALREADY_EXISTS = "AlreadyExists"
    CONFLICT = "Conflict"
    GONE = "Gone"
    INVALID = "Invalid"
    SERVER_TIMEOUT = "ServerTimeout"
    TIMEOUT = "Timeout"
    TOO_MANY_REQUESTS = "TooManyRequests"
    BAD_REQUEST = "BadRequest"
    METHOD_NOT_ALLOWED = "MethodNotAllowed"
    NOT_ACCEPTABLE = "NotAcceptable"
    REQUEST_ENTITY_TOO_LARGE = "RequestEntityTooLarge"
    UNSUPPORTED_MEDIA_TYPE = "UnsupportedMediaType"
    INTERNAL_ERROR = "InternalError"
    EXPIRED = "Expired"
    SERVICE_UNAVAILABLE = "ServiceUnavailable"


_KNOWN_REASONS: frozenset[str] = frozenset(r.value for r in StatusReason)


class Status(BaseModel):
    """Structured failure status returned by a resource API."""

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        extra="ignore",
        json_schema_extra={
            "title": "API Status",
            "examples": [{"reason": "Conflict", "message": "object has been modified", "code": 409}],
        },
    )

    reason: StatusReason = StatusReason.UNKNOWN
    message: str = ""
    code: Annotated[int, Field(ge=0, le=599)] = 0

    @field_validator("reason", mode="before")
    @classmethod
    def _unrecognized_as_unknown(cls, v: StatusReason | str) -> StatusReason | str:
        """Map reasons this client does not know to UNKNOWN instead of failing."""
        if isinstance(v, str) and v not in _KNOWN_REASONS:
            return StatusReason.UNKNOWN
        return v


class StatusError(Exception):
    """Exception raised for an API call that returned a failure Status."""

    def __init__(self, status: Status) -> None:
        super().__init__(status.message)
        self.status = status

    @classmethod
    def conflict(cls, message: str = "the object has been modified") -> StatusError:
        """Build the optimistic-concurrency conflict error."""
        return cls(Status(reason=StatusReason.CONFLICT, message=message, code=409))

    def __str__(self) -> str:
        return self.status.message or self.status.reason.value or "unknown status error"

    def __repr__(self) -> str:
        return f"StatusError(reason={self.status.reason.value!r}, code={self.status.code})"


def _find_status_error(err: BaseException | None) -> StatusError | None:
    """Walk wrapped errors and the explicit cause chain to the first StatusError."""
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        if isinstance(err, StatusError):
            return err
        seen.add(id(err))
        err = err.err if isinstance(err, RetryableError) else err.__cause__
    return None


def reason_for_error(err: BaseException | None) -> StatusReason:
    """Status reason of the first StatusError in the chain, UNKNOWN otherwise."""
    found = _find_status_error(err)
    return found.status.reason if found else StatusReason.UNKNOWN


def is_conflict(err: BaseException | None) -> bool:
    """True if err represents a resource version conflict.

    Matches a CONFLICT reason, or an unknown or unrecognized reason with
    HTTP code 409.
    """
    found = _find_status_error(err)
    if found is None:
        return False
    status = found.status
    if status.reason == StatusReason.CONFLICT:
        return True
    return status.reason == StatusReason.UNKNOWN and status.code == 409
