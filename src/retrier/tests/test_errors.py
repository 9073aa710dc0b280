"""Tests for marker errors and API status classification."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from retrier.errors import (
    RetryableError,
    Status,
    StatusError,
    StatusReason,
    is_conflict,
    is_retryable_error,
    reason_for_error,
)


def test_retryable_error_message_delegates() -> None:
    inner = RuntimeError("assert.AnError general error for testing")
    err = RetryableError(inner)

    assert str(err) == str(inner)
    assert err.err is inner
    assert "RuntimeError" in repr(err)


def test_is_retryable_error() -> None:
    """Type identity drives the classification, not message text."""
    inner = RuntimeError("transient")

    assert not is_retryable_error(None)
    assert not is_retryable_error(inner)
    assert not is_retryable_error(RuntimeError(str(RetryableError(inner))))
    assert is_retryable_error(RetryableError(inner))


def test_is_retryable_error_exact_type_only() -> None:
    class NetworkRetryableError(RetryableError):
        pass

    assert not is_retryable_error(NetworkRetryableError(OSError("reset")))


def test_status_error_message() -> None:
    err = StatusError(Status(reason=StatusReason.NOT_FOUND, message="configmaps \"cfg\" not found", code=404))
    assert str(err) == 'configmaps "cfg" not found'
    assert str(StatusError(Status(reason=StatusReason.CONFLICT))) == "Conflict"
    assert str(StatusError(Status())) == "unknown status error"


def test_status_accepts_reason_strings() -> None:
    status = Status.model_validate({"reason": "Conflict", "code": 409, "kind": "Status"})
    assert status.reason is StatusReason.CONFLICT


@pytest.mark.parametrize(
    ("reason", "expected"),
    [
        ("Expired", StatusReason.EXPIRED),
        ("MethodNotAllowed", StatusReason.METHOD_NOT_ALLOWED),
        ("NotAcceptable", StatusReason.NOT_ACCEPTABLE),
        ("RequestEntityTooLarge", StatusReason.REQUEST_ENTITY_TOO_LARGE),
        ("UnsupportedMediaType", StatusReason.UNSUPPORTED_MEDIA_TYPE),
        ("SomeFutureReason", StatusReason.UNKNOWN),
    ],
)
def test_status_reason_parsing(reason: str, expected: StatusReason) -> None:
    assert Status.model_validate({"reason": reason}).reason is expected


def test_status_rejects_invalid_code() -> None:
    with pytest.raises(ValidationError):
        Status(code=1000)


def test_is_conflict() -> None:
    assert is_conflict(StatusError.conflict())
    assert is_conflict(StatusError(Status(reason=StatusReason.CONFLICT)))
    assert is_conflict(StatusError(Status(code=409)))
    assert is_conflict(StatusError(Status.model_validate({"reason": "SomeFutureReason", "code": 409})))


def test_is_conflict_rejects_other_errors() -> None:
    assert not is_conflict(None)
    assert not is_conflict(RuntimeError("Conflict"))
    assert not is_conflict(StatusError(Status(reason=StatusReason.ALREADY_EXISTS, code=409)))
    assert not is_conflict(StatusError(Status(reason=StatusReason.NOT_FOUND, code=404)))


def test_conflict_found_through_cause_chain() -> None:
    conflict = StatusError.conflict()
    try:
        try:
            raise conflict
        except StatusError as e:
            raise RetryableError(e) from e
    except RetryableError as wrapped:
        assert is_conflict(wrapped)
        assert reason_for_error(wrapped) is StatusReason.CONFLICT


def test_conflict_found_inside_marker_without_cause() -> None:
    wrapped = RetryableError(StatusError.conflict())
    assert wrapped.__cause__ is None
    assert is_conflict(wrapped)
    assert reason_for_error(wrapped) is StatusReason.CONFLICT


def test_reason_for_error_without_status() -> None:
    assert reason_for_error(None) is StatusReason.UNKNOWN
    assert reason_for_error(ValueError("x")) is StatusReason.UNKNOWN


def test_reason_for_error_handles_cause_cycle() -> None:
    a, b = ValueError("a"), ValueError("b")
    a.__cause__, b.__cause__ = b, a
    assert reason_for_error(a) is StatusReason.UNKNOWN
