"""Unit tests for domain exceptions."""

import pytest

from parish.domain.exceptions import (
    NotFound,
    ParishError,
    PermissionDenied,
    ValidationError,
)


def test_permission_denied_inherits_parish_error() -> None:
    """PermissionDenied is a subclass of ParishError."""
    assert issubclass(PermissionDenied, ParishError)


def test_not_found_inherits_parish_error() -> None:
    assert issubclass(NotFound, ParishError)


def test_validation_error_inherits_parish_error() -> None:
    assert issubclass(ValidationError, ParishError)


def test_raise_not_found_catchable_as_parish_error() -> None:
    """NotFound can be caught as ParishError."""
    with pytest.raises(ParishError):
        raise NotFound("Event", "123")


def test_validation_error_carries_field() -> None:
    """ValidationError keeps the failing field and message."""
    err = ValidationError("recurringDays", "duplicate weekday 1")
    assert err.field == "recurringDays"
    assert err.message == "duplicate weekday 1"
    assert str(err) == "recurringDays: duplicate weekday 1"


def test_exception_message_preserved() -> None:
    msg = "Finance Manager does not have access to events"
    with pytest.raises(PermissionDenied, match=msg):
        raise PermissionDenied(msg)
