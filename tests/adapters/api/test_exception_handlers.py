"""Tests for the domain error to HTTP status mapping."""

from src.adapters.api.exception_handlers import status_for
from src.domain.errors import (
    AdminAuthenticationError,
    DuplicateSubscriptionError,
    EntityNotFoundError,
    ValidationError,
)


def test_status_for_known_errors() -> None:
    assert status_for(ValidationError("bad")) == 400
    assert status_for(EntityNotFoundError("Goal", "x")) == 404
    assert status_for(DuplicateSubscriptionError("a@b.co")) == 409


def test_status_for_unmapped_error_is_server_error() -> None:
    assert status_for(AdminAuthenticationError("no")) == 500
