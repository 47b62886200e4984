"""Tests for the Streamlit admin gate."""

import pytest

from src.adapters.interface.streamlit.admin_session import (
    SESSION_KEY,
    AdminSession,
    get_admin_session,
)
from src.domain.errors import AdminAuthenticationError


def test_login_with_matching_password() -> None:
    session = AdminSession(failed_attempts=2)

    assert session.login("s3cret", "s3cret") is True
    assert session.authenticated is True
    assert session.failed_attempts == 0


def test_login_rejects_wrong_or_missing_passwords() -> None:
    session = AdminSession()

    assert session.login("guess", "s3cret") is False
    assert session.login("", "s3cret") is False
    assert session.login("anything", None) is False
    assert session.authenticated is False
    assert session.failed_attempts == 3


def test_require_and_logout() -> None:
    session = AdminSession()
    with pytest.raises(AdminAuthenticationError):
        session.require()

    session.login("pw", "pw")
    session.require()
    session.logout()

    with pytest.raises(AdminAuthenticationError):
        session.require()


def test_get_admin_session_reuses_stored_session() -> None:
    state: dict = {}

    first = get_admin_session(state)
    first.login("pw", "pw")
    second = get_admin_session(state)

    assert second is first
    assert state[SESSION_KEY].authenticated is True


def test_get_admin_session_replaces_foreign_values() -> None:
    state = {SESSION_KEY: "stale"}

    assert isinstance(get_admin_session(state), AdminSession)
