from __future__ import annotations

import pytest

from onboarding_system.auth import session as session_module
from onboarding_system.auth.session import SessionManager
from onboarding_system.core.exceptions import InvalidTokenError, TokenExpiredError


@pytest.fixture
def clock(monkeypatch, fixed_now):
    now = {"value": fixed_now}
    monkeypatch.setattr(session_module, "now_timestamp", lambda: now["value"])
    return now


def test_start_and_require(clock):
    sessions = SessionManager()
    s = sessions.start("admin")

    assert sessions.require(s.token) == s
    assert sessions.current() == s


def test_new_login_replaces_previous_token(clock):
    sessions = SessionManager()
    first = sessions.start("admin")
    second = sessions.start("admin")

    with pytest.raises(InvalidTokenError):
        sessions.require(first.token)
    assert sessions.require(second.token) == second


def test_expired_session_is_cleared(clock):
    sessions = SessionManager(ttl_seconds=3600)
    s = sessions.start("admin")

    clock["value"] += 3600
    with pytest.raises(TokenExpiredError):
        sessions.require(s.token)
    assert sessions.current() is None


def test_current_expires_lazily(clock):
    sessions = SessionManager(ttl_seconds=10)
    sessions.start("admin")

    clock["value"] += 9
    assert sessions.current() is not None
    clock["value"] += 1
    assert sessions.current() is None


def test_end_with_other_token_keeps_session(clock):
    sessions = SessionManager()
    s = sessions.start("admin")

    assert sessions.end("admin:1:" + "x" * 30) is False
    assert sessions.end(s.token) is True
    with pytest.raises(InvalidTokenError):
        sessions.require(s.token)


@pytest.mark.parametrize("token", [None, "", "garbage"])
def test_require_without_valid_token(token):
    with pytest.raises(InvalidTokenError):
        SessionManager().require(token)


@pytest.mark.parametrize("token", [None, ""])
def test_end_without_token_keeps_session(clock, token):
    sessions = SessionManager()
    s = sessions.start("admin")

    assert sessions.end(token) is False
    assert sessions.require(s.token) == s
