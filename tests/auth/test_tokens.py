from __future__ import annotations

import pytest

from onboarding_system.auth.tokens import generate_session_token, parse_session_token, validate_token_expiration
from onboarding_system.core.exceptions import InvalidTokenError, ValidationError


def test_token_format(fixed_now):
    token = generate_session_token("admin", now=fixed_now)

    identifier, issued_at, suffix = token.split(":")
    assert identifier == "admin"
    assert int(issued_at) == fixed_now
    assert len(suffix) == 30 and suffix.isalnum()
    assert parse_session_token(token).issued_at == fixed_now


@pytest.mark.parametrize("identifier", ["", "ad:min"])
def test_token_rejects_bad_identifier(identifier):
    with pytest.raises(ValidationError):
        generate_session_token(identifier)


def test_fresh_token_is_valid():
    assert validate_token_expiration(generate_session_token("admin")) is True


def test_token_older_than_an_hour_is_expired(fixed_now):
    token = generate_session_token("admin", now=fixed_now - 3601)

    assert validate_token_expiration(token, now=fixed_now) is False


def test_token_expiry_boundary(fixed_now):
    token = generate_session_token("admin", now=fixed_now)

    assert validate_token_expiration(token, now=fixed_now + 3599) is True
    assert validate_token_expiration(token, now=fixed_now + 3600) is False


@pytest.mark.parametrize(
    "token",
    ["", "admin", "admin:notanumber:" + "a" * 30, "admin:123:short", "admin:123:" + "!" * 30, ":123:" + "a" * 30],
)
def test_malformed_token_raises(token):
    with pytest.raises(InvalidTokenError):
        validate_token_expiration(token)
