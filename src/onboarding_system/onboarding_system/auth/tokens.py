from __future__ import annotations

import secrets
import string
from typing import NamedTuple, Optional

from ..common.datetime_utils import now_timestamp
from ..core.constants import SESSION_TOKEN_DELIMITER, SESSION_TOKEN_RANDOM_LENGTH, SESSION_TTL_SECONDS
from ..core.exceptions import InvalidTokenError, ValidationError

_TOKEN_ALPHABET = string.ascii_letters + string.digits


class TokenParts(NamedTuple):
    identifier: str
    issued_at: int
    suffix: str


def generate_session_token(identifier: str, *, now: Optional[int] = None) -> str:
    """Return `identifier:unix_timestamp:random30`."""
    if not identifier:
        raise ValidationError("Session identifier is required")
    if SESSION_TOKEN_DELIMITER in identifier:
        raise ValidationError(f"Session identifier must not contain {SESSION_TOKEN_DELIMITER!r}")

    issued_at = now_timestamp() if now is None else int(now)
    suffix = "".join(secrets.choice(_TOKEN_ALPHABET) for _ in range(SESSION_TOKEN_RANDOM_LENGTH))
    return SESSION_TOKEN_DELIMITER.join((identifier, str(issued_at), suffix))


def parse_session_token(token: str) -> TokenParts:
    if not isinstance(token, str) or not token:
        raise InvalidTokenError("Missing session token")

    parts = token.split(SESSION_TOKEN_DELIMITER)
    if len(parts) != 3:
        raise InvalidTokenError("Malformed session token")

    identifier, issued_s, suffix = parts
    if not identifier or not issued_s.isdigit():
        raise InvalidTokenError("Malformed session token")
    if len(suffix) != SESSION_TOKEN_RANDOM_LENGTH or not all(c in _TOKEN_ALPHABET for c in suffix):
        raise InvalidTokenError("Malformed session token")

    return TokenParts(identifier=identifier, issued_at=int(issued_s), suffix=suffix)


def validate_token_expiration(
    token: str,
    *,
    now: Optional[int] = None,
    ttl_seconds: int = SESSION_TTL_SECONDS,
) -> bool:
    """True while the token is younger than `ttl_seconds`; not renewable."""
    issued_at = parse_session_token(token).issued_at
    current = now_timestamp() if now is None else int(now)
    return current - issued_at < ttl_seconds
