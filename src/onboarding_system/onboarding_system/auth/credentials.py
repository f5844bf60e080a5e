"""Handle/password generation and password hashing.

Passwords are hashed with Werkzeug's PBKDF2 helper; the resulting string embeds
the method, iteration count and salt, so verification needs nothing else.
"""
from __future__ import annotations

import secrets
import string

from werkzeug.security import check_password_hash, generate_password_hash

from ..core.constants import PASSWORD_HASH_METHOD, PASSWORD_SALT_LENGTH
from ..core.exceptions import ValidationError

LOWER_CASE = string.ascii_lowercase
UPPER_CASE = string.ascii_uppercase
NUMBERS = string.digits
SPECIAL_CHARACTERS = "!@#$%&*()_-+=,.:;?/|"

PASSWORD_FIRST_ALPHABET = LOWER_CASE + SPECIAL_CHARACTERS + NUMBERS
PASSWORD_MIDDLE_ALPHABET = LOWER_CASE + UPPER_CASE + NUMBERS + SPECIAL_CHARACTERS
PASSWORD_LAST_ALPHABET = LOWER_CASE + UPPER_CASE + NUMBERS
PASSWORD_MIDDLE_LENGTH = 7

_HASH_PREFIXES = ("pbkdf2:", "scrypt:")


def _draw(alphabet: str, size: int) -> str:
    return "".join(secrets.choice(alphabet) for _ in range(size))


def generate_handle(first_name: str, last_name: str) -> str:
    """First initial plus last name, lowercased: ("John", "Doe") -> "jdoe"."""
    first_name = (first_name or "").strip()
    last_name = "".join((last_name or "").split())
    if not first_name:
        raise ValidationError("First name is required to generate a handle")
    if not last_name:
        raise ValidationError("Last name is required to generate a handle")
    return first_name.lower()[0] + last_name.lower()


def generate_random_password() -> str:
    """Nine characters: one opener, seven mixed, one alphanumeric closer."""
    return (
        _draw(PASSWORD_FIRST_ALPHABET, 1)
        + _draw(PASSWORD_MIDDLE_ALPHABET, PASSWORD_MIDDLE_LENGTH)
        + _draw(PASSWORD_LAST_ALPHABET, 1)
    )


def hash_password(password: str) -> str:
    return generate_password_hash(password, method=PASSWORD_HASH_METHOD, salt_length=PASSWORD_SALT_LENGTH)


def verify_hashed_password(password: str, hashed_password: str) -> bool:
    if not password or not hashed_password:
        return False
    try:
        return check_password_hash(hashed_password, password)
    except (ValueError, TypeError):
        # e.g. an unknown method or a corrupted digest
        return False


def is_password_hash(value: str | None) -> bool:
    return bool(value) and value.startswith(_HASH_PREFIXES)
