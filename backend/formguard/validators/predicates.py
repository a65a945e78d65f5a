"""Standalone predicates and string helpers, usable without any schema.

Every function here is total and side-effect free: non-string input simply
fails the check instead of raising.
"""

import re
from typing import Any

from formguard.validators.patterns import (
    EMAIL_PATTERN,
    PASSWORD_PATTERN,
    PHONE_PATTERN,
    SPECIAL_CHARACTERS,
    URL_PATTERN,
    USERNAME_PATTERN,
)

MAX_PASSWORD_STRENGTH = 4

_SPECIAL_CHARACTER = re.compile(f"[{re.escape(SPECIAL_CHARACTERS)}]")

_HTML_ENTITIES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#x27;",
    "/": "&#x2F;",
}
_HTML_UNSAFE = re.compile(r"[&<>\"'/]")


def _fullmatch(pattern: re.Pattern, value: Any) -> bool:
    return isinstance(value, str) and pattern.fullmatch(value) is not None


def is_valid_email(email: Any) -> bool:
    return _fullmatch(EMAIL_PATTERN, email)


def is_valid_phone(phone: Any) -> bool:
    return _fullmatch(PHONE_PATTERN, phone)


def is_valid_url(url: Any) -> bool:
    return _fullmatch(URL_PATTERN, url)


def is_valid_username(username: Any) -> bool:
    return _fullmatch(USERNAME_PATTERN, username)


def is_valid_password(password: Any) -> bool:
    """Strict password check: 8+ chars with lower, upper, digit and symbol."""
    return _fullmatch(PASSWORD_PATTERN, password)


def get_password_strength(password: str) -> int:
    """Score a password from 0 (weakest) to 4 (strongest).

    One point each for: length >= 8, length >= 12, mixed case, a digit, and a
    symbol from SPECIAL_CHARACTERS. Five points are possible; the result is
    capped at 4.
    """
    if not isinstance(password, str):
        return 0

    strength = 0
    if len(password) >= 8:
        strength += 1
    if len(password) >= 12:
        strength += 1
    if re.search(r"[a-z]", password) and re.search(r"[A-Z]", password):
        strength += 1
    if re.search(r"[0-9]", password):
        strength += 1
    if _SPECIAL_CHARACTER.search(password):
        strength += 1

    return min(strength, MAX_PASSWORD_STRENGTH)


def sanitize_string(text: str) -> str:
    """Escape HTML-significant characters in a single pass.

    Existing entities are escaped again (``&amp;`` -> ``&amp;amp;``).
    """
    return _HTML_UNSAFE.sub(lambda match: _HTML_ENTITIES[match.group()], text)
