"""Pattern & message catalog — the regexes and error texts every rule draws from.

Messages are pure functions of their parameters: the same rule kind with the
same bound always produces the same text, so callers (and tests) can compare
error strings exactly.
"""

import re
from typing import Any, Callable, Iterable

# ──────────────────────────────────────────────────────────────────────
# PATTERNS (always applied with fullmatch)
# ──────────────────────────────────────────────────────────────────────

SPECIAL_CHARACTERS = "@$!%*?&"

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")

# Stricter address shape: no leading, trailing-local or doubled dots; domain
# labels start alphanumeric.
STRICT_EMAIL_PATTERN = re.compile(
    r"^(?!\.)(?!.*\.\.)([A-Z0-9_'+\-\.]*)[A-Z0-9_+-]@([A-Z0-9][A-Z0-9\-]*\.)+[A-Z]{2,}$",
    re.IGNORECASE | re.ASCII,
)

PHONE_PATTERN = re.compile(r"^\+?[1-9]\d{1,14}$", re.ASCII)
URL_PATTERN = re.compile(
    r"^https?://(www\.)?[-a-zA-Z0-9@:%._+~#=]{1,256}\.[a-zA-Z0-9()]{1,6}\b"
    r"([-a-zA-Z0-9()@:%_+.~#?&/=]*)$",
    re.ASCII,
)
USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9_-]{3,20}$")
PASSWORD_PATTERN = re.compile(
    r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])[A-Za-z\d@$!%*?&]{8,}$",
    re.ASCII,
)
PERSON_NAME_PATTERN = re.compile(r"^[a-zA-Z\s'-]+$")

ALPHANUMERIC_PATTERN = re.compile(r"^[a-zA-Z0-9]+$")
NUMERIC_PATTERN = re.compile(r"^[0-9]+$")
ALPHA_PATTERN = re.compile(r"^[a-zA-Z]+$")

# ──────────────────────────────────────────────────────────────────────
# STATIC MESSAGES
# ──────────────────────────────────────────────────────────────────────

MESSAGES: dict[str, str] = {
    "required": "This field is required",
    "email": "Please enter a valid email address",
    "phone": "Please enter a valid phone number",
    "url": "Please enter a valid URL",
    "username": (
        "Username must be 3-20 characters and contain only letters, numbers, "
        "hyphens, and underscores"
    ),
    "password": (
        "Password must be at least 8 characters and contain uppercase, "
        "lowercase, number, and special character"
    ),
    "password_match": "Passwords do not match",
    "password_unchanged": "New password must be different from current password",
    "alphanumeric": "Must contain only letters and numbers",
    "numeric": "Must contain only numbers",
    "alpha": "Must contain only letters",
    "terms": "You must accept the terms and conditions",
    "invalid": "Invalid",
    "invalid_input": "Invalid input",
}

# ──────────────────────────────────────────────────────────────────────
# MESSAGE GENERATORS
# ──────────────────────────────────────────────────────────────────────


def min_length(bound: int) -> str:
    return f"Must be at least {bound} characters"


def max_length(bound: int) -> str:
    return f"Must be at most {bound} characters"


def min_value(bound: float) -> str:
    return f"Must be at least {bound}"


def max_value(bound: float) -> str:
    return f"Must be at most {bound}"


def one_of(options: Iterable[Any]) -> str:
    return f"Must be one of: {', '.join(str(o) for o in options)}"


def invalid_type(expected: str, received: str) -> str:
    return f"Expected {expected}, received {received}"


# Keyed by RuleKind value; kinds absent here fall back to a static message.
MESSAGE_GENERATORS: dict[str, Callable[[Any], str]] = {
    "min_length": min_length,
    "max_length": max_length,
    "min": min_value,
    "max": max_value,
    "enum": one_of,
}

DEFAULT_MESSAGES: dict[str, str] = {
    "required": MESSAGES["required"],
    "pattern": MESSAGES["invalid"],
    "custom": MESSAGES["invalid_input"],
}


def message_for(kind: str, param: Any = None) -> str:
    """Resolve the catalog message for a rule kind and its parameter."""
    generator = MESSAGE_GENERATORS.get(kind)
    if generator is not None:
        return generator(param)
    return DEFAULT_MESSAGES.get(kind, MESSAGES["invalid_input"])
