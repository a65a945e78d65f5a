"""Form schemas — the named object schemas used by the application's forms.

All schemas are module-level constants built once at import and never mutated.
Field names match the keys the form components submit.
"""

from typing import Literal, NotRequired, TypedDict

from formguard.validators import rules as r
from formguard.validators.patterns import (
    EMAIL_PATTERN,
    MESSAGES,
    PASSWORD_PATTERN,
    PERSON_NAME_PATTERN,
    PHONE_PATTERN,
    STRICT_EMAIL_PATTERN,
    URL_PATTERN,
    USERNAME_PATTERN,
)
from formguard.validators.schema import FieldSchema, ObjectSchema, Refinement, field

SORT_OPTIONS = ("relevance", "date", "popularity")

# ──────────────────────────────────────────────────────────────────────
# REUSABLE FIELDS
# ──────────────────────────────────────────────────────────────────────

email_field = field(
    r.required(),
    r.matches(EMAIL_PATTERN, MESSAGES["email"]),
    r.matches(STRICT_EMAIL_PATTERN, MESSAGES["email"]),
)

password_field = field(r.min_length(8), r.matches(PASSWORD_PATTERN, MESSAGES["password"]))

username_field = field(
    r.min_length(3),
    r.max_length(20),
    r.matches(USERNAME_PATTERN, MESSAGES["username"]),
)

phone_field = field(r.matches(PHONE_PATTERN, MESSAGES["phone"]), optional=True, allow_empty=True)

url_field = field(r.matches(URL_PATTERN, MESSAGES["url"]), optional=True, allow_empty=True)

required_text = field(r.required())


def _person_name(label: str) -> FieldSchema:
    return field(
        r.required(),
        r.min_length(2),
        r.max_length(50),
        r.matches(PERSON_NAME_PATTERN, f"{label} must contain only letters"),
    )


def _bounded_text(low: int, high: int) -> FieldSchema:
    return field(r.required(), r.min_length(low), r.max_length(high))


def _passwords_match(password_key: str):
    return lambda data: data.get(password_key) == data.get("confirmPassword")


# ──────────────────────────────────────────────────────────────────────
# FORM SCHEMAS
# ──────────────────────────────────────────────────────────────────────

user_register_schema = ObjectSchema(
    "user_register",
    {
        "firstName": _person_name("First name"),
        "lastName": _person_name("Last name"),
        "username": username_field,
        "email": email_field,
        "password": password_field,
        "confirmPassword": required_text,
        "phoneNumber": phone_field,
        "acceptTerms": field(r.custom(lambda value: value is True, MESSAGES["terms"]), type="boolean"),
    },
    refinements=[
        Refinement(
            predicate=_passwords_match("password"),
            message=MESSAGES["password_match"],
            path="confirmPassword",
        ),
    ],
)

user_login_schema = ObjectSchema(
    "user_login",
    {
        "email": email_field,
        "password": required_text,
        "rememberMe": field(type="boolean", optional=True),
    },
)

contact_form_schema = ObjectSchema(
    "contact_form",
    {
        "name": _bounded_text(2, 100),
        "email": email_field,
        "subject": _bounded_text(5, 200),
        "message": _bounded_text(10, 2000),
    },
)

user_profile_update_schema = ObjectSchema(
    "user_profile_update",
    {
        "firstName": field(r.min_length(2), r.max_length(50), optional=True),
        "lastName": field(r.min_length(2), r.max_length(50), optional=True),
        "phoneNumber": phone_field,
        "bio": field(r.max_length(500), optional=True, allow_empty=True),
        "website": url_field,
        "location": field(r.max_length(100), optional=True, allow_empty=True),
    },
)

password_change_schema = ObjectSchema(
    "password_change",
    {
        "currentPassword": required_text,
        "newPassword": password_field,
        "confirmPassword": required_text,
    },
    refinements=[
        Refinement(
            predicate=_passwords_match("newPassword"),
            message=MESSAGES["password_match"],
            path="confirmPassword",
        ),
        Refinement(
            predicate=lambda data: data.get("currentPassword") != data.get("newPassword"),
            message=MESSAGES["password_unchanged"],
            path="newPassword",
        ),
    ],
)

search_query_schema = ObjectSchema(
    "search_query",
    {
        "query": _bounded_text(2, 100),
        "category": field(optional=True),
        "sortBy": field(r.one_of(SORT_OPTIONS), optional=True),
        "page": field(r.min_value(1), type="number", optional=True),
        "limit": field(r.min_value(1), r.max_value(100), type="number", optional=True),
    },
)

FORM_SCHEMAS: dict[str, ObjectSchema] = {
    "register": user_register_schema,
    "login": user_login_schema,
    "contact": contact_form_schema,
    "profile_update": user_profile_update_schema,
    "password_change": password_change_schema,
    "search": search_query_schema,
}

# ──────────────────────────────────────────────────────────────────────
# VALIDATED PAYLOAD TYPES
# ──────────────────────────────────────────────────────────────────────


class UserRegisterForm(TypedDict):
    firstName: str
    lastName: str
    username: str
    email: str
    password: str
    confirmPassword: str
    phoneNumber: NotRequired[str]
    acceptTerms: bool


class UserLoginForm(TypedDict):
    email: str
    password: str
    rememberMe: NotRequired[bool]


class ContactForm(TypedDict):
    name: str
    email: str
    subject: str
    message: str


class UserProfileUpdateForm(TypedDict, total=False):
    firstName: str
    lastName: str
    phoneNumber: str
    bio: str
    website: str
    location: str


class PasswordChangeForm(TypedDict):
    currentPassword: str
    newPassword: str
    confirmPassword: str


class SearchQuery(TypedDict):
    query: str
    category: NotRequired[str]
    sortBy: NotRequired[Literal["relevance", "date", "popularity"]]
    page: NotRequired[float]
    limit: NotRequired[float]
