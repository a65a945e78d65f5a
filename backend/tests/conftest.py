"""Shared fixtures for formguard tests."""

from __future__ import annotations

import os
from typing import Any

import pytest

from formguard.config import get_settings
from formguard.logging_config import configure_logging

# Debug events (schema failures, file rejections) are asserted in tests.
os.environ.setdefault("FORMGUARD_LOG_LEVEL", "debug")
configure_logging()


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def registration() -> dict[str, Any]:
    return {
        "firstName": "John",
        "lastName": "Doe",
        "username": "johndoe",
        "email": "john.doe@example.com",
        "password": "Abcdef1!",
        "confirmPassword": "Abcdef1!",
        "phoneNumber": "+1234567890",
        "acceptTerms": True,
    }


@pytest.fixture
def password_change() -> dict[str, Any]:
    return {
        "currentPassword": "OldPass1!",
        "newPassword": "NewPass1!",
        "confirmPassword": "NewPass1!",
    }
