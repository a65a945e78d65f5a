"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest

from formguard.config import Settings, get_settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FORMGUARD_LOG_LEVEL", raising=False)
    settings = Settings(_env_file=None)
    assert settings.MAX_FILE_SIZE_BYTES == 5 * 1024 * 1024
    assert settings.DEBOUNCE_WAIT_MS == 300
    assert settings.DEBUG is False
    assert settings.LOG_LEVEL == "info"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORMGUARD_DEBOUNCE_WAIT_MS", "150")
    monkeypatch.setenv("FORMGUARD_DEBUG", "true")
    settings = get_settings()
    assert settings.DEBOUNCE_WAIT_MS == 150
    assert settings.DEBUG is True


def test_cached() -> None:
    assert get_settings() is get_settings()
