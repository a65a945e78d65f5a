"""Tests for the debounce wrapper."""

from __future__ import annotations

import asyncio

import pytest
from structlog.testing import capture_logs

from formguard.validators.debounce import debounce


@pytest.mark.asyncio
async def test_only_last_call_fires() -> None:
    calls: list[str] = []
    wrapped = debounce(calls.append, 20)

    wrapped("a")
    wrapped("b")
    wrapped("c")
    assert calls == []  # no leading-edge call

    await asyncio.sleep(0.1)
    assert calls == ["c"]


@pytest.mark.asyncio
async def test_spaced_calls_each_fire() -> None:
    calls: list[str] = []
    wrapped = debounce(calls.append, 10)

    wrapped("a")
    await asyncio.sleep(0.08)
    wrapped("b")
    await asyncio.sleep(0.08)

    assert calls == ["a", "b"]


@pytest.mark.asyncio
async def test_wrappers_do_not_share_timers() -> None:
    first: list[int] = []
    second: list[int] = []
    wrap_first = debounce(first.append, 10)
    wrap_second = debounce(second.append, 10)

    wrap_first(1)
    wrap_second(2)
    await asyncio.sleep(0.08)

    assert first == [1]
    assert second == [2]


@pytest.mark.asyncio
async def test_keyword_arguments_forwarded() -> None:
    received: list[dict] = []

    def handler(**kwargs) -> None:
        received.append(kwargs)

    wrapped = debounce(handler, 5)
    wrapped(field="username", value="alice")
    await asyncio.sleep(0.05)

    assert received == [{"field": "username", "value": "alice"}]


@pytest.mark.asyncio
async def test_coroutine_functions_are_awaited() -> None:
    calls: list[str] = []

    async def check(value: str) -> None:
        await asyncio.sleep(0)
        calls.append(value)

    wrapped = debounce(check, 5)
    wrapped("x")
    wrapped("y")
    await asyncio.sleep(0.05)

    assert calls == ["y"]


@pytest.mark.asyncio
async def test_default_wait_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORMGUARD_DEBOUNCE_WAIT_MS", "5")
    calls: list[str] = []
    wrapped = debounce(calls.append)

    wrapped("z")
    await asyncio.sleep(0.05)

    assert calls == ["z"]


def test_preserves_wrapped_name() -> None:
    def validate_username(value: str) -> None:
        pass

    assert debounce(validate_username, 10).__name__ == "validate_username"


def test_requires_running_loop() -> None:
    wrapped = debounce(print, 10)
    with pytest.raises(RuntimeError):
        wrapped("outside")


@pytest.mark.asyncio
async def test_running_coroutine_is_held_until_done() -> None:
    started = asyncio.Event()
    release = asyncio.Event()

    async def slow_check() -> None:
        started.set()
        await release.wait()

    wrapped = debounce(slow_check, 5)
    wrapped()
    await asyncio.wait_for(started.wait(), 1)
    assert len(wrapped.running_tasks) == 1

    release.set()
    await asyncio.sleep(0.01)
    assert wrapped.running_tasks == set()


@pytest.mark.asyncio
async def test_coroutine_failure_is_logged() -> None:
    async def failing_check(value: str) -> None:
        raise ValueError(f"bad {value}")

    wrapped = debounce(failing_check, 5)
    with capture_logs() as logs:
        wrapped("x")
        await asyncio.sleep(0.05)

    failures = [entry for entry in logs if entry["event"] == "debounced_call_failed"]
    assert len(failures) == 1
    assert failures[0]["error"] == "bad x"
    assert failures[0]["function"].endswith("failing_check")
    assert failures[0]["log_level"] == "error"
    assert wrapped.running_tasks == set()
