"""Debounce — trailing-edge call coalescing for live (per-keystroke) validation.

Usage:
    check_username = debounce(run_username_check, 300)
    check_username("al")   # superseded
    check_username("alice")  # runs once, 300ms after the last call
"""

import asyncio
import inspect
import functools
from typing import Any, Callable, Optional

import structlog

from formguard.config import get_settings

logger = structlog.get_logger()


def debounce(func: Callable[..., Any], wait_ms: Optional[float] = None) -> Callable[..., None]:
    """Wrap ``func`` so it only runs after ``wait_ms`` without further calls.

    Each wrapper owns its own pending timer. Calls are scheduled on the running
    asyncio loop; coroutine functions are started as tasks when the timer fires,
    held until they finish, and logged if they raise.

    Raises:
        RuntimeError: if the wrapper is called with no running event loop
    """
    if wait_ms is None:
        wait_ms = get_settings().DEBOUNCE_WAIT_MS
    wait_seconds = max(wait_ms, 0) / 1000
    is_coroutine = inspect.iscoroutinefunction(func)
    name = getattr(func, "__qualname__", repr(func))
    pending: Optional[asyncio.TimerHandle] = None
    running: set[asyncio.Task] = set()

    def task_done(task: asyncio.Task) -> None:
        running.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error("debounced_call_failed", function=name, error=str(error))

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> None:
        nonlocal pending
        loop = asyncio.get_running_loop()
        if pending is not None:
            pending.cancel()

        def fire() -> None:
            nonlocal pending
            pending = None
            if is_coroutine:
                task = loop.create_task(func(*args, **kwargs))
                running.add(task)
                task.add_done_callback(task_done)
            else:
                func(*args, **kwargs)

        pending = loop.call_later(wait_seconds, fire)

    wrapper.running_tasks = running  # type: ignore[attr-defined]
    return wrapper
