"""Structured logging setup shared by the validation engine and its helpers."""

import logging

import structlog

from formguard.config import get_settings


def configure_logging() -> None:
    """Configure structlog once for the host process.

    Debug mode renders human-readable console lines, otherwise one JSON
    object per event.
    """
    settings = get_settings()
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if settings.DEBUG else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )
