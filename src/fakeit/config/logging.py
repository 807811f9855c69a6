"""Structured logging setup."""

from __future__ import annotations

import logging
from typing import Any

import structlog

from fakeit.config.settings import Settings, get_settings
from fakeit.core.exceptions import ConfigurationError
from fakeit.core.messages import ExceptionMessage, render


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog from *settings*.

    Only messages at or above ``settings.log_level`` are emitted, rendered
    for the console or as JSON lines.
    """
    settings = settings or get_settings()
    level_name = settings.log_level.upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ConfigurationError(
            render(ExceptionMessage.UNKNOWN_LOG_LEVEL, level=settings.log_level),
            details={"log_level": settings.log_level},
        )

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    """Get a structlog logger for *name*."""
    return structlog.get_logger(name)
