"""Structured logging helpers."""

from __future__ import annotations

import logging

import structlog

from message_format.config import get_settings


def build_processors(json_output: bool = True) -> list:
    """Processor chain shared by every translation log event."""

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        renderer,
    ]


def configure_logging(level: int | str | None = None, *, json_output: bool | None = None) -> None:
    """Configure structlog output; level and renderer default to settings."""

    settings = get_settings()
    if level is None:
        level = settings.log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    if json_output is None:
        json_output = settings.log_json

    logging.basicConfig(level=level, format="%(message)s")
    structlog.configure(
        processors=build_processors(json_output),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


logger = structlog.get_logger()

__all__ = ["build_processors", "configure_logging", "logger"]
