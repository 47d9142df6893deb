"""Structured logging helpers.

The library only emits events through ``logger``. Host applications call
``configure_logging()`` once at startup to choose level and rendering.
"""

from __future__ import annotations

import logging

import structlog

from dblang.config import LangSettings, get_settings


def configure_logging(
    settings: LangSettings | None = None,
    *,
    level: int | str | None = None,
    json_output: bool | None = None,
) -> None:
    settings = settings or get_settings()
    level = settings.log_level if level is None else level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    if json_output is None:
        json_output = settings.environment != "dev"

    logging.basicConfig(level=level, format="%(message)s", handlers=[logging.StreamHandler()])

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


logger = structlog.get_logger()

__all__ = ["configure_logging", "logger"]
