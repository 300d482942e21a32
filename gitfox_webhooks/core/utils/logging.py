"""
Structured logging setup.

Routes structlog through the standard library so log level and handlers are
controlled in one place.
"""

from __future__ import annotations

import logging
import sys

import structlog

from gitfox_webhooks.core.config import LoggingConfig


def configure_logging(settings: LoggingConfig | None = None) -> None:
    """
    Configure stdlib logging and structlog.

    Args:
        settings: Logging configuration; defaults to INFO with console output.
    """
    settings = settings or LoggingConfig()
    level = logging.getLevelName(settings.level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(message)s",
        stream=sys.stdout,
        force=True,
    )

    renderer = structlog.processors.JSONRenderer() if settings.json else structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
