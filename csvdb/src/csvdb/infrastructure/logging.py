"""Structured logging for csvdb.

csvdb runs inside other programs, so records go to stderr and the root
stdlib logger is left alone. Level and format default to the
observability section of the configuration
(CSVDB_OBSERVABILITY__LOG_LEVEL, CSVDB_OBSERVABILITY__LOG_FORMAT).
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

from csvdb.infrastructure.config import get_config

LOG_FORMATS = ("json", "console")


def setup_logging(
    level: str | None = None,
    log_format: str | None = None,
) -> None:
    """
    Configure structlog for csvdb events.

    Args:
        level: Log level name (default from config)
        log_format: 'json' or 'console' (default from config)

    Raises:
        ValueError: If the level or format is unknown
    """
    settings = get_config().observability
    level = (level or settings.log_level).upper()
    log_format = log_format or settings.log_format

    numeric_level = logging.getLevelName(level)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")
    if log_format not in LOG_FORMATS:
        raise ValueError(f"Unknown log format: {log_format}")

    renderer: Processor
    if log_format == "json":
        renderer = structlog.processors.JSONRenderer(sort_keys=True)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None, **initial_context: Any) -> structlog.BoundLogger:
    """Return a logger that tags each event with `name` under the "logger" key."""
    if name is not None:
        initial_context = {"logger": name, **initial_context}
    return structlog.get_logger(**initial_context)
