# simulations/log.py
"""
structlog setup shared by the simulation harness and the report CLI.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, List, Optional

import structlog


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    extra_processors: Optional[List[Any]] = None,
) -> None:
    """
    Configure structlog on top of stdlib logging.

    Args:
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        format_json: render JSON lines instead of the colored console format
        include_timestamp: add an ISO timestamp to every event
        extra_processors: appended before the final renderer
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stderr,
        format="%(message)s",
        force=True,
    )

    processors: List[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def _configure_passthrough() -> None:
    """
    Route events to stdlib logging without installing any handler.

    Used until configure_logging() runs, so library callers only see what
    their own stdlib logging setup lets through (WARNING and up by default).
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    if not structlog.is_configured():
        _configure_passthrough()
    return structlog.get_logger(name)
