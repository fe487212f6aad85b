"""Structured logging for vocab_srs.

The library only emits events; applications decide how they are rendered
by calling configure_logging() once at startup. Importing the package
leaves structlog configuration untouched.
"""

import logging
import sys
from typing import Any, Optional

import structlog

__all__ = [
    "configure_logging",
    "get_logger",
]


def configure_logging(
    level: Optional[int] = None,
    json_output: Optional[bool] = None,
    add_timestamp: bool = True,
) -> None:
    """Configure structlog for an application embedding vocab_srs.

    Args:
        level: Logging level (default: from settings, INFO)
        json_output: If True, output JSON; if False, pretty console output
            (default: from settings)
        add_timestamp: If True, add ISO timestamp to log entries
    """
    from vocab_srs.config import get_settings

    settings = get_settings()
    if level is None:
        level = logging.getLevelName(settings.log_level)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {settings.log_level}")
    if json_output is None:
        json_output = settings.log_json

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if add_timestamp:
        processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger, usually with the calling module's __name__."""
    return structlog.get_logger(name)

