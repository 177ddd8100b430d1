"""Structured logging configuration for the sine sequence explorer.

This module standardizes logging across the explorer using ``structlog``. It
produces either JSON (for machines) or a pretty console format (for humans)
and binds the component name so log lines from the CLI, the session and the
generator stay distinguishable when mixed.

Typical usage
- Call ``configure_logging(component, log_level, log_format)`` at startup
- Acquire loggers via ``structlog.get_logger(name)`` or ``ServiceLogger``
"""

import logging
import sys
from typing import Any

import structlog
from structlog.stdlib import LoggerFactory, add_logger_name

LOG_FORMATS = ("json", "console")


def configure_logging(
    component: str,
    log_level: str = "INFO",
    log_format: str = "json",
) -> None:
    """Configure structured logging for a component.

    Parameters
    - component: Logical component identifier bound to each log line
    - log_level: ``DEBUG``, ``INFO``, ``WARNING``, ``ERROR`` (case-insensitive)
    - log_format: ``json`` for machine consumption; ``console`` for humans
    """
    if log_format not in LOG_FORMATS:
        raise ValueError(f"Unknown log format: {log_format}")

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
    )

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_logger_name,
    ]

    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(component=component)


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


class ServiceLogger:
    """Logger carrying a fixed set of context fields."""

    def __init__(self, name: str, **context: Any):
        self.name = name
        self.logger = structlog.get_logger(name)
        self.context = context

    def bind(self, **kwargs: Any) -> "ServiceLogger":
        """Return a new ``ServiceLogger`` with the merged context."""
        return ServiceLogger(self.name, **{**self.context, **kwargs})

    def info(self, message: str, **kwargs: Any) -> None:
        self.logger.info(message, **{**self.context, **kwargs})


def log_performance(operation: str, duration_ms: float, **kwargs: Any) -> None:
    """Log the duration of a unit of work.

    Parameters
    - operation: A stable identifier for the measured unit of work
    - duration_ms: Elapsed time in milliseconds
    - kwargs: Additional dimensions (sample count, sequence length, ...)
    """
    logger = get_logger("performance")
    logger.info(
        f"Operation {operation} completed",
        operation=operation,
        duration_ms=duration_ms,
        **kwargs
    )
