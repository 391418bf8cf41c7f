"""Structured logging configuration using structlog + rich."""

import logging
import sys

import structlog
from rich.traceback import install as install_rich_traceback

from fallible.config import settings


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def setup_logging(
    *,
    json_logs: bool | None = None,
    log_level: str | None = None,
    rich_tracebacks: bool = True,
) -> None:
    """Configure structlog with rich console output or JSON formatting.

    The library itself never calls this; host applications do, once.

    Args:
        json_logs: If True, output JSON logs (for production). Otherwise, console.
            Defaults to ``settings.json_logs``.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
            Defaults to ``settings.log_level``.
        rich_tracebacks: Install rich's traceback handler for uncaught exceptions.
    """
    if json_logs is None:
        json_logs = settings.json_logs
    level = getattr(logging, (log_level or settings.log_level).upper())

    if rich_tracebacks:
        install_rich_traceback(show_locals=True, width=120)

    if json_logs:
        renderers: list[structlog.types.Processor] = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        renderers = [
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    structlog.configure(
        processors=[*_shared_processors(), *renderers],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Also configure standard library logging at the same level
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )


def get_logger(name: str | None = None) -> structlog.typing.FilteringBoundLogger:
    """Get a logger instance.

    Args:
        name: Optional logger name (typically __name__).

    Returns:
        A bound structlog logger.
    """
    return structlog.get_logger(name)
