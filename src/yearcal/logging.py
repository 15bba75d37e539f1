"""Logging configuration for yearcal."""

import logging
import sys
import time
from contextlib import contextmanager
from typing import Generator

import structlog


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structlog logger."""
    return structlog.get_logger(name)


def configure_logging(
    level: str = "WARNING",
    json_output: bool = False,
) -> None:
    """Configure yearcal logging.

    Args:
        level: Log level ("DEBUG", "INFO", "WARNING", "ERROR")
        json_output: True for JSON output, False for console

    Raises:
        ValueError: If level is not a known log level name
    """
    level = level.upper()
    numeric_level = logging.getLevelName(level)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logging.basicConfig(format="%(message)s", level=numeric_level)

    shared_processors = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_output:
        processors = shared_processors + [structlog.processors.JSONRenderer()]
    else:
        processors = shared_processors + [structlog.dev.ConsoleRenderer(colors=False)]

    # stderr keeps stdout for the calendar; no logger caching so the CLI can
    # be reconfigured within one process
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


@contextmanager
def timed_block(
    logger: structlog.BoundLogger,
    event: str,
    level: str = "debug",
    **context: object,
) -> Generator[None, None, None]:
    """Context manager for timing code blocks."""
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        getattr(logger, level)(event, elapsed_ms=round(elapsed_ms, 2), **context)
