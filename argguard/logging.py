"""structlog setup for services that report rejected arguments."""

import logging
from typing import Union

import structlog

from .validation import check_if_not_null, check_if_valid


def resolve_level(level: Union[str, int]) -> int:
    """Map a standard level name, or a numeric level, to its numeric value.

    Raises:
        ArgumentNullError: If level is None.
        ArgumentError: If level is neither a known level name nor an int.
    """
    check_if_not_null(level, "level")
    if isinstance(level, int) and not isinstance(level, bool):
        return level
    check_if_valid(isinstance(level, str), "level", f"log level must be a name or int: {level!r}")
    value = logging.getLevelName(level.upper())
    check_if_valid(isinstance(value, int), "level", f"unknown log level: {level}")
    return value


def configure_logging(level: Union[str, int] = "INFO") -> None:
    """Configure structlog with JSON rendering and ISO timestamps."""
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(resolve_level(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
    )
