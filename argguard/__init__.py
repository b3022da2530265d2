"""Argument guards that raise typed errors naming the offending argument."""

from .errors import (
    ArgumentErrorKind,
    ArgumentError,
    ArgumentNullError,
    ArgumentOutOfRangeError,
)
from .validation import (
    check_if_not_null,
    check_if_in_range,
    check_if_valid,
)
from .status import (
    status_code_for,
    abort_with,
    guarded,
)
from .logging import configure_logging, resolve_level

__all__ = [
    # Errors
    "ArgumentErrorKind",
    "ArgumentError",
    "ArgumentNullError",
    "ArgumentOutOfRangeError",
    # Guards
    "check_if_not_null",
    "check_if_in_range",
    "check_if_valid",
    # gRPC boundary
    "status_code_for",
    "abort_with",
    "guarded",
    # Logging
    "configure_logging",
    "resolve_level",
]
