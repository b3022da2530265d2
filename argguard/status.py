"""Translate argument errors into gRPC status at a service boundary.

The guards themselves only raise. Servicers that want a rejected argument
reported to the client as a status code use these helpers:
- ArgumentOutOfRangeError -> OUT_OF_RANGE
- ArgumentNullError, ArgumentError -> INVALID_ARGUMENT
"""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

import grpc
import structlog

from .errors import ArgumentError, ArgumentErrorKind

_logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def status_code_for(error: ArgumentError) -> grpc.StatusCode:
    """Return the gRPC status code for an argument error."""
    if error.kind is ArgumentErrorKind.OUT_OF_RANGE:
        return grpc.StatusCode.OUT_OF_RANGE
    return grpc.StatusCode.INVALID_ARGUMENT


def abort_with(
    context: grpc.ServicerContext,
    error: ArgumentError,
    logger: structlog.BoundLogger | None = None,
) -> None:
    """Log a rejected argument and abort the RPC with its status code.

    Args:
        context: The servicer context of the current RPC.
        error: The argument error raised by a guard.
        logger: Optional structlog logger; defaults to this module's logger.
    """
    code = status_code_for(error)
    (logger or _logger).warning(
        "argument_rejected",
        argument=error.argument_name,
        kind=error.kind.value,
        code=code.name,
        error=error.message,
    )
    context.abort(code, str(error))


def guarded(method: F) -> F:
    """Decorate a servicer method so argument errors abort the RPC.

    The method must take (self, request, context). Exceptions other than
    ArgumentError propagate unchanged.
    """

    @functools.wraps(method)
    def wrapper(self, request, context):
        try:
            return method(self, request, context)
        except ArgumentError as e:
            abort_with(context, e)

    return wrapper  # type: ignore[return-value]
