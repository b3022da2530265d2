"""Guard helpers for function argument precondition checks.

Callers invoke a guard at the top of their own function; a failed check
raises an ArgumentError subclass naming the offending argument.
"""

from typing import Any, NoReturn, Optional, overload

from .errors import ArgumentError, ArgumentNullError, ArgumentOutOfRangeError


def check_if_not_null(value: Any, argument_name: str, message: Optional[str] = None) -> None:
    """Require that a value is not None.

    Falsy values such as 0, False and "" pass: only None counts as absent,
    so the guard can be applied uniformly in generic code.
    """
    __tracebackhide__ = True
    if value is None:
        _raise_argument_null_error(argument_name, message)


def check_if_in_range(in_range_condition: bool, argument_name: str, message: str) -> None:
    """Require that a precomputed range test holds."""
    __tracebackhide__ = True
    if not in_range_condition:
        _raise_argument_out_of_range_error(argument_name, message)


@overload
def check_if_valid(is_valid_condition: bool, message: str) -> None: ...


@overload
def check_if_valid(is_valid_condition: bool, argument_name: str, message: str) -> None: ...


def check_if_valid(
    is_valid_condition: bool,
    argument_name_or_message: str,
    message: Optional[str] = None,
) -> None:
    """Require that a precomputed validity test holds.

    With a single string the error carries only that message, for conditions
    spanning several arguments. With two, the first names the argument.
    """
    __tracebackhide__ = True
    if not is_valid_condition:
        if message is None:
            _raise_argument_error(argument_name_or_message)
        _raise_argument_error(message, argument_name_or_message)


# Raising lives in separate helpers so the guards above stay a single
# test and call on the passing path.


def _raise_argument_null_error(argument_name: str, message: Optional[str] = None) -> NoReturn:
    __tracebackhide__ = True
    raise ArgumentNullError(argument_name, message)


def _raise_argument_out_of_range_error(argument_name: str, message: str) -> NoReturn:
    __tracebackhide__ = True
    raise ArgumentOutOfRangeError(argument_name, message)


def _raise_argument_error(message: str, argument_name: Optional[str] = None) -> NoReturn:
    __tracebackhide__ = True
    raise ArgumentError(message, argument_name)
