"""Error types raised by the argument guards."""

from enum import Enum
from typing import Optional


class ArgumentErrorKind(Enum):
    """Which precondition an argument failed."""

    INVALID = "invalid"
    NULL = "null"
    OUT_OF_RANGE = "out_of_range"


class ArgumentError(ValueError):
    """Argument failed a validity check."""

    kind = ArgumentErrorKind.INVALID
    default_message = "Value does not fall within the expected range."

    def __init__(self, message: Optional[str] = None, argument_name: Optional[str] = None):
        self.message = message if message is not None else self.default_message
        self.argument_name = argument_name
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.argument_name is not None:
            return f"{self.message} (Parameter '{self.argument_name}')"
        return self.message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"argument_name={self.argument_name!r})"
        )

    def is_null(self) -> bool:
        """Return True if a required argument was None."""
        return self.kind is ArgumentErrorKind.NULL

    def is_out_of_range(self) -> bool:
        """Return True if the argument was outside its valid domain."""
        return self.kind is ArgumentErrorKind.OUT_OF_RANGE

    def is_invalid(self) -> bool:
        """Return True if a general validity check failed."""
        return self.kind is ArgumentErrorKind.INVALID


class ArgumentNullError(ArgumentError):
    """Required argument was None."""

    kind = ArgumentErrorKind.NULL
    default_message = "Value cannot be null."

    def __init__(self, argument_name: Optional[str] = None, message: Optional[str] = None):
        super().__init__(message, argument_name)


class ArgumentOutOfRangeError(ArgumentError):
    """Argument was outside its range of valid values."""

    kind = ArgumentErrorKind.OUT_OF_RANGE
    default_message = "Specified argument was out of the range of valid values."

    def __init__(self, argument_name: Optional[str] = None, message: Optional[str] = None):
        super().__init__(message, argument_name)
