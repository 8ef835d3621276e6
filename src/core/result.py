"""Result types for railway-oriented programming.

This module implements the Result pattern to handle operations that can fail
without using exceptions. This approach makes error handling explicit and
testable.

Exactly one side of a Result is meaningful. Reading ``value`` from a
``Failure`` is a programming error and raises ``InvalidResultAccessError``;
expected business failures are never raised, they are returned.

Usage:
    def divide(a: float, b: float) -> Result[float, str]:
        if b == 0:
            return Failure(error="Division by zero")
        return Success(value=a / b)

    result = divide(10, 2)
    match result:
        case Success(value=value):
            print(f"Result: {value}")
        case Failure(error=error):
            print(f"Error: {error}")
"""

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


class InvalidResultAccessError(RuntimeError):
    """Raised when the success value of a failed Result is read."""


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    @property
    def error(self) -> None:
        """Successful results carry no error."""
        return None


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    @property
    def value(self) -> NoReturn:
        """Failed results have no value.

        Raises:
            InvalidResultAccessError: Always.
        """
        raise InvalidResultAccessError(
            f"No value for failure result: {self.error}"
        )


# Type alias for Result union
Result: TypeAlias = Success[T] | Failure[E]
