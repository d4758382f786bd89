"""Result pattern for consistent return types across the engine and services.

Engine and service operations never raise for expected failures. They return
a Result carrying either a value or an ErrorKind plus a message, and the API
layer translates failed results into HTTP errors.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from mortgage_market.core.errors import ErrorKind

T = TypeVar("T")


@dataclass
class Result(Generic[T]):
    """
    Represents the outcome of an operation.

    Attributes:
        success: Whether the operation succeeded
        value: The return value on success, None on failure
        error: Human-readable message on failure, None on success
        error_kind: Failure category from the error taxonomy

    Usage:
        return Result.ok(offer)
        return Result.fail("Offer not found", ErrorKind.NOT_FOUND)
    """

    success: bool
    value: Optional[T] = None
    error: Optional[str] = None
    error_kind: Optional[ErrorKind] = None

    @classmethod
    def ok(cls, value: T = None) -> "Result[T]":
        """Create a successful result."""
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: str, error_kind: ErrorKind) -> "Result[T]":
        """Create a failure result."""
        return cls(success=False, error=error, error_kind=error_kind)

    def __bool__(self) -> bool:
        return self.success

    def unwrap(self) -> T:
        """
        Get the value, raising if the operation failed.

        Raises:
            ValueError: If the operation failed
        """
        if not self.success:
            raise ValueError(f"Result unwrap failed: {self.error}")
        return self.value
