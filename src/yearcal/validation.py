"""Precondition checks for sequence combinators."""

from typing import Sized


class PreconditionError(AssertionError):
    """Raised when a caller violates a combinator precondition.

    Signals a programming error rather than bad input data, so it is
    not meant to be caught.
    """
    pass


def require_positive(name: str, value: int) -> None:
    """Check that an integer parameter is strictly positive.

    Raises:
        PreconditionError: If value is zero or negative
    """
    if value <= 0:
        raise PreconditionError(f"{name} must be positive, got {value}")


def require_non_empty(name: str, items: Sized) -> None:
    """Check that a collected sequence has at least one element.

    Raises:
        PreconditionError: If items is empty
    """
    if len(items) == 0:
        raise PreconditionError(f"{name} requires at least one sequence")
