"""Faults raised by the outcome and presence types.

These exceptions signal a violated precondition (unwrapping a failure,
wrapping ``None`` in ``Some``, flattening a non-nested option). Modeled
failures never use them; those travel as ``Err`` / ``Nothing`` values.
"""

from typing import Any


class OutcomeError(Exception):
    """Base exception for all faults raised by this package."""
    pass


class UnwrapError(OutcomeError):
    """Raised when unwrap() is called on an Err or on Nothing."""

    def __init__(self, message: str, error: Any = None):
        super().__init__(message)
        self.error = error


class AbsentValueError(OutcomeError, TypeError):
    """Raised when a Some would wrap None."""
    pass


class FlattenError(OutcomeError, TypeError):
    """Raised when flatten() is called on a Some that does not hold a Some."""
    pass
