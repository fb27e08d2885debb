"""Typed failures raised by the efficiency engine."""

from __future__ import annotations


class ValidationError(ValueError):
    """Raised when scan or route input cannot be analyzed at all.

    The engine raises this before any computation begins, so callers never
    receive a partial result.
    """

    def __init__(self, message: str) -> None:
        """Initialize the error.

        Args:
            message: Human-readable reason, e.g. "scan data empty".
        """

        super().__init__(message)
        self.message = message
