"""Codec-related exceptions.

- InvalidArgumentError: a caller-supplied value is outside its documented range
"""

from typing import Any

from .base import LaunchGridError


class InvalidArgumentError(LaunchGridError, ValueError):
    """A value passed to an encoder operation violates its range constraint.

    Raised before any bytes are built, so the device session is unaffected.
    """

    def __init__(self, field: str, value: Any, constraint: str):
        """
        Initialize invalid argument error.

        Args:
            field: Name of the offending argument
            value: The rejected value
            constraint: Human-readable description of the violated constraint
        """
        super().__init__(
            user_message=f"Invalid value for '{field}': {value!r} ({constraint})",
            technical_message=f"Contract violation: {field}={value!r} must satisfy {constraint}",
            recoverable=True,
            recovery_hint=f"Pass a value for '{field}' that satisfies: {constraint}",
        )
        self.field = field
        self.value = value
        self.constraint = constraint
