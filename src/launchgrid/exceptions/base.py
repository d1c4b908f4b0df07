"""Root of the launchgrid error hierarchy.

Every codec and transport failure carries two texts: a short one that the
CLI prints, and a longer one for the log that names the offending value or
MIDI operation. ``recoverable`` tells the caller whether the device session
is still usable after the error.
"""

from typing import Optional


class LaunchGridError(Exception):
    """Base exception for encoder and transport failures."""

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        """
        Args:
            user_message: One-line message printed by the CLI
            technical_message: Message for the log (defaults to user_message)
            recoverable: True if the device session is unaffected
            recovery_hint: What to change before trying again
        """
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """Message plus recovery hint, as shown by ``launchgrid encode``."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
