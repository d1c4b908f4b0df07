"""Transport-related exceptions.

- TransportError: the byte-sink rejected a frame (port closed, backend error)
"""

from typing import Optional

from .base import LaunchGridError


class TransportError(LaunchGridError):
    """Sending a frame to the MIDI output failed."""

    def __init__(self, operation: str, original_error: Optional[str] = None):
        """
        Initialize transport error.

        Args:
            operation: What was being attempted (e.g. "send note_on frame")
            original_error: Error reported by the MIDI backend, if any
        """
        technical = f"Transport failure during {operation}"
        if original_error:
            technical += f": {original_error}"

        super().__init__(
            user_message="Could not send MIDI data to the device.",
            technical_message=technical,
            recoverable=True,
            recovery_hint=(
                "Check that the Launchpad is plugged in and not used by another "
                "application. Run 'launchgrid ports' to see available MIDI ports."
            ),
        )
        self.operation = operation
        self.original_error = original_error
