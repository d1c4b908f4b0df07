"""Collaborator and device-family protocols."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from launchgrid.models import Message


class ByteSink(Protocol):
    """Accepts complete outgoing frames and forwards them to a MIDI output."""

    def send(self, data: Sequence[int]) -> None:
        """
        Send one complete, self-delimited frame.

        Raises:
            TransportError: If the frame could not be delivered
        """
        ...


class ByteSource(Protocol):
    """Delivers complete incoming frames in arrival order."""

    def __iter__(self) -> Iterator[tuple[int, Sequence[int]]]:
        """Yield ``(timestamp, data)`` once per complete frame."""
        ...


class DeviceSpec(Protocol):
    """
    Capabilities one controller model exposes to a canvas-style layer.

    Models share the event/command vocabulary but differ in coordinate
    bounds, color precision and frame encodings.
    """

    BOUNDING_BOX_WIDTH: int
    BOUNDING_BOX_HEIGHT: int
    COLOR_PRECISION: int

    def is_valid(self, x: int, y: int) -> bool:
        """Whether absolute coordinate ``(x, y)`` is a physical button."""
        ...

    def setup(self, output) -> None:
        """Put a freshly connected output into the state the layer expects."""
        ...

    def flush(self, output, changes: Iterable[tuple[int, int, tuple[int, int, int]]]) -> None:
        """Send a batch of ``(x, y, (r, g, b))`` LED changes."""
        ...

    def decode(self, timestamp: int, data: Sequence[int]) -> Message:
        """Decode one incoming frame."""
        ...
