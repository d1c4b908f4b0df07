"""mido-backed byte-sink and byte-source adapters.

These are the glue between raw frames and a MIDI backend. Port discovery,
hot-plug and reconnection stay with the caller.
"""

import logging
import time
from collections.abc import Iterator, Sequence

import mido

from launchgrid.exceptions import TransportError

logger = logging.getLogger(__name__)


class MidoPortSink:
    """Byte-sink writing frames to a mido output port."""

    def __init__(self, port: mido.ports.BaseOutput):
        """
        Initialize sink.

        Args:
            port: Open mido output port
        """
        self._port = port

    def send(self, data: Sequence[int]) -> None:
        """
        Send one complete frame.

        Raises:
            TransportError: If mido rejects the frame or the port fails
        """
        try:
            message = mido.Message.from_bytes(list(data))
        except ValueError as e:
            raise TransportError("encode frame", str(e)) from e

        try:
            self._port.send(message)
        except (OSError, ValueError) as e:
            logger.error(f"Error sending MIDI message: {e}")
            raise TransportError(f"send {message.type} frame", str(e)) from e

    @property
    def name(self) -> str:
        return self._port.name


class RecordingSink:
    """Byte-sink that keeps every frame in memory instead of sending it."""

    def __init__(self):
        self.frames: list[list[int]] = []

    def send(self, data: Sequence[int]) -> None:
        self.frames.append(list(data))


def iter_frames(port: mido.ports.BaseInput) -> Iterator[tuple[int, list[int]]]:
    """
    Byte-source over a mido input port.

    Blocks on the port and yields ``(timestamp_us, data)`` for every
    incoming message, in arrival order.

    Args:
        port: Open mido input port
    """
    for message in port:
        yield time.monotonic_ns() // 1000, message.bytes()


def list_ports() -> dict[str, list[str]]:
    """List available MIDI input and output port names."""
    return {
        "input": mido.get_input_names(),
        "output": mido.get_output_names(),
    }
