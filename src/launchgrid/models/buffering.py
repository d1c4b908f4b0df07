"""Double-buffering configuration."""

from dataclasses import dataclass

from launchgrid.exceptions import InvalidArgumentError

from .enums import Buffer


@dataclass(frozen=True)
class DoubleBuffering:
    """
    Double-buffering state to send to the device.

    The default is no flashing with buffer A both updated and displayed, so
    any LED data written to the device is shown instantly.

    - ``copy``: copy the LED states from the new displayed buffer to the new
      updating buffer
    - ``flash``: continually flip displayed buffers to make LEDs flash
    - ``edited_buffer``: the new updating buffer
    - ``displayed_buffer``: the new displayed buffer

    Raises:
        InvalidArgumentError: If a flag is not a bool or a buffer not a ``Buffer``
    """

    copy: bool = False
    flash: bool = False
    edited_buffer: Buffer = Buffer.A
    displayed_buffer: Buffer = Buffer.A

    def __post_init__(self):
        # Each flag is a single bit of the wire byte
        for name in ("copy", "flash"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise InvalidArgumentError(name, value, "must be True or False")
        for name in ("edited_buffer", "displayed_buffer"):
            value = getattr(self, name)
            if not isinstance(value, Buffer):
                raise InvalidArgumentError(name, value, "must be Buffer.A or Buffer.B")
