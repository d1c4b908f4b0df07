"""Launchpad Mini MK3 device capabilities."""

import logging
from collections.abc import Iterable, Sequence

from launchgrid.devices.protocols import DeviceSpec
from launchgrid.models import Message, RgbColor, button_from_abs

from .input import decode_message
from .output import LaunchpadMiniMK3Output

logger = logging.getLogger(__name__)


class LaunchpadMiniMK3Spec(DeviceSpec):
    """
    Mini MK3 implementation of the device capability protocol.

    The device occupies a 9x9 absolute bounding box: a control row on top,
    then eight grid rows with a side button each. The top-right corner
    holds the logo and is not a button.
    """

    BOUNDING_BOX_WIDTH = 9
    BOUNDING_BOX_HEIGHT = 9
    COLOR_PRECISION = 64

    def is_valid(self, x: int, y: int) -> bool:
        if not (0 <= x < self.BOUNDING_BOX_WIDTH and 0 <= y < self.BOUNDING_BOX_HEIGHT):
            return False
        if x == 8 and y == 0:
            return False
        return True

    def setup(self, output: LaunchpadMiniMK3Output) -> None:
        """Enter programmer mode."""
        output.set_programmer_mode()
        logger.info("Entered programmer mode")

    def flush(
        self,
        output: LaunchpadMiniMK3Output,
        changes: Iterable[tuple[int, int, tuple[int, int, int]]],
    ) -> None:
        """
        Send absolute-coordinate RGB changes as one lighting frame.

        Args:
            output: Connected output
            changes: ``(x, y, (r, g, b))`` entries with channels 0-63
        """
        pairs = [
            (button_from_abs(x, y), RgbColor(r=r, g=g, b=b))
            for x, y, (r, g, b) in changes
        ]
        if not pairs:
            return
        output.light_multiple_rgb(pairs)

    def decode(self, timestamp: int, data: Sequence[int]) -> Message:
        return decode_message(timestamp, data)
