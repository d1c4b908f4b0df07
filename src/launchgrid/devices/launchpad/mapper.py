"""
Button ↔ note mapping for the Launchpad Mini MK3.

Grid Layout
-----------

Grid pads and the side column send note-on messages. Logical ``y`` counts
rows from the top, while the device counts from the bottom::

    y=0: 81 82 83 84 85 86 87 88 | 89
    y=1: 71 72 73 74 75 76 77 78 | 79
    ...
    y=7: 11 12 13 14 15 16 17 18 | 19
         x=0                 x=7   x=8

    note = 10 * (8 - y) + x + 1
    x = note % 10 - 1
    y = 8 - note // 10

Control Buttons
---------------

The top control keys use different numbers in each direction: they are
lit with note ``104 + index`` but report presses as controller changes
``91 + index``. The asymmetry is the device's, not ours.
"""

from typing import Optional

from launchgrid.exceptions import InvalidArgumentError
from launchgrid.models import Button, ControlButton, GridButton


class LaunchpadMiniMK3Mapper:
    """Pure translation between buttons and MIDI note/controller numbers."""

    ROW_SPACING = 10
    GRID_WIDTH = 9  # 8 pads + side column
    GRID_HEIGHT = 8
    CONTROL_COUNT = 8

    CONTROL_OUTPUT_OFFSET = 104
    CONTROL_INPUT_OFFSET = 91

    @classmethod
    def encode_button(cls, button: Button) -> int:
        """
        Convert a button to the number used to light it.

        Raises:
            InvalidArgumentError: If the button lies outside the device
        """
        if isinstance(button, GridButton):
            return cls.xy_to_note(button.x, button.y)
        if isinstance(button, ControlButton):
            if not 0 <= button.index < cls.CONTROL_COUNT:
                raise InvalidArgumentError("index", button.index, "0 <= index <= 7")
            return button.index + cls.CONTROL_OUTPUT_OFFSET
        raise InvalidArgumentError("button", button, "must be a GridButton or ControlButton")

    @classmethod
    def xy_to_note(cls, x: int, y: int) -> int:
        """
        Convert grid coordinates to a note number.

        Raises:
            InvalidArgumentError: If x is outside 0-8 or y outside 0-7
        """
        if not 0 <= x < cls.GRID_WIDTH:
            raise InvalidArgumentError("x", x, "0 <= x <= 8")
        if not 0 <= y < cls.GRID_HEIGHT:
            raise InvalidArgumentError("y", y, "0 <= y <= 7")

        return cls.ROW_SPACING * (8 - y) + x + 1

    @classmethod
    def decode_grid_button(cls, note: int) -> Optional[GridButton]:
        """
        Convert an incoming note number to a grid button.

        Returns:
            GridButton, or None if the note is not on the grid
        """
        x = note % cls.ROW_SPACING - 1
        y = 8 - note // cls.ROW_SPACING

        if not (0 <= x < cls.GRID_WIDTH and 0 <= y < cls.GRID_HEIGHT):
            return None

        return GridButton(x=x, y=y)

    @classmethod
    def decode_control_button(cls, number: int) -> Optional[ControlButton]:
        """
        Convert an incoming controller number to a control button.

        Returns:
            ControlButton, or None if the number is outside 91-98
        """
        index = number - cls.CONTROL_INPUT_OFFSET
        if not 0 <= index < cls.CONTROL_COUNT:
            return None

        return ControlButton(index=index)
