"""
Launchpad Mini MK3 input decoding.

Input Flow: Button Press → Your Code
=====================================

::

    Hardware Button Press
          ↓
    [raw frame: 0x90 11 127]
          ↓
    decode_message(timestamp, data):
      inquiry responses?      → DeviceInquiryResponse / VersionInquiryResponse
      fixed frame table       → TextEndedOrLooped / ProgrammerMode
      (status, length) table  → _decode_note_on / _decode_control_change
      otherwise               → Pass
          ↓
    [Press(GridButton(x=0, y=7))]

The device never sends note-off: a release is a note-on with velocity 0.
Velocities other than 0 and 127 decode to ``UnexpectedValue`` so a single
odd byte cannot stop the input stream.
"""

import logging
from collections.abc import Callable, Sequence
from typing import Optional

from launchgrid.models import (
    Button,
    DeviceInquiryResponse,
    Message,
    Pass,
    Press,
    ProgrammerMode,
    Release,
    TextEndedOrLooped,
    UnexpectedValue,
    VersionInquiryResponse,
)

from .frames import CONTROL_CHANGE, NOTE_ON
from .inquiry import parse_device_inquiry, parse_version_inquiry
from .mapper import LaunchpadMiniMK3Mapper

logger = logging.getLogger(__name__)

RELEASE_VELOCITY = 0
PRESS_VELOCITY = 127


def _press_or_release(button: Button, velocity: int) -> Message:
    if velocity == RELEASE_VELOCITY:
        return Release(button=button)
    if velocity == PRESS_VELOCITY:
        return Press(button=button)

    logger.warning(f"Unexpected velocity {velocity} for {button!r}")
    return UnexpectedValue(button=button, value=velocity)


def _decode_note_on(data: tuple[int, ...]) -> Optional[Message]:
    _, note, velocity = data
    button = LaunchpadMiniMK3Mapper.decode_grid_button(note)
    if button is None:
        return None
    return _press_or_release(button, velocity)


def _decode_control_change(data: tuple[int, ...]) -> Optional[Message]:
    _, number, velocity = data
    button = LaunchpadMiniMK3Mapper.decode_control_button(number)
    if button is None:
        return None
    return _press_or_release(button, velocity)


# Frames whose meaning depends on their fields, keyed by (status, length)
_SHAPED_FRAMES: dict[tuple[int, int], Callable[[tuple[int, ...]], Optional[Message]]] = {
    (NOTE_ON, 3): _decode_note_on,
    (CONTROL_CHANGE, 3): _decode_control_change,
}

# Frames recognised byte for byte
_FIXED_FRAMES: dict[tuple[int, ...], Message] = {
    (CONTROL_CHANGE, 0, 3): TextEndedOrLooped(),
    (0xF0, 0x00, 0x20, 0x29, 0x02, 0x0D, 0x0E, 0x01, 0xF7): ProgrammerMode(),
}


def decode_message(timestamp: int, data: Sequence[int]) -> Message:
    """
    Decode one complete incoming frame.

    Never raises for well-formed byte input: frames that are not understood
    decode to ``Pass``.

    Args:
        timestamp: Arrival time supplied by the byte-source (unused)
        data: One complete raw frame

    Returns:
        The decoded message
    """
    frame = tuple(data)

    device_inquiry = parse_device_inquiry(frame)
    if device_inquiry is not None:
        return DeviceInquiryResponse(info=device_inquiry)

    version_inquiry = parse_version_inquiry(frame)
    if version_inquiry is not None:
        return VersionInquiryResponse(info=version_inquiry)

    fixed = _FIXED_FRAMES.get(frame)
    if fixed is not None:
        return fixed

    if frame:
        handler = _SHAPED_FRAMES.get((frame[0], len(frame)))
        if handler is not None:
            message = handler(frame)
            if message is not None:
                return message

    logger.warning(f"Unexpected midi message: {list(frame)}")
    return Pass(data=frame)

