"""Builders for fixed-length channel-message frames.

Each function returns the complete frame as a list of bytes; nothing is
sent from here.
"""

from launchgrid.exceptions import InvalidArgumentError
from launchgrid.models import (
    Brightness,
    DoubleBuffering,
    DoubleBufferingBehavior,
    PaletteColor,
)

NOTE_ON = 0x90
RAPID_UPDATE = 0x92  # Note-on on channel 3
CONTROL_CHANGE = 0xB0

DEVICE_CONTROL = 0  # Controller number shared by reset, brightness and buffering
DUTY_CYCLE_LOW = 30
DUTY_CYCLE_HIGH = 31

LOOP_FLAG = 0b0000_1000
BUFFERING_MARKER = 0b0010_0000


def make_color_code(color: PaletteColor, behavior: DoubleBufferingBehavior) -> int:
    """
    Pack a palette color and double-buffering flags into one light code.

    Raises:
        InvalidArgumentError: If behavior is not a DoubleBufferingBehavior
    """
    if not isinstance(behavior, DoubleBufferingBehavior):
        raise InvalidArgumentError("behavior", behavior, "must be a DoubleBufferingBehavior")
    return color.id | behavior.value


def make_color_code_loopable(color: PaletteColor, should_loop: bool) -> int:
    """Pack a palette color and the scroll loop flag into one color code."""
    if not isinstance(should_loop, bool):
        raise InvalidArgumentError("should_loop", should_loop, "must be True or False")
    return color.id | (LOOP_FLAG if should_loop else 0)


def set_button(note: int, light_code: int) -> list[int]:
    return [NOTE_ON, note, light_code]


def set_button_rapid(light_code1: int, light_code2: int) -> list[int]:
    return [RAPID_UPDATE, light_code1, light_code2]


def turn_on_all_leds(brightness: Brightness) -> list[int]:
    if not isinstance(brightness, Brightness):
        raise InvalidArgumentError("brightness", brightness, "must be a Brightness level")
    return [CONTROL_CHANGE, DEVICE_CONTROL, brightness.value]


def set_duty_cycle(numerator: int, denominator: int) -> list[int]:
    """
    Build a duty-cycle frame.

    Numerators 1-8 go to controller 30, 9-16 to controller 31.

    Raises:
        InvalidArgumentError: If numerator is outside 1-16 or denominator outside 3-18
    """
    if not 1 <= numerator <= 16:
        raise InvalidArgumentError("numerator", numerator, "1 <= numerator <= 16")
    if not 3 <= denominator <= 18:
        raise InvalidArgumentError("denominator", denominator, "3 <= denominator <= 18")

    if numerator < 9:
        return [CONTROL_CHANGE, DUTY_CYCLE_LOW, 16 * (numerator - 1) + (denominator - 3)]
    return [CONTROL_CHANGE, DUTY_CYCLE_HIGH, 16 * (numerator - 9) + (denominator - 3)]


def control_double_buffering(d: DoubleBuffering) -> list[int]:
    if not isinstance(d, DoubleBuffering):
        raise InvalidArgumentError("d", d, "must be a DoubleBuffering")
    last_byte = (
        BUFFERING_MARKER
        | (int(d.copy) << 4)
        | (int(d.flash) << 3)
        | (d.edited_buffer.value << 2)
        | d.displayed_buffer.value
    )
    return [CONTROL_CHANGE, DEVICE_CONTROL, last_byte]
