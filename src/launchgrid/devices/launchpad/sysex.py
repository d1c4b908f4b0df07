"""
SysEx frame builders for the Launchpad Mini MK3.

SysEx: The Launchpad's Secret Language
=======================================

System Exclusive messages are manufacturer-specific MIDI frames::

    [0xF0] [Manufacturer ID] [Device-specific data...] [0xF7]
     Start                                              End

Every Novation frame starts with the manufacturer id ``00 20 29``. The
Mini MK3 accepts several generations of command sets, each with its own
prefix after the manufacturer id::

    F0 00 20 29 02 0D ...   Mini MK3 commands (programmer mode, RGB lighting)
    F0 00 20 29 02 18 ...   MK2-compatible commands (light all, grid layout)
    F0 00 20 29 09 ...      Legacy text scrolling

RGB Lighting
------------

One frame lights up to 80 buttons; each button takes a 5-byte spec::

    [0xF0, 0x00, 0x20, 0x29, 0x02, 0x0D, 0x03,  3, 81, 63, 0, 0,  0xF7]
                                          │     │  │   └─ r, g, b (0-63)
                                          │     │  └─ button number
                                          │     └─ spec type 3 = RGB
                                          └─ LED lighting command

Key Design Principle
--------------------

This is the lowest level of the output side. It knows about button
numbers and byte layouts, never about buttons or colors as objects; the
output layer above does that translation.
"""

SYSEX_START = 0xF0
SYSEX_END = 0xF7

NOVATION_MANUFACTURER_ID = [0x00, 0x20, 0x29]
MK2_COMPAT_HEADER = [*NOVATION_MANUFACTURER_ID, 0x02, 0x18]
TEXT_SCROLL_HEADER = [*NOVATION_MANUFACTURER_ID, 0x09]

MAX_LIGHTING_SPECS = 80


# Command bytes following the model header
LED_LIGHTING = 0x03
PROGRAMMER_MODE = 0x0E

RGB_LIGHTING_SPEC = 0x03  # Spec type of a 5-byte (button, r, g, b) lighting entry

# Command bytes following the MK2-compatible header
LIGHT_ALL = 0x0E
GRID_MAPPING_MODE = 0x22


def wrap(data: list[int]) -> list[int]:
    """Delimit a SysEx payload with start and end bytes."""
    return [SYSEX_START, *data, SYSEX_END]


class LaunchpadSysEx:
    """Low-level SysEx frame builder for one Launchpad model."""

    def __init__(self, header: list[int]):
        """
        Initialize with SysEx header.

        Args:
            header: Model SysEx header bytes (excluding F0)
        """
        self.header = list(header)

    def programmer_mode(self) -> list[int]:
        """Build the programmer mode switch frame."""
        return wrap([*self.header, PROGRAMMER_MODE, 1])

    def led_lighting(self, specs: list[tuple[int, ...]]) -> list[int]:
        """
        Build LED lighting frame.

        Args:
            specs: List of (lighting_type, button_number, *data_bytes)
        """
        data = [*self.header, LED_LIGHTING]
        for spec in specs:
            data.extend(spec)
        return wrap(data)

    @staticmethod
    def light_all(palette_id: int) -> list[int]:
        return wrap([*MK2_COMPAT_HEADER, LIGHT_ALL, palette_id])

    @staticmethod
    def grid_mapping_mode(mode: int) -> list[int]:
        return wrap([*MK2_COMPAT_HEADER, GRID_MAPPING_MODE, mode])

    @staticmethod
    def scroll_text(color_code: int, text: bytes) -> list[int]:
        return wrap([*TEXT_SCROLL_HEADER, color_code, *text])
