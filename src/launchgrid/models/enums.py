"""Enumerations for the Launchpad codec."""

from enum import Enum


class Brightness(Enum):
    """All-LEDs test brightness levels, valued by their wire code."""

    OFF = 0
    LOW = 125
    MEDIUM = 126
    FULL = 127


class GridMappingMode(Enum):
    """Note layout used by the grid."""

    SESSION = 0
    DRUM_RACK = 1


class Buffer(Enum):
    """One of the two LED buffers."""

    A = 0
    B = 1


class DoubleBufferingBehavior(Enum):
    """How a single LED write interacts with the two buffers.

    Values are the flag bits OR-ed into the light code.
    """

    NONE = 0  # Write to the updating buffer only
    CLEAR = 8  # Clear the other buffer's copy of this LED
    COPY = 4  # Write to both buffers
    CLEAR_AND_COPY = 12
