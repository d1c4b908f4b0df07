"""Launchgrid: MIDI protocol codec for grid-style Launchpad controllers."""

__version__ = "0.1.0"

from .devices.launchpad import LaunchpadMiniMK3Output, LaunchpadMiniMK3Spec, decode_message

__all__ = [
    "LaunchpadMiniMK3Output",
    "LaunchpadMiniMK3Spec",
    "decode_message",
]
