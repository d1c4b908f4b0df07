"""Launchpad Mini MK3 codec."""

from .device import LaunchpadMiniMK3Spec
from .input import decode_message
from .inquiry import (
    build_device_inquiry_request,
    build_version_inquiry_request,
    parse_device_inquiry,
    parse_version_inquiry,
)
from .mapper import LaunchpadMiniMK3Mapper
from .output import LaunchpadMiniMK3Output
from .sysex import LaunchpadSysEx

__all__ = [
    "LaunchpadMiniMK3Mapper",
    "LaunchpadMiniMK3Output",
    "LaunchpadMiniMK3Spec",
    "LaunchpadSysEx",
    "build_device_inquiry_request",
    "build_version_inquiry_request",
    "decode_message",
    "parse_device_inquiry",
    "parse_version_inquiry",
]
