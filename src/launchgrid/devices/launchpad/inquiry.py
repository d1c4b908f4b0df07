"""
Device and version inquiry exchanges.

Device inquiry is the universal MIDI identity request::

    request:  F0 7E <id> 06 01 F7
    response: F0 7E <id> 06 02 <m1 m2 m3> <f1 f2> <fm1 fm2> <r1 r2 r3 r4> F7

Two-byte family codes are 7-bit, least significant byte first. The four
revision bytes are decimal digits.

Version inquiry is Novation-specific::

    request:  F0 00 20 29 00 70 F7
    response: F0 00 20 29 00 70 <bootloader x5> <firmware x5> <size hi lo> F7

Parsers return None for frames that do not match, so the decoder can fall
through to other message kinds.
"""

from collections.abc import Sequence
from typing import Optional

from launchgrid.models import DeviceIdQuery, DeviceInquiry, VersionInquiry

from .sysex import NOVATION_MANUFACTURER_ID, SYSEX_END, SYSEX_START, wrap

UNIVERSAL_NON_REALTIME = 0x7E
GENERAL_INFORMATION = 0x06
IDENTITY_REQUEST = 0x01
IDENTITY_REPLY = 0x02

VERSION_INQUIRY_HEADER = [*NOVATION_MANUFACTURER_ID, 0x00, 0x70]

DEVICE_INQUIRY_RESPONSE_LENGTH = 17
VERSION_INQUIRY_RESPONSE_LENGTH = 19


def _digits(data: Sequence[int]) -> int:
    """Combine a run of decimal digit bytes into one number."""
    value = 0
    for digit in data:
        value = value * 10 + digit
    return value


def build_device_inquiry_request(query: DeviceIdQuery) -> list[int]:
    return wrap([UNIVERSAL_NON_REALTIME, query.device_id, GENERAL_INFORMATION, IDENTITY_REQUEST])


def build_version_inquiry_request() -> list[int]:
    return wrap(VERSION_INQUIRY_HEADER)


def parse_device_inquiry(data: Sequence[int]) -> Optional[DeviceInquiry]:
    """
    Parse a device inquiry response frame.

    Args:
        data: One complete incoming frame

    Returns:
        DeviceInquiry, or None if the frame is not a device inquiry response
    """
    if len(data) != DEVICE_INQUIRY_RESPONSE_LENGTH:
        return None
    if data[0] != SYSEX_START or data[-1] != SYSEX_END:
        return None
    if data[1] != UNIVERSAL_NON_REALTIME or list(data[3:5]) != [GENERAL_INFORMATION, IDENTITY_REPLY]:
        return None

    return DeviceInquiry(
        device_id=data[2],
        manufacturer_id=(data[5], data[6], data[7]),
        family_code=data[8] | (data[9] << 7),
        family_member_code=data[10] | (data[11] << 7),
        firmware_revision=_digits(data[12:16]),
    )


def parse_version_inquiry(data: Sequence[int]) -> Optional[VersionInquiry]:
    """
    Parse a version inquiry response frame.

    Args:
        data: One complete incoming frame

    Returns:
        VersionInquiry, or None if the frame is not a version inquiry response
    """
    if len(data) != VERSION_INQUIRY_RESPONSE_LENGTH:
        return None
    if data[0] != SYSEX_START or data[-1] != SYSEX_END:
        return None
    if list(data[1:6]) != VERSION_INQUIRY_HEADER:
        return None

    return VersionInquiry(
        bootloader_version=_digits(data[6:11]),
        firmware_version=_digits(data[11:16]),
        bootloader_size=(data[16] << 7) | data[17],
    )
