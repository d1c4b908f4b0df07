"""Decoded input messages.

Every incoming frame decodes to exactly one of these. They are frozen
dataclasses so they compare and hash by value.
"""

from dataclasses import dataclass

from .button import Button
from .inquiry import DeviceInquiry, VersionInquiry


class Message:
    """Base class of every decoded input message."""

    pass


@dataclass(frozen=True)
class Press(Message):
    """A button was pressed."""

    button: Button


@dataclass(frozen=True)
class Release(Message):
    """A button was released."""

    button: Button


@dataclass(frozen=True)
class TextEndedOrLooped(Message):
    """A text scroll ended or completed one loop."""


@dataclass(frozen=True)
class ProgrammerMode(Message):
    """The device acknowledged the switch to programmer mode."""


@dataclass(frozen=True)
class DeviceInquiryResponse(Message):
    """The response to a device inquiry request."""

    info: DeviceInquiry


@dataclass(frozen=True)
class VersionInquiryResponse(Message):
    """The response to a version inquiry request."""

    info: VersionInquiry


@dataclass(frozen=True)
class UnexpectedValue(Message):
    """A press/release frame carried a velocity other than 0 or 127."""

    button: Button
    value: int


@dataclass(frozen=True)
class Pass(Message):
    """A frame the codec does not act on. ``data`` holds the raw bytes."""

    data: tuple[int, ...] = ()
