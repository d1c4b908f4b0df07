"""Value model for the Launchpad codec."""

from .buffering import DoubleBuffering
from .button import Button, ControlButton, GridButton, button_from_abs
from .color import PaletteColor, RgbColor
from .enums import Brightness, Buffer, DoubleBufferingBehavior, GridMappingMode
from .inquiry import DeviceIdQuery, DeviceInquiry, VersionInquiry
from .messages import (
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

__all__ = [
    "Brightness",
    "Buffer",
    "Button",
    "ControlButton",
    "DeviceIdQuery",
    "DeviceInquiry",
    "DeviceInquiryResponse",
    "DoubleBuffering",
    "DoubleBufferingBehavior",
    "GridButton",
    "GridMappingMode",
    "Message",
    "PaletteColor",
    "Pass",
    "Press",
    "ProgrammerMode",
    "Release",
    "RgbColor",
    "TextEndedOrLooped",
    "UnexpectedValue",
    "VersionInquiry",
    "VersionInquiryResponse",
    "button_from_abs",
]
