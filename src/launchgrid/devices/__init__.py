"""Device configuration, collaborator protocols and device implementations."""

from .config import LAUNCHPAD_MINI_MK3, DeviceConfig
from .protocols import ByteSink, ByteSource, DeviceSpec

__all__ = [
    "LAUNCHPAD_MINI_MK3",
    "ByteSink",
    "ByteSource",
    "DeviceConfig",
    "DeviceSpec",
]
