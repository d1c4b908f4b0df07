"""Identity payloads returned by the device inquiry exchanges."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field


class DeviceIdQuery(BaseModel):
    """Which device a device inquiry is addressed to (127 = any device)."""

    model_config = ConfigDict(frozen=True)

    ANY_DEVICE: ClassVar[int] = 127

    device_id: int = Field(default=127, ge=0, le=127)

    @classmethod
    def any(cls) -> "DeviceIdQuery":
        return cls(device_id=cls.ANY_DEVICE)

    @classmethod
    def specific(cls, device_id: int) -> "DeviceIdQuery":
        return cls(device_id=device_id)


class DeviceInquiry(BaseModel):
    """Parsed universal device inquiry response."""

    model_config = ConfigDict(frozen=True)

    device_id: int
    manufacturer_id: tuple[int, int, int]
    family_code: int
    family_member_code: int
    firmware_revision: int


class VersionInquiry(BaseModel):
    """Parsed firmware version inquiry response."""

    model_config = ConfigDict(frozen=True)

    bootloader_version: int
    firmware_version: int
    bootloader_size: int
