"""Pydantic-based device configuration.

A DeviceConfig carries what differs between otherwise identical devices:
how to recognise their MIDI ports and the SysEx header for model-specific
commands.
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator



class DeviceConfig(BaseModel):
    """Runtime configuration for one device model."""

    model: str = Field(min_length=1, description="Device model name")
    manufacturer: str = Field(default="Novation", description="Manufacturer name")
    detection_patterns: list[str] = Field(
        default_factory=list,
        description="Patterns for detecting this device in port names"
    )
    exclude_patterns: list[str] = Field(
        default_factory=list,
        description="Port patterns to skip even when a detection pattern matches"
    )
    sysex_header: list[int] = Field(
        description="SysEx header bytes for model-specific commands (excluding F0)"
    )

    @field_validator("sysex_header")
    @classmethod
    def validate_sysex_header(cls, v: list[int]) -> list[int]:
        """Validate SysEx header bytes are in valid range."""
        for byte in v:
            if not 0 <= byte <= 127:
                raise ValueError(f"SysEx byte {byte} out of range (0-127)")
        return v

    @property
    def display_name(self) -> str:
        """Human-readable device name."""
        return f"{self.manufacturer} {self.model}"

    def matches(self, port_name: str) -> bool:
        """Check if port name matches this device's detection patterns."""
        if any(excl in port_name for excl in self.exclude_patterns):
            return False
        return any(pattern in port_name for pattern in self.detection_patterns)

    def select_port(self, ports: list[str]) -> Optional[str]:
        """
        Select the first port matching this device.

        Args:
            ports: Available port names

        Returns:
            Selected port name or None if nothing matches
        """
        for port in ports:
            if self.matches(port):
                return port
        return None

    @classmethod
    def from_json_file(cls, path: Path) -> "DeviceConfig":
        """Load a device configuration from a JSON file with validation."""
        with open(path) as f:
            return cls.model_validate_json(f.read())

    def to_json_file(self, path: Path, indent: int = 2) -> None:
        """Save the configuration to a JSON file."""
        with open(path, "w") as f:
            f.write(self.model_dump_json(indent=indent))


LAUNCHPAD_MINI_MK3 = DeviceConfig(
    model="Launchpad Mini MK3",
    detection_patterns=["LPMiniMK3", "Launchpad Mini MK3"],
    # The DAW port shares the name prefix but does not accept programmer traffic
    exclude_patterns=["DAW"],
    sysex_header=[0x00, 0x20, 0x29, 0x02, 0x0D],
)
