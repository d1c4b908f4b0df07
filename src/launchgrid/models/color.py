"""Color models for LED control.

The device understands two color representations:

- ``PaletteColor``: an index (0-127) into the fixed on-device palette
- ``RgbColor``: direct RGB with 6-bit channels (0-63)

Both models are frozen to ensure hashability, so they can key an
application's LED-state cache.
"""

from typing import ClassVar, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from launchgrid.exceptions import InvalidArgumentError, wrap_pydantic_error


class PaletteColor(BaseModel):
    """A color from the device palette.

    Everywhere a PaletteColor is expected by the encoder, the raw palette
    index may be passed instead::

        output.light_all(PaletteColor(id=92))
        output.light_all(92)
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(strict=True, ge=0, le=127, description="Palette index (0-127)")

    # Basic colors, the top row of the palette
    BLACK: ClassVar["PaletteColor"]
    DARK_GRAY: ClassVar["PaletteColor"]
    LIGHT_GRAY: ClassVar["PaletteColor"]
    WHITE: ClassVar["PaletteColor"]

    # Third column from the right
    RED: ClassVar["PaletteColor"]
    YELLOW: ClassVar["PaletteColor"]
    GREEN: ClassVar["PaletteColor"]
    SLIGHTLY_LIGHT_GREEN: ClassVar["PaletteColor"]
    LIGHT_BLUE: ClassVar["PaletteColor"]
    BLUE: ClassVar["PaletteColor"]
    MAGENTA: ClassVar["PaletteColor"]
    BROWN: ClassVar["PaletteColor"]

    CYAN: ClassVar["PaletteColor"]

    @classmethod
    def coerce(cls, value: Union["PaletteColor", int]) -> "PaletteColor":
        """
        Accept either a PaletteColor or a raw palette index.

        Args:
            value: PaletteColor instance or integer palette index

        Returns:
            PaletteColor

        Raises:
            InvalidArgumentError: If the index is outside 0-127
        """
        if isinstance(value, cls):
            # model_construct() skips validation
            if isinstance(value.id, bool) or not isinstance(value.id, int) or not 0 <= value.id <= 127:
                raise InvalidArgumentError("color", value.id, "palette index must be an integer 0-127")
            return value
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgumentError("color", value, "palette index must be an integer 0-127")
        try:
            return cls(id=value)
        except ValidationError as e:
            raise wrap_pydantic_error(e) from e


PaletteColor.BLACK = PaletteColor(id=0)
PaletteColor.DARK_GRAY = PaletteColor(id=1)
PaletteColor.LIGHT_GRAY = PaletteColor(id=2)
PaletteColor.WHITE = PaletteColor(id=3)
PaletteColor.RED = PaletteColor(id=5)
PaletteColor.YELLOW = PaletteColor(id=13)
PaletteColor.GREEN = PaletteColor(id=21)
PaletteColor.SLIGHTLY_LIGHT_GREEN = PaletteColor(id=29)
PaletteColor.LIGHT_BLUE = PaletteColor(id=37)
PaletteColor.BLUE = PaletteColor(id=45)
PaletteColor.MAGENTA = PaletteColor(id=53)
PaletteColor.BROWN = PaletteColor(id=61)
# Not part of the column above but cyan is too useful to leave out
PaletteColor.CYAN = PaletteColor(id=90)


class RgbColor(BaseModel):
    """An RGB color. Each channel may only go up to 63."""

    model_config = ConfigDict(frozen=True)

    r: int = Field(strict=True, ge=0, le=63, description="Red (0-63)")
    g: int = Field(strict=True, ge=0, le=63, description="Green (0-63)")
    b: int = Field(strict=True, ge=0, le=63, description="Blue (0-63)")

    @classmethod
    def off(cls) -> "RgbColor":
        """Create off (black) color."""
        return cls(r=0, g=0, b=0)

    def with_red(self, r: int) -> "RgbColor":
        return RgbColor(r=r, g=self.g, b=self.b)

    def with_green(self, g: int) -> "RgbColor":
        return RgbColor(r=self.r, g=g, b=self.b)

    def with_blue(self, b: int) -> "RgbColor":
        return RgbColor(r=self.r, g=self.g, b=b)

    def check(self) -> "RgbColor":
        """
        Re-check the channel bounds of an instance that may have skipped validation.

        Raises:
            InvalidArgumentError: If a channel is outside 0-63
        """
        for name, value in (("r", self.r), ("g", self.g), ("b", self.b)):
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 63:
                raise InvalidArgumentError(name, value, f"0 <= {name} <= 63")
        return self

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)
