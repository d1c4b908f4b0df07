"""Button identity for the Launchpad grid and control keys.

Logical grid coordinates put ``(0, 0)`` at the top-left pad; ``x`` grows to
the right and ``y`` grows downwards. Column ``x = 8`` is the column of side
(scene) buttons to the right of the 8x8 grid.

Absolute coordinates cover the full 9x9 bounding box of the device::

    y=0:  C0 C1 C2 C3 C4 C5 C6 C7 (logo)     control buttons
    y=1:  G  G  G  G  G  G  G  G  S          grid row 0 + side button
    ...
    y=8:  G  G  G  G  G  G  G  G  S          grid row 7 + side button
"""

from typing import Union

from pydantic import BaseModel, ConfigDict, Field


class GridButton(BaseModel):
    """A pad on the grid (including the side column at ``x = 8``)."""

    model_config = ConfigDict(frozen=True)

    x: int = Field(strict=True, ge=0, le=8, description="Column (0-8)")
    y: int = Field(strict=True, ge=0, le=7, description="Row from the top (0-7)")

    @property
    def abs_x(self) -> int:
        return self.x

    @property
    def abs_y(self) -> int:
        return self.y + 1


class ControlButton(BaseModel):
    """One of the eight control keys along the top edge."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(strict=True, ge=0, le=7, description="Control key index, left to right (0-7)")

    @property
    def abs_x(self) -> int:
        return self.index

    @property
    def abs_y(self) -> int:
        return 0


Button = Union[GridButton, ControlButton]


def button_from_abs(x: int, y: int) -> Button:
    """
    Create a button from absolute bounding-box coordinates.

    Args:
        x: Absolute column (0-8)
        y: Absolute row (0-8), row 0 being the control row

    Returns:
        ControlButton for row 0, GridButton otherwise

    Raises:
        pydantic.ValidationError: If the coordinates do not name a button
    """
    if y == 0:
        return ControlButton(index=x)
    return GridButton(x=x, y=y - 1)
