"""Launchpad Mini MK3 output: one encoder operation per device command."""

import itertools
import logging
from collections.abc import Iterable
from typing import Optional, Union

from launchgrid.devices.config import LAUNCHPAD_MINI_MK3, DeviceConfig
from launchgrid.devices.protocols import ByteSink
from launchgrid.exceptions import InvalidArgumentError
from launchgrid.models import (
    Brightness,
    Button,
    DeviceIdQuery,
    DoubleBuffering,
    DoubleBufferingBehavior,
    GridMappingMode,
    PaletteColor,
    RgbColor,
)

from . import frames
from .inquiry import build_device_inquiry_request, build_version_inquiry_request
from .mapper import LaunchpadMiniMK3Mapper
from .sysex import MAX_LIGHTING_SPECS, RGB_LIGHTING_SPEC, LaunchpadSysEx

logger = logging.getLogger(__name__)

ColorLike = Union[PaletteColor, int]


class LaunchpadMiniMK3Output:
    """
    Output controller for the Launchpad Mini MK3.

    Every operation builds exactly one frame (``set_all_buttons`` is the
    exception, sending 40) and hands it to the byte-sink. Arguments are
    range-checked first; ``InvalidArgumentError`` means nothing was sent.
    ``TransportError`` from the sink propagates unchanged and is not retried.
    """

    def __init__(self, sink: ByteSink, config: DeviceConfig = LAUNCHPAD_MINI_MK3):
        """
        Initialize output controller.

        Args:
            sink: Byte-sink that delivers frames to the device
            config: Device configuration with SysEx header
        """
        self.sink = sink
        self.config = config
        self.mapper = LaunchpadMiniMK3Mapper
        self.sysex = LaunchpadSysEx(config.sysex_header)

    @classmethod
    def connect(
        cls, sink: ByteSink, config: DeviceConfig = LAUNCHPAD_MINI_MK3
    ) -> "LaunchpadMiniMK3Output":
        """Create an output and run the connection setup sequence."""
        output = cls(sink, config)
        output.change_grid_mapping_mode(GridMappingMode.SESSION)
        logger.info(f"Connected to {config.display_name}")
        return output

    def send(self, data: list[int]) -> None:
        logger.debug(f"Sending {data}")
        self.sink.send(data)

    def set_button(
        self,
        button: Button,
        color: ColorLike,
        behavior: DoubleBufferingBehavior = DoubleBufferingBehavior.COPY,
    ) -> None:
        """
        Set a ``button`` to a palette ``color``.

        For example to set the leftmost control button to yellow::

            output.set_button(ControlButton(index=0), PaletteColor.YELLOW)
        """
        light_code = frames.make_color_code(PaletteColor.coerce(color), behavior)
        self.send(frames.set_button(self.mapper.encode_button(button), light_code))

    def light_multiple_rgb(self, buttons: Iterable[tuple[Button, RgbColor]]) -> None:
        """
        Light multiple buttons with varying RGB color in one frame.

        For example to light the top left button blue and the top right
        button red::

            output.light_multiple_rgb([
                (GridButton(x=0, y=0), RgbColor(r=0, g=0, b=63)),
                (GridButton(x=7, y=0), RgbColor(r=63, g=0, b=0)),
            ])

        Raises:
            InvalidArgumentError: If more than 80 buttons are given, or a
                color is not an in-range RgbColor
        """
        # Read one past the limit so an endless iterator is still rejected
        pairs = list(itertools.islice(buttons, MAX_LIGHTING_SPECS + 1))
        if len(pairs) > MAX_LIGHTING_SPECS:
            raise InvalidArgumentError("buttons", len(pairs), "at most 80 buttons per frame")

        specs = []
        for button, color in pairs:
            if not isinstance(color, RgbColor):
                raise InvalidArgumentError("color", color, "must be an RgbColor")
            r, g, b = color.check().to_rgb_tuple()
            specs.append((RGB_LIGHTING_SPEC, self.mapper.encode_button(button), r, g, b))

        self.send(self.sysex.led_lighting(specs))

    def set_button_rapid(
        self,
        color1: ColorLike,
        dbb1: DoubleBufferingBehavior,
        color2: ColorLike,
        dbb2: DoubleBufferingBehavior,
    ) -> None:
        """
        Light the next two LEDs in rapid-update order.

        The device keeps a cursor that walks the 8x8 grid left-to-right,
        top-to-bottom, then the scene launch buttons top-to-bottom, then the
        top buttons left-to-right. Overflowing data is ignored. Sending any
        other message and then this one again resets the cursor.
        """
        self.send(
            frames.set_button_rapid(
                frames.make_color_code(PaletteColor.coerce(color1), dbb1),
                frames.make_color_code(PaletteColor.coerce(color2), dbb2),
            )
        )

    def set_programmer_mode(self) -> None:
        self.send(self.sysex.programmer_mode())

    def turn_on_all_leds(self, brightness: Brightness) -> None:
        """
        Turn on all LEDs at one of four fixed brightness levels.

        Mainly a diagnostics tool to check that the device responds.
        According to the device documentation this also resets various
        settings (see ``reset``), though in practice that is inconsistent.
        """
        self.send(frames.turn_on_all_leds(brightness))

    def set_duty_cycle(self, numerator: int, denominator: int) -> None:
        """
        Set the proportion of multiplex passes low/medium LEDs are lit for.

        The default duty cycle is 1/5. Lower ratios increase contrast between
        brightness levels but also flicker; ratios of 1/8 or less flicker
        noticeably over large areas.

        Raises:
            InvalidArgumentError: If numerator is outside 1-16 or denominator outside 3-18
        """
        self.send(frames.set_duty_cycle(numerator, denominator))

    def control_double_buffering(self, d: DoubleBuffering) -> None:
        """
        Configure double buffering.

        Sending this also resets the flash timer, so it can resynchronise
        the flash rate of several devices.
        """
        self.send(frames.control_double_buffering(d))

    def scroll_text(self, text: Union[str, bytes], color: ColorLike, should_loop: bool = False) -> None:
        """
        Scroll ``text`` across the grid.

        A ``TextEndedOrLooped`` message arrives when the scroll ends or
        completes a loop.

        Raises:
            InvalidArgumentError: If the text contains non 7-bit characters
        """
        if isinstance(text, str):
            try:
                text = text.encode("ascii")
            except UnicodeEncodeError as e:
                raise InvalidArgumentError("text", text, "must be ASCII") from e
        if any(byte > 127 for byte in text):
            raise InvalidArgumentError("text", text, "bytes must be 0-127")

        color_code = frames.make_color_code_loopable(PaletteColor.coerce(color), should_loop)
        self.send(self.sysex.scroll_text(color_code, text))

    def request_device_inquiry(self, query: Optional[DeviceIdQuery] = None) -> None:
        """Ask the device to identify itself; the answer is a DeviceInquiryResponse."""
        self.send(build_device_inquiry_request(query or DeviceIdQuery.any()))

    def request_version_inquiry(self) -> None:
        """Ask for firmware versions; the answer is a VersionInquiryResponse."""
        self.send(build_version_inquiry_request())

    def change_grid_mapping_mode(self, mode: GridMappingMode) -> None:
        self.send(self.sysex.grid_mapping_mode(mode.value))

    # -----------------------------
    # Shorthand functions:
    # -----------------------------

    def reset(self) -> None:
        """Turn off all LEDs and reset mapping mode, buffer settings and duty cycle."""
        self.turn_on_all_leds(Brightness.OFF)

    def set_all_buttons(
        self,
        color: ColorLike,
        behavior: DoubleBufferingBehavior = DoubleBufferingBehavior.COPY,
    ) -> None:
        """Light every button using 40 rapid updates."""
        color = PaletteColor.coerce(color)
        for _ in range(40):
            self.set_button_rapid(color, behavior, color, behavior)

    def light(self, button: Button, color: ColorLike) -> None:
        self.set_button(button, color, DoubleBufferingBehavior.COPY)

    def light_all(self, color: ColorLike) -> None:
        """
        Light all buttons, including control and side buttons.

        For example to clear the grid::

            output.light_all(PaletteColor.BLACK)
        """
        self.send(self.sysex.light_all(PaletteColor.coerce(color).id))

    def clear(self) -> None:
        """Clear all buttons. Equivalent to ``light_all(PaletteColor.BLACK)``."""
        self.light_all(PaletteColor.BLACK)
