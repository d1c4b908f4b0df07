"""Unit tests for LaunchpadMiniMK3Output."""

import itertools

import pytest

from launchgrid.devices.launchpad import LaunchpadMiniMK3Output
from launchgrid.exceptions import InvalidArgumentError, TransportError
from launchgrid.models import (
    Brightness,
    Buffer,
    ControlButton,
    DeviceIdQuery,
    DoubleBuffering,
    DoubleBufferingBehavior,
    GridButton,
    GridMappingMode,
    PaletteColor,
    RgbColor,
)

from .conftest import sent_frames


class TestConnection:
    """Test the connection setup sequence."""

    @pytest.mark.unit
    def test_connect_selects_session_layout(self, mock_sink):
        LaunchpadMiniMK3Output.connect(mock_sink)

        assert sent_frames(mock_sink) == [[240, 0, 32, 41, 2, 24, 34, 0, 247]]

    @pytest.mark.unit
    def test_constructor_sends_nothing(self, mock_sink):
        LaunchpadMiniMK3Output(mock_sink)

        assert not mock_sink.send.called

    @pytest.mark.unit
    def test_drum_rack_layout(self, output, mock_sink):
        output.change_grid_mapping_mode(GridMappingMode.DRUM_RACK)

        assert sent_frames(mock_sink) == [[240, 0, 32, 41, 2, 24, 34, 1, 247]]


class TestSetButton:
    """Test single-button lighting."""

    @pytest.mark.unit
    def test_grid_button(self, output, mock_sink):
        output.set_button(GridButton(x=0, y=0), PaletteColor.RED, DoubleBufferingBehavior.NONE)

        assert sent_frames(mock_sink) == [[0x90, 81, 5]]

    @pytest.mark.unit
    def test_control_button(self, output, mock_sink):
        output.set_button(ControlButton(index=0), PaletteColor.RED, DoubleBufferingBehavior.NONE)

        assert sent_frames(mock_sink) == [[0x90, 104, 5]]

    @pytest.mark.unit
    def test_behavior_flags_are_packed(self, output, mock_sink):
        output.set_button(GridButton(x=0, y=7), PaletteColor.WHITE, DoubleBufferingBehavior.COPY)
        output.set_button(GridButton(x=0, y=7), PaletteColor.WHITE, DoubleBufferingBehavior.CLEAR)

        assert sent_frames(mock_sink) == [[0x90, 11, 3 | 4], [0x90, 11, 3 | 8]]

    @pytest.mark.unit
    def test_light_uses_copy(self, output, mock_sink):
        output.light(GridButton(x=8, y=7), PaletteColor.BLACK)

        assert sent_frames(mock_sink) == [[0x90, 19, 4]]

    @pytest.mark.unit
    def test_accepts_raw_palette_index(self, output, mock_sink):
        output.set_button(GridButton(x=0, y=0), 1, DoubleBufferingBehavior.NONE)

        assert sent_frames(mock_sink) == [[0x90, 81, 1]]

    @pytest.mark.unit
    def test_invalid_palette_index(self, output, mock_sink):
        with pytest.raises(InvalidArgumentError):
            output.set_button(GridButton(x=0, y=0), 128)

        assert not mock_sink.send.called


class TestLightMultipleRgb:
    """Test batched RGB lighting."""

    @pytest.mark.unit
    def test_two_buttons(self, output, mock_sink):
        output.light_multiple_rgb([
            (GridButton(x=0, y=0), RgbColor(r=0, g=0, b=63)),
            (GridButton(x=7, y=0), RgbColor(r=63, g=0, b=0)),
        ])

        assert sent_frames(mock_sink) == [[
            240, 0, 32, 41, 2, 13, 3,
            3, 81, 0, 0, 63,
            3, 88, 63, 0, 0,
            247,
        ]]

    @pytest.mark.unit
    def test_control_button(self, output, mock_sink):
        output.light_multiple_rgb([(ControlButton(index=2), RgbColor(r=1, g=2, b=3))])

        assert sent_frames(mock_sink) == [[240, 0, 32, 41, 2, 13, 3, 3, 106, 1, 2, 3, 247]]

    @pytest.mark.unit
    def test_accepts_generator(self, output, mock_sink):
        output.light_multiple_rgb(
            (GridButton(x=x, y=0), RgbColor.off()) for x in range(3)
        )

        frame = sent_frames(mock_sink)[0]
        assert len(frame) == 7 + 3 * 5 + 1

    @pytest.mark.unit
    def test_eighty_buttons_allowed(self, output, mock_sink):
        pairs = [(GridButton(x=x, y=y), RgbColor.off()) for x in range(9) for y in range(8)]
        pairs += [(ControlButton(index=i), RgbColor.off()) for i in range(8)]
        assert len(pairs) == 80

        output.light_multiple_rgb(pairs)

        assert mock_sink.send.call_count == 1

    @pytest.mark.unit
    def test_more_than_eighty_rejected_before_sending(self, output, mock_sink):
        pairs = [(GridButton(x=0, y=0), RgbColor.off())] * 81

        with pytest.raises(InvalidArgumentError) as exc_info:
            output.light_multiple_rgb(pairs)

        assert exc_info.value.value == 81
        assert not mock_sink.send.called

    @pytest.mark.unit
    def test_palette_color_rejected(self, output, mock_sink):
        with pytest.raises(InvalidArgumentError):
            output.light_multiple_rgb([(GridButton(x=0, y=0), PaletteColor.RED)])

        assert not mock_sink.send.called

    @pytest.mark.unit
    def test_unvalidated_channel_rejected(self, output, mock_sink):
        color = RgbColor.model_construct(r=200, g=0, b=0)

        with pytest.raises(InvalidArgumentError) as exc_info:
            output.light_multiple_rgb([(GridButton(x=0, y=0), color)])

        assert exc_info.value.field == "r"
        assert exc_info.value.value == 200
        assert not mock_sink.send.called

    @pytest.mark.unit
    def test_endless_iterator_rejected(self, output, mock_sink):
        pairs = itertools.repeat((GridButton(x=0, y=0), RgbColor.off()))

        with pytest.raises(InvalidArgumentError):
            output.light_multiple_rgb(pairs)

        assert not mock_sink.send.called


class TestDeviceCommands:
    """Test mode, brightness and timing commands."""

    @pytest.mark.unit
    def test_rapid_update(self, output, mock_sink):
        output.set_button_rapid(
            PaletteColor.RED, DoubleBufferingBehavior.NONE,
            PaletteColor.GREEN, DoubleBufferingBehavior.CLEAR,
        )

        assert sent_frames(mock_sink) == [[0x92, 5, 21 | 8]]

    @pytest.mark.unit
    def test_programmer_mode(self, output, mock_sink):
        output.set_programmer_mode()

        assert sent_frames(mock_sink) == [[240, 0, 32, 41, 2, 13, 14, 1, 247]]

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "brightness, code",
        [(Brightness.OFF, 0), (Brightness.LOW, 125), (Brightness.MEDIUM, 126), (Brightness.FULL, 127)],
    )
    def test_turn_on_all_leds(self, output, mock_sink, brightness, code):
        output.turn_on_all_leds(brightness)

        assert sent_frames(mock_sink) == [[0xB0, 0, code]]

    @pytest.mark.unit
    def test_duty_cycle_branch_boundary(self, output, mock_sink):
        output.set_duty_cycle(1, 3)
        output.set_duty_cycle(9, 3)

        assert sent_frames(mock_sink) == [[0xB0, 30, 0], [0xB0, 31, 0]]

    @pytest.mark.unit
    def test_duty_cycle_packing(self, output, mock_sink):
        output.set_duty_cycle(8, 18)
        output.set_duty_cycle(16, 18)
        output.set_duty_cycle(2, 5)

        assert sent_frames(mock_sink) == [[0xB0, 30, 127], [0xB0, 31, 127], [0xB0, 30, 18]]

    @pytest.mark.unit
    @pytest.mark.parametrize("numerator, denominator", [(0, 3), (17, 3), (1, 2), (1, 19)])
    def test_duty_cycle_out_of_range(self, output, mock_sink, numerator, denominator):
        with pytest.raises(InvalidArgumentError):
            output.set_duty_cycle(numerator, denominator)

        assert not mock_sink.send.called

    @pytest.mark.unit
    def test_double_buffering_default(self, output, mock_sink):
        output.control_double_buffering(DoubleBuffering())

        assert sent_frames(mock_sink) == [[0xB0, 0, 0b0010_0000]]

    @pytest.mark.unit
    def test_double_buffering_all_bits(self, output, mock_sink):
        output.control_double_buffering(
            DoubleBuffering(copy=True, flash=True, edited_buffer=Buffer.B, displayed_buffer=Buffer.B)
        )

        assert sent_frames(mock_sink) == [[0xB0, 0, 0b0011_1101]]

    @pytest.mark.unit
    def test_double_buffering_flash_only(self, output, mock_sink):
        output.control_double_buffering(DoubleBuffering(flash=True, edited_buffer=Buffer.B))

        assert sent_frames(mock_sink) == [[0xB0, 0, 0b0010_1100]]

    @pytest.mark.unit
    def test_set_button_rejects_raw_behavior(self, output, mock_sink):
        with pytest.raises(InvalidArgumentError):
            output.set_button(GridButton(x=0, y=0), PaletteColor.RED, 4)

        assert not mock_sink.send.called

    @pytest.mark.unit
    def test_turn_on_all_leds_rejects_raw_level(self, output, mock_sink):
        with pytest.raises(InvalidArgumentError):
            output.turn_on_all_leds(127)

        assert not mock_sink.send.called


class TestScrollText:
    """Test text scrolling."""

    @pytest.mark.unit
    def test_looping(self, output, mock_sink):
        output.scroll_text("Hi", PaletteColor.RED, should_loop=True)

        assert sent_frames(mock_sink) == [[240, 0, 32, 41, 9, 5 | 8, 72, 105, 247]]

    @pytest.mark.unit
    def test_not_looping_bytes(self, output, mock_sink):
        output.scroll_text(b"ok", PaletteColor.GREEN)

        assert sent_frames(mock_sink) == [[240, 0, 32, 41, 9, 21, 111, 107, 247]]

    @pytest.mark.unit
    def test_non_ascii_text(self, output, mock_sink):
        with pytest.raises(InvalidArgumentError):
            output.scroll_text("café", PaletteColor.RED)

        assert not mock_sink.send.called

    @pytest.mark.unit
    def test_high_bytes(self, output, mock_sink):
        with pytest.raises(InvalidArgumentError):
            output.scroll_text(b"\xff", PaletteColor.RED)


class TestInquiryRequests:
    """Test identity request frames."""

    @pytest.mark.unit
    def test_device_inquiry_any(self, output, mock_sink):
        output.request_device_inquiry()

        assert sent_frames(mock_sink) == [[240, 126, 127, 6, 1, 247]]

    @pytest.mark.unit
    def test_device_inquiry_specific(self, output, mock_sink):
        output.request_device_inquiry(DeviceIdQuery.specific(5))

        assert sent_frames(mock_sink) == [[240, 126, 5, 6, 1, 247]]

    @pytest.mark.unit
    def test_version_inquiry(self, output, mock_sink):
        output.request_version_inquiry()

        assert sent_frames(mock_sink) == [[240, 0, 32, 41, 0, 112, 247]]


class TestShorthands:
    """Test composed operations."""

    @pytest.mark.unit
    def test_light_all_black(self, output, mock_sink):
        output.light_all(PaletteColor.BLACK)

        assert sent_frames(mock_sink) == [[240, 0, 32, 41, 2, 24, 14, 0, 247]]

    @pytest.mark.unit
    def test_light_all_raw_index(self, output, mock_sink):
        output.light_all(92)

        assert sent_frames(mock_sink) == [[240, 0, 32, 41, 2, 24, 14, 92, 247]]

    @pytest.mark.unit
    def test_light_all_unvalidated_palette_rejected(self, output, mock_sink):
        with pytest.raises(InvalidArgumentError) as exc_info:
            output.light_all(PaletteColor.model_construct(id=200))

        assert exc_info.value.value == 200
        assert not mock_sink.send.called

    @pytest.mark.unit
    def test_clear(self, output, mock_sink):
        output.clear()

        assert sent_frames(mock_sink) == [[240, 0, 32, 41, 2, 24, 14, 0, 247]]

    @pytest.mark.unit
    def test_reset(self, output, mock_sink):
        output.reset()

        assert sent_frames(mock_sink) == [[0xB0, 0, 0]]

    @pytest.mark.unit
    def test_set_all_buttons(self, output, mock_sink):
        output.set_all_buttons(PaletteColor.RED, DoubleBufferingBehavior.NONE)

        assert sent_frames(mock_sink) == [[0x92, 5, 5]] * 40


class TestTransportFailure:
    """Test sink failures reach the caller."""

    @pytest.mark.unit
    def test_transport_error_propagates(self, output, mock_sink):
        mock_sink.send.side_effect = TransportError("send frame", "port closed")

        with pytest.raises(TransportError):
            output.clear()

        assert mock_sink.send.call_count == 1

    @pytest.mark.unit
    def test_set_all_buttons_stops_at_first_failure(self, output, mock_sink):
        mock_sink.send.side_effect = TransportError("send frame")

        with pytest.raises(TransportError):
            output.set_all_buttons(PaletteColor.RED)

        assert mock_sink.send.call_count == 1
