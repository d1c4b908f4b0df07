"""Decode and encode commands."""

import logging
from typing import Optional

import click
import mido
from pydantic import ValidationError

from launchgrid.devices import DeviceConfig
from launchgrid.devices.launchpad import LaunchpadMiniMK3Output, decode_message
from launchgrid.exceptions import LaunchGridError, TransportError, wrap_pydantic_error
from launchgrid.midi import MidoPortSink, RecordingSink
from launchgrid.models import (
    Brightness,
    Buffer,
    ControlButton,
    DeviceIdQuery,
    DoubleBuffering,
    GridButton,
    GridMappingMode,
)

logger = logging.getLogger(__name__)


def parse_byte(value: str) -> int:
    """Parse a decimal or 0x-prefixed hex byte."""
    try:
        byte = int(value, 0)
    except ValueError as e:
        raise click.BadParameter(f"{value!r} is not a number") from e
    if not 0 <= byte <= 255:
        raise click.BadParameter(f"{value!r} is not a byte (0-255)")
    return byte


def to_click_error(error: Exception) -> click.ClickException:
    """Convert a codec error to a click error showing the recovery hint."""
    if isinstance(error, ValidationError):
        error = wrap_pydantic_error(error)
    return click.ClickException(error.get_full_message())


def format_frame(frame: list[int], as_hex: bool) -> str:
    if as_hex:
        return " ".join(f"{byte:02X}" for byte in frame)
    return ", ".join(str(byte) for byte in frame)


@click.command()
@click.argument("data", nargs=-1, required=True)
@click.option("--timestamp", type=int, default=0, help="Timestamp to decode with")
def decode(data: tuple[str, ...], timestamp: int):
    """
    Decode one raw frame given as decimal or 0x-prefixed hex bytes.

    \b
    Example:
      launchgrid decode 0x90 11 127
    """
    frame = [parse_byte(value) for value in data]
    click.echo(repr(decode_message(timestamp, frame)))


@click.group(name="encode")
@click.option("--hex", "as_hex", is_flag=True, help="Print frames as hex")
@click.option("--send", is_flag=True, help="Send to the device instead of printing")
@click.option("--port", default=None, help="Output port name (default: first matching port)")
@click.pass_context
def encode_group(ctx, as_hex: bool, send: bool, port: Optional[str]):
    """Build the frame for one encoder operation."""
    ctx.obj["as_hex"] = as_hex
    ctx.obj["send"] = send
    ctx.obj["port"] = port


def run_operation(ctx: click.Context, operation) -> None:
    """Run ``operation(output)`` against a recording sink or a real port."""
    config: DeviceConfig = ctx.obj["config"]
    if not ctx.obj["send"]:
        sink = RecordingSink()
        try:
            operation(LaunchpadMiniMK3Output(sink, config))
        except (LaunchGridError, ValidationError) as e:
            raise to_click_error(e) from e
        for frame in sink.frames:
            click.echo(format_frame(frame, ctx.obj["as_hex"]))
        return

    port_name = ctx.obj["port"] or config.select_port(mido.get_output_names())
    if not port_name:
        raise click.ClickException(f"No MIDI output found for {config.display_name}")

    try:
        with mido.open_output(port_name) as port:
            output = LaunchpadMiniMK3Output.connect(MidoPortSink(port), config)
            operation(output)
    except (OSError, TransportError) as e:
        logger.error(f"Failed to send to {port_name}: {e}")
        raise click.ClickException(f"Failed to send to {port_name}: {e}") from e
    except (LaunchGridError, ValidationError) as e:
        raise to_click_error(e) from e

    click.echo(f"Sent to {port_name}")


@encode_group.command(name="button")
@click.argument("x", type=int)
@click.argument("y", type=int)
@click.argument("color", type=int)
@click.pass_context
def encode_button(ctx, x: int, y: int, color: int):
    """Light grid button X,Y with palette COLOR."""
    run_operation(ctx, lambda output: output.light(GridButton(x=x, y=y), color))


@encode_group.command(name="control")
@click.argument("index", type=int)
@click.argument("color", type=int)
@click.pass_context
def encode_control(ctx, index: int, color: int):
    """Light control button INDEX with palette COLOR."""
    run_operation(ctx, lambda output: output.light(ControlButton(index=index), color))


@encode_group.command(name="light-all")
@click.argument("color", type=int)
@click.pass_context
def encode_light_all(ctx, color: int):
    """Light every button with palette COLOR."""
    run_operation(ctx, lambda output: output.light_all(color))


@encode_group.command(name="clear")
@click.pass_context
def encode_clear(ctx):
    """Turn every button off."""
    run_operation(ctx, lambda output: output.clear())


@encode_group.command(name="reset")
@click.pass_context
def encode_reset(ctx):
    """Reset the device LEDs and settings."""
    run_operation(ctx, lambda output: output.reset())


@encode_group.command(name="brightness")
@click.argument(
    "level", type=click.Choice([b.name.lower() for b in Brightness], case_sensitive=False)
)
@click.pass_context
def encode_brightness(ctx, level: str):
    """Turn on all LEDs at LEVEL."""
    run_operation(ctx, lambda output: output.turn_on_all_leds(Brightness[level.upper()]))


@encode_group.command(name="duty-cycle")
@click.argument("numerator", type=int)
@click.argument("denominator", type=int)
@click.pass_context
def encode_duty_cycle(ctx, numerator: int, denominator: int):
    """Set the LED duty cycle to NUMERATOR/DENOMINATOR."""
    run_operation(ctx, lambda output: output.set_duty_cycle(numerator, denominator))


@encode_group.command(name="buffering")
@click.option("--copy", is_flag=True, help="Copy displayed buffer into the updating one")
@click.option("--flash", is_flag=True, help="Flip buffers continually")
@click.option("--edited", type=click.Choice(["a", "b"]), default="a", help="Updating buffer")
@click.option("--displayed", type=click.Choice(["a", "b"]), default="a", help="Displayed buffer")
@click.pass_context
def encode_buffering(ctx, copy: bool, flash: bool, edited: str, displayed: str):
    """Configure double buffering."""
    d = DoubleBuffering(
        copy=copy,
        flash=flash,
        edited_buffer=Buffer[edited.upper()],
        displayed_buffer=Buffer[displayed.upper()],
    )
    run_operation(ctx, lambda output: output.control_double_buffering(d))


@encode_group.command(name="scroll")
@click.argument("text")
@click.option("--color", type=int, default=3, help="Palette color (default: white)")
@click.option("--loop", is_flag=True, help="Loop the scroll")
@click.pass_context
def encode_scroll(ctx, text: str, color: int, loop: bool):
    """Scroll TEXT across the grid."""
    run_operation(ctx, lambda output: output.scroll_text(text, color, loop))


@encode_group.command(name="programmer-mode")
@click.pass_context
def encode_programmer_mode(ctx):
    """Switch the device to programmer mode."""
    run_operation(ctx, lambda output: output.set_programmer_mode())


@encode_group.command(name="grid-mode")
@click.argument("mode", type=click.Choice(["session", "drum-rack"]))
@click.pass_context
def encode_grid_mode(ctx, mode: str):
    """Change the grid note layout."""
    grid_mode = GridMappingMode[mode.replace("-", "_").upper()]
    run_operation(ctx, lambda output: output.change_grid_mapping_mode(grid_mode))


@encode_group.command(name="device-inquiry")
@click.option("--device-id", type=int, default=DeviceIdQuery.ANY_DEVICE, help="Device id (127 = any)")
@click.pass_context
def encode_device_inquiry(ctx, device_id: int):
    """Request the device identity."""
    run_operation(
        ctx, lambda output: output.request_device_inquiry(DeviceIdQuery.specific(device_id))
    )


@encode_group.command(name="version-inquiry")
@click.pass_context
def encode_version_inquiry(ctx):
    """Request the firmware versions."""
    run_operation(ctx, lambda output: output.request_version_inquiry())
