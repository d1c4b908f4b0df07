"""MIDI port commands."""

import logging

import click
import mido

from launchgrid.devices import DeviceConfig
from launchgrid.devices.launchpad import decode_message
from launchgrid.midi import iter_frames, list_ports
from launchgrid.models import Pass

logger = logging.getLogger(__name__)


@click.command()
@click.pass_context
def ports(ctx):
    """List available MIDI ports, marking those that match the device."""
    config: DeviceConfig = ctx.obj["config"]
    available = list_ports()

    for direction in ("input", "output"):
        click.echo(f"MIDI {direction.capitalize()} Ports:\n")
        if not available[direction]:
            click.echo(f"  No MIDI {direction} ports found.")
        for i, port in enumerate(available[direction]):
            marker = "*" if config.matches(port) else " "
            click.echo(f" {marker}[{i}] {port}")
        click.echo("")

    click.echo(f"* = matches {config.display_name}")


@click.command()
@click.argument("port_name", required=False)
@click.option("--show-pass/--hide-pass", default=False, help="Show frames that decode to Pass")
@click.pass_context
def monitor(ctx, port_name: str, show_pass: bool):
    """
    Decode messages from the device input port in real time.

    PORT_NAME defaults to the first input port matching the device config.

    Press Ctrl+C to stop.
    """
    config: DeviceConfig = ctx.obj["config"]
    port_name = port_name or config.select_port(mido.get_input_names())
    if not port_name:
        raise click.ClickException(f"No MIDI input found for {config.display_name}")

    click.echo(f"Monitoring {port_name}")
    click.echo("Press Ctrl+C to stop\n")

    try:
        with mido.open_input(port_name) as port:
            for timestamp, data in iter_frames(port):
                message = decode_message(timestamp, data)
                if isinstance(message, Pass) and not show_pass:
                    continue
                click.echo(f"[{timestamp}] {message!r}")
    except KeyboardInterrupt:
        click.echo("\nStopped monitoring")
    except OSError as e:
        logger.error(f"Failed to open {port_name}: {e}")
        raise click.ClickException(f"Failed to open {port_name}: {e}") from e
