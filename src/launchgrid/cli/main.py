"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError

from launchgrid.devices import LAUNCHPAD_MINI_MK3, DeviceConfig

from .commands import decode, encode_group, monitor, ports

logger = logging.getLogger(__name__)

_handler: Optional[logging.Handler] = None


def setup_logging(verbose: int, log_file: Optional[Path]) -> None:
    """
    Configure logging for the CLI.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        log_file: Optional log file path; logs go to stderr otherwise
    """
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if log_file:
        # Keeps last 5 files, max 10MB each
        handler: logging.Handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5
        )
    else:
        handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(formatter)

    global _handler
    root_logger = logging.getLogger()
    if _handler is not None:
        root_logger.removeHandler(_handler)
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _handler = handler

    logger.info(f"Logging configured: level={logging.getLevelName(level)}")


def load_config(config_path: Optional[Path]) -> DeviceConfig:
    """Load a device config file, or the built-in Mini MK3 config."""
    if config_path is None:
        return LAUNCHPAD_MINI_MK3

    try:
        return DeviceConfig.from_json_file(config_path)
    except ValidationError as e:
        raise click.ClickException(f"Invalid device config {config_path}:\n{e}") from e


@click.group()
@click.version_option(version="0.1.0", prog_name="launchgrid")
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Write logs to this file instead of stderr'
)
@click.option(
    '--config',
    'config_path',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help='Device config JSON file (default: built-in Launchpad Mini MK3)'
)
@click.pass_context
def cli(ctx, verbose: int, log_file: Optional[Path], config_path: Optional[Path]):
    """
    Launchgrid - encode and decode Launchpad Mini MK3 MIDI traffic.

    \b
    Examples:
      # Decode a raw frame
      launchgrid decode 0x90 11 127

      # Show the frame that clears the grid
      launchgrid encode clear

      # Scroll text on a connected device
      launchgrid encode --send scroll "hello" --color 5

      # Watch what the device sends
      launchgrid monitor
    """
    setup_logging(verbose, log_file)
    ctx.ensure_object(dict)
    ctx.obj["config"] = load_config(config_path)


cli.add_command(decode)
cli.add_command(encode_group)
cli.add_command(monitor)
cli.add_command(ports)


def main():
    """Console script entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
