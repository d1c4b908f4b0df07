"""CLI commands."""

from .codec import decode, encode_group
from .midi import monitor, ports

__all__ = ["decode", "encode_group", "monitor", "ports"]
