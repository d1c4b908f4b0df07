"""MIDI transport adapters."""

from .ports import MidoPortSink, RecordingSink, iter_frames, list_ports

__all__ = ["MidoPortSink", "RecordingSink", "iter_frames", "list_ports"]
