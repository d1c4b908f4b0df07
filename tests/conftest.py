"""Pytest fixtures for tests."""

from unittest.mock import Mock

import pytest

from launchgrid.devices.launchpad import LaunchpadMiniMK3Output


@pytest.fixture
def mock_sink():
    """Create a byte-sink that records calls."""
    sink = Mock(spec=["send"])
    sink.send = Mock(return_value=None)
    return sink


@pytest.fixture
def output(mock_sink):
    """Create an output bound to the mock sink."""
    return LaunchpadMiniMK3Output(mock_sink)


def sent_frames(sink) -> list[list[int]]:
    """All frames handed to a mock sink, in order."""
    return [list(call.args[0]) for call in sink.send.call_args_list]
