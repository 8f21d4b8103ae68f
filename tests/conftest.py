"""Pytest configuration and fixtures for buildchat tests."""

import tempfile
from pathlib import Path

import pytest

from buildchat.core.log import ConsoleSink, setup_logger
from buildchat.snapshot import BuildRecord


@pytest.fixture(autouse=True, scope="session")
def configure_logging():
    """Log to the console only, at debug, for the whole session."""
    setup_logger(
        log_root=Path(tempfile.gettempdir()) / "buildchat-tests",
        service_name="buildchat-tests",
        console=ConsoleSink(level="debug"),
    )


class RecordingPublisher:
    """Publisher that remembers what it was asked to post."""

    def __init__(self, room, sent):
        self.room = room
        self.sent = sent

    def publish(self, message, color):
        self.sent.append((self.room, message, color))


@pytest.fixture
def sent():
    """(room, message, color) tuples posted during a test."""
    return []


@pytest.fixture
def publisher_factory(sent):
    return lambda room: RecordingPublisher(room, sent)


@pytest.fixture
def make_build():
    """Build a BuildRecord from keyword overrides."""
    def _make(**overrides):
        data = {
            "display_name": "#42",
            "duration": "3 min",
            "outcome": "SUCCESS",
            "project_name": "webapp",
            "project_display_name": "Web App",
            "status_icon": "blue.png",
            "url": "job/webapp/42/",
        }
        data.update(overrides)
        return BuildRecord.model_validate(data)
    return _make
