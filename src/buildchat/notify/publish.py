"""Publishers that deliver notifications to a chat room."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from buildchat.core.log import logger


@runtime_checkable
class Publisher(Protocol):
    """Delivers one message to a chat room.

    The notifier does not wait for or inspect delivery; transport
    errors are the publisher's concern.
    """

    def publish(self, message: str, color: str) -> None:
        ...


class LogPublisher:
    """Publisher that writes notifications to the application log."""

    def __init__(self, room: str):
        self.room = room

    def publish(self, message: str, color: str) -> None:
        logger.info(
            "Chat notification to {room}: {message}",
            room=self.room,
            color=color,
            message=message,
        )
