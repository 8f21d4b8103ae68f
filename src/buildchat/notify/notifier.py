"""Turns build lifecycle events into chat notifications."""

from __future__ import annotations

from collections.abc import Callable

from buildchat.core.config import NotifyPolicy
from buildchat.core.log import logger
from buildchat.notify.message import start_message, status_message
from buildchat.notify.policy import should_notify_build
from buildchat.notify.publish import LogPublisher, Publisher
from buildchat.notify.status import GREEN, completion_color
from buildchat.snapshot.build import BuildRecord


class ActiveNotifier:
    """Handles the host's build lifecycle callbacks.

    Start events always notify. Completion events notify when the
    project's NotifyPolicy accepts the result. Deletion and
    finalization are ignored.
    """

    def __init__(
        self,
        server_url: str,
        publisher_factory: Callable[[str], Publisher] = LogPublisher,
    ):
        """
        Args:
            server_url: Build server root URL, ending with '/'
            publisher_factory: Creates the publisher for a chat room
        """
        self.server_url = server_url
        self.publisher_factory = publisher_factory

    def started(self, build: BuildRecord, room: str) -> str:
        """Announce a started build and return the posted message."""
        with logger.span("Build started", build=build.display_name):
            message = start_message(build, self.server_url)
            self.publisher_factory(room).publish(message, GREEN)
            return message

    def completed(
        self, build: BuildRecord, policy: NotifyPolicy, room: str
    ) -> str | None:
        """Report a completed build if the policy asks for it.

        Returns:
            The posted message, or None if nothing was posted
        """
        with logger.span(
            "Build completed",
            build=build.display_name,
            outcome=build.outcome.value,
        ):
            if not should_notify_build(build, policy):
                logger.debug(
                    "Notification not required by project policy",
                    outcome=build.outcome.value,
                    previous=build.previous_result.value,
                )
                return None
            message = status_message(build, self.server_url)
            self.publisher_factory(room).publish(
                message, completion_color(build.outcome)
            )
            return message

    def deleted(self, build: BuildRecord) -> None:
        pass

    def finalized(self, build: BuildRecord) -> None:
        pass
