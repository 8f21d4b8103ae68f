"""Notify command - posts the notification for one build event."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, Field

from buildchat.core.log import logger
from buildchat.notify.notifier import ActiveNotifier
from buildchat.snapshot.loader import BuildSnapshotError, load_build

if TYPE_CHECKING:
    from buildchat.core.config import State


class NotifyCommand(BaseModel):
    """Send the chat notification for a build lifecycle event.

    The build is read from a YAML or JSON snapshot file produced by
    the build host. Completion events are filtered through the
    project's notify policy; start events always notify.
    """

    event: Literal["started", "completed", "deleted", "finalized"] = Field(
        default="completed",
        description="Lifecycle event to handle",
    )
    build: Path = Field(
        description="Path to the build snapshot (YAML or JSON)",
    )

    def run(self, state: State) -> int:
        """Handle the event.

        Returns:
            Exit code (0=success, 2=unreadable snapshot)
        """
        try:
            build = load_build(self.build)
        except BuildSnapshotError as e:
            logger.error("Cannot load build snapshot", error=str(e))
            return 2

        config = state.config
        project = config.project_for(build.project_name)
        room = config.room_for(build.project_name)
        notifier = ActiveNotifier(config.notifier.build_server_url)

        if self.event == "started":
            notifier.started(build, room)
        elif self.event == "completed":
            notifier.completed(build, project.policy, room)
        elif self.event == "deleted":
            notifier.deleted(build)
        else:
            notifier.finalized(build)
        return 0
