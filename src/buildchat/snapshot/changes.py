"""Source-control change set models."""

from __future__ import annotations

from pydantic import Field

from buildchat.core.base import BaseSnapshot


class ChangeSetEntry(BaseSnapshot):
    """One commit in a build's change set."""

    author: str = Field(description="Display name of the commit author")
    affected_files: frozenset[str] | None = Field(
        default=frozenset(),
        description=(
            "Paths touched by the commit. None when the source-control "
            "backend cannot list affected files"
        ),
    )

    @property
    def files_supported(self) -> bool:
        return self.affected_files is not None


class ChangeSet(BaseSnapshot):
    """Ordered commits that went into a build."""

    entries: tuple[ChangeSetEntry, ...] = ()
