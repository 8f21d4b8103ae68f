"""Build snapshot models supplied by the host build system."""

from __future__ import annotations

from enum import Enum

from pydantic import Field, ValidationInfo, field_validator

from buildchat.core.base import BaseSnapshot
from buildchat.snapshot.changes import ChangeSet
from buildchat.snapshot.results import TestSummary


class BuildOutcome(str, Enum):
    """Result of a build, or BUILDING while it still runs.

    Outcomes are compared by equality only; they have no order.
    """

    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"
    UNSTABLE = "UNSTABLE"
    ABORTED = "ABORTED"
    NOT_BUILT = "NOT_BUILT"
    BUILDING = "BUILDING"
    UNKNOWN = "UNKNOWN"


class Culprit(BaseSnapshot):
    """A user whose changes are implicated in a build."""

    display_name: str
    profile_url: str


class BuildRecord(BaseSnapshot):
    """Everything the notifier needs to know about one build.

    The host resolves project and previous-build lookups up front,
    so the record carries flat values instead of back-references.
    """

    display_name: str = Field(description="Build name, e.g. '#42'")
    duration: str = Field(
        default="",
        description="Human readable duration, e.g. '3 min'",
    )
    building: bool = Field(
        default=False,
        description="Whether the build is still running",
    )
    outcome: BuildOutcome = Field(
        default=BuildOutcome.UNKNOWN,
        description="Current result of the build",
    )
    previous_outcome: BuildOutcome | None = Field(
        default=None,
        description="Result of the previous build of the project, if any",
    )
    project_name: str = Field(description="Project key used for config lookup")
    project_display_name: str = Field(
        default="",
        validate_default=True,
        description="Project name shown in notifications",
    )
    status_icon: str = Field(
        default="",
        description="Project status icon path, e.g. 'blue.png'",
    )
    url: str = Field(
        default="",
        description="Build URL relative to the build server root",
    )
    cause: str | None = Field(
        default=None,
        description="Short description of what triggered the build",
    )
    change_set: ChangeSet | None = Field(
        default=None,
        description="Source changes, or None if never computed",
    )
    tests: TestSummary | None = Field(
        default=None,
        description="Test counts, or None if the build ran no tests",
    )
    culprits: tuple[Culprit, ...] = Field(
        default=(),
        description="Users whose changes went into the build",
    )

    @field_validator("project_display_name", mode="after")
    @classmethod
    def _default_display_name(cls, value: str, info: ValidationInfo) -> str:
        return value or info.data.get("project_name", "")

    @field_validator("culprits", mode="after")
    @classmethod
    def _unique_culprits(
        cls, value: tuple[Culprit, ...]
    ) -> tuple[Culprit, ...]:
        seen = {}
        for culprit in value:
            seen.setdefault(culprit.profile_url, culprit)
        return tuple(seen.values())

    @property
    def previous_result(self) -> BuildOutcome:
        """Previous outcome, treating a first build as following a success."""
        if self.previous_outcome is None:
            return BuildOutcome.SUCCESS
        return self.previous_outcome
