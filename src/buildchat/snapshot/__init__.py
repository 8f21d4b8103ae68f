"""Read-only snapshots of host build data."""

from buildchat.snapshot.build import BuildOutcome, BuildRecord, Culprit
from buildchat.snapshot.changes import ChangeSet, ChangeSetEntry
from buildchat.snapshot.loader import BuildSnapshotError, load_build
from buildchat.snapshot.results import TestCounts, TestSummary

__all__ = [
    "BuildOutcome",
    "BuildRecord",
    "BuildSnapshotError",
    "ChangeSet",
    "ChangeSetEntry",
    "Culprit",
    "TestCounts",
    "TestSummary",
    "load_build",
]
