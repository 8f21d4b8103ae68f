"""Status labels and notification colors for builds."""

from __future__ import annotations

from buildchat.snapshot.build import BuildOutcome, BuildRecord

GREEN = "green"
RED = "red"
YELLOW = "yellow"

_LABELS = {
    BuildOutcome.SUCCESS: ("Success", GREEN),
    BuildOutcome.FAILURE: ("<b>FAILURE</b>", RED),
    BuildOutcome.ABORTED: ("ABORTED", YELLOW),
    BuildOutcome.NOT_BUILT: ("Not built", YELLOW),
    BuildOutcome.UNSTABLE: ("Unstable", RED),
}


def classify(build: BuildRecord) -> tuple[str, str]:
    """Return the (label, color) pair describing a build's status.

    A running build is "Starting...", a success right after a
    failure is "Back to normal", anything unrecognised is "Unknown".
    """
    if build.building or build.outcome == BuildOutcome.BUILDING:
        return "Starting...", GREEN
    if (
        build.outcome == BuildOutcome.SUCCESS
        and build.previous_result == BuildOutcome.FAILURE
    ):
        return "Back to normal", GREEN
    return _LABELS.get(build.outcome, ("Unknown", YELLOW))


def status_label(build: BuildRecord) -> str:
    return classify(build)[0]


def status_color(build: BuildRecord) -> str:
    return classify(build)[1]


def completion_color(outcome: BuildOutcome) -> str:
    """Color of a completion notification.

    Depends on the outcome alone; unlike status_color it never looks
    at the previous build.
    """
    if outcome == BuildOutcome.SUCCESS:
        return GREEN
    if outcome in (BuildOutcome.FAILURE, BuildOutcome.UNSTABLE):
        return RED
    return YELLOW
