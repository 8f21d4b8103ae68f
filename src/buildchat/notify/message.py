"""Composition of chat notification text.

Messages are HTML fragments joined in a fixed order:

    <header> <status> after <duration>.<tests><culprits>

Each function returns a string and shares no state, so messages for
different builds can be composed concurrently.
"""

from __future__ import annotations

from collections.abc import Iterable

from buildchat.notify.changes import summarize_changes
from buildchat.notify.deltas import describe_tests
from buildchat.notify.status import status_label
from buildchat.snapshot.build import BuildRecord, Culprit


def link(href: str, text: str) -> str:
    return f'<a href="{href}">{text}</a>'


def header(build: BuildRecord, server_url: str) -> str:
    """Status icon and build link that open every message."""
    icon = build.status_icon
    return (
        f'<img src="{server_url}images/24x24/{icon}" alt="{icon}"/> '
        f"{link(server_url + build.url, build.project_display_name)}"
        f" - {build.display_name} "
    )


def culprits_phrase(culprits: Iterable[Culprit]) -> str:
    """Culprit links as ' Changes by a, b.', or '' when there are none."""
    links = [link(c.profile_url, c.display_name) for c in culprits]
    if not links:
        return ""
    return f" Changes by {', '.join(links)}."


def status_message(build: BuildRecord, server_url: str) -> str:
    """Full status message: label, duration, tests and culprits."""
    return "".join([
        header(build, server_url),
        status_label(build),
        f" after {build.duration}.",
        describe_tests(build.tests),
        culprits_phrase(build.culprits),
    ])


def start_message(build: BuildRecord, server_url: str) -> str:
    """Message announcing a started build.

    Prefers the change summary, then the trigger cause, then the
    full status message.
    """
    changes = summarize_changes(build)
    if changes is not None:
        return header(build, server_url) + changes
    if build.cause is not None:
        return header(build, server_url) + build.cause
    return status_message(build, server_url)
