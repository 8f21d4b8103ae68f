"""Summaries of the source changes that started a build."""

from __future__ import annotations

from buildchat.core.log import logger
from buildchat.snapshot.build import BuildRecord


def summarize_changes(build: BuildRecord) -> str | None:
    """Describe who changed how many files for a build.

    Returns:
        "Started by changes from <authors> (<n> file(s) changed)", or
        None when there is nothing reliable to report: no computed
        change set, no entries, or an entry whose affected files the
        source-control backend cannot list.
    """
    if build.change_set is None:
        logger.info("No change set computed", build=build.display_name)
        return None

    authors: dict[str, None] = {}
    files: set[str] = set()
    for entry in build.change_set.entries:
        logger.spew("Change set entry", author=entry.author)
        if not entry.files_supported:
            logger.info(
                "Affected files unsupported by source control",
                build=build.display_name,
                author=entry.author,
            )
            return None
        authors.setdefault(entry.author)
        files.update(entry.affected_files)

    if not authors:
        logger.info("Empty change set", build=build.display_name)
        return None

    return (
        f"Started by changes from {', '.join(authors)} "
        f"({len(files)} file(s) changed)"
    )
