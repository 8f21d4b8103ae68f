"""Test count phrases comparing a build with its predecessor."""

from __future__ import annotations

from buildchat.snapshot.results import TestCounts, TestSummary


def delta(previous: int, current: int, what: str) -> str:
    """Signed change between two counts, or "" when they are equal.

    >>> delta(10, 7, "total tests")
    ' (-3 total tests)'
    """
    if previous == current:
        return ""
    sign = "-" if previous > current else "+"
    return f" ({sign}{abs(previous - current)} {what})"


def _skipped(tests: TestSummary, previous: TestCounts | None) -> str:
    if tests.skipped == 0:
        return ""
    phrase = f" ({tests.skipped} tests skipped)"
    if previous is not None:
        phrase += delta(previous.skipped, tests.skipped, "skipped tests")
    return phrase


def describe_tests(tests: TestSummary | None) -> str:
    """Phrase summarizing test results, ending with a period.

    Returns "" for builds without test results, so the caller can
    append the result unconditionally.
    """
    if tests is None:
        return ""

    previous = tests.previous
    fragments = []
    if tests.failed == 0:
        fragments.append(f" {tests.total} tests passed")
    else:
        fragments.append(f" {tests.failed} of {tests.total} tests failed")
        if previous is not None:
            fragments.append(
                delta(previous.failed, tests.failed, "failed tests")
            )
    if previous is not None:
        fragments.append(delta(previous.total, tests.total, "total tests"))
    fragments.append(_skipped(tests, previous))
    fragments.append(".")
    return "".join(fragments)
