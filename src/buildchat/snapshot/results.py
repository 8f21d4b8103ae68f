"""Test result counts attached to a build."""

from __future__ import annotations

from pydantic import Field

from buildchat.core.base import BaseSnapshot


class TestCounts(BaseSnapshot):
    """Totals from one test run."""

    __test__ = False

    total: int = Field(default=0, ge=0)
    failed: int = Field(default=0, ge=0)
    skipped: int = Field(default=0, ge=0)


class TestSummary(TestCounts):
    """Test counts of a build, with the previous build's counts if known."""

    previous: TestCounts | None = None
