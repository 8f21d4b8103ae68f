"""Decides which completed builds produce a notification."""

from __future__ import annotations

from buildchat.core.config import NotifyPolicy
from buildchat.snapshot.build import BuildOutcome, BuildRecord


def should_notify(
    outcome: BuildOutcome,
    previous: BuildOutcome,
    policy: NotifyPolicy,
) -> bool:
    """Whether a completed build with this outcome should notify.

    Args:
        outcome: Result of the completed build
        previous: Result of the build before it (SUCCESS if none)
        policy: Project notification flags
    """
    if outcome == BuildOutcome.ABORTED:
        return policy.notify_aborted
    if outcome == BuildOutcome.FAILURE:
        return policy.notify_failure
    if outcome == BuildOutcome.NOT_BUILT:
        return policy.notify_not_built
    if outcome == BuildOutcome.UNSTABLE:
        return policy.notify_unstable
    if outcome == BuildOutcome.SUCCESS:
        back_to_normal = (
            previous == BuildOutcome.FAILURE and policy.notify_back_to_normal
        )
        return back_to_normal or policy.notify_success
    return False


def should_notify_build(build: BuildRecord, policy: NotifyPolicy) -> bool:
    return should_notify(build.outcome, build.previous_result, policy)
