"""Tests for lifecycle event handling."""

import pytest

from buildchat.core.config import NotifyPolicy
from buildchat.notify.notifier import ActiveNotifier
from buildchat.notify.publish import LogPublisher, Publisher

SERVER = "https://ci.example.com/"


@pytest.fixture
def notifier(publisher_factory):
    return ActiveNotifier(SERVER, publisher_factory)


def test_unstable_not_notified_without_flag(notifier, make_build, sent):
    build = make_build(outcome="UNSTABLE")
    policy = NotifyPolicy(notify_unstable=False)
    assert notifier.completed(build, policy, "builds") is None
    assert sent == []


def test_unstable_notified_with_flag(notifier, make_build, sent):
    build = make_build(outcome="UNSTABLE")
    policy = NotifyPolicy(notify_unstable=True)
    message = notifier.completed(build, policy, "builds")
    assert sent == [("builds", message, "red")]
    assert "Unstable after 3 min." in message


def test_failure_posts_red(notifier, make_build, sent):
    notifier.completed(make_build(outcome="FAILURE"), NotifyPolicy(), "ops")
    [(room, message, color)] = sent
    assert room == "ops"
    assert color == "red"
    assert "<b>FAILURE</b>" in message


def test_back_to_normal_posts_green(notifier, make_build, sent):
    build = make_build(outcome="SUCCESS", previous_outcome="FAILURE")
    notifier.completed(build, NotifyPolicy(), "ops")
    [(_, message, color)] = sent
    assert color == "green"
    assert "Back to normal after 3 min." in message


def test_aborted_posts_yellow(notifier, make_build, sent):
    policy = NotifyPolicy(notify_aborted=True)
    notifier.completed(make_build(outcome="ABORTED"), policy, "ops")
    assert sent[0][2] == "yellow"


def test_start_always_notifies_green(notifier, make_build, sent):
    build = make_build(building=True, outcome="BUILDING", cause="Timer")
    message = notifier.started(build, "ops")
    assert sent == [("ops", message, "green")]
    assert message.endswith(" - #42 Timer")


def test_start_of_failing_project_still_green(notifier, make_build, sent):
    build = make_build(building=True, previous_outcome="FAILURE")
    notifier.started(build, "ops")
    assert sent[0][2] == "green"


def test_deleted_and_finalized_are_silent(notifier, make_build, sent):
    build = make_build(outcome="FAILURE")
    notifier.deleted(build)
    notifier.finalized(build)
    assert sent == []


def test_log_publisher_is_a_publisher():
    publisher = LogPublisher("ops")
    assert isinstance(publisher, Publisher)
    publisher.publish("hello", "green")


class RoomDown(Exception):
    pass


class FailingPublisher:
    def __init__(self, room):
        self.room = room

    def publish(self, message, color):
        raise RoomDown(self.room)


def test_publisher_errors_propagate(make_build):
    notifier = ActiveNotifier(SERVER, FailingPublisher)
    with pytest.raises(RoomDown, match="ops"):
        notifier.completed(
            make_build(outcome="FAILURE"), NotifyPolicy(), "ops"
        )
    with pytest.raises(RoomDown):
        notifier.started(make_build(building=True), "ops")
