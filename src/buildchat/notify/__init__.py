"""Notification decisions and message composition."""

from buildchat.notify.notifier import ActiveNotifier
from buildchat.notify.publish import LogPublisher, Publisher

__all__ = ["ActiveNotifier", "LogPublisher", "Publisher"]
