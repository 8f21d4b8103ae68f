"""CLI command modules for buildchat."""

from buildchat.command.notify import NotifyCommand

__all__ = ["NotifyCommand"]
