#!/usr/bin/env python3
"""buildchat CLI - chat notifications for CI build events."""

import sys

from pydantic_settings import CliApp, CliSubCommand, get_subcommand

from buildchat.command.notify import NotifyCommand
from buildchat.core.config import State
from buildchat.core.log import logger


class CliState(State):
    """Post chat notifications for CI build lifecycle events.

    Configuration sources (in priority order):
    1. Command-line arguments (--config.notifier.room value)
    2. buildchat.yaml in the current directory, then the user
       config directory, then package defaults
    3. .env file
    4. Environment variables
       (BUILDCHAT_CONFIG__NOTIFIER__ROOM=value)
    """

    notify: CliSubCommand[NotifyCommand]

    def cli_cmd(self):
        """Dispatch to the active subcommand, or show help."""
        subcommand = get_subcommand(self, is_required=False)

        if subcommand is None:
            CliApp.run(CliState, cli_args=['--help'])
            sys.exit(1)

        with logger:
            raise SystemExit(subcommand.run(self))


def main():
    """Main entry point for CLI."""
    CliApp.run(CliState)


if __name__ == "__main__":
    main()
