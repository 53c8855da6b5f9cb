"""Command line interface for pathwise."""

import sys
from typing import final

from pathwise.platform.logging import logger
from pathwise.ui.cli.args import ArgumentParser
from pathwise.ui.cli.args.options import (
    ChecksumArgs,
    CLIArgs,
    IdentifyArgs,
    InspectArgs,
    RelativeArgs,
    WhichArgs,
)
from pathwise.ui.cli.commands import (
    ChecksumCommand,
    CommandExecutor,
    IdentifyCommand,
    InspectCommand,
    RelativeCommand,
    WhichCommand,
)


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Exits with status 1 when any input fails, 130 on interrupt.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            results = CommandProcessor.build_command(args).execute()
            if any(not row.success for row in results):
                sys.exit(1)
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)

    @staticmethod
    def build_command(args: CLIArgs) -> CommandExecutor:
        """Pick the executor for the parsed subcommand."""

        if isinstance(args, InspectArgs):
            return InspectCommand(args)
        if isinstance(args, RelativeArgs):
            return RelativeCommand(args)
        if isinstance(args, WhichArgs):
            return WhichCommand(args)
        if isinstance(args, ChecksumArgs):
            return ChecksumCommand(args)
        assert isinstance(args, IdentifyArgs)
        return IdentifyCommand(args)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
