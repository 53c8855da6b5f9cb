"""Command execution package for CLI."""

from pathwise.ui.cli.commands.executor import CommandExecutor
from pathwise.ui.cli.commands.checksum import ChecksumCommand
from pathwise.ui.cli.commands.identify import IdentifyCommand
from pathwise.ui.cli.commands.inspect import InspectCommand
from pathwise.ui.cli.commands.relative import RelativeCommand
from pathwise.ui.cli.commands.which import WhichCommand

__all__ = [
    "ChecksumCommand",
    "CommandExecutor",
    "IdentifyCommand",
    "InspectCommand",
    "RelativeCommand",
    "WhichCommand",
]
