"""Command line argument handling package."""

from pathwise.ui.cli.args.parser import ArgumentParser
from pathwise.ui.cli.args.options import (
    ChecksumArgs,
    CLIArgs,
    IdentifyArgs,
    InspectArgs,
    RelativeArgs,
    WhichArgs,
)

__all__ = [
    "ArgumentParser",
    "CLIArgs",
    "ChecksumArgs",
    "IdentifyArgs",
    "InspectArgs",
    "RelativeArgs",
    "WhichArgs",
]
