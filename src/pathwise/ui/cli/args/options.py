"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final


@final
@dataclass(slots=True)
class InspectArgs:
    """Command line arguments for the ``inspect`` subcommand."""

    command: Literal["inspect"]
    paths: list[str]
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class RelativeArgs:
    """Command line arguments for the ``relative`` subcommand."""

    command: Literal["relative"]
    paths: list[str]
    anchor: str | None
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class WhichArgs:
    """Command line arguments for the ``which`` subcommand."""

    command: Literal["which"]
    names: list[str]
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class ChecksumArgs:
    """Command line arguments for the ``checksum`` subcommand."""

    command: Literal["checksum"]
    paths: list[str]
    algorithm: str
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class IdentifyArgs:
    """Command line arguments for the ``identify`` subcommand."""

    command: Literal["identify"]
    paths: list[str]
    verbose: bool
    quiet: bool


CLIArgs = InspectArgs | RelativeArgs | WhichArgs | ChecksumArgs | IdentifyArgs

__all__ = ["CLIArgs", "ChecksumArgs", "IdentifyArgs", "InspectArgs", "RelativeArgs", "WhichArgs"]
