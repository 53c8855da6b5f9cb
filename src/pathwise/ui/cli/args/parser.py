"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import final

from pathwise.config.config import Config
from pathwise.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from pathwise.ui.cli.args.options import (
    ChecksumArgs,
    CLIArgs,
    IdentifyArgs,
    InspectArgs,
    RelativeArgs,
    WhichArgs,
)


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="pathwise",
            description="pathwise - inspect, relate and identify file paths.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug output",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        inspect_parser = subparsers.add_parser(
            "inspect",
            help="Show how paths decompose into directories, base name and extension",
        )
        _ = inspect_parser.add_argument(
            "paths",
            nargs="+",
            metavar="PATH",
            help="Local path, glob pattern or URL",
        )

        relative_parser = subparsers.add_parser(
            "relative",
            help="Express paths relative to an anchor directory",
        )
        _ = relative_parser.add_argument("paths", nargs="+", metavar="PATH")
        _ = relative_parser.add_argument(
            "--to",
            dest="anchor",
            type=str,
            metavar="ANCHOR",
            help="Anchor directory (defaults to the current directory)",
        )

        which_parser = subparsers.add_parser(
            "which",
            help="Locate binaries on the PATH",
        )
        _ = which_parser.add_argument("names", nargs="+", metavar="NAME")

        checksum_parser = subparsers.add_parser(
            "checksum",
            help="Print file digests",
        )
        _ = checksum_parser.add_argument("paths", nargs="+", metavar="PATH")
        _ = checksum_parser.add_argument(
            "--algorithm",
            type=str,
            default="sha256",
            help="hashlib algorithm name (sha256, sha1, md5, ...)",
        )

        identify_parser = subparsers.add_parser(
            "identify",
            help="Report media types and the extension that really fits each file",
        )
        _ = identify_parser.add_argument("paths", nargs="+", metavar="PATH")

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        # Set log level based on verbosity flags
        is_quiet = bool(parsed_args.quiet)
        is_verbose = bool(parsed_args.verbose)

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "inspect":
            return InspectArgs(
                command="inspect",
                paths=list(parsed_args.paths),
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "relative":
            return RelativeArgs(
                command="relative",
                paths=list(parsed_args.paths),
                anchor=parsed_args.anchor,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "which":
            return WhichArgs(
                command="which",
                names=list(parsed_args.names),
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "checksum":
            return ChecksumArgs(
                command="checksum",
                paths=list(parsed_args.paths),
                algorithm=parsed_args.algorithm,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "identify":
            return IdentifyArgs(
                command="identify",
                paths=list(parsed_args.paths),
                verbose=is_verbose,
                quiet=is_quiet,
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)
