"""Command line argument parser."""

import argparse
import logging
from collections.abc import Sequence
from typing import final

from mp3repair.config.config import Config
from mp3repair.config.paths import default_log_file
from mp3repair.platform.logging import logger, setup_logger
from mp3repair.shared import ProgrammerError
from mp3repair.ui.cli.args.flags import (
    IO_FLAGS,
    LIST_FLAGS,
    REPAIR_FLAGS,
    SCAN_FLAGS,
    SEARCH_FLAGS,
    FlagSpec,
    add_flags,
    read_flags,
)
from mp3repair.ui.cli.args.options import CLIArgs, ListArgs, PostRepairArgs, RepairArgs, ScanArgs

COMMAND_FLAGS: dict[str, tuple[FlagSpec, ...]] = {
    "scan": SCAN_FLAGS + SEARCH_FLAGS + IO_FLAGS,
    "repair": REPAIR_FLAGS + SEARCH_FLAGS + IO_FLAGS,
    "list": LIST_FLAGS + SEARCH_FLAGS + IO_FLAGS,
    "postRepair": SEARCH_FLAGS,
}


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
            prog="mp3repair",
            description="mp3repair - inspect and repair the metadata of an mp3 library.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        scan_parser = subparsers.add_parser(
            "scan",
            help="Inspect mp3 files and their directories and report problems",
            epilog=(
                "examples:\n"
                "  scan --empty      reports empty artist and album directories\n"
                "  scan --files      reads each mp3 file's metadata and reports inconsistencies\n"
                "  scan --numbering  reports errors in the track numbers of mp3 files"
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        ArgumentParser._configure_command_parser(scan_parser, "scan")

        repair_parser = subparsers.add_parser(
            "repair",
            help="Repair mp3 metadata that disagrees with the file layout",
        )
        ArgumentParser._configure_command_parser(repair_parser, "repair")

        list_parser = subparsers.add_parser(
            "list",
            help="List artists, albums and tracks",
        )
        ArgumentParser._configure_command_parser(list_parser, "list")

        post_repair_parser = subparsers.add_parser(
            "postRepair",
            help="Delete the backup directories created by repair",
        )
        ArgumentParser._configure_command_parser(post_repair_parser, "postRepair")

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If argparse rejects the arguments.
            ConfigError: If the configuration file cannot be read.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        # Set log level based on verbosity flags
        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.WARNING

        configuration = Config.load()
        log_file_path = configuration.log_file or default_log_file()
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command
        values = read_flags(parsed_args, COMMAND_FLAGS[command], configuration)
        logger.info(
            "executing command",
            extra={"fields": {"command": command, **{k: v.value for k, v in values.items()}}},
        )

        if command == "scan":
            return ScanArgs(command="scan", verbose=is_verbose, quiet=is_quiet, values=values)
        if command == "repair":
            return RepairArgs(command="repair", verbose=is_verbose, quiet=is_quiet, values=values)
        if command == "list":
            return ListArgs(command="list", verbose=is_verbose, quiet=is_quiet, values=values)
        if command == "postRepair":
            return PostRepairArgs(
                command="postRepair", verbose=is_verbose, quiet=is_quiet, values=values
            )

        raise ProgrammerError(f"unsupported command: {command}")

    @staticmethod
    def _configure_command_parser(parser: argparse.ArgumentParser, command: str) -> None:
        """Apply the verbosity switches and the command's flag table."""

        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed processing information",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all log output except errors",
        )
        add_flags(parser, COMMAND_FLAGS[command])


__all__ = ["ArgumentParser", "COMMAND_FLAGS"]
