"""Command line interface for mp3repair."""

from typing import final

from mp3repair.config.config import ConfigError
from mp3repair.platform.logging import logger
from mp3repair.shared import ExitStatus, ProgrammerError, exit_error_message
from mp3repair.ui.cli.args import ArgumentParser
from mp3repair.ui.cli.args.options import CLIArgs, ListArgs, RepairArgs, ScanArgs
from mp3repair.ui.cli.commands import (
    CommandExecutor,
    ListCommand,
    PostRepairCommand,
    RepairCommand,
    ScanCommand,
)


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> int:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            int: The process exit code.
        """
        command_name = "mp3repair"
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            command_name = args.command
            status = CommandProcessor.build_command(args).execute()
        except ConfigError as e:
            logger.error("Configuration error: %s", e)
            status = ExitStatus.USER_ERROR
        except ProgrammerError as e:
            logger.error("internal error: %s", e)
            status = ExitStatus.PROGRAMMER_ERROR
        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            return 130
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            status = ExitStatus.PROGRAMMER_ERROR

        if status is not ExitStatus.SUCCESS:
            logger.error(exit_error_message(command_name, status))
        return int(status)

    @staticmethod
    def build_command(args: CLIArgs) -> CommandExecutor:
        if isinstance(args, ScanArgs):
            return ScanCommand(args)
        if isinstance(args, RepairArgs):
            return RepairCommand(args)
        if isinstance(args, ListArgs):
            return ListCommand(args)
        return PostRepairCommand(args)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code.
    """
    return CommandProcessor.process_command()
