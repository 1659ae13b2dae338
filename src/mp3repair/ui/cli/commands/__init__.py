"""Command execution package for CLI."""

from mp3repair.ui.cli.commands.executor import CommandExecutor
from mp3repair.ui.cli.commands.list import ListCommand
from mp3repair.ui.cli.commands.post_repair import PostRepairCommand
from mp3repair.ui.cli.commands.repair import RepairCommand
from mp3repair.ui.cli.commands.scan import ScanCommand

__all__ = [
    "CommandExecutor",
    "ListCommand",
    "PostRepairCommand",
    "RepairCommand",
    "ScanCommand",
]
