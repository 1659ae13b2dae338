"""Command line argument handling package."""

from mp3repair.ui.cli.args.options import CLIArgs, ListArgs, PostRepairArgs, RepairArgs, ScanArgs
from mp3repair.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser", "CLIArgs", "ListArgs", "PostRepairArgs", "RepairArgs", "ScanArgs"]
