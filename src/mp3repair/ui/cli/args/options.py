"""Command line argument options."""

from dataclasses import dataclass, field
from typing import Literal, final

from mp3repair.shared import FlagValue


@final
@dataclass(slots=True)
class ScanArgs:
    """Command line arguments for the ``scan`` subcommand."""

    command: Literal["scan"]
    verbose: bool
    quiet: bool
    values: dict[str, FlagValue] = field(default_factory=dict)


@final
@dataclass(slots=True)
class RepairArgs:
    """Command line arguments for the ``repair`` subcommand."""

    command: Literal["repair"]
    verbose: bool
    quiet: bool
    values: dict[str, FlagValue] = field(default_factory=dict)


@final
@dataclass(slots=True)
class ListArgs:
    """Command line arguments for the ``list`` subcommand."""

    command: Literal["list"]
    verbose: bool
    quiet: bool
    values: dict[str, FlagValue] = field(default_factory=dict)


@final
@dataclass(slots=True)
class PostRepairArgs:
    """Command line arguments for the ``postRepair`` subcommand."""

    command: Literal["postRepair"]
    verbose: bool
    quiet: bool
    values: dict[str, FlagValue] = field(default_factory=dict)


CLIArgs = ScanArgs | RepairArgs | ListArgs | PostRepairArgs

__all__ = ["CLIArgs", "ListArgs", "PostRepairArgs", "RepairArgs", "ScanArgs"]
