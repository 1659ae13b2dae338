"""Display management for CLI interface."""

from mp3repair.ui.cli.display.concerns import ConcernsDisplay
from mp3repair.ui.cli.display.listing import ListingDisplay, ListingOptions
from mp3repair.ui.cli.display.progress import ProgressDisplay

__all__ = ["ConcernsDisplay", "ListingDisplay", "ListingOptions", "ProgressDisplay"]
