"""Progress display functionality for CLI."""

from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar, final

from rich.console import Console
from rich.progress import Progress, TaskID

from mp3repair.features.library import ProgressCallback

T = TypeVar("T")


@final
class ProgressDisplay:
    """Shows a transient bar while track metadata is read."""

    def __init__(self, console: Console) -> None:
        self.console = console

    def run(self, work: Callable[[ProgressCallback], T]) -> T:
        """Run ``work`` with a callback that advances the bar.

        Args:
            work: Receives the progress callback and performs the reads.

        Returns:
            Whatever ``work`` returns.
        """
        progress_kwargs: dict[str, Any] = {
            "transient": True,
            "redirect_stdout": False,
            "redirect_stderr": False,
            "console": self.console,
        }

        with Progress(**progress_kwargs) as progress:
            task_id: TaskID | None = None
            last_count = 0

            def _cb(processed: int, total: int, current_file: Path) -> None:
                nonlocal task_id, last_count
                _ = current_file
                if task_id is None:
                    task_id = progress.add_task("[cyan]Reading tracks...", total=total)
                advance = max(0, processed - last_count)
                _ = progress.update(
                    task_id,
                    advance=advance,
                    description=f"[cyan]Reading tracks... {processed}/{total}",
                )
                last_count = processed

            return work(_cb)


__all__ = ["ProgressDisplay"]
