"""Filesystem port consumed by the codec, scanner, reader and repair engine."""

from __future__ import annotations

import os
from pathlib import Path
from typing import BinaryIO, Protocol


class FileSystem(Protocol):
    """Abstract filesystem operations; failures surface as ``OSError``."""

    def stat(self, path: Path) -> os.stat_result:
        """Return the status of ``path``."""

        ...

    def exists(self, path: Path) -> bool:
        """Return True if the path exists."""

        ...

    def is_dir(self, path: Path) -> bool:
        """Return True when the path is a directory."""

        ...

    def is_file(self, path: Path) -> bool:
        """Return True when the path is a regular file."""

        ...

    def open(self, path: Path, mode: str) -> BinaryIO:
        """Open ``path`` in a binary ``mode`` (``rb`` or ``r+b``)."""

        ...

    def read_dir(self, path: Path) -> list[Path]:
        """Return the entries of ``path`` sorted by name."""

        ...

    def write_file(self, path: Path, content: bytes) -> None:
        """Create or replace ``path`` with ``content``."""

        ...

    def remove(self, path: Path) -> None:
        """Remove the file at ``path``."""

        ...

    def remove_tree(self, path: Path) -> None:
        """Remove the directory ``path`` and everything below it."""

        ...

    def mkdir(self, path: Path) -> None:
        """Create the directory ``path``; its parent must exist."""

        ...

    def copy_file(self, source: Path, destination: Path) -> None:
        """Copy ``source`` byte-for-byte to ``destination``."""

        ...
