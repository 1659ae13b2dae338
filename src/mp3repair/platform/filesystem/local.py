"""Filesystem adapter backed by the local disk."""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import BinaryIO, cast

from .ports import FileSystem


class LocalFileSystem(FileSystem):
    """Thin wrapper around ``pathlib`` and ``shutil``."""

    def stat(self, path: Path) -> os.stat_result:
        return path.stat()

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def is_file(self, path: Path) -> bool:
        return path.is_file()

    def open(self, path: Path, mode: str) -> BinaryIO:
        if "b" not in mode:
            raise ValueError(f"binary mode required, got {mode!r}")
        return cast(BinaryIO, open(path, mode))

    def read_dir(self, path: Path) -> list[Path]:
        return sorted(path.iterdir(), key=lambda entry: entry.name)

    def write_file(self, path: Path, content: bytes) -> None:
        _ = path.write_bytes(content)

    def remove(self, path: Path) -> None:
        path.unlink()

    def remove_tree(self, path: Path) -> None:
        shutil.rmtree(path)

    def mkdir(self, path: Path) -> None:
        path.mkdir()

    def copy_file(self, source: Path, destination: Path) -> None:
        _ = shutil.copyfile(source, destination)


__all__ = ["LocalFileSystem"]
