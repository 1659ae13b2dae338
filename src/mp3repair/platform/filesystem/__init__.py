"""Filesystem port and its local adapter."""

from .local import LocalFileSystem
from .ports import FileSystem

__all__ = ["FileSystem", "LocalFileSystem"]
