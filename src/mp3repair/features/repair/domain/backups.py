"""
Summary: Backup locations shared by repair and post-repair cleanup.
Why: Both commands must agree on where a track's pre-repair copy lives.
"""

from __future__ import annotations

from pathlib import Path

from mp3repair.config.settings import BACKUP_DIR_NAME
from mp3repair.features.library import Album, Track


def backup_directory(album: Album) -> Path:
    return album.path / BACKUP_DIR_NAME


def backup_path(track: Track, directory: Path) -> Path:
    """``<directory>/<track number><extension>``."""

    return directory / f"{track.number}{track.extension}"


__all__ = ["backup_directory", "backup_path"]
