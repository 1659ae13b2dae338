"""Where: features/repair/usecases/engine.py
What: Back up and rewrite every track carrying a metadata conflict.
Why: Rewriting tags in place is destructive; each rewrite is preceded by a
     byte-exact copy in the album's backup directory.
Assumptions: - Conflict concerns are attached before ``repair`` runs.
             - Canonical album and artist values were derived from the same
               graph the concerned tree mirrors.
Trade-offs: - A failure skips only the track (or album) involved; the exit
              status records that something went wrong.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import final

from mp3repair.features.analysis import (
    ConcernedAlbum,
    ConcernedArtist,
    expected_metadata,
    find_conflicted_tracks,
    render_concerns,
)
from mp3repair.features.library import Track
from mp3repair.features.metadata import NoEditRequiredError, TrackMetadata, write_differences
from mp3repair.platform.filesystem import FileSystem
from mp3repair.platform.output import OutputBus
from mp3repair.shared import ExitStatus, quoted

from ..domain.backups import backup_directory, backup_path
from .dirty import DirtyMarker

MetadataWriter = Callable[[Path, TrackMetadata, FileSystem], list[Exception]]

NOTHING_TO_DO = "No repairable track defects were found."


@final
class RepairEngine:
    """Repair conflicted tracks, or describe the repairs in a dry run."""

    def __init__(
        self,
        bus: OutputBus,
        filesystem: FileSystem,
        dirty_marker: DirtyMarker,
        *,
        writer: MetadataWriter = write_differences,
    ) -> None:
        self.bus = bus
        self.filesystem = filesystem
        self.dirty_marker = dirty_marker
        self._writer = writer

    def run(self, concerned_artists: list[ConcernedArtist], dry_run: bool) -> ExitStatus:
        count = find_conflicted_tracks(concerned_artists)
        if dry_run:
            self.report_repairs_needed(concerned_artists)
            return ExitStatus.SUCCESS
        if count == 0:
            self.bus.console_print(NOTHING_TO_DO)
            return ExitStatus.SUCCESS
        return self.backup_and_fix(concerned_artists)

    def report_repairs_needed(self, concerned_artists: list[ConcernedArtist]) -> None:
        lines = render_concerns(concerned_artists)
        if not lines:
            self.bus.console_print(NOTHING_TO_DO)
            return
        self.bus.console_print("The following concerns can be repaired:")
        for line in lines:
            self.bus.console_print(line)

    def backup_and_fix(self, concerned_artists: list[ConcernedArtist]) -> ExitStatus:
        status = ExitStatus.SUCCESS
        for concerned_artist in concerned_artists:
            for concerned_album in concerned_artist.albums:
                if not concerned_album.is_concerned:
                    continue
                directory = self._ensure_backup_directory(concerned_album)
                if directory is None:
                    status = ExitStatus.SYSTEM_ERROR
                    continue
                for concerned_track in concerned_album.tracks:
                    if not concerned_track.is_concerned:
                        continue
                    track = concerned_track.track
                    if not self._attempt_copy(track, directory):
                        status = ExitStatus.SYSTEM_ERROR
                        continue
                    errors = self._writer(track.path, expected_metadata(track), self.filesystem)
                    status = status.worst(self._process_update_result(track, errors))
        return status

    def _ensure_backup_directory(self, concerned_album: ConcernedAlbum) -> Path | None:
        album = concerned_album.album
        directory = backup_directory(album)
        if self.filesystem.is_dir(directory):
            return directory
        try:
            self.filesystem.mkdir(directory)
        except OSError as e:
            self.bus.error_printf("The directory %s cannot be created: %s.", quoted(directory), e)
            self.bus.error_printf(
                "The track files in the directory %s will not be repaired.", quoted(album.path)
            )
            self.bus.log(
                logging.ERROR,
                "cannot create directory",
                {"command": "repair", "directory": str(directory), "error": str(e)},
            )
            return None
        return directory

    def _attempt_copy(self, track: Track, directory: Path) -> bool:
        destination = backup_path(track, directory)
        backed_up = False
        if self.filesystem.is_file(destination):
            self.bus.error_printf(
                "The backup file for track file %s, %s, already exists.",
                quoted(track),
                quoted(destination),
            )
            self.bus.log(
                logging.ERROR,
                "file already exists",
                {"command": "repair", "file": str(destination)},
            )
        else:
            try:
                self.filesystem.copy_file(track.path, destination)
            except OSError as e:
                self.bus.error_printf(
                    "The track file %s could not be backed up due to error %s.", quoted(track), e
                )
                self.bus.log(
                    logging.ERROR,
                    "error copying file",
                    {
                        "command": "repair",
                        "source": str(track.path),
                        "destination": str(destination),
                        "error": str(e),
                    },
                )
            else:
                self.bus.console_printf(
                    "The track file %s has been backed up to %s.", quoted(track), quoted(destination)
                )
                backed_up = True
        if not backed_up:
            self.bus.error_printf("The track file %s will not be repaired.", quoted(track))
        return backed_up

    def _process_update_result(self, track: Track, errors: list[Exception]) -> ExitStatus:
        if not errors:
            self.bus.console_printf("%s repaired.", quoted(track))
            self.dirty_marker.mark_dirty(self.bus)
            return ExitStatus.SUCCESS
        if all(isinstance(e, NoEditRequiredError) for e in errors):
            self.bus.log(logging.INFO, "no edit required", {"track": str(track)})
            return ExitStatus.SUCCESS
        self.bus.error_printf("An error occurred repairing track %s.", quoted(track))
        self.bus.log(
            logging.ERROR,
            "cannot edit track",
            {
                "command": "repair",
                "directory": str(track.path.parent),
                "fileName": track.file_name,
                "error": "[" + ", ".join(quoted(e) for e in errors) + "]",
            },
        )
        return ExitStatus.SYSTEM_ERROR


__all__ = ["MetadataWriter", "NOTHING_TO_DO", "RepairEngine"]
