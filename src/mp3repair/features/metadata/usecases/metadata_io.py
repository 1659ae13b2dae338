"""Where: features/metadata/usecases/metadata_io.py
What: Read both tag formats from a track file, and write only what differs.
Why: The reader and the repair engine need one entry point each that hides
     the v1/v2 split and records failures per source.
Assumptions: - The file is opened once per operation; v2 is handled before v1.
Trade-offs: - The v1 trailer is rewritten in place rather than via a temp copy;
              the repair engine's backup is the safety net.
"""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO

from mutagen import MutagenError
from mutagen.id3 import ID3

from mp3repair.platform.filesystem import FileSystem

from ..domain.errors import MetadataError, NoEditRequiredError
from ..domain.models import (
    FieldDifference,
    MetadataField,
    SourceMetadata,
    SourceType,
    TrackMetadata,
)
from .comparisons import source_differences
from .id3v1 import ID3V1Tag, read_v1_tag, write_v1_tag
from .id3v2 import apply_differences, load_v2_tag, save_v2_tag, to_source_metadata


def _read_v2(fileobj: BinaryIO) -> tuple[ID3 | None, SourceMetadata]:
    try:
        tags = load_v2_tag(fileobj)
        return tags, to_source_metadata(tags)
    except (MetadataError, MutagenError, OSError) as e:
        return None, SourceMetadata(error=str(e))


def _read_v1(fileobj: BinaryIO) -> tuple[ID3V1Tag | None, SourceMetadata]:
    try:
        tag = read_v1_tag(fileobj)
        return tag, tag.to_source_metadata()
    except (MetadataError, OSError) as e:
        return None, SourceMetadata(error=str(e))


def read_track_metadata(path: Path, filesystem: FileSystem) -> TrackMetadata:
    """Read both sources of ``path``; failures are recorded, never raised.

    v2 is canonical when it was read cleanly, else v1, else neither.
    """
    metadata = TrackMetadata()
    try:
        with filesystem.open(path, "rb") as fileobj:
            _, metadata.v2 = _read_v2(fileobj)
            _, metadata.v1 = _read_v1(fileobj)
    except OSError as e:
        metadata.v1 = SourceMetadata(error=str(e))
        metadata.v2 = SourceMetadata(error=str(e))
    if metadata.v2.ok:
        metadata.canonical_source = SourceType.ID3V2
    elif metadata.v1.ok:
        metadata.canonical_source = SourceType.ID3V1
    return metadata


def apply_v1_differences(tag: ID3V1Tag, differences: list[FieldDifference]) -> None:
    for difference in differences:
        expected = difference.expected
        if difference.field is MetadataField.TRACK_NUMBER:
            assert isinstance(expected, int)
            if not tag.set_track(expected):
                raise ValueError(f"track number {expected} does not fit the ID3V1 track field")
        elif difference.field is MetadataField.TRACK_NAME:
            tag.title = str(expected)
        elif difference.field is MetadataField.ALBUM_NAME:
            tag.album = str(expected)
        elif difference.field is MetadataField.ARTIST_NAME:
            tag.artist = str(expected)
        elif difference.field is MetadataField.GENRE:
            tag.genre = str(expected)
        elif difference.field is MetadataField.YEAR:
            tag.year = str(expected)


def write_differences(
    path: Path,
    expected: TrackMetadata,
    filesystem: FileSystem,
) -> list[Exception]:
    """Rewrite the fields of ``path`` that disagree with ``expected``.

    Returns:
        One error per source whose write failed, or a single
        ``NoEditRequiredError`` when every field already agrees. An empty
        list means the file was rewritten successfully.
    """
    errors: list[Exception] = []
    try:
        with filesystem.open(path, "r+b") as fileobj:
            tags, v2_actual = _read_v2(fileobj)
            v1_tag, v1_actual = _read_v1(fileobj)
            v2_differences = (
                source_differences(SourceType.ID3V2, v2_actual, expected.v2) if tags else []
            )
            v1_differences = (
                source_differences(SourceType.ID3V1, v1_actual, expected.v1) if v1_tag else []
            )
            if not v1_differences and not v2_differences:
                return [NoEditRequiredError()]

            if tags is not None and v2_differences:
                try:
                    apply_differences(tags, v2_differences)
                    save_v2_tag(fileobj, tags, keep_v1=v1_tag is not None)
                    if v1_tag is not None and not v1_differences:
                        write_v1_tag(fileobj, v1_tag)
                except (MutagenError, OSError, ValueError) as e:
                    errors.append(e)

            if v1_tag is not None and v1_differences:
                try:
                    apply_v1_differences(v1_tag, v1_differences)
                    write_v1_tag(fileobj, v1_tag)
                except (OSError, ValueError) as e:
                    errors.append(e)
    except OSError as e:
        errors.append(e)
    return errors


def read_v1_diagnostics(path: Path, filesystem: FileSystem) -> list[str]:
    """Describe the v1 trailer field by field.

    Raises:
        NoID3V1MetadataError: When the file has no trailer.
        OSError: When the file cannot be read.
    """
    with filesystem.open(path, "rb") as fileobj:
        return read_v1_tag(fileobj).diagnostics()


__all__ = [
    "apply_v1_differences",
    "read_track_metadata",
    "read_v1_diagnostics",
    "write_differences",
]
