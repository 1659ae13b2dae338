"""Where: features/metadata/usecases/id3v2.py
What: Read and rewrite the ID3v2 frame block through mutagen.
Why: mutagen owns the frame format; this module maps the frames the repair
     pipeline cares about onto ``SourceMetadata`` and back.
Assumptions: - Tags are loaded untranslated so v2.3 files keep TYER and
               their frame encodings; v2.2 tags are upgraded to v2.4.
Trade-offs: - A v2.2 tag is saved as v2.4, since mutagen cannot write v2.2.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import BinaryIO, Final

from mutagen.id3 import (
    ID3,
    MCDI,
    Encoding,
    Frames,
    ID3NoHeaderError,
    ID3v1SaveOptions,
    TextFrame,
)

from ..domain.errors import NoID3V2MetadataError, TrackNumberError
from ..domain.genres import genre_name, normalize_genre_name
from ..domain.models import FieldDifference, MetadataField, SourceMetadata

ENCODING_NAMES: Final[dict[int, str]] = {
    Encoding.LATIN1: "ISO-8859-1",
    Encoding.UTF16: "UTF-16",
    Encoding.UTF16BE: "UTF-16BE",
    Encoding.UTF8: "UTF-8",
}

_CODECS: Final[dict[int, str]] = {
    Encoding.LATIN1: "latin-1",
    Encoding.UTF16: "utf-16",
    Encoding.UTF16BE: "utf-16-be",
    Encoding.UTF8: "utf-8",
}

_FRAME_IDS: Final[dict[MetadataField, str]] = {
    MetadataField.TRACK_NAME: "TIT2",
    MetadataField.ARTIST_NAME: "TPE1",
    MetadataField.ALBUM_NAME: "TALB",
    MetadataField.GENRE: "TCON",
}

_GENRE_REFERENCE: Final[re.Pattern[str]] = re.compile(r"^\((\d+)\)(.*)$")


def strip_leading_boms(value: str) -> str:
    return value.lstrip("\ufeff")


def parse_track_number(value: str) -> int:
    """Parse "n" or "n/total"; digits stop at the first non-digit.

    Raises:
        TrackNumberError: When the value is empty or does not start with a digit.
    """
    value = strip_leading_boms(value)
    if not value:
        raise TrackNumberError("track number is zero length")
    digits = re.match(r"\d+", value)
    if digits is None:
        raise TrackNumberError("track number first character is not a digit")
    return int(digits.group())


def interpret_genre(value: str) -> str:
    """Resolve "(NN)" and "(NN)Name" references into the v1 table.

    "(17)" and "(17)Rock" both become "Rock"; a reference whose trailing
    text names a different genre is left alone.
    """
    if value.isdigit():
        return genre_name(int(value)) or value
    match = _GENRE_REFERENCE.match(value)
    if match is None:
        return value
    name = genre_name(int(match.group(1)))
    if name is None:
        return value
    rest = match.group(2)
    if not rest or normalize_genre_name(rest) == normalize_genre_name(name):
        return name
    return value


def _frame_text(tags: ID3, frame_id: str) -> str:
    frame = tags.get(frame_id)
    if frame is None:
        return ""
    return strip_leading_boms("/".join(str(part) for part in frame.text))


def _format_length(value: str) -> str:
    milliseconds = int("".join(char for char in value if char.isdigit()) or "0")
    seconds = milliseconds // 1000
    return f"{seconds // 60}:{seconds % 60:02d}.{milliseconds % 1000:03d}"


def frame_strings(tags: ID3) -> dict[str, list[str]]:
    """Render every frame as text, keyed by frame ID."""

    rendered: dict[str, list[str]] = {}
    for key in sorted(tags.keys()):
        frame = tags[key]
        frame_id: str = frame.FrameID
        if frame_id == "TLEN":
            value = _format_length(_frame_text(tags, "TLEN"))
        elif isinstance(frame, TextFrame):
            value = strip_leading_boms("/".join(str(part) for part in frame.text))
        elif isinstance(frame, MCDI):
            value = frame.data.hex(" ")
        else:
            value = frame.pprint().partition("=")[2]
        rendered.setdefault(frame_id, []).append(value)
    return rendered


def _primary_encoding(tags: ID3) -> str:
    for frame_id in ("TIT2", "TPE1", "TALB"):
        frame = tags.get(frame_id)
        if frame is not None:
            return ENCODING_NAMES.get(int(frame.encoding), "unknown")
    for frame in tags.values():
        if isinstance(frame, TextFrame):
            return ENCODING_NAMES.get(int(frame.encoding), "unknown")
    return ""


def load_v2_tag(fileobj: BinaryIO) -> ID3:
    """Load the frame block at the start of an open file.

    Raises:
        NoID3V2MetadataError: When there is no tag or it holds no frames.
        mutagen.MutagenError: When the tag is malformed.
    """
    _ = fileobj.seek(0)
    try:
        tags = ID3(fileobj, translate=False, load_v1=False)
    except ID3NoHeaderError as e:
        raise NoID3V2MetadataError() from e
    if tags.version < (2, 3, 0):
        tags.update_to_v24()
    if not tags.keys():
        raise NoID3V2MetadataError()
    return tags


def to_source_metadata(tags: ID3) -> SourceMetadata:
    """Project the frames the pipeline uses onto a record.

    Raises:
        TrackNumberError: When TRCK is missing or malformed.
    """
    track_number = parse_track_number(_frame_text(tags, "TRCK"))
    mcdi = tags.get("MCDI")
    return SourceMetadata(
        artist_name=_frame_text(tags, "TPE1"),
        album_name=_frame_text(tags, "TALB"),
        track_name=_frame_text(tags, "TIT2"),
        track_number=track_number,
        year=_frame_text(tags, "TYER") or _frame_text(tags, "TDRC"),
        genre=interpret_genre(_frame_text(tags, "TCON")),
        cd_identifier=bytes(mcdi.data) if mcdi is not None else b"",
        encoding=_primary_encoding(tags),
        version=tags.version[1],
        frame_strings=frame_strings(tags),
    )


def _choose_encoding(current: int | None, value: str, version: int) -> int:
    wide = Encoding.UTF8 if version == 4 else Encoding.UTF16
    if current is None:
        current = Encoding.LATIN1
    try:
        _ = value.encode(_CODECS.get(int(current), "utf-8"))
    except UnicodeEncodeError:
        return wide
    return current


def _set_text(tags: ID3, frame_id: str, value: str) -> None:
    existing = tags.get(frame_id)
    encoding = _choose_encoding(
        int(existing.encoding) if existing is not None else None,
        value,
        tags.version[1],
    )
    frame_class = Frames[frame_id]
    tags.setall(frame_id, [frame_class(encoding=encoding, text=[value])])


def _year_frame_id(tags: ID3) -> str:
    for frame_id in ("TYER", "TDRC"):
        if frame_id in tags:
            return frame_id
    return "TYER" if tags.version[1] == 3 else "TDRC"


def apply_differences(tags: ID3, differences: Iterable[FieldDifference]) -> None:
    """Set each differing field to its expected value."""

    for difference in differences:
        expected = difference.expected
        if difference.field is MetadataField.TRACK_NUMBER:
            total = _frame_text(tags, "TRCK").partition("/")[2]
            _set_text(tags, "TRCK", f"{expected}/{total}" if total else str(expected))
        elif difference.field is MetadataField.YEAR:
            _set_text(tags, _year_frame_id(tags), str(expected))
        elif difference.field is MetadataField.CD_IDENTIFIER:
            assert isinstance(expected, bytes)
            tags.setall("MCDI", [MCDI(data=expected)])
        else:
            _set_text(tags, _FRAME_IDS[difference.field], str(expected))


def save_v2_tag(fileobj: BinaryIO, tags: ID3, *, keep_v1: bool) -> None:
    """Rewrite the frame block in the tag's own major version.

    With ``keep_v1`` mutagen rebuilds the trailer from the frames, so the
    caller must write its own trailer back afterwards.
    """
    version = 3 if tags.version[1] == 3 else 4
    tags.save(
        fileobj,
        v1=ID3v1SaveOptions.UPDATE if keep_v1 else ID3v1SaveOptions.REMOVE,
        v2_version=version,
    )


__all__ = [
    "ENCODING_NAMES",
    "apply_differences",
    "frame_strings",
    "interpret_genre",
    "load_v2_tag",
    "parse_track_number",
    "save_v2_tag",
    "strip_leading_boms",
    "to_source_metadata",
]
