"""Test helpers: captured output bus and synthesized mp3 files."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from io import StringIO
from pathlib import Path

from mutagen.id3 import ID3, MCDI, Encoding, Frames, ID3v1SaveOptions
from rich.console import Console

from mp3repair.features.metadata.usecases.id3v1 import ID3V1Tag
from mp3repair.platform.output import OutputBus

# A few bytes of MPEG frame header; nothing decodes the payload.
PAYLOAD = b"\xff\xfb\x90\x64" + bytes(252)


@dataclass
class CapturedBus:
    bus: OutputBus
    out_buffer: StringIO
    err_buffer: StringIO

    @property
    def out(self) -> str:
        return self.out_buffer.getvalue()

    @property
    def err(self) -> str:
        return self.err_buffer.getvalue()

    def out_lines(self) -> list[str]:
        return self.out.splitlines()

    def err_lines(self) -> list[str]:
        return self.err.splitlines()


def captured_output_bus() -> CapturedBus:
    out_buffer = StringIO()
    err_buffer = StringIO()
    bus = OutputBus(
        console=Console(file=out_buffer, width=500, soft_wrap=True),
        error_console=Console(file=err_buffer, width=500, soft_wrap=True),
    )
    return CapturedBus(bus=bus, out_buffer=out_buffer, err_buffer=err_buffer)


def write_mp3(
    path: Path,
    *,
    frames: Mapping[str, str] | None = None,
    mcdi: bytes | None = None,
    v1: Mapping[str, str | int] | None = None,
) -> Path:
    """Create a track file with an ID3v2.3 block and/or an ID3v1 trailer.

    Args:
        path: File to create; parent directories are created as needed.
        frames: Text frames (``{"TIT2": "Title", ...}``) for the v2 block.
        mcdi: Optional MCDI frame content.
        v1: Trailer fields: title, artist, album, year, genre, track.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_bytes(PAYLOAD)
    if frames is not None or mcdi is not None:
        tags = ID3()
        for frame_id, text in (frames or {}).items():
            tags.add(Frames[frame_id](encoding=Encoding.LATIN1, text=[text]))
        if mcdi is not None:
            tags.add(MCDI(data=mcdi))
        tags.save(path, v1=ID3v1SaveOptions.REMOVE, v2_version=3)
    if v1 is not None:
        tag = ID3V1Tag()
        tag.title = str(v1.get("title", ""))
        tag.artist = str(v1.get("artist", ""))
        tag.album = str(v1.get("album", ""))
        tag.year = str(v1.get("year", ""))
        if "genre" in v1:
            tag.genre = str(v1["genre"])
        if "track" in v1:
            _ = tag.set_track(int(v1["track"]))
        with open(path, "ab") as fileobj:
            _ = fileobj.write(tag.to_bytes())
    return path


def consistent_track(
    root: Path,
    artist: str,
    album: str,
    number: int,
    title: str,
    *,
    tagged_number: int | None = None,
    genre: str = "Rock",
    year: str = "1999",
) -> Path:
    """Write ``<root>/<artist>/<album>/<NN> <title>.mp3`` with matching tags,
    except for the track number when ``tagged_number`` is given."""

    recorded = number if tagged_number is None else tagged_number
    return write_mp3(
        root / artist / album / f"{number:02d} {title}.mp3",
        frames={
            "TIT2": title,
            "TPE1": artist,
            "TALB": album,
            "TRCK": str(recorded),
            "TCON": genre,
            "TYER": year,
        },
        v1={
            "title": title,
            "artist": artist,
            "album": album,
            "year": year,
            "genre": genre,
            "track": recorded,
        },
    )
