"""Where: features/analysis/usecases/canonical.py
What: Derive each album's and artist's canonical values by majority vote.
Why: Per-album checks compare every track against one agreed value.
Assumptions: - Only tracks with valid metadata vote.
Trade-offs: - Without a strict majority the value stays undetermined and the
              matching check is skipped, rather than guessing.
"""

from __future__ import annotations

import logging
from collections import Counter

from mp3repair.features.library import Artist
from mp3repair.features.metadata import name_matches
from mp3repair.platform.output import OutputBus
from mp3repair.shared import quoted

AMBIGUOUS_VALUE_LOG = "no value has a majority of instances"


def canonical_choice(votes: Counter[str]) -> tuple[str, bool]:
    """Return ``(value, selected)`` for the strict-majority value.

    No votes at all selects the empty string.
    """
    if not votes:
        return "", True
    majority = 1 + sum(votes.values()) // 2
    for value, count in votes.items():
        if count >= majority:
            return value, True
    return "", False


def encode_choices(votes: Counter[str]) -> str:
    """Render votes as ``{"a": 1 instance, "b": 2 instances}``."""

    rendered = sorted(
        f"{quoted(value)}: {count} {'instance' if count == 1 else 'instances'}"
        for value, count in votes.items()
    )
    return "{" + ", ".join(rendered) + "}"


def _report_ambiguity(
    bus: OutputBus,
    subject: str,
    context: str,
    votes: Counter[str],
    fields: dict[str, str],
) -> None:
    bus.error_printf(
        "There are multiple %s fields for %s, and there is no unambiguously preferred choice;"
        " candidates are %s.",
        subject,
        quoted(context),
        encode_choices(votes),
    )
    bus.log(logging.ERROR, AMBIGUOUS_VALUE_LOG, {"field": subject, "settings": dict(votes)} | fields)


def process_album_metadata(bus: OutputBus, artists: list[Artist]) -> None:
    """Set genre, year, canonical title and CD identifier on every album."""

    for artist in artists:
        for album in artist.albums:
            genres: Counter[str] = Counter()
            years: Counter[str] = Counter()
            titles: Counter[str] = Counter()
            identifiers: Counter[str] = Counter()
            identifier_bytes: dict[str, bytes] = {}
            for track in album.tracks:
                metadata = track.metadata
                if metadata is None or metadata.canonical is None:
                    continue
                canonical = metadata.canonical
                source = metadata.canonical_source
                assert source is not None
                genre = canonical.genre.lower()
                if genre and not genre.startswith("unknown"):
                    genres[canonical.genre] += 1
                if canonical.year:
                    years[canonical.year] += 1
                if name_matches(source, album.title, canonical.album_name):
                    titles[canonical.album_name] += 1
                key = canonical.cd_identifier.hex()
                identifiers[key] += 1
                identifier_bytes[key] = canonical.cd_identifier

            context = f"{album.title} by {artist.name}"
            fields = {"albumName": album.title, "artistName": artist.name}

            genre, selected = canonical_choice(genres)
            if selected:
                album.genre = genre
            else:
                _report_ambiguity(bus, "genre", context, genres, fields)

            year, selected = canonical_choice(years)
            if selected:
                album.year = year
            else:
                _report_ambiguity(bus, "year", context, years, fields)

            title, selected = canonical_choice(titles)
            if selected:
                if title:
                    album.canonical_title = title
            else:
                _report_ambiguity(bus, "album title", context, titles, fields)

            identifier, selected = canonical_choice(identifiers)
            if selected:
                album.cd_identifier = identifier_bytes.get(identifier, b"")
            else:
                _report_ambiguity(bus, "MCDI frame", context, identifiers, fields)


def process_artist_metadata(bus: OutputBus, artists: list[Artist]) -> None:
    """Set the canonical name of every artist."""

    for artist in artists:
        names: Counter[str] = Counter()
        for track in artist.tracks():
            metadata = track.metadata
            if metadata is None or metadata.canonical is None:
                continue
            source = metadata.canonical_source
            assert source is not None
            if name_matches(source, artist.name, metadata.canonical.artist_name):
                names[metadata.canonical.artist_name] += 1
        name, selected = canonical_choice(names)
        if not selected:
            _report_ambiguity(bus, "artist name", artist.name, names, {"artistName": artist.name})
            continue
        if name:
            artist.canonical_name = name


def derive_canonical_values(bus: OutputBus, artists: list[Artist]) -> None:
    process_album_metadata(bus, artists)
    process_artist_metadata(bus, artists)


__all__ = [
    "AMBIGUOUS_VALUE_LOG",
    "canonical_choice",
    "derive_canonical_values",
    "encode_choices",
    "process_album_metadata",
    "process_artist_metadata",
]
