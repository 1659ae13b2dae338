"""Where: features/analysis/usecases/checks.py
What: The scan checks (empty folders, numbering, file metadata) and the
      conflict classification used by repair.
Why: Each check attaches typed concerns to the concerned tree and reports
     whether it found anything, so the caller can print clean results.
"""

from __future__ import annotations

from collections import defaultdict

from mp3repair.features.library import Artist
from mp3repair.shared import quoted

from ..domain.concerns import ConcernedArtist, ConcernType, lookup_track
from .reconcile import conflict_messages, reconcile, report_metadata_problems


def analyze_empty(concerned_artists: list[ConcernedArtist]) -> bool:
    """Flag artists without albums and albums without tracks."""

    found = False
    for concerned_artist in concerned_artists:
        if not concerned_artist.artist.has_albums:
            concerned_artist.add_concern(ConcernType.EMPTY, "no albums found")
            found = True
            continue
        for concerned_album in concerned_artist.albums:
            if not concerned_album.album.has_tracks:
                concerned_album.add_concern(ConcernType.EMPTY, "no tracks found")
                found = True
    return found


def _gap(low: int, high: int) -> str:
    return str(low) if low == high else f"{min(low, high)}-{max(low, high)}"


def generate_numbering_concerns(tracks_by_number: dict[int, list[str]], max_track: int) -> list[str]:
    """Report duplicate numbers and gaps in ``1..max_track``.

    Duplicates come first, one line per number in ascending order, followed
    by a single line listing every missing range.
    """
    concerns: list[str] = []
    numbers = sorted(number for number, names in tracks_by_number.items() if names)
    for number in numbers:
        names = sorted(tracks_by_number[number])
        if len(names) > 1:
            leading = ", ".join(quoted(name) for name in names[:-1])
            concerns.append(
                f"multiple tracks identified as track {number}: {leading} and {quoted(names[-1])}"
            )
    missing: list[str] = []
    if numbers:
        if numbers[0] > 1:
            missing.append(_gap(1, numbers[0] - 1))
        for current, following in zip(numbers, numbers[1:]):
            if following - current != 1:
                missing.append(_gap(current + 1, following - 1))
        if numbers[-1] < max_track:
            missing.append(_gap(numbers[-1] + 1, max_track))
    if missing:
        concerns.append(f"missing tracks identified: {', '.join(missing)}")
    return concerns


def analyze_numbering(concerned_artists: list[ConcernedArtist]) -> bool:
    found = False
    for concerned_artist in concerned_artists:
        for concerned_album in concerned_artist.albums:
            tracks_by_number: defaultdict[int, list[str]] = defaultdict(list)
            max_track = len(concerned_album.tracks)
            for concerned_track in concerned_album.tracks:
                number = concerned_track.track.number
                tracks_by_number[number].append(concerned_track.name)
                max_track = max(max_track, number)
            for concern in generate_numbering_concerns(dict(tracks_by_number), max_track):
                concerned_album.add_concern(ConcernType.NUMBERING, concern)
                found = True
    return found


def analyze_files(concerned_artists: list[ConcernedArtist], artists: list[Artist]) -> bool:
    """Attach metadata problems of every track in ``artists`` (typically a
    filtered copy) to the matching concerned track."""

    found = False
    for artist in artists:
        for track in artist.tracks():
            problems = report_metadata_problems(track)
            if not problems:
                continue
            found = True
            concerned_track = lookup_track(concerned_artists, track)
            if concerned_track is None:
                continue
            for problem in problems:
                concerned_track.add_concern(ConcernType.FILES, problem)
    return found


def find_conflicted_tracks(concerned_artists: list[ConcernedArtist]) -> int:
    """Add a conflict concern per disagreeing field; return the number of conflicted tracks."""

    count = 0
    for concerned_artist in concerned_artists:
        for concerned_album in concerned_artist.albums:
            for concerned_track in concerned_album.tracks:
                for message in conflict_messages(reconcile(concerned_track.track)):
                    concerned_track.add_concern(ConcernType.CONFLICT, message)
                if concerned_track.is_concerned:
                    count += 1
    return count


__all__ = [
    "analyze_empty",
    "analyze_files",
    "analyze_numbering",
    "find_conflicted_tracks",
    "generate_numbering_concerns",
]
