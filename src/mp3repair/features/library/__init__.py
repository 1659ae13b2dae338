"""Library graph: artists, albums and tracks discovered on disk."""

from .domain.models import Album, Artist, Track, all_tracks
from .domain.track_names import ParsedTrackName, parse_track_name
from .usecases.reader import MetadataReader, ProgressCallback, clamp_open_file_limit
from .usecases.search import LibraryScanner, SearchSettings

__all__ = [
    "Album",
    "Artist",
    "LibraryScanner",
    "MetadataReader",
    "ParsedTrackName",
    "ProgressCallback",
    "SearchSettings",
    "Track",
    "all_tracks",
    "clamp_open_file_limit",
    "parse_track_name",
]
