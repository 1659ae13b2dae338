"""Consistency analysis: canonical values, checks and the concern tree."""

from .domain.concerns import (
    ConcernedAlbum,
    ConcernedArtist,
    ConcernedTrack,
    Concerns,
    ConcernType,
    lookup_track,
    prepare_concerned_artists,
    render_concerns,
)
from .usecases.canonical import canonical_choice, derive_canonical_values, encode_choices
from .usecases.checks import (
    analyze_empty,
    analyze_files,
    analyze_numbering,
    find_conflicted_tracks,
    generate_numbering_concerns,
)
from .usecases.reconcile import (
    MetadataState,
    conflict_messages,
    expected_metadata,
    reconcile,
    report_metadata_problems,
)

__all__ = [
    "ConcernType",
    "ConcernedAlbum",
    "ConcernedArtist",
    "ConcernedTrack",
    "Concerns",
    "MetadataState",
    "analyze_empty",
    "analyze_files",
    "analyze_numbering",
    "canonical_choice",
    "conflict_messages",
    "derive_canonical_values",
    "encode_choices",
    "expected_metadata",
    "find_conflicted_tracks",
    "generate_numbering_concerns",
    "lookup_track",
    "prepare_concerned_artists",
    "reconcile",
    "render_concerns",
    "report_metadata_problems",
]
