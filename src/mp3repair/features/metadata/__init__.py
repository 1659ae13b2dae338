"""ID3 metadata codec: v1 trailer, v2 frames and the rules comparing them."""

from .domain.errors import (
    MISSING_METADATA_MESSAGES,
    MetadataError,
    NoEditRequiredError,
    NoID3V1MetadataError,
    NoID3V2MetadataError,
)
from .domain.frames import FRAME_DESCRIPTIONS, frame_description, track_details
from .domain.models import (
    SOURCE_ORDER,
    FieldDifference,
    MetadataField,
    SourceMetadata,
    SourceType,
    TrackMetadata,
)
from .usecases.comparisons import name_matches, track_differences, years_match
from .usecases.metadata_io import read_track_metadata, read_v1_diagnostics, write_differences

__all__ = [
    "FRAME_DESCRIPTIONS",
    "MISSING_METADATA_MESSAGES",
    "FieldDifference",
    "MetadataError",
    "MetadataField",
    "NoEditRequiredError",
    "NoID3V1MetadataError",
    "NoID3V2MetadataError",
    "SOURCE_ORDER",
    "SourceMetadata",
    "SourceType",
    "TrackMetadata",
    "frame_description",
    "name_matches",
    "read_track_metadata",
    "read_v1_diagnostics",
    "track_details",
    "track_differences",
    "write_differences",
    "years_match",
]
