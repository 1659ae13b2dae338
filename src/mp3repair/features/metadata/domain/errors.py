"""Errors raised by the metadata codec."""

from __future__ import annotations

from mp3repair.shared.errors import Mp3RepairError


class MetadataError(Mp3RepairError):
    """Base class for codec failures recorded against a metadata source."""


class NoID3V1MetadataError(MetadataError):
    def __init__(self) -> None:
        super().__init__("no ID3V1 metadata found")


class NoID3V2MetadataError(MetadataError):
    def __init__(self) -> None:
        super().__init__("no ID3V2 metadata found")


class NoEditRequiredError(MetadataError):
    """Write-differences found every field already in agreement."""

    def __init__(self) -> None:
        super().__init__("no edit required")


class TrackNumberError(MetadataError):
    """A TRCK frame value could not be turned into a track number."""


MISSING_METADATA_MESSAGES: frozenset[str] = frozenset(
    {"no ID3V1 metadata found", "no ID3V2 metadata found"}
)

__all__ = [
    "MISSING_METADATA_MESSAGES",
    "MetadataError",
    "NoEditRequiredError",
    "NoID3V1MetadataError",
    "NoID3V2MetadataError",
    "TrackNumberError",
]
