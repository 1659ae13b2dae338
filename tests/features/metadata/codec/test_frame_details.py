"""Tests for frame descriptions and the track details view."""

from mp3repair.features.metadata import frame_description, track_details
from mp3repair.features.metadata.domain.frames import NO_DESCRIPTION


def test_frame_description_lookup() -> None:
    assert frame_description("TCOM") == "Composer"
    assert frame_description("ZZZZ") == NO_DESCRIPTION


def test_track_details_keeps_only_non_core_text_frames() -> None:
    frames = {
        "TIT2": ["Song"],
        "TPE1": ["Band"],
        "TCOM": ["Someone", "Someone Else"],
        "TXXX": ["custom"],
        "COMM": ["a comment"],
    }

    assert track_details(frames) == {"Composer": "Someone/Someone Else"}
