"""
Summary: ID3v2.3 frame descriptions and the frames shown as track details.
Why: The list command names frames by description rather than by four-letter id.
"""

from __future__ import annotations

from typing import Final

# Declared ID3v2.3 frames, from the ID3v2.3.0 informal standard.
FRAME_DESCRIPTIONS: Final[dict[str, str]] = {
    "AENC": "Audio encryption",
    "APIC": "Attached picture",
    "COMM": "Comments",
    "COMR": "Commercial frame",
    "ENCR": "Encryption method registration",
    "EQUA": "Equalization",
    "ETCO": "Event timing codes",
    "GEOB": "General encapsulated object",
    "GRID": "Group identification registration",
    "IPLS": "Involved people list",
    "LINK": "Linked information",
    "MCDI": "Music CD identifier",
    "MLLT": "MPEG location lookup table",
    "OWNE": "Ownership frame",
    "PRIV": "Private frame",
    "PCNT": "Play counter",
    "POPM": "Popularimeter",
    "POSS": "Position synchronisation frame",
    "RBUF": "Recommended buffer size",
    "RVAD": "Relative volume adjustment",
    "RVRB": "Reverb",
    "SYLT": "Synchronized lyric/text",
    "SYTC": "Synchronized tempo codes",
    "TALB": "Album/Movie/Show title",
    "TBPM": "BPM (beats per minute)",
    "TCOM": "Composer",
    "TCON": "Content type (genre)",
    "TCOP": "Copyright message",
    "TDAT": "Date",
    "TDLY": "Playlist delay",
    "TENC": "Encoded by",
    "TEXT": "Lyricist/Text writer",
    "TFLT": "File type",
    "TIME": "Time",
    "TIT1": "Content group description",
    "TIT2": "Title/songname/content description",
    "TIT3": "Subtitle/Description refinement",
    "TKEY": "Initial key",
    "TLAN": "Language(s)",
    "TLEN": "Length",
    "TMED": "Media type",
    "TOAL": "Original album/movie/show title",
    "TOFN": "Original filename",
    "TOLY": "Original lyricist(s)/text writer(s)",
    "TOPE": "Original artist(s)/performer(s)",
    "TORY": "Original release year",
    "TOWN": "File owner/licensee",
    "TPE1": "Lead performer(s)/Soloist(s)",
    "TPE2": "Band/orchestra/accompaniment",
    "TPE3": "Conductor/performer refinement",
    "TPE4": "Interpreted, remixed, or otherwise modified by",
    "TPOS": "Part of a set",
    "TPUB": "Publisher",
    "TRCK": "Track number/Position in set",
    "TRDA": "Recording dates",
    "TRSN": "Internet radio station name",
    "TRSO": "Internet radio station owner",
    "TSIZ": "Size (bytes)",
    "TSRC": "ISRC (international standard recording code)",
    "TSSE": "Software/Hardware and settings used for encoding",
    "TYER": "Year",
    "TXXX": "User defined text information frame",
    "UFID": "Unique file identifier",
    "USER": "Terms of use",
    "USLT": "Unsychronized lyric/text transcription",
    "WCOM": "Commercial information",
    "WCOP": "Copyright/Legal information",
    "WOAF": "Official audio file webpage",
    "WOAR": "Official artist/performer webpage",
    "WOAS": "Official audio source webpage",
    "WORS": "Official internet radio station homepage",
    "WPAY": "Payment",
    "WPUB": "Publishers official webpage",
    "WXXX": "User defined URL link frame",
}

NO_DESCRIPTION: Final[str] = "No description found"

# Frames the analyzer and repair engine already account for.
CORE_FRAMES: Final[frozenset[str]] = frozenset(
    {"TALB", "TCON", "TDRC", "TIT2", "TLEN", "TPE1", "TRCK", "TYER", "MCDI"}
)


def frame_description(frame_id: str) -> str:
    return FRAME_DESCRIPTIONS.get(frame_id, NO_DESCRIPTION)


def track_details(frames: dict[str, list[str]]) -> dict[str, str]:
    """Non-core text frames keyed by their description, e.g. ``Composer``."""

    details: dict[str, str] = {}
    for frame_id, values in frames.items():
        if not frame_id.startswith("T") or frame_id in CORE_FRAMES or frame_id == "TXXX":
            continue
        details[frame_description(frame_id)] = "/".join(values)
    return details


__all__ = [
    "CORE_FRAMES",
    "FRAME_DESCRIPTIONS",
    "NO_DESCRIPTION",
    "frame_description",
    "track_details",
]
