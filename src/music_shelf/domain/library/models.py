"""
Music library domain models.

Contains data structures for representing catalog entries and the raw
metadata extracted from audio containers.
"""

from typing import NamedTuple, Optional

UNKNOWN_ARTIST = "Unknown Artist"
UNKNOWN_ALBUM = "Unknown Album"


class EmbeddedPicture(NamedTuple):
    """Picture embedded in an audio container.

    format is whatever the container declares: a full MIME type
    ("image/png") for ID3 and FLAC, a bare subtype ("jpeg") for MP4.
    """
    data: bytes
    format: Optional[str] = None


class ExtractedTags(NamedTuple):
    """Subset of metadata a container exposes. Any field may be absent."""
    title: Optional[str] = None
    artist: Optional[str] = None
    album: Optional[str] = None
    duration: Optional[float] = None  # in seconds, finite when present
    picture: Optional[EmbeddedPicture] = None


class SongRecord(NamedTuple):
    """One catalog entry, built fresh for every listing request."""
    filename: str  # Key within the catalog directory
    title: str
    artist: str = UNKNOWN_ARTIST
    album: str = UNKNOWN_ALBUM
    artwork: Optional[str] = None  # data:<mime>;base64,<b64> or /artwork/<name>
    duration: float = 0.0  # in seconds
