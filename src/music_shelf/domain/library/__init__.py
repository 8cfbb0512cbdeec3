"""Library domain - catalog scanning and metadata.

This domain handles:
- Song data models
- Supported-format classification of the catalog directory
- Metadata and artwork extraction from audio files
- Concurrent catalog building
"""

# Models
from .models import (
    UNKNOWN_ALBUM,
    UNKNOWN_ARTIST,
    EmbeddedPicture,
    ExtractedTags,
    SongRecord,
)

# Scanning
from .scanner import classify_entries, is_supported_format, list_audio_files

# Metadata extraction
from .metadata import extract_metadata, read_tags

# Artwork
from .artwork import artwork_url, encode_artwork, encode_inline, picture_mime_type

# Catalog
from .catalog import build_catalog, build_song_record, run_with_deadline

__all__ = [
    "UNKNOWN_ALBUM",
    "UNKNOWN_ARTIST",
    "EmbeddedPicture",
    "ExtractedTags",
    "SongRecord",
    "classify_entries",
    "is_supported_format",
    "list_audio_files",
    "extract_metadata",
    "read_tags",
    "artwork_url",
    "encode_artwork",
    "encode_inline",
    "picture_mime_type",
    "build_catalog",
    "build_song_record",
    "run_with_deadline",
]
