"""
Audio metadata extraction.

Handles reading common tags, duration and embedded artwork from audio files
using Mutagen. A file that cannot be parsed never aborts a catalog build:
extract_metadata() absorbs the failure and reports it as a warning.
"""

import base64
import binascii
import math
import struct
from typing import Any, Optional

from loguru import logger
from mutagen import File as MutagenFile
from mutagen import MutagenError
from mutagen.flac import Picture
from mutagen.id3 import ID3
from mutagen.mp4 import MP4Cover, MP4Tags

from music_shelf.core.exceptions import MetadataError

from .models import EmbeddedPicture, ExtractedTags

# ID3 (MP3/WAV/AIFF), MP4 atoms, then Vorbis-style comments (FLAC/Ogg)
TITLE_TAGS = ["TIT2", "\xa9nam", "TITLE", "title"]
ARTIST_TAGS = ["TPE1", "\xa9ART", "ARTIST", "artist"]
ALBUM_TAGS = ["TALB", "\xa9alb", "ALBUM", "album"]


def get_tag_value(audio_file: Any, tag_names: list[str]) -> Optional[str]:
    """Get tag value, trying multiple possible tag names."""
    for tag_name in tag_names:
        try:
            value = audio_file.get(tag_name)
        except (KeyError, ValueError):
            # Some formats (like Vorbis) raise ValueError for non-ASCII keys
            continue
        if not value:
            continue

        # ID3 text frames keep their values in .text
        if hasattr(value, "text"):
            value = value.text
        if isinstance(value, list):
            value = value[0] if value else None
        if value is None:
            continue

        text = str(value).strip()
        if text:
            return text
    return None


def get_duration(audio_file: Any) -> Optional[float]:
    """Stream length in seconds, or None when missing or not finite."""
    info = getattr(audio_file, "info", None)
    length = getattr(info, "length", None)
    if not isinstance(length, (int, float)) or isinstance(length, bool):
        return None
    if not math.isfinite(length) or length < 0:
        return None
    return float(length)


def get_embedded_picture(audio_file: Any) -> Optional[EmbeddedPicture]:
    """Return the first embedded picture, whatever the container."""
    tags = getattr(audio_file, "tags", None)

    # MP3/WAV/AIFF (ID3 APIC frames)
    if isinstance(tags, ID3):
        frames = tags.getall("APIC")
        if frames:
            return EmbeddedPicture(bytes(frames[0].data), frames[0].mime or None)

    # MP4/M4A (covr atom)
    if isinstance(tags, MP4Tags):
        covers = tags.get("covr")
        if covers:
            cover = covers[0]
            fmt = "png" if getattr(cover, "imageformat", None) == MP4Cover.FORMAT_PNG else "jpeg"
            return EmbeddedPicture(bytes(cover), fmt)

    # FLAC (picture metadata blocks)
    pictures = getattr(audio_file, "pictures", None)
    if pictures:
        return EmbeddedPicture(bytes(pictures[0].data), pictures[0].mime or None)

    # Ogg Vorbis/Opus (base64 FLAC picture block in a comment)
    if tags is not None and not isinstance(tags, (ID3, MP4Tags)):
        try:
            blocks = tags.get("metadata_block_picture")
        except (KeyError, ValueError):
            blocks = None
        if blocks:
            try:
                picture = Picture(base64.b64decode(blocks[0]))
            except (binascii.Error, MutagenError, ValueError, struct.error) as e:
                logger.debug(f"Ignoring unreadable metadata_block_picture: {e}")
                return None
            return EmbeddedPicture(bytes(picture.data), picture.mime or None)

    return None


def read_tags(local_path: str) -> ExtractedTags:
    """Parse an audio container and return the tags it exposes.

    Raises:
        MetadataError: If the file is unreadable or not a recognized container
    """
    try:
        audio_file = MutagenFile(local_path)
    except (MutagenError, OSError) as e:
        raise MetadataError(local_path, f"Could not parse {local_path}: {e}") from e

    if audio_file is None:
        raise MetadataError(local_path, f"Unrecognized audio container: {local_path}")

    return ExtractedTags(
        title=get_tag_value(audio_file, TITLE_TAGS),
        artist=get_tag_value(audio_file, ARTIST_TAGS),
        album=get_tag_value(audio_file, ALBUM_TAGS),
        duration=get_duration(audio_file),
        picture=get_embedded_picture(audio_file),
    )


def extract_metadata(local_path: str) -> tuple[ExtractedTags, Optional[Exception]]:
    """Extract tags, absorbing any per-file failure.

    Returns:
        (tags, None) on success, (empty tags, error) on failure
    """
    try:
        return read_tags(local_path), None
    except Exception as e:
        logger.warning(f"Failed to parse metadata for {local_path}: {e}")
        return ExtractedTags(), e
