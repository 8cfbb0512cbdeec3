"""
Catalog directory scanning.

Filters directory entries down to the supported audio formats.
"""

import os
from pathlib import Path
from typing import Iterable

from music_shelf.core.path_security import is_path_within_catalog

DEFAULT_SUPPORTED_FORMATS = [".mp3", ".flac", ".m4a", ".wav", ".aac"]


def is_supported_format(filename: str, supported_formats: list[str]) -> bool:
    """Check if file extension is supported (case-insensitive)."""
    return Path(filename).suffix.lower() in supported_formats


def classify_entries(
    entries: Iterable[str], supported_formats: list[str] = DEFAULT_SUPPORTED_FORMATS
) -> list[str]:
    """Pure function - keep entries with a supported extension, in input order."""
    return [entry for entry in entries if is_supported_format(entry, supported_formats)]


def list_audio_files(
    directory: Path, supported_formats: list[str] = DEFAULT_SUPPORTED_FORMATS
) -> list[str]:
    """List audio filenames directly inside directory.

    Order is the directory's enumeration order; sorting is left to clients.
    Subdirectories are skipped even when their name looks like an audio file,
    as are symlinks that resolve outside the directory.

    Raises:
        OSError: If the directory cannot be read
    """
    with os.scandir(directory) as it:
        names = [
            entry.name
            for entry in it
            if entry.is_file()
            and is_path_within_catalog(Path(entry.path), Path(directory))
        ]
    return classify_entries(names, supported_formats)
