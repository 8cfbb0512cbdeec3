"""
Path security validation utilities for Music Shelf.

Provides pure functions to validate client-supplied filenames stay within the
catalog directory, preventing directory traversal attacks and symlink escapes.
"""

from pathlib import Path
from typing import Optional


def is_path_within_catalog(file_path: Path, catalog_dir: Path) -> bool:
    """Pure function - validates path is within the catalog directory.

    Uses Path.resolve() to handle symlinks and relative paths, then checks if the
    resolved path is a child of the resolved catalog root.

    Args:
        file_path: The file path to validate
        catalog_dir: Catalog root directory

    Returns:
        True if path is within catalog boundaries, False otherwise
    """
    try:
        resolved_path = file_path.resolve()
        catalog_root = catalog_dir.resolve()
    except (OSError, RuntimeError, ValueError):
        # Path.resolve() can raise OSError for invalid paths, RuntimeError for
        # symlink loops and ValueError for embedded null bytes
        return False

    if resolved_path == catalog_root:
        return False

    try:
        resolved_path.relative_to(catalog_root)
        return True
    except ValueError:
        return False


def resolve_catalog_path(filename: str, catalog_dir: Path) -> Optional[Path]:
    """Pure function - join a client filename onto the catalog root.

    Returns the joined path when it stays inside the catalog, None otherwise.
    Existence is not checked here so callers can tell "outside" from "missing".
    """
    if not filename or "\x00" in filename:
        return None

    candidate = catalog_dir / filename
    if not is_path_within_catalog(candidate, catalog_dir):
        return None
    return candidate
