"""Music Shelf exceptions for error handling."""


class MusicShelfError(Exception):
    """Base exception for Music Shelf operations."""

    pass


class MetadataError(MusicShelfError):
    """Raised when an audio container cannot be parsed."""

    def __init__(self, path: str, message: str = None):
        self.path = path
        super().__init__(message or f"Could not read metadata from {path}")


class CatalogError(MusicShelfError):
    """Raised when the catalog directory cannot be listed."""

    pass


class RangeNotSatisfiableError(MusicShelfError):
    """Raised when a Range header is malformed or outside the file."""

    def __init__(self, header: str, file_size: int):
        self.header = header
        self.file_size = file_size
        super().__init__(f"Range not satisfiable: {header!r} (size={file_size})")
