"""Music Shelf - catalog a directory of audio files and stream them over HTTP."""

__version__ = "1.0.0"
