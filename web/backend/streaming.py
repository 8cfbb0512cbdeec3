"""Byte-range parsing and file windowing for audio streaming."""

from pathlib import Path
from typing import Iterator, NamedTuple

from music_shelf.core.exceptions import RangeNotSatisfiableError

# Fixed regardless of container; browsers sniff the actual codec.
STREAM_CONTENT_TYPE = "audio/mpeg"

STREAM_CHUNK_SIZE = 64 * 1024


class ByteRange(NamedTuple):
    """Inclusive byte window into a file: 0 <= start <= end <= size - 1."""
    start: int
    end: int
    file_size: int

    @property
    def length(self) -> int:
        return self.end - self.start + 1

    @property
    def content_range(self) -> str:
        return f"bytes {self.start}-{self.end}/{self.file_size}"


def _is_offset(token: str) -> bool:
    return token.isascii() and token.isdigit()


def parse_range_header(range_header: str, file_size: int) -> ByteRange:
    """Pure function - parse "bytes=<start>-[<end>]" against a file size.

    Supports the suffix form "bytes=-N" (last N bytes). Only the first range of
    a multi-range request is honored. An end past EOF is clamped.

    Raises:
        RangeNotSatisfiableError: On malformed syntax or a window outside the file
    """
    header = range_header.strip()
    unit, sep, range_value = header.partition("=")
    if not sep or unit.strip().lower() != "bytes":
        raise RangeNotSatisfiableError(range_header, file_size)

    first_range = range_value.split(",", 1)[0].strip()
    start_str, dash, end_str = first_range.partition("-")
    if not dash:
        raise RangeNotSatisfiableError(range_header, file_size)
    start_str, end_str = start_str.strip(), end_str.strip()

    if start_str == "":
        # Suffix range: last N bytes
        if not _is_offset(end_str) or int(end_str) == 0 or file_size == 0:
            raise RangeNotSatisfiableError(range_header, file_size)
        suffix_len = min(int(end_str), file_size)
        return ByteRange(file_size - suffix_len, file_size - 1, file_size)

    if not _is_offset(start_str) or (end_str and not _is_offset(end_str)):
        raise RangeNotSatisfiableError(range_header, file_size)

    start = int(start_str)
    end = int(end_str) if end_str else file_size - 1
    end = min(end, file_size - 1)

    if start >= file_size or end < start:
        raise RangeNotSatisfiableError(range_header, file_size)

    return ByteRange(start, end, file_size)


def iter_file_range(
    path: Path, byte_range: ByteRange, chunk_size: int = STREAM_CHUNK_SIZE
) -> Iterator[bytes]:
    """Yield exactly byte_range.length bytes of path, chunk by chunk."""
    with path.open("rb") as handle:
        handle.seek(byte_range.start)
        remaining = byte_range.length
        while remaining > 0:
            chunk = handle.read(min(chunk_size, remaining))
            if not chunk:
                # File shrank underneath us
                break
            remaining -= len(chunk)
            yield chunk
