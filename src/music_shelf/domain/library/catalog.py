"""
Catalog building.

Turns a snapshot of the catalog directory into SongRecords. Each matched file
is extracted in its own worker thread under a deadline; the listing is
returned once every extraction has settled.
"""

import asyncio
from pathlib import Path
from typing import Any, Callable, Optional, TypeVar

from loguru import logger

from music_shelf.core.config import LibraryConfig
from music_shelf.core.exceptions import CatalogError

from . import metadata
from .artwork import encode_artwork
from .models import UNKNOWN_ALBUM, UNKNOWN_ARTIST, ExtractedTags, SongRecord
from .scanner import list_audio_files

T = TypeVar("T")


def build_song_record(
    filename: str, tags: ExtractedTags, artwork_mode: str = "inline"
) -> SongRecord:
    """Pure function - apply display defaults to extracted tags."""
    return SongRecord(
        filename=filename,
        title=tags.title or Path(filename).stem,
        artist=tags.artist or UNKNOWN_ARTIST,
        album=tags.album or UNKNOWN_ALBUM,
        artwork=encode_artwork(filename, tags.picture, artwork_mode),
        duration=tags.duration if tags.duration is not None else 0.0,
    )


async def run_with_deadline(
    func: Callable[..., T],
    *args: Any,
    timeout: float,
    semaphore: Optional[asyncio.Semaphore] = None,
) -> T:
    """Run func in the default executor under a deadline.

    The deadline starts when a worker thread picks the call up, so time spent
    queued behind other files does not count against it. A timed-out call
    cannot be interrupted; it keeps its semaphore slot until it returns.

    Raises:
        asyncio.TimeoutError: If the call runs longer than timeout
    """
    loop = asyncio.get_running_loop()
    if semaphore is not None:
        await semaphore.acquire()

    started = asyncio.Event()

    def run() -> T:
        loop.call_soon_threadsafe(started.set)
        return func(*args)

    def settle(future: asyncio.Future) -> None:
        if semaphore is not None:
            semaphore.release()
        # Mark late failures as retrieved
        if not future.cancelled():
            future.exception()

    try:
        future = loop.run_in_executor(None, run)
    except BaseException:
        if semaphore is not None:
            semaphore.release()
        raise
    future.add_done_callback(settle)

    await started.wait()
    return await asyncio.wait_for(asyncio.shield(future), timeout=timeout)


async def extract_with_deadline(
    local_path: Path,
    timeout: float,
    semaphore: Optional[asyncio.Semaphore] = None,
) -> ExtractedTags:
    """Extract metadata in a worker thread, treating a timeout as a parse failure."""
    try:
        tags, _ = await run_with_deadline(
            metadata.extract_metadata,
            str(local_path),
            timeout=timeout,
            semaphore=semaphore,
        )
    except asyncio.TimeoutError:
        logger.warning(
            f"Metadata extraction timed out after {timeout}s for {local_path.name}"
        )
        return ExtractedTags()
    return tags


async def _build_one(
    directory: Path,
    filename: str,
    config: LibraryConfig,
    semaphore: Optional[asyncio.Semaphore],
) -> SongRecord:
    tags = await extract_with_deadline(
        directory / filename, config.extraction_timeout_seconds, semaphore
    )
    return build_song_record(filename, tags, config.artwork_mode)


async def build_catalog(
    directory: Path, config: Optional[LibraryConfig] = None
) -> list[SongRecord]:
    """Build one SongRecord per supported file in directory.

    Args:
        directory: Catalog root
        config: Library settings (formats, timeout, concurrency, artwork mode)

    Returns:
        Records in directory enumeration order

    Raises:
        CatalogError: If the directory cannot be listed
    """
    config = config or LibraryConfig(catalog_dir=str(directory))

    try:
        filenames = await asyncio.to_thread(
            list_audio_files, directory, config.supported_formats
        )
    except OSError as e:
        raise CatalogError(f"Cannot list catalog directory {directory}: {e}") from e

    semaphore = (
        asyncio.Semaphore(config.max_concurrent_extractions)
        if config.max_concurrent_extractions > 0
        else None
    )

    records = await asyncio.gather(
        *(_build_one(directory, name, config, semaphore) for name in filenames)
    )

    logger.info(f"Catalog built: {len(records)} songs from {directory}")
    return list(records)
