from pathlib import Path

from fastapi import APIRouter, Depends
from fastapi.responses import Response
from loguru import logger

from music_shelf.core.config import Config
from music_shelf.core.path_security import resolve_catalog_path
from music_shelf.domain.library import metadata
from music_shelf.domain.library.artwork import picture_mime_type
from music_shelf.domain.library.catalog import run_with_deadline
from ..deps import get_catalog_dir, get_config

router = APIRouter()


@router.get("/artwork/{filename}")
async def get_artwork(
    filename: str,
    config: Config = Depends(get_config),
    catalog_dir: Path = Depends(get_catalog_dir),
):
    """Return the raw embedded picture of a catalog file."""
    # SECURITY: Validate path within catalog
    file_path = resolve_catalog_path(filename, catalog_dir)
    if file_path is None:
        logger.warning(f"Blocked artwork access outside catalog: {filename!r}")
        return Response(status_code=403)

    if not file_path.is_file():
        return Response(status_code=404)

    try:
        tags = await run_with_deadline(
            metadata.read_tags,
            str(file_path),
            timeout=config.library.extraction_timeout_seconds,
        )
    except Exception:
        logger.exception(f"Artwork extraction failed for {filename}")
        return Response(status_code=500)

    if tags.picture is None:
        return Response(status_code=404)

    return Response(content=tags.picture.data, media_type=picture_mime_type(tags.picture))
