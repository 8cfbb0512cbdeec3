from pathlib import Path

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from loguru import logger

from music_shelf.core.config import Config
from music_shelf.domain.library import build_catalog
from ..deps import get_catalog_dir, get_config
from ..schemas import ErrorResponse, SongResponse

router = APIRouter()


@router.get(
    "/songs",
    response_model=list[SongResponse],
    responses={500: {"model": ErrorResponse}},
)
async def list_songs(
    config: Config = Depends(get_config),
    catalog_dir: Path = Depends(get_catalog_dir),
):
    """List every supported file in the catalog with its metadata."""
    try:
        records = await build_catalog(catalog_dir, config.library)
    except Exception:
        logger.exception("Error building songs list")
        return JSONResponse(status_code=500, content={"error": "Failed to list songs"})

    return [SongResponse(**record._asdict()) for record in records]
