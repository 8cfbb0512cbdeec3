from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import (
    FileResponse,
    PlainTextResponse,
    Response,
    StreamingResponse,
)
from loguru import logger

from music_shelf.core.exceptions import RangeNotSatisfiableError
from music_shelf.core.path_security import resolve_catalog_path
from ..deps import get_catalog_dir
from ..streaming import STREAM_CONTENT_TYPE, iter_file_range, parse_range_header

router = APIRouter()


@router.api_route("/stream/{filename}", methods=["GET", "HEAD"])
async def stream_song(
    filename: str, request: Request, catalog_dir: Path = Depends(get_catalog_dir)
):
    """Serve a catalog file, honoring a single byte range for seeking."""
    # SECURITY: Validate path within catalog
    file_path = resolve_catalog_path(filename, catalog_dir)
    if file_path is None:
        logger.warning(f"Blocked stream access outside catalog: {filename!r}")
        return PlainTextResponse("Access denied", status_code=403)

    if not file_path.is_file():
        return PlainTextResponse("File not found", status_code=404)

    file_size = file_path.stat().st_size
    range_header = request.headers.get("range")

    if not range_header:
        logger.debug(f"Streaming {filename} in full ({file_size} bytes)")
        return FileResponse(
            file_path,
            media_type=STREAM_CONTENT_TYPE,
            headers={"Accept-Ranges": "bytes"},
        )

    try:
        byte_range = parse_range_header(range_header, file_size)
    except RangeNotSatisfiableError as e:
        logger.info(f"Rejected range for {filename}: {e}")
        return Response(
            status_code=416,
            headers={"Content-Range": f"bytes */{file_size}"},
        )

    logger.debug(f"Streaming {filename} {byte_range.content_range}")
    return StreamingResponse(
        iter_file_range(file_path, byte_range),
        status_code=206,
        media_type=STREAM_CONTENT_TYPE,
        headers={
            "Content-Range": byte_range.content_range,
            "Accept-Ranges": "bytes",
            "Content-Length": str(byte_range.length),
        },
    )
