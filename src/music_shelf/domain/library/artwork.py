"""
Artwork encoding for catalog responses.

The same EmbeddedPicture feeds three consumers: the inline data URI in the
listing, the lookup URL alternative, and the raw bytes served by
/artwork/{filename}.
"""

import base64
from typing import Optional
from urllib.parse import quote

from .models import EmbeddedPicture

DEFAULT_IMAGE_FORMAT = "jpeg"


def picture_mime_type(picture: EmbeddedPicture) -> str:
    """Pure function - MIME type for a declared picture format.

    A declared "image/..." value is used as-is; a bare subtype gets the
    "image/" prefix; a missing format falls back to JPEG.
    """
    fmt = (picture.format or DEFAULT_IMAGE_FORMAT).strip().lower()
    if fmt.startswith("image/"):
        return fmt
    return f"image/{fmt or DEFAULT_IMAGE_FORMAT}"


def encode_inline(picture: EmbeddedPicture) -> str:
    """Encode picture bytes as a data URI."""
    payload = base64.b64encode(picture.data).decode("ascii")
    return f"data:{picture_mime_type(picture)};base64,{payload}"


def artwork_url(filename: str) -> str:
    """Lookup path serving the raw picture for a catalog file."""
    return f"/artwork/{quote(filename, safe='')}"


def encode_artwork(
    filename: str, picture: Optional[EmbeddedPicture], mode: str = "inline"
) -> Optional[str]:
    """Artwork value for a SongRecord, or None when nothing is embedded."""
    if picture is None:
        return None
    if mode == "url":
        return artwork_url(filename)
    return encode_inline(picture)
