from pydantic import BaseModel
from typing import Optional


class SongResponse(BaseModel):
    filename: str
    title: str
    artist: str
    album: str
    artwork: Optional[str] = None  # data:<mime>;base64,<b64>, /artwork/<name>, or null
    duration: float = 0.0  # seconds

    model_config = {"frozen": True}  # Immutable


class ErrorResponse(BaseModel):
    error: str
