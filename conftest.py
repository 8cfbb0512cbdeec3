"""Pytest configuration shared by domain and backend tests.

Builds real WAV files on disk (stdlib wave + mutagen ID3 chunk) so metadata
extraction runs against actual containers rather than mocks.
"""

import wave
from pathlib import Path
from typing import Optional

import pytest
from mutagen.id3 import APIC, TALB, TIT2, TPE1
from mutagen.wave import WAVE

from music_shelf.core.config import Config, LibraryConfig

FAKE_JPEG = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00fake-cover-bytes\xff\xd9"


def write_wav(path: Path, frames: int = 8000, sample_rate: int = 8000) -> Path:
    """Write a silent mono 16-bit WAV (frames / sample_rate seconds long)."""
    with wave.open(str(path), "wb") as wav_file:
        wav_file.setnchannels(1)
        wav_file.setsampwidth(2)
        wav_file.setframerate(sample_rate)
        wav_file.writeframes(b"\x00\x00" * frames)
    return path


def tag_wav(
    path: Path,
    title: Optional[str] = None,
    artist: Optional[str] = None,
    album: Optional[str] = None,
    picture: Optional[bytes] = None,
    picture_mime: str = "image/jpeg",
) -> Path:
    """Attach an ID3 chunk to an existing WAV."""
    audio = WAVE(str(path))
    audio.add_tags()
    if title:
        audio.tags.add(TIT2(encoding=3, text=[title]))
    if artist:
        audio.tags.add(TPE1(encoding=3, text=[artist]))
    if album:
        audio.tags.add(TALB(encoding=3, text=[album]))
    if picture is not None:
        audio.tags.add(
            APIC(encoding=3, mime=picture_mime, type=3, desc="Cover", data=picture)
        )
    audio.save()
    return path


@pytest.fixture
def make_song(tmp_path):
    """Factory creating a (optionally tagged) WAV inside tmp_path/music."""
    catalog = tmp_path / "music"
    catalog.mkdir(exist_ok=True)

    def _make(filename: str, frames: int = 8000, **tags) -> Path:
        path = write_wav(catalog / filename, frames=frames)
        if tags:
            tag_wav(path, **tags)
        return path

    return _make


@pytest.fixture
def catalog_dir(tmp_path) -> Path:
    catalog = tmp_path / "music"
    catalog.mkdir(exist_ok=True)
    return catalog


@pytest.fixture
def library_config(catalog_dir) -> LibraryConfig:
    return LibraryConfig(catalog_dir=str(catalog_dir), extraction_timeout_seconds=5.0)


@pytest.fixture
def client(library_config):
    """TestClient with the catalog pointed at tmp_path/music."""
    from fastapi.testclient import TestClient

    from web.backend.deps import get_config
    from web.backend.main import app

    config = Config(library=library_config)
    app.dependency_overrides[get_config] = lambda: config
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
