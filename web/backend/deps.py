from pathlib import Path

from fastapi import Depends

from music_shelf.core.config import load_config, Config


def get_config() -> Config:
    """FastAPI dependency for configuration."""
    return load_config()


def get_catalog_dir(config: Config = Depends(get_config)) -> Path:
    """FastAPI dependency for the catalog root directory."""
    return Path(config.library.catalog_dir)
