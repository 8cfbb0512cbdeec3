"""Core infrastructure layer - no business logic dependencies.

This module provides foundation-level services:
- Configuration management (TOML)
- Logging (Loguru)
- Path containment checks
- Exception hierarchy
"""

# Configuration
from .config import (
    Config,
    LibraryConfig,
    LoggingConfig,
    WebConfig,
    get_config_dir,
    get_config_path,
    get_data_dir,
    load_config,
)

# Errors
from .exceptions import (
    CatalogError,
    MetadataError,
    MusicShelfError,
    RangeNotSatisfiableError,
)

__all__ = [
    # Config
    "Config",
    "LibraryConfig",
    "LoggingConfig",
    "WebConfig",
    "get_config_dir",
    "get_config_path",
    "get_data_dir",
    "load_config",
    # Errors
    "CatalogError",
    "MetadataError",
    "MusicShelfError",
    "RangeNotSatisfiableError",
]
