"""
Configuration management for Music Shelf
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from loguru import logger

ARTWORK_MODES = ("inline", "url")


@dataclass
class LibraryConfig:
    """Configuration for the catalog directory and metadata extraction."""

    catalog_dir: str = field(default_factory=lambda: str(Path.cwd() / "music"))
    supported_formats: List[str] = field(
        default_factory=lambda: [".mp3", ".flac", ".m4a", ".wav", ".aac"]
    )
    extraction_timeout_seconds: float = 10.0
    max_concurrent_extractions: int = 0  # 0 = unbounded
    artwork_mode: str = "inline"  # 'inline' (data URI) or 'url' (/artwork/...)

    def validate(self) -> None:
        """Validate library configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if self.artwork_mode not in ARTWORK_MODES:
            raise ValueError(
                f"Invalid artwork mode: {self.artwork_mode!r}. "
                f"Valid modes are: {ARTWORK_MODES}"
            )
        if self.extraction_timeout_seconds <= 0:
            raise ValueError("extraction_timeout_seconds must be positive")
        if self.max_concurrent_extractions < 0:
            raise ValueError("max_concurrent_extractions cannot be negative")


@dataclass
class WebConfig:
    """Configuration for the HTTP server."""

    host: str = "0.0.0.0"
    port: int = 8080
    allowed_origins: List[str] = field(
        default_factory=lambda: ["http://localhost:8080"]
    )
    auto_reload: bool = False


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = (
        None  # Custom log file path (default: ~/.local/share/music-shelf/music-shelf.log)
    )
    max_file_size_mb: int = 10  # Maximum log file size before rotation
    backup_count: int = 5  # Number of backup files to keep
    console_output: bool = True  # Also output to stderr


@dataclass
class Config:
    """Main configuration object."""

    library: LibraryConfig = field(default_factory=LibraryConfig)
    web: WebConfig = field(default_factory=WebConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "music-shelf"
    return Path.home() / ".config" / "music-shelf"


def get_data_dir() -> Path:
    """Get the data directory path."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "music-shelf"
    return Path.home() / ".local" / "share" / "music-shelf"


def _find_project_config() -> Optional[Path]:
    """Find config.toml in project root by looking for pyproject.toml.

    Returns:
        Path to config.toml in project root, or None if not found
    """
    current = Path(__file__).resolve().parent
    for parent in [current] + list(current.parents):
        if (parent / "pyproject.toml").exists():
            config_path = parent / "config.toml"
            return config_path if config_path.exists() else None
    return None


def get_config_path() -> Path:
    """Get the main configuration file path.

    MUSIC_SHELF_CONFIG wins when set. Otherwise checks for config.toml in
    the following order:
    1. Project root (detected via pyproject.toml) - for development
    2. Current working directory
    3. XDG_CONFIG_HOME/music-shelf (or ~/.config/music-shelf)
    """
    explicit = os.environ.get("MUSIC_SHELF_CONFIG")
    if explicit:
        return Path(explicit).expanduser()

    project_config = _find_project_config()
    if project_config:
        return project_config

    local_config = Path.cwd() / "config.toml"
    if local_config.exists():
        return local_config

    return get_config_dir() / "config.toml"


def parse_config(toml_data: dict) -> Config:
    """Build a Config from parsed TOML data, falling back to defaults per key."""
    config = Config()

    if "library" in toml_data:
        library_data = toml_data["library"]
        config.library = LibraryConfig(
            catalog_dir=str(
                Path(
                    library_data.get("catalog_dir", config.library.catalog_dir)
                ).expanduser()
            ),
            supported_formats=[
                fmt.lower() if fmt.startswith(".") else f".{fmt.lower()}"
                for fmt in library_data.get(
                    "supported_formats", config.library.supported_formats
                )
            ],
            extraction_timeout_seconds=float(
                library_data.get(
                    "extraction_timeout_seconds",
                    config.library.extraction_timeout_seconds,
                )
            ),
            max_concurrent_extractions=int(
                library_data.get(
                    "max_concurrent_extractions",
                    config.library.max_concurrent_extractions,
                )
            ),
            artwork_mode=library_data.get("artwork_mode", config.library.artwork_mode),
        )
        try:
            config.library.validate()
        except ValueError as e:
            logger.warning(f"Invalid library configuration: {e}. Using defaults.")
            config.library = LibraryConfig(catalog_dir=config.library.catalog_dir)

    if "web" in toml_data:
        web_data = toml_data["web"]
        config.web = WebConfig(
            host=web_data.get("host", config.web.host),
            port=int(web_data.get("port", config.web.port)),
            allowed_origins=web_data.get(
                "allowed_origins", config.web.allowed_origins
            ),
            auto_reload=web_data.get("auto_reload", config.web.auto_reload),
        )

    if "logging" in toml_data:
        logging_data = toml_data["logging"]
        log_file = logging_data.get("log_file")
        if log_file:
            log_file = str(Path(log_file).expanduser())
        config.logging = LoggingConfig(
            level=logging_data.get("level", config.logging.level).upper(),
            log_file=log_file,
            max_file_size_mb=logging_data.get(
                "max_file_size_mb", config.logging.max_file_size_mb
            ),
            backup_count=logging_data.get("backup_count", config.logging.backup_count),
            console_output=logging_data.get(
                "console_output", config.logging.console_output
            ),
        )

    return config


def apply_env_overrides(config: Config) -> Config:
    """Apply environment variable overrides in place.

    - MUSIC_SHELF_CATALOG_DIR
    - MUSIC_SHELF_PORT
    - ALLOWED_ORIGINS (comma separated)
    """
    catalog_dir = os.environ.get("MUSIC_SHELF_CATALOG_DIR")
    if catalog_dir:
        config.library.catalog_dir = str(Path(catalog_dir).expanduser())

    port = os.environ.get("MUSIC_SHELF_PORT")
    if port:
        try:
            config.web.port = int(port)
        except ValueError:
            logger.warning(f"Ignoring non-numeric MUSIC_SHELF_PORT: {port!r}")

    allowed_origins = os.environ.get("ALLOWED_ORIGINS", "")
    if allowed_origins:
        config.web.allowed_origins = [
            origin.strip() for origin in allowed_origins.split(",") if origin.strip()
        ]

    return config


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file, or defaults when no file exists.

    Environment variables override TOML values (see apply_env_overrides).
    """
    from dotenv import load_dotenv

    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    config_path = config_path or get_config_path()

    if not config_path.exists():
        return apply_env_overrides(Config())

    try:
        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)
        config = parse_config(toml_data)
    except (OSError, tomllib.TOMLDecodeError, TypeError, ValueError) as e:
        logger.warning(f"Error loading configuration from {config_path}: {e}")
        logger.warning("Using default configuration.")
        config = Config()

    return apply_env_overrides(config)
