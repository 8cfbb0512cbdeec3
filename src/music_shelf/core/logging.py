"""
Centralized logging configuration for Music Shelf using Loguru.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from .config import LoggingConfig, get_data_dir


def get_log_file_path() -> Path:
    """Get the path to the log file."""
    return get_data_dir() / "music-shelf.log"


def setup_logging(config: Optional[LoggingConfig] = None) -> Path:
    """
    Configure loguru sinks for the application.

    Replaces the default stderr sink with a rotating file sink and, when
    console_output is enabled, a compact stderr sink.

    Args:
        config: Logging configuration (defaults used when None)

    Returns:
        Path of the log file in use
    """
    config = config or LoggingConfig()
    log_file = Path(config.log_file) if config.log_file else get_log_file_path()
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger.remove()

    logger.add(
        log_file,
        rotation=f"{config.max_file_size_mb} MB",
        retention=config.backup_count,
        level="DEBUG",  # Capture all levels to file
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}",
        enqueue=False,
    )

    if config.console_output:
        logger.add(
            sys.stderr,
            level=config.level,
            format="<level>{level}</level>: {message}",
        )

    logger.info(
        f"Logging initialized: {log_file} (level={config.level}, "
        f"max_size={config.max_file_size_mb}MB, backups={config.backup_count})"
    )
    return log_file
