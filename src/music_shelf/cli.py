"""
Music Shelf CLI - Entry point

Runs the FastAPI backend under uvicorn with settings from config.toml,
optionally overridden on the command line.
"""

import argparse
import os
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from music_shelf.core.config import Config, load_config
from music_shelf.core.logging import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='music-shelf',
        description='Catalog a music directory and stream it over HTTP',
    )
    parser.add_argument(
        '--config',
        type=Path,
        help='Path to config.toml (default: auto-detected)'
    )

    subparsers = parser.add_subparsers(dest='subcommand', help='Available commands')

    serve_parser = subparsers.add_parser('serve', help='Start the HTTP server')
    serve_parser.add_argument('--host', help='Interface to bind')
    serve_parser.add_argument('--port', type=int, help='Port to listen on')
    serve_parser.add_argument(
        '--catalog-dir',
        help='Directory of audio files to serve'
    )
    serve_parser.add_argument(
        '--reload',
        action='store_true',
        help='Restart on code changes (development)'
    )

    return parser


def apply_cli_overrides(config: Config, args: argparse.Namespace) -> Config:
    """Apply command-line values on top of the loaded configuration."""
    if getattr(args, 'host', None):
        config.web.host = args.host
    if getattr(args, 'port', None):
        config.web.port = args.port
    if getattr(args, 'catalog_dir', None):
        config.library.catalog_dir = str(Path(args.catalog_dir).expanduser())
    if getattr(args, 'reload', False):
        config.web.auto_reload = True
    return config


def run_server(config: Config, config_path: Optional[Path] = None) -> int:
    """Start uvicorn in the foreground.

    Args:
        config: Resolved configuration, CLI overrides included
        config_path: Explicit config.toml for the app process to load

    Returns:
        Exit code (0 for clean shutdown, 1 for failure)
    """
    import uvicorn

    catalog_dir = Path(config.library.catalog_dir)
    if not catalog_dir.is_dir():
        logger.error(f"Catalog directory does not exist: {catalog_dir}")
        return 1

    # The app loads its own config per request; pass overrides through the env
    if config_path is not None:
        os.environ['MUSIC_SHELF_CONFIG'] = str(Path(config_path).expanduser().resolve())
    os.environ['MUSIC_SHELF_CATALOG_DIR'] = str(catalog_dir)
    os.environ['ALLOWED_ORIGINS'] = ','.join(config.web.allowed_origins)

    logger.info(
        f"Serving {catalog_dir} at http://{config.web.host}:{config.web.port}"
    )
    uvicorn.run(
        "web.backend.main:app",
        host=config.web.host,
        port=config.web.port,
        reload=config.web.auto_reload,
        log_level=config.logging.level.lower(),
    )
    return 0


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for the music-shelf command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.subcommand != 'serve':
        parser.print_help()
        sys.exit(1)

    config = apply_cli_overrides(load_config(args.config), args)
    setup_logging(config.logging)
    sys.exit(run_server(config, args.config))


if __name__ == '__main__':
    main()
