#!/usr/bin/env python3
"""
cli.py
------
Starts the WebPlayer HTTP server.

Usage:
    python -m webplayer -port 4001 -data webplayer-data.json
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

import uvicorn

from webplayer.app import create_app
from webplayer.core.config import get_settings
from webplayer.repositories.json_storage import Storage

logger = logging.getLogger("webplayer")


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(prog="webplayer", description="Personal playlist manager")
    parser.add_argument("-port", "--port", type=int, default=None,
                        help=f"HTTP server port (default {settings.port})")
    parser.add_argument("-data", "--data", default=None,
                        help=f"Path to data persistence file (default {settings.data_file})")
    parser.add_argument("-host", "--host", default=None,
                        help=f"Interface to bind (default {settings.host})")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings().override(port=args.port, data_file=args.data, host=args.host)
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    storage = Storage(settings.data_file, history_limit=settings.history_limit)
    app = create_app(storage, settings)

    logger.info("WebPlayer running at http://%s:%d", settings.host, settings.port)
    logger.info("Data stored in: %s", settings.data_file)
    logger.info("Press Ctrl+C to stop")
    try:
        uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())
