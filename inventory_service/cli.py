#!/usr/bin/env python3
"""
Command-line entry point for the inventory service
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

import uvicorn

from inventory_service.config import Settings
from inventory_service.main import create_app

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    # -h is the host; help is only available as --help.
    parser = argparse.ArgumentParser(
        prog="inventory-service",
        description="Inventory tracking service",
        add_help=False,
    )
    parser.add_argument("--help", action="help", help="Show this help message and exit")
    parser.add_argument("-h", "--host", help="Server address (env: INVENTORY_HOST)")
    parser.add_argument("-p", "--port", type=int, help="Server port (env: INVENTORY_PORT)")
    parser.add_argument("-c", "--cache", type=Path, help="Cache directory for photos (env: INVENTORY_CACHE_DIR)")
    parser.add_argument(
        "--prune-photos",
        action="store_true",
        default=None,
        help="Delete photo files when they are replaced or their item is deleted",
    )
    parser.add_argument("--log-level", help="Logging level (env: INVENTORY_LOG_LEVEL)")
    return parser


def settings_from_args(args: argparse.Namespace, base: Optional[Settings] = None) -> Settings:
    base = base or Settings.from_env()
    return base.with_overrides(
        host=args.host,
        port=args.port,
        cache_dir=args.cache,
        prune_replaced_photos=args.prune_photos,
        log_level=args.log_level.upper() if args.log_level else None,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = settings_from_args(args)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings.cache_dir.mkdir(parents=True, exist_ok=True)
    app = create_app(settings)

    logger.info("Server running at http://%s:%s", settings.host, settings.port)
    logger.info("Docs available at http://%s:%s/docs", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())
