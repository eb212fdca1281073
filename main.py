"""
Stock Feed Sync: entry point.

Downloads the supplier stock feed and pushes it into the storefront catalog.

Usage:
    # Normal run: FTP download, then sync
    python main.py

    # Sync from a local file (no FTP)
    python main.py --feed-file ./Stock.txt
"""

import argparse
from typing import Optional

import structlog
from pydantic import ValidationError

from config import configure_logging, load_settings
from services.sync_service import InventorySyncService

logger = structlog.get_logger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Sync stock feed into the catalog")
    parser.add_argument(
        "--feed-file",
        help="Parse this local feed instead of downloading it over FTP",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    """
    Run one sync.

    Always returns 0; outcomes are reported through the log.
    """
    args = parse_args(argv)

    try:
        settings = load_settings()
    except ValidationError as e:
        # structlog's default logger still prints to stdout here
        logger.error("settings_invalid", error_count=e.error_count(), errors=e.errors())
        return 0

    configure_logging(settings)

    logger.info(
        "application_starting",
        environment=settings.environment,
        catalog_url=settings.bigcommerce_api_url
    )

    summary = InventorySyncService(settings).run(feed_path=args.feed_file)

    if summary.aborted:
        logger.error("inventory_sync_did_not_finish", error=summary.fatal_error)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
