"""Main entry point with CLI."""
import argparse
import sys
from pathlib import Path

from gsm_scraper.config import config, Config
from gsm_scraper.logging_conf import setup_logging
from gsm_scraper.jobs.runner import CrawlRunner, ListingFetchError
from gsm_scraper.store.output import format_summary, save_devices

import logging

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="GSMArena device scraper")

    parser.add_argument(
        "--listing-url",
        default=None,
        help="Results page to crawl (default: eSIM devices from YEAR_MIN, available)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help=f"JSON output file (default: {config.OUTPUT_FILE})",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=None,
        help=f"Seconds to sleep after each device page (default: {config.REQUEST_DELAY})",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Only crawl the first N devices",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Debug logging",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging("DEBUG" if args.verbose else None)

    try:
        Config.validate()
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    output = args.output or config.OUTPUT_FILE

    logger.info("Starting GSMArena scraper...")
    runner = CrawlRunner(
        listing_url=args.listing_url,
        delay=args.delay,
        limit=args.limit,
    )
    try:
        devices = runner.run()
    except ListingFetchError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(1)

    print(format_summary(devices))
    save_devices(devices, output)


if __name__ == "__main__":
    main()
