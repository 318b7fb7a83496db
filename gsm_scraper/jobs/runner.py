"""Main job runner orchestrating the crawl."""
import logging
import time
from typing import Callable, Optional

from gsm_scraper.config import config
from gsm_scraper.fetch.client import FetchClient
from gsm_scraper.fetch.endpoints import get_listing_url
from gsm_scraper.parse.device_parser import extract_device_info
from gsm_scraper.parse.links import extract_device_links
from gsm_scraper.parse.models import DeviceRecord
from gsm_scraper.jobs.metrics import Metrics

logger = logging.getLogger(__name__)


class ListingFetchError(RuntimeError):
    """The listing page could not be fetched; there is nothing to crawl."""


class CrawlRunner:
    """Fetches the listing page, then every device page on it, in order."""

    def __init__(
        self,
        listing_url: Optional[str] = None,
        base_url: Optional[str] = None,
        delay: Optional[float] = None,
        limit: Optional[int] = None,
        client: Optional[FetchClient] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.listing_url = listing_url or get_listing_url()
        self.base_url = base_url or config.BASE_URL
        self.delay = config.REQUEST_DELAY if delay is None else delay
        self.limit = limit
        self.client = client
        self.sleep = sleep
        self.metrics: Optional[Metrics] = None

    def run(self) -> list[DeviceRecord]:
        """Run the crawl and return the records in discovery order."""
        if self.client is not None:
            return self._crawl(self.client)
        with FetchClient() as client:
            return self._crawl(client)

    def _crawl(self, client: FetchClient) -> list[DeviceRecord]:
        logger.info("Fetching results page...")
        listing_html = client.fetch(self.listing_url)
        if listing_html is None:
            raise ListingFetchError(f"Could not fetch the main results page: {self.listing_url}")

        logger.info("Extracting device URLs...")
        device_urls = extract_device_links(listing_html, self.base_url)
        logger.info(f"Found {len(device_urls)} devices.")

        if self.limit is not None:
            device_urls = device_urls[: self.limit]
            logger.info(f"Limiting crawl to {len(device_urls)} devices")

        self.metrics = Metrics(len(device_urls))
        devices: list[DeviceRecord] = []

        for index, device_url in enumerate(device_urls, start=1):
            logger.info(f"Fetching device {index}/{len(device_urls)}: {device_url}")
            record = self._process_device(client, device_url)
            self.metrics.increment("processed")
            if record is None:
                self.metrics.increment("failed")
                continue

            devices.append(record)
            self.metrics.increment("ok")
            self.metrics.record_code_source(record.code_source)

            # Politeness delay, fixed
            if self.delay > 0:
                self.sleep(self.delay)

        self._final_report()
        return devices

    def _process_device(self, client: FetchClient, device_url: str) -> Optional[DeviceRecord]:
        device_html = client.fetch(device_url)
        if device_html is None:
            logger.error(f"  - Error fetching device page (status {client.last_status})")
            return None
        try:
            return extract_device_info(device_html, device_url)
        except Exception as e:
            logger.error(f"  - Error extracting device page {device_url}: {e}", exc_info=True)
            return None

    def _final_report(self) -> None:
        """Log final counters."""
        summary = self.metrics.get_summary()
        logger.info("=" * 60)
        logger.info("CRAWL REPORT")
        logger.info(f"Elapsed: {summary['elapsed_seconds']:.1f}s")
        logger.info(f"Processed: {summary['processed']}/{summary['total']}")
        logger.info(f"OK: {summary['ok']}")
        logger.info(f"Failed: {summary['failed']}")
        logger.info(f"Throughput: {summary['rate']:.2f} pages/s")
        logger.info(f"Code sources: {summary['code_sources']}")
        logger.info("=" * 60)
