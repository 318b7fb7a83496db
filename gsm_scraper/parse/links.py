"""Extract device detail links from a GSMArena results page."""
import logging
import re

from selectolax.parser import HTMLParser

from gsm_scraper.fetch.endpoints import get_device_url

logger = logging.getLogger(__name__)

# brand_model-1234.php; category and navigation pages don't have the id suffix
DEVICE_HREF_PATTERN = re.compile(r"[a-zA-Z]+_[a-zA-Z0-9_]+-(\d+)\.php")


def extract_device_links(html_content: str, base_url: str | None = None) -> list[str]:
    """
    Extract device page links from a listing page.
    Returns absolute URLs, deduplicated, in document order.
    """
    if not html_content:
        return []

    # selectolax recovers from broken markup instead of raising
    parser = HTMLParser(html_content)
    links: list[str] = []
    seen: set[str] = set()

    for link in parser.css('a[href*=".php"]'):
        href = link.attributes.get("href")
        if not href or not DEVICE_HREF_PATTERN.search(href):
            continue
        url = get_device_url(href, base_url)
        if url not in seen:
            seen.add(url)
            links.append(url)

    logger.debug(f"Found {len(links)} device links")
    return links
