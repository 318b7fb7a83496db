"""URL builders for GSMArena mobile endpoints."""
from urllib.parse import urlencode

from gsm_scraper.config import config


def get_listing_url(year_min: int | None = None, base_url: str | None = None) -> str:
    """Get the results page URL: eSIM devices, available, released from year_min."""
    if config.LISTING_URL and year_min is None and base_url is None:
        return config.LISTING_URL
    base = base_url or config.BASE_URL
    params = {
        "nYearMin": year_min if year_min is not None else config.YEAR_MIN,
        "chkESIM": "selected",
        "sAvailabilities": 1,
    }
    return f"{base}results.php3?{urlencode(params)}"


def get_device_url(href: str, base_url: str | None = None) -> str:
    """Get the absolute detail page URL for a device href."""
    return f"{base_url or config.BASE_URL}{href.lstrip('/')}"
