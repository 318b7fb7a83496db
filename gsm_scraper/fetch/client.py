"""HTTP client for GSMArena pages."""
import logging
from typing import Optional
import httpx

from gsm_scraper.config import config

logger = logging.getLogger(__name__)


class FetchClient:
    """Blocking HTTP client with a fixed mobile identity.

    TLS verification is off by default: the mobile subdomain may present
    certificate issues. A page counts as fetched only on HTTP 200; nothing
    is retried.
    """

    def __init__(
        self,
        user_agent: str | None = None,
        timeout: float | None = None,
        verify: bool | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self.client = httpx.Client(
            headers={"User-Agent": user_agent or config.USER_AGENT},
            timeout=timeout if timeout is not None else config.TIMEOUT,
            follow_redirects=True,
            verify=config.VERIFY_TLS if verify is None else verify,
            transport=transport,
        )
        self.last_status: Optional[int] = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        self.client.close()

    def fetch(self, url: str) -> Optional[str]:
        """Fetch a URL. Returns the body on HTTP 200, None otherwise."""
        self.last_status = None
        try:
            response = self.client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"Network error for {url}: {e!r}")
            return None

        self.last_status = response.status_code
        if response.status_code != 200:
            logger.warning(f"HTTP {response.status_code} for {url}")
            return None

        return response.text
