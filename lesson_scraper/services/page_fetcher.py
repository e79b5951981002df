"""Service for fetching lesson pages over HTTP"""

import logging
from typing import Optional

import httpx

from lesson_scraper.config import settings

logger = logging.getLogger(__name__)


class PageFetcher:
    """Fetches a page's HTML with a single request (no retries)."""

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.timeout = httpx.Timeout(settings.FETCH_TIMEOUT_SECONDS, connect=10.0)
        self.headers = {
            "User-Agent": settings.FETCH_USER_AGENT,
            "Accept": "text/html,application/xhtml+xml;q=0.9,*/*;q=0.8",
        }
        self._transport = transport

    async def fetch(self, url: str) -> Optional[str]:
        """
        Fetch ``url`` and return the response body.

        Returns:
            The HTML text, or None if the request failed or was not 2xx
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                headers=self.headers,
                follow_redirects=settings.FETCH_FOLLOW_REDIRECTS,
                transport=self._transport,
            ) as client:
                res = await client.get(url)
        except httpx.HTTPError as e:
            logger.error("Error fetching %s: %s", url, e)
            return None

        if not res.is_success:
            logger.warning("Fetching %s returned HTTP %s", url, res.status_code)
            return None

        logger.info("Fetched %s (%d bytes)", url, len(res.content))
        return res.text
