"""Firecrawl page loader: one POST to /v1/scrape per URL."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from .models import (
    FirecrawlScrapeResponse,
    ScrapedPage,
    ScrapeFailure,
    ScrapeOutcome,
)
from .sanitize import sanitize

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.firecrawl.dev"
SCRAPE_PATH = "/v1/scrape"

# Fixed scrape options; Firecrawl enforces the timeouts and the cache window.
SCRAPE_FORMATS = ["markdown"]
SCRAPE_TIMEOUT_MS = 60_000
WAIT_FOR_MS = 5_000
RENDER_JS = True
BLOCK_ADS = True
CACHE_MAX_AGE_MS = 3_600_000


def build_scrape_payload(url: Any) -> dict[str, Any]:
    """Return the JSON body sent to Firecrawl for *url*."""
    return {
        "url": url,
        "formats": list(SCRAPE_FORMATS),
        "timeout": SCRAPE_TIMEOUT_MS,
        "waitFor": WAIT_FOR_MS,
        "render_js": RENDER_JS,
        "blockAds": BLOCK_ADS,
        "maxAge": CACHE_MAX_AGE_MS,
    }


class FirecrawlLoader:
    """Loads pages using the Firecrawl REST API.

    Expected failures (non-OK status, a body without ``success``/``data``)
    come back as :class:`ScrapeFailure`. Transport and decoding errors are
    raised to the caller.
    """

    def __init__(
        self,
        api_key: str,
        api_url: str = DEFAULT_API_URL,
        timeout: float | None = None,
    ) -> None:
        self._api_key = api_key
        self._endpoint = (api_url or DEFAULT_API_URL).rstrip("/") + SCRAPE_PATH
        self._timeout = timeout

    async def load(self, url: Any) -> ScrapeOutcome:
        """Scrape a single URL and return a sanitized ScrapedPage or a ScrapeFailure."""
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            resp = await client.post(
                self._endpoint,
                headers={
                    "Authorization": f"Bearer {self._api_key}",
                    "Content-Type": "application/json",
                },
                json=build_scrape_payload(url),
            )

            if not resp.is_success:
                body = resp.text
                logger.error(
                    "firecrawl scrape failed",
                    extra={"url": url, "status_code": resp.status_code, "body": body},
                )
                return ScrapeFailure(error="Scrape failed", details=body)

            payload = resp.json()

        try:
            result = FirecrawlScrapeResponse.model_validate(payload)
        except ValidationError:
            result = None

        if result is None or not result.success or result.data is None:
            logger.warning("invalid firecrawl response", extra={"url": url})
            return ScrapeFailure(error="Invalid scrape response")

        data = result.data
        metadata = data.metadata
        return ScrapedPage(
            url=url,
            title=sanitize(metadata.title if metadata else ""),
            description=sanitize(metadata.description if metadata else ""),
            content=sanitize(data.markdown),
            # Passed through as reported; Firecrawl owns the cache.
            cached=data.cached or False,
        )
