"""Service layer: validates, delegates to Firecrawl and shapes the envelope."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from src.api.schemas import ScrapeMetadata, ScrapeResult, StructuredContent
from src.config import Settings
from src.scraper import FirecrawlLoader, ScrapedPage, ScrapeFailure

logger = logging.getLogger(__name__)

URL_REQUIRED = "URL is required"
API_KEY_MISSING = "FIRECRAWL_API_KEY not set"


def extract_url(payload: Any) -> Any:
    """Return the ``url`` member of a JSON request body.

    Only objects carry one; arrays, strings and numbers yield ``None``. The
    value is returned as sent so the caller can apply a truthiness check.
    """
    if isinstance(payload, dict):
        return payload.get("url")
    return None


def format_content(page: ScrapedPage) -> str:
    """Flatten a scraped page into a labeled plain-text block."""
    text = (
        f"Title: {page.title}\n"
        f"Description: {page.description}\n"
        f"URL: {page.url}\n"
        "\n"
        "Content:\n"
        f"{page.content}"
    )
    return text.strip()


def build_success(page: ScrapedPage) -> ScrapeResult:
    content = format_content(page)
    return ScrapeResult(
        success=True,
        content=content,
        structured=StructuredContent(
            title=page.title,
            description=page.description,
            content=page.content,
            url=page.url,
        ),
        metadata=ScrapeMetadata(
            timestamp=datetime.now(timezone.utc),
            cached=page.cached,
            content_length=len(content),
        ),
    )


async def scrape_url(url: Any, settings: Settings) -> tuple[int, ScrapeResult]:
    """Run one scrape and return ``(status_code, envelope)``.

    Expected failures are returned as error envelopes. Anything raised here
    (network or decoding errors) is left to the route to convert.
    """
    if not url:
        return 400, ScrapeResult(success=False, error=URL_REQUIRED)

    if not settings.firecrawl_api_key:
        logger.error("firecrawl api key not configured")
        return 500, ScrapeResult(success=False, error=API_KEY_MISSING)

    logger.info("scraping url", extra={"url": url})
    loader = FirecrawlLoader(
        api_key=settings.firecrawl_api_key,
        api_url=settings.firecrawl_api_url,
        timeout=settings.firecrawl_http_timeout,
    )
    outcome = await loader.load(url)

    if isinstance(outcome, ScrapeFailure):
        return 500, ScrapeResult(
            success=False, error=outcome.error, details=outcome.details
        )

    result = build_success(outcome)
    logger.info(
        "scrape completed",
        extra={
            "url": url,
            "cached": outcome.cached,
            "content_length": result.metadata.content_length,
        },
    )
    return 200, result
