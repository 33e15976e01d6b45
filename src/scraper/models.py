"""Data models for the scraper package."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel


@dataclass
class ScrapedPage:
    """A scraped page with sanitized text fields."""

    url: Any
    title: str = ""
    description: str = ""
    content: str = ""
    cached: Any = False


@dataclass
class ScrapeFailure:
    """An expected provider failure, returned instead of raised."""

    error: str
    details: str | None = None


ScrapeOutcome = ScrapedPage | ScrapeFailure


# --- Firecrawl /v1/scrape response body (untrusted, everything optional) ---


class FirecrawlPageMetadata(BaseModel):
    model_config = {"extra": "ignore"}

    title: str | None = None
    description: str | None = None


class FirecrawlScrapeData(BaseModel):
    model_config = {"extra": "ignore"}

    markdown: str | None = None
    metadata: FirecrawlPageMetadata | None = None
    # Passed through untouched, whatever its type
    cached: Any = None


class FirecrawlScrapeResponse(BaseModel):
    model_config = {"extra": "ignore"}

    # Checked for truthiness only
    success: Any = None
    data: FirecrawlScrapeData | None = None
