"""Firecrawl-backed page scraping with text sanitization."""

from .firecrawl_loader import FirecrawlLoader, build_scrape_payload
from .models import ScrapedPage, ScrapeFailure, ScrapeOutcome
from .sanitize import sanitize

__all__ = [
    "FirecrawlLoader",
    "ScrapeFailure",
    "ScrapeOutcome",
    "ScrapedPage",
    "build_scrape_payload",
    "sanitize",
]
