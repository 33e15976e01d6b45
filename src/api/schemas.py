"""Response Pydantic models."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class StructuredContent(BaseModel):
    title: str = ""
    description: str = ""
    content: str = ""
    # Echoed back exactly as the caller sent it
    url: Any


class ScrapeMetadata(BaseModel):
    timestamp: datetime
    # Firecrawl's value, unverified
    cached: Any = False
    content_length: int = Field(serialization_alias="contentLength")


class ScrapeResult(BaseModel):
    """Response envelope returned for every outcome."""

    success: bool
    content: str | None = None
    structured: StructuredContent | None = None
    metadata: ScrapeMetadata | None = None
    error: str | None = None
    details: str | None = None

    def to_body(self) -> dict:
        """JSON-ready dict with camelCase aliases and unset fields dropped."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
