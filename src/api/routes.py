"""POST /api/scrape-url-enhanced endpoint handler."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.api.schemas import ScrapeResult
from src.api.service import extract_url, scrape_url
from src.config import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter()

INVALID_BODY = "Invalid request body"


def error_response(message: str, status_code: int = 500) -> JSONResponse:
    return JSONResponse(
        ScrapeResult(success=False, error=message or "Unknown error").to_body(),
        status_code=status_code,
    )


@router.post("/api/scrape-url-enhanced")
async def scrape_url_enhanced(
    payload: Any = Body(None),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    # An absent body and a literal JSON null carry nothing to read a url from
    if payload is None:
        logger.warning("empty scrape request body")
        return error_response(INVALID_BODY)

    url = extract_url(payload)
    try:
        status_code, result = await scrape_url(url, settings)
    except Exception as exc:
        logger.exception("scrape request failed", extra={"url": url})
        return error_response(str(exc))
    return JSONResponse(result.to_body(), status_code=status_code)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer bodies that are not JSON with the error envelope."""
    logger.warning(
        "invalid scrape request body",
        extra={"path": request.url.path, "error_count": len(exc.errors())},
    )
    return error_response(INVALID_BODY)
