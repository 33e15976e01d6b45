"""FastAPI app entrypoint."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from src.api.routes import request_validation_handler, router
from src.config import get_settings
from src.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # Logging first so startup messages are JSON too
    setup_logging(settings.log_level)
    logger.info("starting scrape service")

    logger.info(
        "scrape service ready",
        extra={
            "firecrawl_api_url": settings.firecrawl_api_url,
            "firecrawl_configured": bool(settings.firecrawl_api_key),
        },
    )

    yield

    logger.info("shutting down scrape service")


app = FastAPI(title="Scrape Service", lifespan=lifespan)
app.include_router(router)
app.add_exception_handler(RequestValidationError, request_validation_handler)


@app.get("/health")
async def health():
    return {"status": "ok"}
