"""Fixtures: test client with overridable settings, logging isolation."""

import logging

import pytest
from fastapi.testclient import TestClient

from src.config import Settings, get_settings
from src.main import app

FIRECRAWL_KEY = "fc-test-key"

# Loggers setup_logging() reconfigures
_MANAGED_LOGGERS = ("", "uvicorn", "uvicorn.access", "uvicorn.error", "httpx", "httpcore")


@pytest.fixture
def settings() -> Settings:
    return Settings(firecrawl_api_key=FIRECRAWL_KEY, _env_file=None)


@pytest.fixture
def client(settings: Settings):
    """TestClient for the app with ``get_settings`` pinned to *settings*."""
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def restore_logging():
    """Undo setup_logging() so later tests don't write to a closed capture stream."""
    saved = {}
    for name in _MANAGED_LOGGERS:
        log = logging.getLogger(name)
        saved[name] = (log.handlers[:], log.level, log.propagate)
    yield
    for name, (handlers, level, propagate) in saved.items():
        log = logging.getLogger(name)
        log.handlers[:] = handlers
        log.setLevel(level)
        log.propagate = propagate
