"""
Dependency injection for FastAPI
"""

import logging
import secrets
import threading
from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header, Query

from ...application.normalizer import RowNormalizer
from ...application.use_cases import ScrapeOpenOrdersUseCase
from ...domain.value_objects import ScraperConfiguration
from ...infrastructure.config import load_configuration
from ...infrastructure.scraping.authenticator import PlaywrightAuthenticator
from ...infrastructure.scraping.browser import PlaywrightSessionProvider
from ...infrastructure.scraping.table_extractor import PlaywrightTableExtractor
from .models import ErrorResponse

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Raised by endpoints and dependencies to answer with an ErrorResponse"""

    def __init__(self, status_code: int, body: ErrorResponse):
        self.status_code = status_code
        self.body = body
        super().__init__(body.error)


@lru_cache()
def get_config() -> ScraperConfiguration:
    """Get the process-wide configuration, read once"""
    return load_configuration()


@lru_cache()
def get_scrape_use_case() -> ScrapeOpenOrdersUseCase:
    """Get the scrape use case wired to Playwright"""
    config = get_config()
    return ScrapeOpenOrdersUseCase(
        config=config,
        session_provider=PlaywrightSessionProvider(config),
        authenticator=PlaywrightAuthenticator(config),
        extractor=PlaywrightTableExtractor(config),
        normalizer=RowNormalizer(display_year=config.display_year),
    )


_session_slots: Optional[threading.BoundedSemaphore] = None
_session_slots_lock = threading.Lock()


def get_session_slots() -> threading.BoundedSemaphore:
    """Bounds how many browser sessions run at once; built exactly once"""
    global _session_slots
    with _session_slots_lock:
        if _session_slots is None:
            _session_slots = threading.BoundedSemaphore(get_config().max_concurrent_sessions)
    return _session_slots


def verify_api_key(
    x_api_key: Optional[str] = Header(None),
    api_key: Optional[str] = Query(None, alias="apiKey"),
    config: ScraperConfiguration = Depends(get_config),
) -> None:
    """Accept the key from the X-API-Key header or the apiKey query parameter"""
    provided = x_api_key or api_key
    if (
        not provided
        or not config.api_key_configured
        or not secrets.compare_digest(provided.encode(), config.api_key.encode())
    ):
        logger.warning("Rejected request with invalid or missing API key")
        raise ApiError(
            401,
            ErrorResponse(error="Unauthorized", message="Invalid or missing API key"),
        )
