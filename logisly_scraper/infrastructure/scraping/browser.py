"""
Playwright-backed browser sessions
"""

import logging
from typing import Optional

from playwright.sync_api import (
    Browser,
    Error as PlaywrightError,
    Page,
    Playwright,
    TimeoutError as PlaywrightTimeout,
    sync_playwright,
)

from ...domain.exceptions import NavigationTimeout, SessionAcquisitionFailed
from ...domain.repositories import BrowserSession, SessionProvider
from ...domain.value_objects import ScraperConfiguration

logger = logging.getLogger(__name__)

LAUNCH_ARGS = [
    '--no-sandbox',
    '--disable-setuid-sandbox',
    '--disable-dev-shm-usage',
    '--disable-gpu',
    '--disable-blink-features=AutomationControlled',
]


class PlaywrightSession(BrowserSession):
    """A Chromium page with its own browser and Playwright driver"""

    def __init__(self, playwright: Playwright, browser: Browser, page: Page):
        self._playwright = playwright
        self._browser = browser
        self.page = page
        self._closed = False

    def navigate(self, url: str, timeout_ms: int) -> None:
        logger.debug(f"Navigating to {url}")
        try:
            self.page.goto(url, wait_until="networkidle", timeout=timeout_ms)
        except PlaywrightTimeout as e:
            raise NavigationTimeout(url, timeout_ms) from e

    @property
    def current_url(self) -> str:
        return self.page.url

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            self._browser.close()
        except PlaywrightError as e:
            logger.warning(f"Error closing browser: {e}")
        finally:
            try:
                self._playwright.stop()
            except PlaywrightError as e:
                logger.warning(f"Error stopping Playwright: {e}")
        logger.debug("Browser session closed")


class PlaywrightSessionProvider(SessionProvider):
    """Launches a fresh Chromium for every session"""

    def __init__(self, config: ScraperConfiguration):
        self.config = config

    def acquire(self) -> PlaywrightSession:
        playwright: Optional[Playwright] = None
        try:
            playwright = sync_playwright().start()
            browser = playwright.chromium.launch(
                headless=self.config.headless,
                args=LAUNCH_ARGS,
            )
            width, height = self.config.viewport
            context = browser.new_context(
                viewport={'width': width, 'height': height},
                user_agent=self.config.user_agent,
            )
            page = context.new_page()
        except PlaywrightError as e:
            if playwright is not None:
                playwright.stop()
            raise SessionAcquisitionFailed(f"Could not start browser: {e}") from e

        logger.debug(f"Browser session started (headless={self.config.headless})")
        return PlaywrightSession(playwright, browser, page)
