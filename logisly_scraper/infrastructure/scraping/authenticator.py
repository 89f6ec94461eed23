"""
Playwright login flow for Logisly
"""

import logging
from typing import Dict, Optional

from playwright.sync_api import Error as PlaywrightError, Locator, Page, TimeoutError as PlaywrightTimeout

from ...domain.exceptions import LoginFormNotFound, LoginSubmitFailed, LoginTimeout
from ...domain.repositories import Authenticator
from ...domain.value_objects import Credentials, ScraperConfiguration, SelectorStrategy
from .browser import PlaywrightSession
from .locators import find_first_visible

logger = logging.getLogger(__name__)

EMAIL_STRATEGIES = (
    SelectorStrategy("Input type email", 'input[type="email"]'),
    SelectorStrategy("Input name email", 'input[name="email"]'),
    SelectorStrategy("Input name username", 'input[name="username"]'),
)

PASSWORD_STRATEGIES = (
    SelectorStrategy("Input type password", 'input[type="password"]'),
    SelectorStrategy("Input name password", 'input[name="password"]'),
)

# Explicit submit controls first, then known button labels
SUBMIT_STRATEGIES = (
    SelectorStrategy("Submit button", 'button[type="submit"]'),
    SelectorStrategy("Submit input", 'input[type="submit"]'),
    SelectorStrategy("Login label", 'button:has-text("Login")'),
    SelectorStrategy("Masuk label", 'button:has-text("Masuk")'),
    SelectorStrategy("Login class", '.btn-login'),
)


class PlaywrightAuthenticator(Authenticator):
    """Fills and submits the Logisly login form"""

    def __init__(self, config: ScraperConfiguration):
        self.config = config
        self.strategy_log: Dict[str, Optional[str]] = {
            'email': None,
            'password': None,
            'submit': None,
        }

    def login(self, session: PlaywrightSession, login_url: str, credentials: Credentials) -> None:
        session.navigate(login_url, self.config.navigation_timeout_ms)
        page = session.page

        email_input = self._locate(page, 'email', EMAIL_STRATEGIES)
        email_input.fill(credentials.email)

        password_input = self._locate(page, 'password', PASSWORD_STRATEGIES)
        password_input.fill(credentials.password)

        submit = self._locate(page, 'submit', SUBMIT_STRATEGIES)
        timeout_ms = self.config.login_submit_timeout_ms
        try:
            with page.expect_navigation(wait_until="networkidle", timeout=timeout_ms):
                self._click_submit(submit, timeout_ms)
        except PlaywrightTimeout as e:
            raise LoginTimeout(f"No navigation within {timeout_ms}ms after login submit") from e

    def _click_submit(self, submit: Locator, timeout_ms: int) -> None:
        # A failed click, timeout included, is not a missing navigation
        try:
            submit.click(timeout=timeout_ms)
        except PlaywrightError as e:
            raise LoginSubmitFailed(f"Login submit click failed: {e}") from e

    def _locate(self, page: Page, field: str, strategies) -> Locator:
        timeout_ms = self.config.login_form_timeout_ms
        found = find_first_visible(page, strategies, timeout_ms)
        if found is None:
            raise LoginFormNotFound(field, timeout_ms)

        strategy, locator = found
        previous = self.strategy_log.get(field)
        if previous and previous != strategy.name:
            logger.warning(f"Login {field} strategy changed: {previous} → {strategy.name}")
        self.strategy_log[field] = strategy.name
        logger.debug(f"Found login {field} via '{strategy.name}'")
        return locator
