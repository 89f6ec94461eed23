"""
Selector fallback chains

A chain is an ordered tuple of SelectorStrategy. The first strategy whose
selector resolves to a visible element wins; supporting a new markup variant
means adding a strategy, not a branch.
"""

import logging
import time
from typing import Optional, Sequence, Tuple

from playwright.sync_api import Error as PlaywrightError, Locator, Page

from ...domain.value_objects import SelectorStrategy

logger = logging.getLogger(__name__)

POLL_INTERVAL_MS = 250


def try_strategy(page: Page, strategy: SelectorStrategy) -> Optional[Locator]:
    """Visible element for one strategy, or None"""
    try:
        locator = page.locator(strategy.selector).first
        if locator.count() > 0 and locator.is_visible():
            return locator
    except PlaywrightError as e:
        logger.debug(f"Strategy '{strategy.name}' failed: {e}")
    return None


def find_first_visible(
    page: Page,
    strategies: Sequence[SelectorStrategy],
    timeout_ms: int,
) -> Optional[Tuple[SelectorStrategy, Locator]]:
    """Try the chain in order until one resolves or timeout_ms elapses"""
    deadline = time.monotonic() + timeout_ms / 1000
    while True:
        for strategy in strategies:
            locator = try_strategy(page, strategy)
            if locator is not None:
                return strategy, locator
        if time.monotonic() >= deadline:
            return None
        page.wait_for_timeout(POLL_INTERVAL_MS)
