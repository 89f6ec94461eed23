"""
Open orders table extraction
"""

import logging
from typing import Iterator

from playwright.sync_api import Error as PlaywrightError, Page, TimeoutError as PlaywrightTimeout

from ...domain.entities import RawRow
from ...domain.exceptions import ListingNotFound
from ...domain.repositories import OrderTableExtractor
from ...domain.value_objects import ScraperConfiguration
from .browser import PlaywrightSession

logger = logging.getLogger(__name__)

# Any one of these means the listing has rendered
CONTAINER_SELECTOR = 'table, .orders-list, [class*="order"]'
ROW_SELECTOR = 'table tr, [class*="order-row"]'
CELL_SELECTOR = 'td'

MIN_CELLS = 6
HEADER_LABELS = ('shipper',)


def is_header_row(cells) -> bool:
    """True when the first cell is exactly a column label, ignoring case"""
    return bool(cells) and cells[0].strip().lower() in HEADER_LABELS


def tab_selector(label: str) -> str:
    """Button or link whose text contains label, quoted for the selector engine"""
    quoted = label.replace('\\', '\\\\').replace('"', '\\"')
    return f'button:has-text("{quoted}"), a:has-text("{quoted}")'


class PlaywrightTableExtractor(OrderTableExtractor):
    """Reads raw rows from the rendered open orders listing"""

    def __init__(self, config: ScraperConfiguration):
        self.config = config

    def extract_rows(self, session: PlaywrightSession) -> Iterator[RawRow]:
        """Wait for the listing, then lazily yield its data rows (one pass)"""
        page = session.page
        self._wait_for_listing(page)
        self._open_secondary_tabs(page)
        return self._iter_rows(page)

    def _wait_for_listing(self, page: Page) -> None:
        timeout_ms = self.config.listing_timeout_ms
        try:
            page.wait_for_selector(CONTAINER_SELECTOR, timeout=timeout_ms)
        except PlaywrightTimeout as e:
            raise ListingNotFound(f"Order listing did not appear within {timeout_ms}ms") from e

    def _open_secondary_tabs(self, page: Page) -> None:
        """Click tabs such as 'Non-SPX' when the page has them"""
        for label in self.config.secondary_tab_labels:
            tab = page.locator(tab_selector(label)).first
            try:
                if tab.count() == 0:
                    logger.info(f"{label} tab not found or not needed")
                    continue
                logger.info(f"Clicking {label} tab...")
                tab.click()
                page.wait_for_timeout(self.config.tab_settle_ms)
            except PlaywrightError as e:
                logger.info(f"Could not open {label} tab: {e}")

    def _iter_rows(self, page: Page) -> Iterator[RawRow]:
        index = 0
        skipped = 0
        for row in page.locator(ROW_SELECTOR).all():
            cells = tuple(text.strip() for text in row.locator(CELL_SELECTOR).all_inner_texts())
            if len(cells) < MIN_CELLS or is_header_row(cells):
                skipped += 1
                continue
            yield RawRow(cells=cells, index=index)
            index += 1
        logger.debug(f"Read {index} candidate rows, skipped {skipped}")
