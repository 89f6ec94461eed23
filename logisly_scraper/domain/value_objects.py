"""
Value Objects - Immutable objects defined by their attributes
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Credentials:
    """Logisly account used to log in"""
    email: str
    password: str

    def __repr__(self) -> str:
        return f"Credentials(email={self.email!r}, password='***')"


@dataclass(frozen=True)
class SelectorStrategy:
    """One named way of locating an element on the page"""
    name: str
    selector: str


@dataclass(frozen=True)
class ScraperConfiguration:
    """Configuration for a scrape run, built once at startup"""
    login_url: str = "https://logisly.com/login"
    orders_url: str = "https://logisly.com/open-orders"
    credentials: Optional[Credentials] = None
    api_key: str = "change-this-secret-key"
    headless: bool = True
    navigation_timeout_ms: int = 60000
    login_form_timeout_ms: int = 10000
    login_submit_timeout_ms: int = 30000
    listing_timeout_ms: int = 20000
    secondary_tab_labels: Tuple[str, ...] = ("Non-SPX",)
    tab_settle_ms: int = 2000
    display_year: str = "2025"
    max_concurrent_sessions: int = 1
    host: str = "0.0.0.0"
    port: int = 3000
    metrics_port: Optional[int] = None
    user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    )
    viewport: Tuple[int, int] = (1920, 1080)

    @property
    def api_key_configured(self) -> bool:
        return bool(self.api_key)
