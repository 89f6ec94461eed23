import os
import logging
from typing import Optional, Tuple

from dotenv import load_dotenv

from ..domain.value_objects import Credentials, ScraperConfiguration

# Load environment variables from .env if it exists
load_dotenv()

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


def load_configuration() -> ScraperConfiguration:
    """Read the scraper settings from the environment once"""
    defaults = ScraperConfiguration()
    return ScraperConfiguration(
        login_url=os.getenv("LOGISLY_LOGIN_URL", defaults.login_url),
        orders_url=os.getenv("LOGISLY_ORDERS_URL", defaults.orders_url),
        credentials=_credentials_from_env(),
        api_key=os.getenv("API_KEY", defaults.api_key),
        headless=os.getenv("HEADLESS", "true").lower() != "false",
        navigation_timeout_ms=_int_env("TIMEOUT", defaults.navigation_timeout_ms),
        login_form_timeout_ms=_int_env("LOGIN_FORM_TIMEOUT", defaults.login_form_timeout_ms),
        login_submit_timeout_ms=_int_env("LOGIN_SUBMIT_TIMEOUT", defaults.login_submit_timeout_ms),
        listing_timeout_ms=_int_env("LISTING_TIMEOUT", defaults.listing_timeout_ms),
        secondary_tab_labels=_labels_env("SECONDARY_TAB_LABELS", defaults.secondary_tab_labels),
        display_year=os.getenv("DISPLAY_YEAR", defaults.display_year),
        max_concurrent_sessions=max(1, _int_env("MAX_CONCURRENT_SESSIONS", defaults.max_concurrent_sessions)),
        host=os.getenv("HOST", defaults.host),
        port=_int_env("PORT", defaults.port),
        metrics_port=_optional_int_env("METRICS_PORT"),
    )


def _credentials_from_env() -> Optional[Credentials]:
    email = os.getenv("LOGISLY_EMAIL", "")
    password = os.getenv("LOGISLY_PASSWORD", "")
    if not email or not password:
        return None
    return Credentials(email=email, password=password)


def _int_env(name: str, default: int) -> int:
    # Unset or unparseable values fall back to the default
    try:
        return int(os.getenv(name, ""))
    except ValueError:
        return default


def _optional_int_env(name: str) -> Optional[int]:
    value = os.getenv(name)
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _labels_env(name: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    value = os.getenv(name)
    if value is None:
        return default
    return tuple(label.strip() for label in value.split(',') if label.strip())


def setup_logging(level: Optional[int] = None) -> logging.Logger:
    if level is None:
        level = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt='%H:%M:%S'
    )
    return logging.getLogger("logisly_scraper")
