"""
Domain Exceptions - Failures a scrape run can end with
"""

from typing import Optional


class ScraperError(Exception):
    """Base class for every failure that ends a scrape run"""


class ConfigurationError(ScraperError):
    """Required configuration (credentials) is missing"""


class SessionAcquisitionFailed(ScraperError):
    """The browser automation capability could not provide a session"""


class NavigationTimeout(ScraperError):
    """A page did not reach network idle within its bounded wait"""

    def __init__(self, url: str, timeout_ms: int, detail: Optional[str] = None):
        self.url = url
        self.timeout_ms = timeout_ms
        message = f"Navigation to {url} timed out after {timeout_ms}ms"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class LoginFormNotFound(ScraperError):
    """None of the selector strategies for a login form field resolved"""

    def __init__(self, field: str, timeout_ms: int):
        self.field = field
        self.timeout_ms = timeout_ms
        super().__init__(f"Login form field '{field}' not found within {timeout_ms}ms")


class LoginSubmitFailed(ScraperError):
    """The submit control was found but clicking it did not go through"""


class LoginTimeout(ScraperError):
    """No navigation followed the login submit within its bounded wait"""


class LoginRejected(ScraperError):
    """The site sent the session back to the login page after submitting credentials"""


class ListingNotFound(ScraperError):
    """The order listing container never appeared"""


class RowRejected(ValueError):
    """A raw row could not be normalized into an order"""

    def __init__(self, reason, index: int):
        self.reason = reason
        self.index = index
        super().__init__(f"Row {index} rejected: {reason.value}")
