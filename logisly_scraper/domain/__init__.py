"""
Domain Layer - Core Business Logic
Contains entities, value objects, exceptions and domain interfaces
"""

from .entities import Order, LoadingDate, RawRow, ScrapeResult, DropReason, ScrapeStage
from .value_objects import Credentials, ScraperConfiguration, SelectorStrategy
from .repositories import BrowserSession, SessionProvider, Authenticator, OrderTableExtractor
from .exceptions import (
    ScraperError,
    ConfigurationError,
    SessionAcquisitionFailed,
    NavigationTimeout,
    LoginFormNotFound,
    LoginSubmitFailed,
    LoginTimeout,
    LoginRejected,
    ListingNotFound,
    RowRejected,
)

__all__ = [
    'Order',
    'LoadingDate',
    'RawRow',
    'ScrapeResult',
    'DropReason',
    'ScrapeStage',
    'Credentials',
    'ScraperConfiguration',
    'SelectorStrategy',
    'BrowserSession',
    'SessionProvider',
    'Authenticator',
    'OrderTableExtractor',
    'ScraperError',
    'ConfigurationError',
    'SessionAcquisitionFailed',
    'NavigationTimeout',
    'LoginFormNotFound',
    'LoginSubmitFailed',
    'LoginTimeout',
    'LoginRejected',
    'ListingNotFound',
    'RowRejected',
]
