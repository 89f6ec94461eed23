"""
Infrastructure Layer - External concerns implementation
"""

from .scraping.browser import PlaywrightSession, PlaywrightSessionProvider
from .scraping.authenticator import PlaywrightAuthenticator
from .scraping.table_extractor import PlaywrightTableExtractor
from .config import load_configuration, setup_logging

__all__ = [
    'PlaywrightSession',
    'PlaywrightSessionProvider',
    'PlaywrightAuthenticator',
    'PlaywrightTableExtractor',
    'load_configuration',
    'setup_logging',
]
