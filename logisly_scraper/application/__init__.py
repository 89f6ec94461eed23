"""
Application Layer - Use Cases and row normalization
"""

from .use_cases import ScrapeOpenOrdersUseCase
from .normalizer import RowNormalizer
from .parsers import parse_currency, parse_route, parse_loading_datetime, classify_tonnage

__all__ = [
    'ScrapeOpenOrdersUseCase',
    'RowNormalizer',
    'parse_currency',
    'parse_route',
    'parse_loading_datetime',
    'classify_tonnage',
]
