"""
Field Parsers - Turn raw cell text into typed values

Every parser is total: unparseable input gives a default instead of raising.
"""

import re
from typing import Tuple

from ..domain.entities import LoadingDate


NON_DIGIT_PATTERN = re.compile(r'\D')
LOADING_DATETIME_PATTERN = re.compile(r'(\d+)\s+(\w+)\s+(\d+:\d+)')

# Checked in order, first keyword found wins
TONNAGE_RULES: Tuple[Tuple[str, int], ...] = (
    ('tronton', 15),
    ('wingbox', 8),
    ('wb', 8),
    ('cddl', 5),
    ('cde', 3),
)
DEFAULT_TONNAGE = 5


def parse_currency(text: str) -> int:
    """Keep only the digits: 'Rp 150.000' -> 150000, '' -> 0"""
    digits = NON_DIGIT_PATTERN.sub('', text or '')
    return int(digits) if digits else 0


def parse_route(text: str) -> Tuple[str, str]:
    """Split 'Origin - Destination' on the hyphen; a missing side is ''"""
    parts = [part.strip() for part in (text or '').split('-')]
    origin = parts[0] if parts else ''
    destination = parts[1] if len(parts) > 1 else ''
    return origin, destination


def parse_loading_datetime(text: str, year: str) -> LoadingDate:
    """
    Pull '<day> <month> <hh:mm>' out of the listing's datetime cell.

    The year is not on the listing; the configured literal is used as-is.
    """
    match = LOADING_DATETIME_PATTERN.search(text or '')
    if not match:
        return LoadingDate(year=year)
    day, month, time_of_day = match.groups()
    return LoadingDate(day=day, month=month, year=year, time=time_of_day)


def classify_tonnage(vehicle_type: str) -> int:
    """Tonnage class from the truck type keyword, defaulting to 5"""
    lowered = (vehicle_type or '').lower()
    for keyword, tonnage in TONNAGE_RULES:
        if keyword in lowered:
            return tonnage
    return DEFAULT_TONNAGE
