"""Lexical filter parsing for free-text search queries.

Keyword tables are ordered lists of ``(keyword, value)`` pairs. Matching is
substring containment tested in table order and the first hit wins, so
"may" also fires inside "maybe".
"""

import re
from typing import List, Optional, Tuple

from travel_log.domain.models import ParsedQuery

YEAR_PATTERN = re.compile(r'\b(19|20)\d{2}\b')

MONTH_KEYWORDS: List[Tuple[str, int]] = [
    ('january', 0), ('jan', 0),
    ('february', 1), ('feb', 1),
    ('march', 2), ('mar', 2),
    ('april', 3), ('apr', 3),
    ('may', 4),
    ('june', 5), ('jun', 5),
    ('july', 6), ('jul', 6),
    ('august', 7), ('aug', 7),
    ('september', 8), ('sep', 8), ('sept', 8),
    ('october', 9), ('oct', 9),
    ('november', 10), ('nov', 10),
    ('december', 11), ('dec', 11),
]

SEASON_KEYWORDS: List[Tuple[str, Tuple[int, ...]]] = [
    ('spring', (2, 3, 4)),
    ('summer', (5, 6, 7)),
    ('fall', (8, 9, 10)),
    ('autumn', (8, 9, 10)),
    ('winter', (11, 0, 1)),
]


def normalize_query(query: str) -> str:
    """Trim and lowercase a raw query."""
    return query.strip().lower()


def parse_year(query: str) -> Optional[int]:
    """Return the first 19xx/20xx year literal in the query, if any."""
    match = YEAR_PATTERN.search(query)
    if match:
        return int(match.group())
    return None


def parse_month(query: str) -> Optional[int]:
    """Return the month index (0-11) of the first month keyword found.

    Examples:
        >>> parse_month("I traveled in June")
        5
        >>> parse_month("sept")
        8
    """
    lowercase_query = query.lower()

    for keyword, month in MONTH_KEYWORDS:
        if keyword in lowercase_query:
            return month

    return None


def parse_season(query: str) -> Optional[List[int]]:
    """Return the months of the first season keyword found."""
    lowercase_query = query.lower()

    for season, months in SEASON_KEYWORDS:
        if season in lowercase_query:
            return list(months)

    return None


def parse_filters(query: str) -> ParsedQuery:
    """Extract year, month and season filters from a query.

    A month keyword takes precedence: when one is found the season table
    is not consulted.
    """
    normalized = normalize_query(query)

    month_filter = parse_month(normalized)
    season_filter = None
    if month_filter is None:
        season = parse_season(normalized)
        if season is not None:
            season_filter = tuple(season)

    return ParsedQuery(
        text=normalized,
        year_filter=parse_year(normalized),
        month_filter=month_filter,
        season_filter=season_filter
    )
