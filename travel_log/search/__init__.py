"""Query parsing, matching, scoring and ranking."""

from .matcher import approximate_match
from .parser import parse_filters, parse_month, parse_season, parse_year
from .ranker import SearchRanker, search
from .scorer import score_entry

__all__ = [
    "SearchRanker",
    "approximate_match",
    "parse_filters",
    "parse_month",
    "parse_season",
    "parse_year",
    "score_entry",
    "search",
]
