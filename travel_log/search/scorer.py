"""Relevance scoring for a single travel entry."""

import math

from travel_log.domain.models import Entry
from travel_log.search.matcher import approximate_match

FULL_LOCATION_SCORE = 100
PARTIAL_LOCATION_SCORE = 50
DETAILS_SCORE = 25
LOCATION_APPROXIMATE_WEIGHT = 30
DETAILS_APPROXIMATE_WEIGHT = 15


def score_entry(entry: Entry, normalized_query: str) -> int:
    """
    Score an entry against an already-normalized query.

    Scoring:
    - Location contains the query: 100 if it is the whole location, else 50
    - Details contain the query: 25
    - Approximate location match: up to 30
    - Approximate details match: up to 15

    Returns:
        Integer score, 0 meaning no relevance
    """
    location = entry.location.lower()
    details = entry.details.lower()
    score = 0.0

    if normalized_query in location:
        if len(normalized_query) == len(location):
            score += FULL_LOCATION_SCORE
        else:
            score += PARTIAL_LOCATION_SCORE

    if normalized_query in details:
        score += DETAILS_SCORE

    score += approximate_match(location, normalized_query) * LOCATION_APPROXIMATE_WEIGHT
    score += approximate_match(details, normalized_query) * DETAILS_APPROXIMATE_WEIGHT

    # Halves round up
    return int(math.floor(score + 0.5))
