"""Ranked search over the travel store."""

import logging
from typing import Any, List, Mapping, Optional, Union

from travel_log.domain.models import (
    MONTH_NAMES,
    EntryResult,
    MonthResult,
    SearchResult,
    YearResult,
)
from travel_log.search.parser import parse_filters
from travel_log.search.scorer import score_entry
from travel_log.storage.travel_store import TravelStore

logger = logging.getLogger(__name__)

DEFAULT_RESULTS_LIMIT = 10
EXACT_NAVIGATION_SCORE = 100
PARTIAL_NAVIGATION_SCORE = 50

StoreLike = Union[TravelStore, Mapping[Any, Any]]


class SearchRanker:
    """Scores store entries and navigation shortcuts against a query."""

    def __init__(self, results_limit: int = DEFAULT_RESULTS_LIMIT):
        self.results_limit = results_limit

    def search(self, query: str, store: Optional[StoreLike]) -> List[SearchResult]:
        """
        Search the store for a free-text query.

        Year, month and season keywords in the query narrow which entries
        are scored. Years and months matching the query text are offered
        as navigation results unless the query already filters on them.

        Args:
            query: Raw query text
            store: A TravelStore or its nested mapping form

        Returns:
            At most ``results_limit`` results, highest score first
        """
        parsed = parse_filters(query)
        if not parsed.text:
            return []

        view = self._as_store(store)
        normalized_query = parsed.text
        logger.debug(
            f"Searching for '{normalized_query}' (year={parsed.year_filter}, "
            f"month={parsed.month_filter}, season={parsed.season_filter})"
        )

        results: List[SearchResult] = []

        for year, month, entry in view.iter_entries():
            if parsed.year_filter is not None and year != parsed.year_filter:
                continue
            if parsed.month_filter is not None and month != parsed.month_filter:
                continue
            if parsed.season_filter is not None and month not in parsed.season_filter:
                continue

            score = score_entry(entry, normalized_query)
            if score > 0:
                results.append(EntryResult(year=year, month=month, entry=entry, score=score))

        if parsed.year_filter is None:
            for year in view.years():
                year_text = str(year)
                if normalized_query in year_text:
                    results.append(YearResult(
                        year=year,
                        score=self._navigation_score(year_text, normalized_query)
                    ))

        if parsed.month_filter is None and parsed.year_filter is None:
            for index, month_name in enumerate(MONTH_NAMES):
                name = month_name.lower()
                if normalized_query in name:
                    results.append(MonthResult(
                        month=index,
                        score=self._navigation_score(name, normalized_query)
                    ))

        # list.sort is stable with reverse=True, ties keep enumeration order
        results.sort(key=lambda result: result.score, reverse=True)
        results = results[:self.results_limit]

        logger.debug(f"Search for '{normalized_query}' returned {len(results)} results")
        return results

    @staticmethod
    def _navigation_score(candidate: str, query: str) -> int:
        if len(candidate) == len(query):
            return EXACT_NAVIGATION_SCORE
        return PARTIAL_NAVIGATION_SCORE

    @staticmethod
    def _as_store(store: Optional[StoreLike]) -> TravelStore:
        if isinstance(store, TravelStore):
            return store
        if isinstance(store, Mapping):
            # Read-only view: ids are never invented here
            return TravelStore.from_dict(store, generate_ids=False)
        if store is not None:
            logger.debug(f"Ignoring unsupported store of type {type(store).__name__}")
        return TravelStore()


def search(
    query: str,
    store: Optional[StoreLike],
    results_limit: int = DEFAULT_RESULTS_LIMIT
) -> List[SearchResult]:
    """Convenience wrapper around SearchRanker.search."""
    return SearchRanker(results_limit=results_limit).search(query, store)
