"""Titles, subtitles and grouping for rendering search results."""

from typing import Dict, List

from travel_log.domain.models import (
    MONTH_NAMES,
    EntryResult,
    MonthResult,
    ResultType,
    SearchResult,
    YearResult,
    results_of_type,
)

DETAILS_PREVIEW_LENGTH = 50

CATEGORY_LABELS = {
    ResultType.YEAR: "Years",
    ResultType.MONTH: "Months",
    ResultType.ENTRY: "Travel Entries",
}


def truncate(text: str, length: int = DETAILS_PREVIEW_LENGTH) -> str:
    """Cut text to ``length`` characters, adding an ellipsis when shortened."""
    if len(text) > length:
        return text[:length] + "..."
    return text


def result_title(result: SearchResult) -> str:
    if isinstance(result, YearResult):
        return f"Go to {result.year}"
    if isinstance(result, MonthResult):
        return f"{MONTH_NAMES[result.month]} travels"
    return result.entry.location


def result_subtitle(result: SearchResult, preview_length: int = DETAILS_PREVIEW_LENGTH) -> str:
    if isinstance(result, YearResult):
        return f"View all travels from {result.year}"
    if isinstance(result, MonthResult):
        return f"View all {MONTH_NAMES[result.month]} entries"
    details = truncate(result.entry.details, preview_length)
    return f"{MONTH_NAMES[result.month]} {result.year} • {details}"


def group_results(results: List[SearchResult]) -> Dict[ResultType, List[SearchResult]]:
    """Group results by kind, in display order (years, months, entries)."""
    return {
        result_type: results_of_type(results, result_type)
        for result_type in (ResultType.YEAR, ResultType.MONTH, ResultType.ENTRY)
    }


def display_order(results: List[SearchResult]) -> List[SearchResult]:
    """Flatten grouped results into the order a list view shows them.

    Keyboard selection indexes refer to this order.
    """
    ordered: List[SearchResult] = []
    for group in group_results(results).values():
        ordered.extend(group)
    return ordered


def describe(result: SearchResult, preview_length: int = DETAILS_PREVIEW_LENGTH) -> Dict[str, object]:
    """Plain-data view of a result for a rendering collaborator."""
    data: Dict[str, object] = {
        "type": result.type.value,
        "icon": result.icon,
        "title": result_title(result),
        "subtitle": result_subtitle(result, preview_length),
        "score": result.score,
    }
    if isinstance(result, (YearResult, EntryResult)):
        data["year"] = result.year
    if isinstance(result, (MonthResult, EntryResult)):
        data["month"] = result.month
    if isinstance(result, EntryResult):
        data["entryId"] = result.entry.id
    return data
