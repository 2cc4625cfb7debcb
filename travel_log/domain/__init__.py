"""Domain models for the travel log."""

from .models import (
    MONTH_NAMES,
    Entry,
    EntryResult,
    MonthResult,
    ParsedQuery,
    ResultType,
    SearchResult,
    SelectionAction,
    YearResult,
)

__all__ = [
    "MONTH_NAMES",
    "Entry",
    "EntryResult",
    "MonthResult",
    "ParsedQuery",
    "ResultType",
    "SearchResult",
    "SelectionAction",
    "YearResult",
]
