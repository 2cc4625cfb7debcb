"""Domain models for travel entries and search results."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, List, Dict, Any, Tuple, Union
from enum import Enum


MONTH_NAMES = [
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December'
]

# Stands in for entries saved without a timestamp
UNKNOWN_TIMESTAMP = datetime.min.replace(tzinfo=timezone.utc)


class ResultType(Enum):
    """Kinds of search results."""
    YEAR = "year"
    MONTH = "month"
    ENTRY = "entry"


@dataclass(frozen=True)
class Entry:
    """A single travel entry."""

    id: str
    location: str
    details: str = ""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the entry for persistence."""
        return {
            "id": self.id,
            "location": self.location,
            "details": self.details,
            "timestamp": self.timestamp.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Entry":
        """Build an entry from its persisted form.

        Raises:
            KeyError: If ``location`` is missing.
            ValueError: If ``location`` is not text or the timestamp cannot
                be parsed.
        """
        location = data["location"]
        if not isinstance(location, str) or not location.strip():
            raise ValueError(f"Invalid location: {location!r}")

        timestamp = data.get("timestamp")
        if isinstance(timestamp, str):
            # Browser exports end in "Z"
            timestamp = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
        elif not isinstance(timestamp, datetime):
            timestamp = UNKNOWN_TIMESTAMP

        return cls(
            id=str(data["id"]) if data.get("id") is not None else "",
            location=location,
            details=str(data.get("details") or ""),
            timestamp=timestamp,
        )


@dataclass(frozen=True)
class ParsedQuery:
    """Structured filters extracted from a free-text query."""

    text: str
    year_filter: Optional[int] = None
    month_filter: Optional[int] = None
    season_filter: Optional[Tuple[int, ...]] = None

    @property
    def has_filters(self) -> bool:
        return (
            self.year_filter is not None
            or self.month_filter is not None
            or self.season_filter is not None
        )


@dataclass(frozen=True)
class YearResult:
    """Navigate to a year."""

    year: int
    score: int
    type: ResultType = field(default=ResultType.YEAR, init=False)
    icon: str = field(default="calendar", init=False)


@dataclass(frozen=True)
class MonthResult:
    """Navigate to a month of the current year."""

    month: int
    score: int
    type: ResultType = field(default=ResultType.MONTH, init=False)
    icon: str = field(default="clock", init=False)


@dataclass(frozen=True)
class EntryResult:
    """A matching travel entry."""

    year: int
    month: int
    entry: Entry
    score: int
    type: ResultType = field(default=ResultType.ENTRY, init=False)
    icon: str = field(default="map-pin", init=False)


SearchResult = Union[YearResult, MonthResult, EntryResult]


@dataclass(frozen=True)
class SelectionAction:
    """What the view should do when a result is chosen."""

    type: ResultType
    year: Optional[int] = None
    month: Optional[int] = None
    entry_id: Optional[str] = None

    @classmethod
    def from_result(cls, result: SearchResult) -> "SelectionAction":
        if isinstance(result, YearResult):
            return cls(type=ResultType.YEAR, year=result.year)
        if isinstance(result, MonthResult):
            return cls(type=ResultType.MONTH, month=result.month)
        return cls(
            type=ResultType.ENTRY,
            year=result.year,
            month=result.month,
            entry_id=result.entry.id
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": self.type.value}
        if self.year is not None:
            data["year"] = self.year
        if self.month is not None:
            data["month"] = self.month
        if self.entry_id is not None:
            data["entryId"] = self.entry_id
        return data


def results_of_type(results: List[SearchResult], result_type: ResultType) -> List[SearchResult]:
    """Filter results down to a single kind, preserving order."""
    return [result for result in results if result.type == result_type]
