"""In-memory travel store with JSON persistence."""

import json
import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from travel_log.domain.models import Entry

logger = logging.getLogger(__name__)

EXPORT_VERSION = "1.0"


def _as_int(value: Any) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _check_month(month: int) -> None:
    if not 0 <= month <= 11:
        raise ValueError(f"Month must be between 0 and 11, got {month}")


def _new_id() -> str:
    return uuid.uuid4().hex


class TravelStore:
    """Travel entries grouped by year, then month index (0-11).

    Years iterate in insertion order, months ascending. Entries within a
    month keep insertion order and never share an id.
    """

    def __init__(self):
        self._data: Dict[int, Dict[int, List[Entry]]] = {}

    def __len__(self) -> int:
        return sum(1 for _ in self.iter_entries())

    def years(self) -> List[int]:
        return list(self._data.keys())

    def months(self, year: int) -> List[int]:
        return sorted(self._data.get(year, {}).keys())

    def entries(self, year: int, month: int) -> List[Entry]:
        return list(self._data.get(year, {}).get(month, []))

    def get_year(self, year: int) -> Dict[int, List[Entry]]:
        """Month-to-entries mapping for a year (a copy, empty if unknown)."""
        return {month: self.entries(year, month) for month in self.months(year)}

    def iter_entries(self) -> Iterator[Tuple[int, int, Entry]]:
        """Yield ``(year, month, entry)`` in enumeration order."""
        for year in self.years():
            for month in self.months(year):
                for entry in self._data[year][month]:
                    yield year, month, entry

    def find_entry(self, entry_id: str) -> Optional[Tuple[int, int, Entry]]:
        for year, month, entry in self.iter_entries():
            if entry.id == entry_id:
                return year, month, entry
        return None

    def add_entry(self, year: int, month: int, location: str, details: str = "") -> Entry:
        """Append a new entry to a month."""
        _check_month(month)
        location = location.strip()
        if not location:
            raise ValueError("Entry location cannot be empty")

        entry = Entry(id=_new_id(), location=location, details=details.strip())
        self._append(year, month, entry)
        logger.info(f"Added entry {entry.id} to {year}-{month + 1:02d}")
        return entry

    def update_entry(
        self,
        year: int,
        month: int,
        entry_id: str,
        location: str,
        details: str = "",
        new_month: Optional[int] = None
    ) -> Entry:
        """
        Update an entry in place, or move it to ``new_month``.

        A moved entry is appended to the end of its new month.

        Raises:
            ValueError: If the entry does not exist or the input is invalid
        """
        location = location.strip()
        if not location:
            raise ValueError("Entry location cannot be empty")
        if new_month is not None:
            _check_month(new_month)

        entries = self._data.get(year, {}).get(month, [])
        index = next((i for i, entry in enumerate(entries) if entry.id == entry_id), None)
        if index is None:
            raise ValueError(f"No entry {entry_id} in {year}-{month + 1:02d}")

        updated = Entry(
            id=entry_id,
            location=location,
            details=details.strip(),
            timestamp=datetime.now(timezone.utc)
        )

        if new_month is None or new_month == month:
            entries[index] = updated
        else:
            del entries[index]
            self._drop_if_empty(year, month)
            self._append(year, new_month, updated)

        logger.info(f"Updated entry {entry_id}")
        return updated

    def remove_entry(self, year: int, month: int, entry_id: str) -> bool:
        """Delete an entry. Returns False if it was not found."""
        entries = self._data.get(year, {}).get(month)
        if not entries:
            return False

        remaining = [entry for entry in entries if entry.id != entry_id]
        if len(remaining) == len(entries):
            return False

        self._data[year][month] = remaining
        self._drop_if_empty(year, month)
        logger.info(f"Removed entry {entry_id}")
        return True

    def clear(self) -> None:
        self._data.clear()

    def _append(self, year: int, month: int, entry: Entry) -> bool:
        entries = self._data.setdefault(year, {}).setdefault(month, [])
        if any(existing.id == entry.id for existing in entries):
            return False
        entries.append(entry)
        return True

    def _drop_if_empty(self, year: int, month: int) -> None:
        if not self._data[year].get(month):
            self._data[year].pop(month, None)

    def merge_dict(self, data: Mapping[Any, Any], generate_ids: bool = True) -> int:
        """
        Merge a nested ``{year: {month: [entry, ...]}}`` mapping.

        Imported entries go after existing ones. Malformed years, months
        and entries are skipped, as are ids already present in the month.
        Entries without an id get a new one, or are skipped when
        ``generate_ids`` is False.

        Returns:
            Number of entries added
        """
        added = 0

        for year_key, months in data.items():
            year = _as_int(year_key)
            if year is None or not isinstance(months, Mapping):
                logger.debug(f"Skipping malformed year {year_key!r}")
                continue

            for month_key, raw_entries in months.items():
                month = _as_int(month_key)
                if month is None or not 0 <= month <= 11 or not isinstance(raw_entries, list):
                    logger.debug(f"Skipping malformed month {year_key!r}/{month_key!r}")
                    continue

                for raw in raw_entries:
                    entry = self._coerce_entry(raw, generate_ids)
                    if entry is None:
                        continue
                    if self._append(year, month, entry):
                        added += 1

        return added

    @staticmethod
    def _coerce_entry(raw: Any, generate_ids: bool = True) -> Optional[Entry]:
        if isinstance(raw, Entry):
            return raw
        if not isinstance(raw, Mapping):
            return None
        try:
            entry = Entry.from_dict(dict(raw))
        except (KeyError, TypeError, ValueError) as e:
            logger.debug(f"Skipping malformed entry: {e}")
            return None
        if not entry.id:
            if not generate_ids:
                logger.debug(f"Skipping entry without id: {entry.location!r}")
                return None
            entry = Entry(
                id=_new_id(),
                location=entry.location,
                details=entry.details,
                timestamp=entry.timestamp
            )
        return entry

    @classmethod
    def from_dict(cls, data: Mapping[Any, Any], generate_ids: bool = True) -> "TravelStore":
        store = cls()
        store.merge_dict(data, generate_ids)
        return store

    def to_dict(self) -> Dict[str, Dict[str, List[Dict[str, Any]]]]:
        """Nested mapping with string keys, as stored on disk."""
        return {
            str(year): {
                str(month): [entry.to_dict() for entry in self._data[year][month]]
                for month in self.months(year)
            }
            for year in self.years()
        }

    def export_document(self) -> Dict[str, Any]:
        return {
            "version": EXPORT_VERSION,
            "exportDate": datetime.now(timezone.utc).isoformat(),
            "data": self.to_dict(),
        }

    def merge_document(self, document: Any) -> int:
        """
        Merge an exported document into the store.

        Raises:
            ValueError: If the document has no ``data`` mapping
        """
        if not isinstance(document, Mapping) or not isinstance(document.get("data"), Mapping):
            raise ValueError("Invalid file format")

        added = self.merge_dict(document["data"])
        logger.info(f"Imported {added} entries")
        return added

    def get_statistics(self) -> Dict[str, Any]:
        years = self.years()
        return {
            "total_entries": len(self),
            "years": len(years),
            "year_range": (min(years), max(years)) if years else None,
        }


class JsonTravelStore(TravelStore):
    """Travel store persisted to a single JSON file."""

    def __init__(self, path: Path):
        super().__init__()
        self.path = Path(path)

    def load(self) -> "JsonTravelStore":
        """Replace the contents with the file's; a missing file means empty."""
        self.clear()
        if not self.path.exists():
            logger.info(f"No data file at {self.path}, starting empty")
            return self

        with open(self.path, encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, Mapping):
            raise ValueError(f"Invalid data file: {self.path}")

        self.merge_dict(data)
        logger.info(f"Loaded {len(self)} entries from {self.path}")
        return self

    def save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.debug(f"Saved travel data to {self.path}")

    def export_to(self, output_path: Path) -> Path:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(self.export_document(), f, indent=2)
        logger.info(f"Exported travel data to {output_path}")
        return output_path

    def import_from(self, input_path: Path) -> int:
        with open(input_path, encoding="utf-8") as f:
            document = json.load(f)
        added = self.merge_document(document)
        self.save()
        return added
