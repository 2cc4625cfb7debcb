"""Bounded, most-recent-first search history."""

import json
import logging
from pathlib import Path
from typing import Iterator, List, Optional

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 5


class SearchHistory:
    """Past query strings, newest first, without duplicates."""

    def __init__(self, limit: int = DEFAULT_HISTORY_LIMIT, items: Optional[List[str]] = None):
        self.limit = limit
        self._items: List[str] = []
        for query in reversed(items or []):
            self.add(query)

    @property
    def items(self) -> List[str]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._items))

    def add(self, query: str) -> None:
        """Record a query. Blank queries are ignored."""
        if not query.strip():
            return

        self._items = [item for item in self._items if item != query]
        self._items.insert(0, query)
        self._items = self._items[:self.limit]

    def clear(self) -> None:
        self._items = []

    @classmethod
    def load(cls, path: Path, limit: int = DEFAULT_HISTORY_LIMIT) -> "SearchHistory":
        """Load history from a JSON list; missing or unreadable files give an empty history."""
        path = Path(path)
        if not path.exists():
            return cls(limit=limit)

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read search history from {path}: {e}")
            return cls(limit=limit)

        if not isinstance(data, list):
            logger.warning(f"Ignoring malformed search history in {path}")
            return cls(limit=limit)

        return cls(limit=limit, items=[item for item in data if isinstance(item, str)])

    def save(self, path: Path) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self._items, f, indent=2)
