"""Main travel log engine that orchestrates all components."""

import logging
from pathlib import Path
from typing import Callable, List, Optional, Dict, Any

from travel_log.domain.models import Entry, SearchResult, SelectionAction
from travel_log.application.config import Config
from travel_log.search import SearchRanker
from travel_log.search.presentation import display_order
from travel_log.session import SearchHistory, SessionController
from travel_log.session.debounce import Scheduler
from travel_log.storage import JsonTravelStore

logger = logging.getLogger(__name__)


class TravelLogEngine:
    """Main engine for storing and searching travel entries."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()
        self._setup_logging()

        self.store: Optional[JsonTravelStore] = None
        self.history: Optional[SearchHistory] = None
        self.ranker: Optional[SearchRanker] = None

        self._initialized = False

    def _setup_logging(self):
        """Setup logging configuration."""
        logging.basicConfig(
            level=getattr(logging, self.config.log_level.upper()),
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            filename=self.config.log_file
        )

    def initialize(self) -> None:
        """Load the store and search history."""
        if self._initialized:
            return

        logger.info("Initializing travel log engine...")

        self.store = JsonTravelStore(self.config.storage.data_file).load()
        self.history = SearchHistory.load(
            self.config.storage.history_file,
            limit=self.config.search.history_limit
        )
        self.ranker = SearchRanker(results_limit=self.config.search.results_limit)

        self._initialized = True
        logger.info("Travel log engine initialized successfully")

    def _ensure_initialized(self) -> None:
        if not self._initialized:
            self.initialize()

    def add_entry(self, year: int, month: int, location: str, details: str = "") -> Entry:
        self._ensure_initialized()
        entry = self.store.add_entry(year, month, location, details)
        self.store.save()
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
        self._ensure_initialized()
        entry = self.store.update_entry(year, month, entry_id, location, details, new_month)
        self.store.save()
        return entry

    def remove_entry(self, year: int, month: int, entry_id: str) -> bool:
        self._ensure_initialized()
        removed = self.store.remove_entry(year, month, entry_id)
        if removed:
            self.store.save()
        return removed

    def search(self, query: str) -> List[SearchResult]:
        """Ranked results for a query, in score order."""
        self._ensure_initialized()
        return self.ranker.search(query, self.store)

    def select(self, query: str, index: int) -> Optional[SelectionAction]:
        """
        Search and choose the result at ``index`` in display order.

        The query is recorded in the search history when a result is chosen.

        Args:
            query: The search query
            index: Position in the displayed list, clamped to range

        Returns:
            The selection action, or None if there are no results
        """
        results = display_order(self.search(query))
        if not results:
            return None

        index = max(0, min(index, len(results) - 1))
        action = SelectionAction.from_result(results[index])
        self.record_query(query)
        return action

    def record_query(self, query: str) -> None:
        self._ensure_initialized()
        self.history.add(query)
        self.history.save(self.config.storage.history_file)

    def clear_history(self) -> None:
        self._ensure_initialized()
        self.history.clear()
        self.history.save(self.config.storage.history_file)

    def create_session(
        self,
        scheduler: Optional[Scheduler] = None,
        on_results: Optional[Callable[[List[SearchResult]], None]] = None,
        on_select: Optional[Callable[[SelectionAction], None]] = None,
        on_clear_highlight: Optional[Callable[[], None]] = None
    ) -> SessionController:
        """Create an interactive session bound to the live store.

        Without a ``scheduler`` the session debounces on the running asyncio
        event loop, so ``input`` must then be called from inside that loop.
        """
        self._ensure_initialized()

        def handle_select(action: SelectionAction) -> None:
            self.history.save(self.config.storage.history_file)
            if on_select:
                on_select(action)

        return SessionController(
            store_provider=lambda: self.store,
            ranker=self.ranker,
            history=self.history,
            debounce_delay=self.config.search.debounce_delay,
            scheduler=scheduler,
            on_results=on_results,
            on_select=handle_select,
            on_clear_highlight=on_clear_highlight
        )

    def export_data(self, output_path: Path) -> Path:
        self._ensure_initialized()
        return self.store.export_to(Path(output_path))

    def import_data(self, input_path: Path) -> int:
        self._ensure_initialized()
        return self.store.import_from(Path(input_path))

    def get_statistics(self) -> Dict[str, Any]:
        """Get system statistics."""
        self._ensure_initialized()

        stats = self.store.get_statistics()
        stats["history_size"] = len(self.history)
        stats["data_file"] = str(self.config.storage.data_file)
        return stats
