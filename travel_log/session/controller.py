"""Command-palette style search session.

The session state is an immutable value; the module-level transition
functions take a state and return the next one, and ``SessionController``
wires them to the debouncer, the ranker and the view callbacks.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

from travel_log.domain.models import SearchResult, SelectionAction
from travel_log.search.presentation import display_order
from travel_log.search.ranker import SearchRanker, StoreLike
from travel_log.session.debounce import Debouncer, Scheduler
from travel_log.session.history import SearchHistory

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_DELAY = 0.2


class SessionStatus(Enum):
    CLOSED = "closed"
    OPEN_EMPTY = "open-empty"
    OPEN_WITH_RESULTS = "open-with-results"


@dataclass(frozen=True)
class SessionState:
    """Snapshot of a search session.

    ``results`` are kept in display order, which is what
    ``selected_index`` points into. ``generation`` changes on every
    open, keystroke and close so late debounce firings can be discarded.
    """

    status: SessionStatus = SessionStatus.CLOSED
    query: str = ""
    results: Tuple[SearchResult, ...] = ()
    selected_index: int = -1
    generation: int = 0

    @property
    def is_open(self) -> bool:
        return self.status != SessionStatus.CLOSED

    @property
    def selected(self) -> Optional[SearchResult]:
        if 0 <= self.selected_index < len(self.results):
            return self.results[self.selected_index]
        return None


def clamp_index(index: int, result_count: int) -> int:
    """Clamp a selection index to [-1, result_count - 1]."""
    return max(-1, min(index, result_count - 1))


def open_session(state: SessionState) -> SessionState:
    return SessionState(
        status=SessionStatus.OPEN_EMPTY,
        generation=state.generation + 1
    )


def change_text(state: SessionState, text: str) -> SessionState:
    if not state.is_open:
        return state
    return replace(state, query=text, generation=state.generation + 1)


def apply_results(
    state: SessionState,
    generation: int,
    results: Sequence[SearchResult]
) -> SessionState:
    """Show results for ``generation``; stale or closed sessions are left as-is."""
    if not state.is_open or generation != state.generation:
        return state
    return replace(
        state,
        status=SessionStatus.OPEN_WITH_RESULTS,
        results=tuple(display_order(list(results))),
        selected_index=-1
    )


def move_selection(state: SessionState, step: int) -> SessionState:
    if not state.is_open:
        return state
    return replace(
        state,
        selected_index=clamp_index(state.selected_index + step, len(state.results))
    )


def close_session(state: SessionState) -> SessionState:
    return replace(
        state,
        status=SessionStatus.CLOSED,
        selected_index=-1,
        generation=state.generation + 1
    )


class SessionController:
    """Drives a search session from UI events.

    Args:
        store_provider: Returns the live store each time a search runs
        ranker: Ranker used for searches
        history: History that selected queries are appended to
        debounce_delay: Seconds of quiet before a search runs
        scheduler: Timer scheduler for the debouncer; defaults to the
            running asyncio event loop
        on_results: Called with display-ordered results after each search
        on_select: Called with the SelectionAction of a chosen result
        on_clear_highlight: Called whenever the view's highlight should go
    """

    def __init__(
        self,
        store_provider: Callable[[], StoreLike],
        ranker: Optional[SearchRanker] = None,
        history: Optional[SearchHistory] = None,
        debounce_delay: float = DEFAULT_DEBOUNCE_DELAY,
        scheduler: Optional[Scheduler] = None,
        on_results: Optional[Callable[[List[SearchResult]], None]] = None,
        on_select: Optional[Callable[[SelectionAction], None]] = None,
        on_clear_highlight: Optional[Callable[[], None]] = None
    ):
        self.store_provider = store_provider
        self.ranker = ranker or SearchRanker()
        self.history = history if history is not None else SearchHistory()
        self.debouncer = Debouncer(debounce_delay, scheduler)
        self.on_results = on_results
        self.on_select = on_select
        self.on_clear_highlight = on_clear_highlight
        self.search_count = 0
        self._state = SessionState()

    @property
    def state(self) -> SessionState:
        return self._state

    def open(self) -> None:
        self.debouncer.cancel()
        self._state = open_session(self._state)
        self._clear_highlight()

    def close(self) -> None:
        self.debouncer.cancel()
        self._state = close_session(self._state)
        self._clear_highlight()

    def input(self, text: str) -> None:
        """Handle a text change; the search runs once typing pauses."""
        if not self._state.is_open:
            return

        self._state = change_text(self._state, text)
        generation = self._state.generation
        self.debouncer.call(lambda: self._run_search(generation, text))

    def _run_search(self, generation: int, text: str) -> None:
        if not self._state.is_open or generation != self._state.generation:
            logger.debug(f"Discarding stale search for '{text}'")
            return

        self.search_count += 1
        results = self.ranker.search(text, self.store_provider())
        self._state = apply_results(self._state, generation, results)

        if self.on_results:
            self.on_results(list(self._state.results))

    def move_down(self) -> None:
        self._state = move_selection(self._state, 1)

    def move_up(self) -> None:
        self._state = move_selection(self._state, -1)

    def select(self, index: Optional[int] = None) -> Optional[SelectionAction]:
        """
        Choose a result, by index or the current selection.

        An explicit index is clamped into range. Nothing happens when no
        result ends up selected.

        Returns:
            The dispatched action, or None
        """
        if not self._state.is_open:
            return None

        if index is None:
            index = self._state.selected_index
        else:
            index = clamp_index(index, len(self._state.results))
            self._state = replace(self._state, selected_index=index)

        result = self._state.selected
        if result is None:
            return None

        action = SelectionAction.from_result(result)
        self.history.add(self._state.query)
        self.close()

        logger.debug(f"Selected {action.type.value} result for '{self._state.query}'")
        if self.on_select:
            self.on_select(action)
        return action

    def handle_key(self, key: str) -> Optional[SelectionAction]:
        """Dispatch a key name (ArrowDown, ArrowUp, Enter, Escape)."""
        if key == "ArrowDown":
            self.move_down()
        elif key == "ArrowUp":
            self.move_up()
        elif key == "Enter":
            return self.select()
        elif key == "Escape":
            self.close()
        return None

    def _clear_highlight(self) -> None:
        if self.on_clear_highlight:
            self.on_clear_highlight()
