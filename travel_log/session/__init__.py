"""Interactive search session."""

from .controller import SessionController, SessionState, SessionStatus
from .debounce import Debouncer
from .history import SearchHistory

__all__ = ["Debouncer", "SearchHistory", "SessionController", "SessionState", "SessionStatus"]
