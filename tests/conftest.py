"""Shared test fixtures for the travel log."""

import pytest

from travel_log.application.config import Config
from travel_log.storage import TravelStore


class ManualHandle:
    def __init__(self, due, callback):
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class ManualScheduler:
    """Deterministic stand-in for the event loop timer."""

    def __init__(self):
        self.now = 0.0
        self.handles = []

    def __call__(self, delay, callback):
        handle = ManualHandle(self.now + delay, callback)
        self.handles.append(handle)
        return handle

    @property
    def pending(self):
        return [h for h in self.handles if not h.cancelled]

    def advance(self, seconds):
        self.now += seconds
        due = [h for h in self.pending if h.due <= self.now]
        for handle in due:
            handle.cancelled = True
            handle.callback()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def sample_store():
    """Paris in June 2023, Tokyo in September 2023, New York in December 2022."""
    store = TravelStore()
    store.add_entry(2023, 5, 'Paris', 'Amazing summer trip to Paris')
    store.add_entry(2023, 8, 'Tokyo', 'Fall vacation in Japan')
    store.add_entry(2022, 11, 'New York', 'Winter holiday shopping')
    return store


@pytest.fixture
def config(tmp_path):
    return Config(storage_path=tmp_path / "storage")
