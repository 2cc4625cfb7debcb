"""Cancel-and-replace debouncing over a pluggable scheduler."""

import asyncio
import logging
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

# scheduler(delay_seconds, callback) -> handle with cancel()
Scheduler = Callable[[float, Callable[[], None]], Any]


def asyncio_scheduler(delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
    """Schedule on the running event loop, keeping everything on one thread.

    Raises:
        RuntimeError: If called outside a running event loop
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        raise RuntimeError(
            "Debouncing needs a running asyncio event loop; "
            "pass a scheduler to use a session from synchronous code"
        ) from None
    return loop.call_later(delay, callback)


class Debouncer:
    """Runs only the most recent callback once calls pause for ``delay`` seconds.

    At most one callback is pending; scheduling a new one cancels the
    previous one, which then never fires.
    """

    def __init__(self, delay: float, scheduler: Optional[Scheduler] = None):
        self.delay = delay
        self._scheduler = scheduler or asyncio_scheduler
        self._handle: Optional[Any] = None
        self._token = 0

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def call(self, callback: Callable[[], None]) -> None:
        self.cancel()
        self._token += 1
        token = self._token

        def fire() -> None:
            if token != self._token:
                # Superseded after the scheduler already released it
                return
            self._handle = None
            callback()

        self._handle = self._scheduler(self.delay, fire)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self._token += 1
