"""One-shot timers for deferred round transitions.

The round engine only needs ``call_later(delay, callback)``. Production uses
Socket.IO background tasks; tests use ``ManualScheduler`` and move time
forward explicitly.
"""

import heapq
import itertools
import logging
from typing import Callable, List, Protocol, Tuple

logger = logging.getLogger(__name__)

Callback = Callable[[], None]


class Scheduler(Protocol):
    def call_later(self, delay: float, callback: Callback) -> None:
        ...


class SocketIOScheduler:
    """Run each callback in a Socket.IO background task after ``delay`` seconds."""

    def __init__(self, socketio):
        self.socketio = socketio

    def call_later(self, delay: float, callback: Callback) -> None:
        self.socketio.start_background_task(self._worker, delay, callback)

    def _worker(self, delay: float, callback: Callback) -> None:
        self.socketio.sleep(delay)
        try:
            callback()
        except Exception:
            logger.exception("Deferred round transition failed")


class ManualScheduler:
    """Fake clock: callbacks fire only when ``advance`` moves time past their deadline."""

    def __init__(self) -> None:
        self.now = 0.0
        self._queue: List[Tuple[float, int, Callback]] = []
        self._counter = itertools.count()

    @property
    def pending(self) -> int:
        return len(self._queue)

    def call_later(self, delay: float, callback: Callback) -> None:
        heapq.heappush(self._queue, (self.now + delay, next(self._counter), callback))

    def advance(self, seconds: float) -> int:
        """Move the clock forward and fire every callback that came due, in order.

        Returns the number of callbacks fired.
        """
        target = self.now + seconds
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, callback = heapq.heappop(self._queue)
            self.now = due
            callback()
            fired += 1
        self.now = target
        return fired

    def run_pending(self) -> int:
        """Fire everything queued, however far in the future."""
        if not self._queue:
            return 0
        return self.advance(max(due for due, _, _ in self._queue) - self.now)
