"""Deferred callbacks for the deletion grace period.

``TimerScheduler`` runs each callback on its own daemon ``threading.Timer`` and
is what the web process uses. ``ManualScheduler`` is a virtual clock driven by
``advance()``; callbacks fire synchronously in deadline order, which keeps
single-threaded hosts and tests deterministic.
"""

import heapq
import itertools
import threading
from collections.abc import Callable
from typing import Protocol


class ScheduledCall(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def schedule(self, delay: float, callback: Callable[[], None]) -> ScheduledCall: ...


class TimerScheduler:
    def schedule(self, delay: float, callback: Callable[[], None]) -> threading.Timer:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return timer


class _ManualCall:
    def __init__(self, deadline: float, callback: Callable[[], None]) -> None:
        self.deadline = deadline
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Virtual clock kept in whole microseconds so repeated steps land exactly on deadlines."""

    def __init__(self) -> None:
        self._now_us = 0
        self._heap: list[tuple[int, int, _ManualCall]] = []
        self._seq = itertools.count()

    @staticmethod
    def _to_us(seconds: float) -> int:
        return round(seconds * 1_000_000)

    @property
    def now(self) -> float:
        return self._now_us / 1_000_000

    @property
    def pending_count(self) -> int:
        return sum(1 for _, _, call in self._heap if not call.cancelled)

    def schedule(self, delay: float, callback: Callable[[], None]) -> _ManualCall:
        deadline = self._now_us + max(self._to_us(delay), 0)
        call = _ManualCall(deadline / 1_000_000, callback)
        heapq.heappush(self._heap, (deadline, next(self._seq), call))
        return call

    def advance(self, seconds: float) -> int:
        """Move the clock forward and fire every call that has come due.

        Returns the number of callbacks fired. A callback may schedule new
        calls; those fire in the same pass if they fall inside the window.
        """
        if seconds < 0:
            raise ValueError("cannot move the clock backwards")
        target = self._now_us + self._to_us(seconds)
        fired = 0
        while self._heap and self._heap[0][0] <= target:
            deadline, _, call = heapq.heappop(self._heap)
            if call.cancelled:
                continue
            self._now_us = deadline
            call.callback()
            fired += 1
        self._now_us = target
        return fired
