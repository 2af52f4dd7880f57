"""Two-phase CV removal with a visible grace period.

``request_delete`` marks an id as pending and returns at once; when the grace
period ends the store's delete runs and the mark is cleared in one step. A
second request for an id that is already pending is ignored, so the store is
asked to delete at most once per accepted request.
"""

import logging
import threading
from collections.abc import Callable

from .scheduler import ScheduledCall, Scheduler

logger = logging.getLogger(__name__)

DEFAULT_GRACE_PERIOD = 0.3


class DeletionCoordinator:
    def __init__(
        self,
        delete: Callable[[int | str], object],
        scheduler: Scheduler,
        grace_period: float = DEFAULT_GRACE_PERIOD,
    ) -> None:
        if grace_period < 0:
            raise ValueError("grace_period must be >= 0")
        self._delete = delete
        self._scheduler = scheduler
        self.grace_period = grace_period
        self._pending: set[int | str] = set()
        self._calls: dict[int | str, ScheduledCall] = {}
        self._closed = False
        self._lock = threading.RLock()

    @property
    def pending(self) -> frozenset:
        with self._lock:
            return frozenset(self._pending)

    @property
    def closed(self) -> bool:
        return self._closed

    def is_pending(self, cv_id: int | str) -> bool:
        with self._lock:
            return cv_id in self._pending

    def request_delete(self, cv_id: int | str) -> bool:
        with self._lock:
            if self._closed:
                logger.debug("Ignoring delete of %s: coordinator closed", cv_id)
                return False
            if cv_id in self._pending:
                logger.debug("Ignoring delete of %s: already pending", cv_id)
                return False
            self._pending.add(cv_id)
            self._calls[cv_id] = self._scheduler.schedule(self.grace_period, lambda: self._commit(cv_id))
        logger.debug("CV %s pending removal for %.3fs", cv_id, self.grace_period)
        return True

    def _commit(self, cv_id: int | str) -> None:
        with self._lock:
            # Fired after close() or for a call that is no longer ours.
            if self._closed or cv_id not in self._pending:
                return
            try:
                self._delete(cv_id)
            except Exception:
                logger.exception("Store failed to delete CV %s", cv_id)
            else:
                logger.info("CV %s removed", cv_id)
            finally:
                self._pending.discard(cv_id)
                self._calls.pop(cv_id, None)

    def close(self) -> None:
        with self._lock:
            self._closed = True
            for call in self._calls.values():
                call.cancel()
            self._calls.clear()
            self._pending.clear()
