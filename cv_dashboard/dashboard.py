"""State owned by one rendering of the CV dashboard.

``DashboardState`` bundles the collection supplied by the store, the search
text and the shared ``DeletionCoordinator``. It holds no timers itself; the
coordinator decides which cards are in their removing transition.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from django.conf import settings
from django.utils import dateformat, timezone

from .deletion import DeletionCoordinator
from .records import CVRecord
from .search import SearchFilter

NO_MATCHES_MESSAGE = "No CVs match your search criteria."
NO_CVS_MESSAGE = "You haven't created any CVs yet. Let's get started!"
DEFAULT_DATE_FORMAT = "M j, Y, h:i A"


def format_last_modified(value: datetime | None) -> str:
    if value is None:
        return ""
    if timezone.is_aware(value):
        value = timezone.localtime(value)
    return dateformat.format(value, getattr(settings, "CV_DATE_FORMAT", DEFAULT_DATE_FORMAT))


@dataclass(frozen=True)
class CVCard:
    id: int | str
    title: str
    full_name: str
    last_modified: str
    removing: bool

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "full_name": self.full_name,
            "last_modified": self.last_modified,
            "removing": self.removing,
        }


class DashboardState:
    def __init__(
        self,
        coordinator: DeletionCoordinator,
        collection: Iterable[CVRecord] = (),
        query: str = "",
        pending: Iterable = (),
    ) -> None:
        self._coordinator = coordinator
        self._search = SearchFilter(collection, query)
        # Ids that were pending when the collection was read; a commit that
        # lands after the read must still show the card as removing.
        self._pending_at_load = frozenset(pending)

    @classmethod
    def from_store(cls, coordinator: DeletionCoordinator, store, query: str = "") -> "DashboardState":
        pending = coordinator.pending
        return cls(coordinator, store.list_cvs(), query, pending=pending)

    @property
    def query(self) -> str:
        return self._search.query

    @property
    def collection(self) -> list[CVRecord]:
        return self._search.collection

    @property
    def visible(self) -> list[CVRecord]:
        return self._search.results

    def set_query(self, query: str) -> None:
        self._search.set_query(query)

    def replace_collection(self, collection: Iterable[CVRecord], pending: Iterable = ()) -> None:
        self._search.set_collection(collection)
        self._pending_at_load = frozenset(pending)

    def is_removing(self, cv_id: int | str) -> bool:
        return cv_id in self._pending_at_load or self._coordinator.is_pending(cv_id)

    def request_delete(self, cv_id: int | str) -> bool:
        return self._coordinator.request_delete(cv_id)

    @property
    def empty_message(self) -> str | None:
        if self.visible:
            return None
        return NO_MATCHES_MESSAGE if self.query else NO_CVS_MESSAGE

    def cards(self) -> list[CVCard]:
        pending = self._pending_at_load | self._coordinator.pending
        return [
            CVCard(
                id=cv.id,
                title=cv.title,
                full_name=cv.full_name,
                last_modified=format_last_modified(cv.last_modified),
                removing=cv.id in pending,
            )
            for cv in self.visible
        ]
