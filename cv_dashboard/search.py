from collections.abc import Iterable

from .records import CVRecord


def matches(cv: CVRecord, query: str) -> bool:
    if not query:
        return True
    needle = query.casefold()
    return needle in (cv.title or "").casefold() or needle in (cv.full_name or "").casefold()


def filter_cvs(cvs: Iterable[CVRecord], query: str) -> list[CVRecord]:
    return [cv for cv in cvs if matches(cv, query)]


class SearchFilter:
    """Keeps the visible subset of a CV collection in step with the search text.

    Both setters recompute immediately, so ``results`` always reflects the
    latest query and the latest collection. Order of the input is preserved.
    """

    def __init__(self, collection: Iterable[CVRecord] = (), query: str = "") -> None:
        self._collection = list(collection)
        self._query = query or ""
        self._results = filter_cvs(self._collection, self._query)

    @property
    def query(self) -> str:
        return self._query

    @property
    def collection(self) -> list[CVRecord]:
        return list(self._collection)

    @property
    def results(self) -> list[CVRecord]:
        return list(self._results)

    def set_query(self, query: str) -> list[CVRecord]:
        self._query = query or ""
        return self.refresh()

    def set_collection(self, collection: Iterable[CVRecord]) -> list[CVRecord]:
        self._collection = list(collection)
        return self.refresh()

    def refresh(self) -> list[CVRecord]:
        self._results = filter_cvs(self._collection, self._query)
        return self.results
