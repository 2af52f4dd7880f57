from datetime import datetime

import pytest

from cv_dashboard.deletion import DeletionCoordinator
from cv_dashboard.records import CVRecord, PersonalInfo
from cv_dashboard.scheduler import ManualScheduler


def make_cv(cv_id, title, full_name, last_modified=None) -> CVRecord:
    return CVRecord(
        id=cv_id,
        title=title,
        personal_info=PersonalInfo(full_name=full_name),
        last_modified=last_modified or datetime(2025, 1, 5, 15, 4),
    )


class RecordingStore:
    def __init__(self) -> None:
        self.deleted = []

    def delete(self, cv_id) -> None:
        self.deleted.append(cv_id)


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture
def coordinator(store, scheduler) -> DeletionCoordinator:
    coordinator = DeletionCoordinator(store.delete, scheduler, grace_period=0.3)
    yield coordinator
    coordinator.close()


@pytest.fixture
def sample_cvs() -> list[CVRecord]:
    return [
        make_cv("a", "Resume A", "Alice"),
        make_cv("b", "CV B", "Bob"),
    ]
