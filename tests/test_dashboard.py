from datetime import datetime, timezone

from conftest import make_cv

from cv_dashboard.dashboard import NO_CVS_MESSAGE, NO_MATCHES_MESSAGE, DashboardState, format_last_modified


def test_empty_collection_without_query_prompts_to_create(coordinator):
    state = DashboardState(coordinator, [], "")
    assert state.visible == []
    assert state.empty_message == NO_CVS_MESSAGE


def test_no_matches_message_depends_on_query(coordinator, sample_cvs):
    state = DashboardState(coordinator, sample_cvs, "nobody")
    assert state.visible == []
    assert state.empty_message == NO_MATCHES_MESSAGE

    state.set_query("")
    assert state.empty_message is None
    assert state.visible == sample_cvs


def test_replace_collection_refilters(coordinator, sample_cvs):
    state = DashboardState(coordinator, sample_cvs, "carla")
    assert state.visible == []

    carla = make_cv("c", "Teaching CV", "Carla")
    state.replace_collection(sample_cvs + [carla])
    assert state.visible == [carla]
    assert state.collection == sample_cvs + [carla]


def test_cards_flag_pending_removal(coordinator, scheduler, sample_cvs):
    state = DashboardState(coordinator, sample_cvs)
    assert state.request_delete("b") is True
    assert state.request_delete("b") is False

    cards = state.cards()
    assert [(card.id, card.removing) for card in cards] == [("a", False), ("b", True)]
    assert state.is_removing("b")

    scheduler.advance(0.3)
    assert not state.is_removing("b")
    assert [card.removing for card in state.cards()] == [False, False]


def test_card_as_dict(coordinator, sample_cvs):
    card = DashboardState(coordinator, sample_cvs, "alice").cards()[0]
    assert card.as_dict() == {
        "id": "a",
        "title": "Resume A",
        "full_name": "Alice",
        "last_modified": "Jan 5, 2025, 03:04 PM",
        "removing": False,
    }


def test_format_last_modified():
    assert format_last_modified(datetime(2024, 11, 30, 9, 5)) == "Nov 30, 2024, 09:05 AM"
    assert format_last_modified(None) == ""


def test_snapshot_taken_before_read_keeps_card_removing(coordinator, scheduler, sample_cvs):
    class CommitDuringRead:
        def list_cvs(self):
            rows = list(sample_cvs)
            # The grace period ends while the rows are being read.
            scheduler.advance(0.3)
            return rows

    coordinator.request_delete("b")
    state = DashboardState.from_store(coordinator, CommitDuringRead())

    assert not coordinator.is_pending("b")
    assert [(card.id, card.removing) for card in state.cards()] == [("a", False), ("b", True)]
    assert state.is_removing("b")

    state.replace_collection([sample_cvs[0]], pending=coordinator.pending)
    assert not state.is_removing("b")


def test_format_uses_configured_format_and_local_time(settings):
    settings.TIME_ZONE = "America/New_York"
    settings.CV_DATE_FORMAT = "Y-m-d H:i"
    aware = datetime(2025, 1, 5, 15, 4, tzinfo=timezone.utc)
    assert format_last_modified(aware) == "2025-01-05 10:04"
