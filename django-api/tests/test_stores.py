"""Unit tests for the in-memory event store."""

import pytest

from events.domain import EventId
from events.stores import InMemoryEventStore
from events.stores.memory_store import seeded_store


class TestInMemoryEventStore:
    def test_seeded_store_holds_six_events(self):
        assert len(seeded_store()) == 6

    def test_list_events_keeps_catalog_order(self, store):
        assert [e.id.value for e in store.list_events()] == ["1", "2", "3", "4", "5", "6"]

    def test_list_events_returns_a_copy(self, store):
        """Callers cannot change the catalog through the returned list."""
        store.list_events().clear()
        assert len(store.list_events()) == 6

    def test_get_event(self, store):
        assert store.get_event(EventId("2")).title == "Tech Innovation Conference"

    def test_get_event_missing(self, store):
        assert store.get_event(EventId("99")) is None

    def test_event_exists(self, store):
        assert store.event_exists(EventId("6"))
        assert not store.event_exists(EventId("60"))

    def test_rejects_duplicate_ids(self, make_event):
        """Event ids must be unique within a catalog."""
        with pytest.raises(ValueError, match="Duplicate event ids"):
            InMemoryEventStore([make_event("1"), make_event("2"), make_event("1")])

    def test_reports_each_duplicate_once(self, make_event):
        events = [make_event(i) for i in ("2", "1", "2", "3", "1", "2")]
        with pytest.raises(ValueError) as excinfo:
            InMemoryEventStore(events)
        assert str(excinfo.value) == "Duplicate event ids in catalog: 1, 2"

    def test_empty_catalog(self):
        store = InMemoryEventStore([])
        assert store.list_events() == []
        assert store.get_event(EventId("1")) is None
