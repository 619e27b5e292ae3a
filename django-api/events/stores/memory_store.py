"""In-memory implementation of the EventStore.

The catalog is built once and never changes afterwards.
"""

from collections import Counter
from collections.abc import Iterable

from events.domain import Event, EventId
from events.domain.query import by_id
from events.stores.interfaces import EventStore
from events.stores.seed import SEED_EVENTS


class InMemoryEventStore(EventStore):
    """Immutable catalog held in process memory."""

    def __init__(self, events: Iterable[Event]) -> None:
        self._events: tuple[Event, ...] = tuple(events)
        counts = Counter(event.id for event in self._events)
        duplicates = sorted(str(i) for i, seen in counts.items() if seen > 1)
        if duplicates:
            raise ValueError(f"Duplicate event ids in catalog: {', '.join(duplicates)}")

    def __len__(self) -> int:
        return len(self._events)

    def list_events(self) -> list[Event]:
        return list(self._events)

    def get_event(self, event_id: EventId) -> Event | None:
        return by_id(event_id.value, self._events)

    def event_exists(self, event_id: EventId) -> bool:
        return self.get_event(event_id) is not None


def seeded_store() -> InMemoryEventStore:
    """Store loaded with the storefront's sample catalog."""
    return InMemoryEventStore(SEED_EVENTS)
