"""Event service - all catalog business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging

from events.domain import CatalogQuery, Event, EventId
from events.domain import query as catalog
from events.domain.errors import EventNotFoundError, InvalidEventIdError
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


class EventService:
    """Service for event catalog operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def list_events(self) -> list[Event]:
        """Return all events in catalog order."""
        return self._store.list_events()

    def search(self, query: CatalogQuery) -> list[Event]:
        """Return the events matching every filter in ``query``, sorted."""
        results = catalog.run_query(query, self._store.list_events())
        logger.debug("Catalog query %s matched %d events", query, len(results))
        return results

    def featured_events(self) -> list[Event]:
        return catalog.featured(self._store.list_events())

    def categories(self) -> list[str]:
        return catalog.categories(self._store.list_events())

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is blank.
            EventNotFoundError: If the event does not exist.
        """
        try:
            parsed = EventId.from_string(event_id)
        except (AttributeError, ValueError) as exc:
            raise InvalidEventIdError() from exc

        event = self._store.get_event(parsed)
        if event is None:
            logger.warning("Event %s not found", parsed)
            raise EventNotFoundError(parsed.value)
        return event
