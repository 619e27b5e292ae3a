"""Pytest configuration and shared fixtures."""

from datetime import date, time

import pytest
from rest_framework.test import APIClient

from events.domain import Capacity, Event, EventId, Money
from events.services import AuthService, CheckoutService, EventService, get_event_store
from events.stores import InMemoryEventStore
from events.stores.seed import SEED_EVENTS


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def fresh_store():
    get_event_store.cache_clear()
    yield
    get_event_store.cache_clear()


@pytest.fixture
def seed_events() -> list[Event]:
    return list(SEED_EVENTS)


@pytest.fixture
def store(seed_events) -> InMemoryEventStore:
    return InMemoryEventStore(seed_events)


@pytest.fixture
def event_service(store) -> EventService:
    return EventService(store)


@pytest.fixture
def checkout_service(event_service) -> CheckoutService:
    return CheckoutService(event_service)


@pytest.fixture
def auth_service() -> AuthService:
    return AuthService()


@pytest.fixture
def make_event():
    """Factory for Event objects with sensible defaults.

    Example:
        event = make_event("7", price="12.50", category="Sports")
    """

    def _make_event(
        event_id: str = "100",
        *,
        title: str = "Test Event",
        description: str = "A test event",
        on: str = "2024-08-01",
        at: str = "19:00",
        venue: str = "Test Venue",
        category: str = "Music",
        price: str = "10.00",
        available_tickets: int = 50,
        featured: bool = False,
    ) -> Event:
        return Event(
            id=EventId(event_id),
            title=title,
            description=description,
            date=date.fromisoformat(on),
            time=time.fromisoformat(at),
            venue=venue,
            address="1 Test Street",
            price=Money.of(price),
            category=category,
            available_tickets=Capacity(available_tickets),
            image="/static/events/test.jpg",
            organizer="Test Organizer",
            featured=featured,
        )

    return _make_event
