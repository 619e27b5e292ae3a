"""Service wiring for the HTTP handlers.

One store is built per process from ``STOREFRONT["EVENT_STORE"]``;
services are cheap and read the current settings each time.
"""

from functools import lru_cache

from django.utils.module_loading import import_string

from events.conf import storefront_settings
from events.services.auth_service import AuthService
from events.services.checkout_service import CheckoutService
from events.services.event_service import EventService
from events.stores.interfaces import EventStore


@lru_cache(maxsize=None)
def get_event_store() -> EventStore:
    factory = import_string(storefront_settings()["EVENT_STORE"])
    return factory()


def get_event_service() -> EventService:
    return EventService(get_event_store())


def get_checkout_service() -> CheckoutService:
    conf = storefront_settings()
    return CheckoutService(
        get_event_service(),
        service_fee_rate=conf["SERVICE_FEE_RATE"],
        max_tickets_per_order=conf["MAX_TICKETS_PER_ORDER"],
    )


def get_auth_service() -> AuthService:
    return AuthService()


__all__ = [
    "AuthService",
    "CheckoutService",
    "EventService",
    "get_auth_service",
    "get_checkout_service",
    "get_event_service",
    "get_event_store",
]
