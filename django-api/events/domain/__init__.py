from events.domain.models import (
    AuthResult,
    Credentials,
    Event,
    PurchaseConfirmation,
    PurchaseOrder,
    Quote,
    Registration,
)
from events.domain.query import CatalogQuery, SortCriterion
from events.domain.value_objects import Capacity, EventId, Money, TicketQuantity

__all__ = [
    "Event",
    "Quote",
    "PurchaseOrder",
    "PurchaseConfirmation",
    "Credentials",
    "Registration",
    "AuthResult",
    "CatalogQuery",
    "SortCriterion",
    "EventId",
    "Money",
    "Capacity",
    "TicketQuantity",
]
