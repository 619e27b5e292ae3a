"""Domain models representing catalog and checkout state.

These are pure domain objects with no API input rules.
HTTP input validation lives in events/handlers/serializers.py.
"""

from dataclasses import dataclass
from datetime import date, datetime, time

from events.domain.value_objects import Capacity, EventId, Money, TicketQuantity


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    title: str
    description: str
    date: date
    time: time
    venue: str
    address: str
    price: Money
    category: str
    available_tickets: Capacity
    image: str
    organizer: str
    featured: bool = False

    @property
    def starts_at(self) -> datetime:
        """Local start timestamp combining date and time."""
        return datetime.combine(self.date, self.time)

    @property
    def sold_out(self) -> bool:
        return self.available_tickets.value == 0


@dataclass(frozen=True)
class Quote:
    """Price breakdown for a number of tickets to one event."""

    event: Event
    quantity: TicketQuantity
    subtotal: Money
    service_fee: Money
    total: Money


@dataclass(frozen=True)
class PurchaseOrder:
    """Checkout form contents."""

    quantity: int
    first_name: str
    last_name: str
    email: str
    phone: str = ""
    payment_method: str = "credit"
    card_number: str = ""
    expiry_date: str = ""
    cvv: str = ""
    card_name: str = ""


@dataclass(frozen=True)
class PurchaseConfirmation:
    """Result of a simulated purchase."""

    confirmation_code: str
    event_title: str
    ticket_count: int
    quote: Quote


@dataclass(frozen=True)
class Credentials:
    email: str
    password: str


@dataclass(frozen=True)
class Registration:
    email: str
    password: str
    confirm_password: str
    first_name: str
    last_name: str


@dataclass(frozen=True)
class AuthResult:
    """Outcome of a simulated login or registration."""

    email: str
    display_name: str
    message: str
