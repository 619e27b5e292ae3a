"""Checkout service - quotes and simulated ticket purchases.

No payment is taken and the catalog is never modified: a successful
purchase does not reduce an event's available tickets.
"""

import logging
import uuid
from decimal import Decimal

from events.domain import (
    Event,
    PurchaseConfirmation,
    PurchaseOrder,
    Quote,
    TicketQuantity,
)
from events.domain.errors import (
    InvalidQuantityError,
    MissingInformationError,
    PaymentInformationRequiredError,
)
from events.services.event_service import EventService

logger = logging.getLogger(__name__)

PAYMENT_METHODS = ("credit", "debit", "paypal")
CARD_FIELDS = ("card_number", "expiry_date", "cvv")
CONTACT_FIELDS = ("first_name", "last_name", "email")


def _blank_fields(source: object, names: tuple[str, ...]) -> list[str]:
    return [name for name in names if not (getattr(source, name) or "").strip()]


class CheckoutService:
    """Service for ticket quotes and purchases."""

    def __init__(
        self,
        events: EventService,
        service_fee_rate: Decimal = Decimal("0.05"),
        max_tickets_per_order: int = 10,
    ) -> None:
        self._events = events
        self._service_fee_rate = Decimal(service_fee_rate)
        self._max_tickets_per_order = max_tickets_per_order

    def max_quantity(self, event: Event) -> int:
        """Largest number of tickets a single order may hold for ``event``."""
        return min(self._max_tickets_per_order, event.available_tickets.value)

    def quote(self, event_id: str, quantity: int) -> Quote:
        """Price ``quantity`` tickets to an event.

        Raises:
            InvalidEventIdError: If the event_id is blank.
            EventNotFoundError: If the event does not exist.
            InvalidQuantityError: If quantity is outside 1..max_quantity.
        """
        event = self._events.get_event(event_id)
        maximum = self.max_quantity(event)
        if not 1 <= quantity <= maximum:
            raise InvalidQuantityError(quantity, maximum)

        subtotal = (event.price * quantity).quantize()
        service_fee = (subtotal * self._service_fee_rate).quantize()
        return Quote(
            event=event,
            quantity=TicketQuantity(quantity),
            subtotal=subtotal,
            service_fee=service_fee,
            total=subtotal + service_fee,
        )

    def purchase(self, event_id: str, order: PurchaseOrder) -> PurchaseConfirmation:
        """Validate a checkout form and simulate a successful purchase.

        Raises:
            EventNotFoundError: If the event does not exist.
            MissingInformationError: If a contact field is blank.
            PaymentInformationRequiredError: If card details are incomplete
                or the payment method is not offered.
        """
        self._events.get_event(event_id)

        missing = _blank_fields(order, CONTACT_FIELDS)
        if missing:
            raise MissingInformationError(missing)

        if order.payment_method not in PAYMENT_METHODS:
            raise PaymentInformationRequiredError(["payment_method"])
        if order.payment_method == "credit":
            missing = _blank_fields(order, CARD_FIELDS)
            if missing:
                raise PaymentInformationRequiredError(missing)

        quote = self.quote(event_id, order.quantity)
        confirmation = PurchaseConfirmation(
            confirmation_code=uuid.uuid4().hex[:10].upper(),
            event_title=quote.event.title,
            ticket_count=quote.quantity.value,
            quote=quote,
        )
        logger.info(
            "Purchase %s: %d ticket(s) for event %s, total %s via %s",
            confirmation.confirmation_code,
            confirmation.ticket_count,
            quote.event.id,
            quote.total,
            order.payment_method,
        )
        return confirmation
