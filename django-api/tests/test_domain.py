"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from datetime import datetime
from decimal import Decimal

import pytest

from events.domain import Capacity, EventId, Money, TicketQuantity
from events.domain.errors import ErrorCode, EventNotFoundError, InvalidQuantityError


class TestMoney:
    """Tests for Money value object."""

    def test_money_accepts_positive_amount(self):
        """Money can be created with positive amount."""
        assert Money(Decimal("89.99")).amount == Decimal("89.99")

    def test_money_accepts_zero(self):
        """Money can be created with zero."""
        assert Money(Decimal("0")).amount == 0

    def test_money_rejects_negative_amount(self):
        """Money raises ValueError for negative amount."""
        with pytest.raises(ValueError):
            Money(Decimal("-0.01"))

    def test_money_str_format(self):
        """Money string representation is formatted to 2 decimal places."""
        assert str(Money(Decimal("45"))) == "45.00"

    def test_of_keeps_float_digits(self):
        """Money.of goes through str so floats keep their printed value."""
        assert Money.of(89.99).amount == Decimal("89.99")

    def test_of_rejects_garbage(self):
        """Money.of raises ValueError for non-numeric input."""
        with pytest.raises(ValueError):
            Money.of("free")

    def test_quantize_rounds_half_up(self):
        """Quantize rounds to whole cents, half-up."""
        assert Money(Decimal("8.999")).quantize().amount == Decimal("9.00")
        assert Money(Decimal("0.125")).quantize().amount == Decimal("0.13")

    def test_ordering(self):
        """Money compares by amount."""
        assert Money(Decimal("25")) < Money(Decimal("35"))


class TestCapacity:
    """Tests for Capacity value object."""

    def test_capacity_accepts_positive_value(self):
        """Capacity can be created with positive value."""
        assert Capacity(500).value == 500

    def test_capacity_accepts_zero(self):
        """Capacity can be created with zero."""
        assert Capacity(0).value == 0

    def test_capacity_rejects_negative_value(self):
        """Capacity raises ValueError for negative value."""
        with pytest.raises(ValueError):
            Capacity(-1)


class TestTicketQuantity:
    def test_rejects_zero(self):
        with pytest.raises(ValueError):
            TicketQuantity(0)

    def test_accepts_one(self):
        assert TicketQuantity(1).value == 1


class TestEventId:
    """Tests for EventId value object."""

    def test_from_string_keeps_value_exactly(self):
        """EventId.from_string does not trim the opaque value."""
        assert EventId.from_string(" 1 ").value == " 1 "

    def test_from_string_blank(self):
        """EventId.from_string raises ValueError for a blank id."""
        with pytest.raises(ValueError):
            EventId.from_string("   ")


class TestEvent:
    def test_starts_at_combines_date_and_time(self, make_event):
        """starts_at is the local date and time as one datetime."""
        event = make_event(on="2024-07-15", at="18:00")
        assert event.starts_at == datetime(2024, 7, 15, 18, 0)

    def test_sold_out(self, make_event):
        assert make_event(available_tickets=0).sold_out
        assert not make_event(available_tickets=1).sold_out


class TestDomainErrors:
    def test_not_found_carries_code_and_id(self):
        error = EventNotFoundError("42")
        assert error.code is ErrorCode.EVENT_NOT_FOUND
        assert error.event_id == "42"
        assert str(error) == "EVENT_NOT_FOUND: Event not found"

    def test_invalid_quantity_message_for_sold_out(self):
        """A zero maximum means nothing can be ordered."""
        error = InvalidQuantityError(1, 0)
        assert error.message == "No tickets are available for this event"
