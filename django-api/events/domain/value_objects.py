"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Self

CENTS = Decimal("0.01")


@dataclass(frozen=True)
class EventId:
    """Opaque, stable identifier for an Event."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("EventId cannot be blank")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise TypeError("Money amount must be a Decimal")
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    @classmethod
    def of(cls, value: Decimal | int | float | str) -> Self:
        """Build Money from a number or numeric string.

        Floats go through ``str`` so ``89.99`` stays ``89.99``.
        """
        try:
            amount = value if isinstance(value, Decimal) else Decimal(str(value))
        except InvalidOperation as exc:
            raise ValueError(f"Invalid money amount: {value!r}") from exc
        return cls(amount=amount)

    def quantize(self) -> Self:
        """Round half-up to whole cents."""
        return type(self)(self.amount.quantize(CENTS, rounding=ROUND_HALF_UP))

    def __add__(self, other: "Money") -> "Money":
        return Money(self.amount + other.amount)

    def __mul__(self, factor: Decimal | int) -> "Money":
        return Money(self.amount * Decimal(factor))

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


@dataclass(frozen=True, order=True)
class Capacity:
    """Non-negative integer representing capacity."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")


@dataclass(frozen=True)
class TicketQuantity:
    """Number of tickets in a single order, at least one."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("Ticket quantity must be at least 1")
