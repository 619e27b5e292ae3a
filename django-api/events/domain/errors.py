"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_QUANTITY = "INVALID_QUANTITY"
    MISSING_INFORMATION = "MISSING_INFORMATION"
    PAYMENT_INFORMATION_REQUIRED = "PAYMENT_INFORMATION_REQUIRED"
    PASSWORD_MISMATCH = "PASSWORD_MISMATCH"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class InvalidQuantityError(DomainError):
    """Raised when a ticket quantity is outside what the event allows."""

    def __init__(self, quantity: int, maximum: int) -> None:
        if maximum < 1:
            message = "No tickets are available for this event"
        else:
            message = f"Ticket quantity must be between 1 and {maximum}"
        super().__init__(code=ErrorCode.INVALID_QUANTITY, message=message)
        self.quantity = quantity
        self.maximum = maximum


class MissingInformationError(DomainError):
    """Raised when required form fields are blank."""

    def __init__(
        self, fields: list[str], message: str = "Please fill in all required fields."
    ) -> None:
        super().__init__(code=ErrorCode.MISSING_INFORMATION, message=message)
        self.fields = tuple(fields)


class PaymentInformationRequiredError(DomainError):
    """Raised when card payment details are incomplete."""

    def __init__(self, fields: list[str]) -> None:
        super().__init__(
            code=ErrorCode.PAYMENT_INFORMATION_REQUIRED,
            message="Please complete your payment details.",
        )
        self.fields = tuple(fields)


class PasswordMismatchError(DomainError):
    """Raised when registration passwords differ."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.PASSWORD_MISMATCH,
            message="Passwords do not match.",
        )
