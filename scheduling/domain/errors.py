"""Domain error codes for the scheduling module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    BOOKING_NOT_FOUND = "BOOKING_NOT_FOUND"
    INVALID_BOOKING_ID = "INVALID_BOOKING_ID"
    INVALID_DATE = "INVALID_DATE"
    INVALID_TIME = "INVALID_TIME"
    INVALID_INTERVAL = "INVALID_INTERVAL"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class BookingNotFoundError(DomainError):
    """Raised when a booking is not found."""

    def __init__(self, booking_id: str) -> None:
        super().__init__(
            code=ErrorCode.BOOKING_NOT_FOUND,
            message="Booking not found",
        )
        object.__setattr__(self, "booking_id", booking_id)


class InvalidBookingIdError(DomainError):
    """Raised when a booking ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_BOOKING_ID,
            message="Invalid booking ID format",
        )


class InvalidDateError(DomainError):
    """Raised when a request date is not a calendar day."""

    def __init__(self, value: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_DATE,
            message="Date must be in YYYY-MM-DD format",
        )
        object.__setattr__(self, "value", value)


class InvalidTimeError(DomainError):
    """Raised when a request time is not HH:MM."""

    def __init__(self, value: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TIME,
            message="Time must be in HH:MM format (24-hour)",
        )
        object.__setattr__(self, "value", value)


class InvalidIntervalError(DomainError):
    """Raised when a requested end time is not after its start time."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_INTERVAL,
            message="End time must be after start time",
        )
