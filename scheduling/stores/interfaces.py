"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from scheduling.domain import Booking, BookingId, Venue


class BookingStore(ABC):
    """Interface for read-only booking and venue lookups."""

    @abstractmethod
    def list_bookings(self) -> list[Booking]:
        """Return all bookings with their sessions, ordered by event_date ascending."""
        ...

    @abstractmethod
    def get_booking(self, booking_id: BookingId) -> Booking | None:
        """Return a booking by ID, or None if not found."""
        ...

    @abstractmethod
    def list_venues(self) -> list[Venue]:
        """Return all venues ordered by name."""
        ...
