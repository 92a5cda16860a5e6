"""Domain models for venue scheduling.

These are pure domain objects with no persistence or API concerns.
Django ORM models are in scheduling/models.py (persistence layer).

Sessions hold raw user input (times as strings, possibly blank) because the
session editor creates them empty and fills them in field by field. Use the
lenient accessors (``interval``, ``start``) to get parsed values, or None.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Literal

from scheduling.domain.value_objects import TimeInterval, TimeOfDay

ALL_DAY_LABEL = "All Day"

SESSION_LABELS = ("Breakfast", "Lunch", "Hi-Tea", "Dinner", ALL_DAY_LABEL)


class BookingStatus(str, Enum):
    BOOKED = "booked"
    PENDING_BEO = "pending_beo"
    BEO_READY = "beo_ready"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    CLOSED = "closed"


INACTIVE_STATUSES = frozenset({BookingStatus.CANCELLED.value, BookingStatus.CLOSED.value})


@dataclass(frozen=True)
class Venue:
    """Domain representation of a Venue."""

    id: str
    name: str
    capacity: int | None = None
    area: str = ""


@dataclass(frozen=True)
class Session:
    """Domain representation of a booking Session."""

    id: str
    name: str = ""
    venue: str = ""
    day: date | None = None
    start_time: str = ""
    end_time: str = ""
    label: str = ""
    all_day: bool = False
    pax_count: int | None = None
    special_instructions: str = ""

    @property
    def is_all_day(self) -> bool:
        return self.all_day or self.label == ALL_DAY_LABEL

    @property
    def start(self) -> TimeOfDay | None:
        if self.is_all_day:
            return TimeInterval.full_day().start
        try:
            return TimeOfDay.parse(self.start_time)
        except ValueError:
            return None

    @property
    def interval(self) -> TimeInterval | None:
        if self.is_all_day:
            return TimeInterval.full_day()
        try:
            return TimeInterval.parse(self.start_time, self.end_time)
        except ValueError:
            return None


@dataclass(frozen=True)
class SessionOccupancy:
    """Venue usage described by explicit sessions."""

    sessions: tuple[Session, ...]
    has_sessions: Literal[True] = True


@dataclass(frozen=True)
class LegacyOccupancy:
    """Venue usage described by a booking's single hall/start/end fields."""

    venue: str
    day: date
    interval: TimeInterval
    has_sessions: Literal[False] = False


Occupancy = SessionOccupancy | LegacyOccupancy


@dataclass(frozen=True)
class Booking:
    """Domain representation of a Booking.

    ``sessions`` keeps insertion order; display order comes from
    scheduling.domain.grouping.
    """

    id: str
    client_name: str = ""
    booking_number: str = ""
    event_type: str = ""
    status: str = BookingStatus.BOOKED.value
    event_date: date | None = None
    event_end_date: date | None = None
    event_duration: int | None = None
    hall: str = ""
    event_start_time: str = ""
    event_end_time: str = ""
    sessions: tuple[Session, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "sessions", tuple(self.sessions))

    @property
    def is_active(self) -> bool:
        return self.status not in INACTIVE_STATUSES

    @property
    def end_day(self) -> date | None:
        """Last day of the booking's span.

        The explicit end date wins over ``event_duration``; an end before the
        start collapses to a single day.
        """
        if self.event_date is None:
            return None
        end = self.event_end_date
        if end is None and self.event_duration and self.event_duration > 1:
            end = self.event_date + timedelta(days=self.event_duration - 1)
        if end is None or end < self.event_date:
            return self.event_date
        return end

    @property
    def total_days(self) -> int:
        if self.event_date is None:
            return 0
        return (self.end_day - self.event_date).days + 1

    @property
    def is_multi_day(self) -> bool:
        return self.total_days > 1

    @property
    def days(self) -> list[date]:
        """Every calendar day from event_date to end_day inclusive."""
        if self.event_date is None:
            return []
        return [self.event_date + timedelta(days=i) for i in range(self.total_days)]

    def covers(self, day: date) -> bool:
        if self.event_date is None:
            return False
        return self.event_date <= day <= self.end_day

    def is_custom_date(self, session: Session) -> bool:
        """True when a dated session falls outside the booking's own days."""
        return session.day is not None and not self.covers(session.day)

    def legacy_interval(self) -> TimeInterval | None:
        if not self.event_start_time or not self.event_end_time:
            return TimeInterval.full_day()
        try:
            return TimeInterval.parse(self.event_start_time, self.event_end_time)
        except ValueError:
            return None

    @property
    def occupancy(self) -> Occupancy | None:
        """How this booking uses venues, or None if it uses none."""
        if self.sessions:
            return SessionOccupancy(sessions=self.sessions)
        if not self.hall or self.event_date is None:
            return None
        interval = self.legacy_interval()
        if interval is None:
            return None
        return LegacyOccupancy(venue=self.hall, day=self.event_date, interval=interval)
