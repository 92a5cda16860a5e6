"""Multi-day expansion and split-cell position classification."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from enum import Enum
from functools import lru_cache

from scheduling.domain.conflicts import ConflictCandidate, booking_slots, find_conflicts
from scheduling.domain.models import Booking
from scheduling.domain.value_objects import TimeOfDay

EVENING_STARTS_AT = TimeOfDay.parse("14:00")


class CellHalf(Enum):
    FIRST = "first"
    SECOND = "second"
    WHOLE = "whole"


class Role(Enum):
    """Where an occurrence sits inside a day cell.

    Check-in happens midday so a multi-day booking starts in the second half;
    check-out happens in the morning so it ends in the first half.
    """

    START = "start"
    MIDDLE = "middle"
    END = "end"
    MORNING = "morning"
    EVENING = "evening"
    FULL = "full"

    @property
    def half(self) -> CellHalf:
        if self in (Role.MORNING, Role.END):
            return CellHalf.FIRST
        if self in (Role.EVENING, Role.START):
            return CellHalf.SECOND
        return CellHalf.WHOLE


@dataclass(frozen=True)
class Occurrence:
    booking_id: str
    day: date
    role: Role
    day_index: int
    total_days: int

    @property
    def day_label(self) -> str:
        return f"Day {self.day_index + 1} of {self.total_days}"


def _role_for_start(start: TimeOfDay) -> Role:
    return Role.MORNING if start < EVENING_STARTS_AT else Role.EVENING


@lru_cache(maxsize=4096)
def classify_position(day: date, booking: Booking) -> Role | None:
    """Role of the booking on ``day``, or None when the day is outside its span."""
    if not booking.covers(day):
        return None

    if booking.is_multi_day:
        if day == booking.event_date:
            return Role.START
        if day == booking.end_day:
            return Role.END
        return Role.MIDDLE

    if booking.sessions:
        for session in booking.sessions:
            if session.day != day:
                continue
            start = session.start
            if start is not None:
                return _role_for_start(start)
        return Role.FULL

    if booking.event_start_time:
        try:
            return _role_for_start(TimeOfDay.parse(booking.event_start_time))
        except ValueError:
            return Role.FULL
    return Role.FULL


def expand_to_occurrences(booking: Booking) -> list[Occurrence]:
    """One occurrence per calendar day of the booking's span, in date order."""
    days = booking.days
    return [
        Occurrence(
            booking_id=booking.id,
            day=day,
            role=classify_position(day, booking),
            day_index=index,
            total_days=len(days),
        )
        for index, day in enumerate(days)
    ]


def has_position_conflict(day: date, booking: Booking, bookings: Iterable[Booking]) -> bool:
    """True when another booking in the same cell position overlaps this one's venue time."""
    role = classify_position(day, booking)
    if role is None:
        return False

    own = [slot for slot in booking_slots(booking) if slot.day == day]
    if not own:
        return False

    same_role = [
        other
        for other in bookings
        if other.id != booking.id and classify_position(day, other) is role
    ]
    if not same_role:
        return False

    return any(
        find_conflicts(ConflictCandidate(slot.venue, slot.day, slot.interval), same_role)
        for slot in own
    )
