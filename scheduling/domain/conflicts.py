"""Venue conflict detection.

A conflict is two occupancies of the same venue on the same calendar day whose
time intervals overlap. Touching intervals (one ends when the next starts) do
not conflict. Inactive bookings and malformed sessions never occupy a venue.
"""

import logging
from collections import defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date

from scheduling.domain.models import Booking, Session
from scheduling.domain.validation import is_session_schedulable
from scheduling.domain.value_objects import TimeInterval

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Slot:
    """One normalized occupancy: a venue, a day and an interval."""

    booking: Booking
    session: Session | None
    venue: str
    day: date
    interval: TimeInterval


@dataclass(frozen=True)
class ConflictCandidate:
    venue: str
    day: date
    interval: TimeInterval


@dataclass(frozen=True)
class ConflictDescriptor:
    booking_id: str
    booking_number: str
    client_name: str
    event_type: str
    status: str
    session_id: str | None
    session_name: str | None
    venue: str
    day: date
    interval: TimeInterval


@dataclass(frozen=True)
class SessionConflict:
    """Conflicts found for one slot of the booking under check."""

    session_id: str | None
    session_name: str | None
    venue: str
    day: date
    interval: TimeInterval
    conflicts: tuple[ConflictDescriptor, ...]


@dataclass(frozen=True)
class VenueSlot:
    """A venue and time requested for every tentative date of an enquiry."""

    venue: str
    interval: TimeInterval


@dataclass(frozen=True)
class DatedConflict:
    day: date
    venue: str
    requested: TimeInterval
    conflict: ConflictDescriptor


@dataclass(frozen=True)
class DateRangeConflicts:
    bookings: tuple[Booking, ...]
    days: tuple[date, ...]

    @property
    def has_conflicts(self) -> bool:
        return bool(self.bookings)


def overlaps(a: TimeInterval, b: TimeInterval) -> bool:
    return a.overlaps(b)


def booking_slots(booking: Booking, include_inactive: bool = False) -> list[Slot]:
    """Occupancies of a booking, in session insertion order.

    Inactive bookings occupy nothing unless ``include_inactive`` is set.
    """
    if not booking.is_active and not include_inactive:
        return []
    occupancy = booking.occupancy
    if occupancy is None:
        return []
    if not occupancy.has_sessions:
        return [Slot(booking, None, occupancy.venue, occupancy.day, occupancy.interval)]

    slots = []
    for session in occupancy.sessions:
        if not is_session_schedulable(session):
            logger.debug("Skipping unschedulable session %s of booking %s", session.id, booking.id)
            continue
        slots.append(Slot(booking, session, session.venue, session.day, session.interval))
    return slots


def _describe(slot: Slot) -> ConflictDescriptor:
    return ConflictDescriptor(
        booking_id=slot.booking.id,
        booking_number=slot.booking.booking_number,
        client_name=slot.booking.client_name,
        event_type=slot.booking.event_type,
        status=slot.booking.status,
        session_id=slot.session.id if slot.session else None,
        session_name=slot.session.name if slot.session else None,
        venue=slot.venue,
        day=slot.day,
        interval=slot.interval,
    )


def find_conflicts(
    candidate: ConflictCandidate,
    bookings: Iterable[Booking],
    exclude_booking_id: str | None = None,
) -> list[ConflictDescriptor]:
    """Every occupant of the candidate's venue and day whose interval overlaps it."""
    conflicts = []
    for booking in bookings:
        if exclude_booking_id is not None and booking.id == exclude_booking_id:
            continue
        for slot in booking_slots(booking):
            if slot.venue != candidate.venue or slot.day != candidate.day:
                continue
            if overlaps(slot.interval, candidate.interval):
                conflicts.append(_describe(slot))
    return conflicts


def find_conflicts_for_dates(
    days: Iterable[date],
    venue_slots: Sequence[VenueSlot],
    bookings: Iterable[Booking],
    exclude_booking_id: str | None = None,
) -> list[DatedConflict]:
    """Check every tentative day against every requested venue slot.

    Results are ordered by day, then by requested slot, then by occupant.
    """
    bookings = list(bookings)
    results = []
    for day in days:
        for slot in venue_slots:
            candidate = ConflictCandidate(venue=slot.venue, day=day, interval=slot.interval)
            for conflict in find_conflicts(candidate, bookings, exclude_booking_id):
                results.append(
                    DatedConflict(day=day, venue=slot.venue, requested=slot.interval, conflict=conflict)
                )
    return results


def find_booking_conflicts(booking: Booking, bookings: Sequence[Booking]) -> list[SessionConflict]:
    """Check each of a booking's own slots against every other booking."""
    results = []
    for slot in booking_slots(booking, include_inactive=True):
        candidate = ConflictCandidate(venue=slot.venue, day=slot.day, interval=slot.interval)
        conflicts = find_conflicts(candidate, bookings, exclude_booking_id=booking.id)
        if conflicts:
            results.append(
                SessionConflict(
                    session_id=slot.session.id if slot.session else None,
                    session_name=slot.session.name if slot.session else None,
                    venue=slot.venue,
                    day=slot.day,
                    interval=slot.interval,
                    conflicts=tuple(conflicts),
                )
            )
    return results


def venue_conflicts_for_date(day: date, bookings: Iterable[Booking]) -> list[str]:
    """Venues with at least one genuine time overlap on the given day.

    Several bookings in one venue on one day are fine as long as their
    intervals do not overlap.
    """
    by_venue: dict[str, list[TimeInterval]] = defaultdict(list)
    for booking in bookings:
        for slot in booking_slots(booking):
            if slot.day == day:
                by_venue[slot.venue].append(slot.interval)

    flagged = []
    for venue, intervals in by_venue.items():
        ordered = sorted(intervals, key=lambda interval: (interval.start, interval.end))
        if any(prev.end > nxt.start for prev, nxt in zip(ordered, ordered[1:])):
            flagged.append(venue)
    return sorted(flagged)


def find_overlapping_bookings(target: Booking, bookings: Iterable[Booking]) -> DateRangeConflicts:
    """Booking-level clash check on day spans and halls, before sessions exist."""
    if target.event_date is None:
        return DateRangeConflicts(bookings=(), days=())
    target_days = set(target.days)

    clashing = []
    clash_days: set[date] = set()
    for booking in bookings:
        if booking.id == target.id or not booking.is_active:
            continue
        if target.hall and booking.hall and booking.hall != target.hall:
            continue
        shared = target_days.intersection(booking.days)
        if shared:
            clashing.append(booking)
            clash_days.update(shared)

    return DateRangeConflicts(bookings=tuple(clashing), days=tuple(sorted(clash_days)))
