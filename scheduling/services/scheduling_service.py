"""Scheduling service - orchestration around the pure scheduling engine.

Services:
- Depend only on interfaces (stores)
- Parse and validate request values
- Raise domain errors for bad ids, dates and times
- Return domain models
"""

import logging
from collections.abc import Iterable, Mapping
from datetime import date

from django.conf import settings
from django.core.cache import cache

from scheduling.domain import (
    Booking,
    BookingId,
    CalendarCell,
    CalendarFilters,
    ConflictCandidate,
    ConflictDescriptor,
    DateRangeConflicts,
    DatedConflict,
    DayGroup,
    Occurrence,
    Session,
    SessionConflict,
    TimeInterval,
    TimeOfDay,
    Venue,
    VenueSlot,
    Violation,
    expand_to_occurrences,
    find_booking_conflicts,
    find_conflicts,
    find_conflicts_for_dates,
    find_overlapping_bookings,
    group_sessions_by_day,
    project_month,
    session_number_map,
    to_calendar_day,
    validate_session,
    venue_conflicts_for_date,
)
from scheduling.domain.errors import (
    BookingNotFoundError,
    InvalidBookingIdError,
    InvalidDateError,
    InvalidIntervalError,
    InvalidTimeError,
)
from scheduling.stores.interfaces import BookingStore

logger = logging.getLogger(__name__)

BOOKINGS_CACHE_KEY = "bookings:list"
VENUES_CACHE_KEY = "venues:list"


def parse_day(value: str) -> date:
    """Accept ``YYYY-MM-DD`` or an ISO datetime such as ``2025-01-10T00:00:00.000Z``."""
    day = to_calendar_day(value)
    if day is None:
        raise InvalidDateError(value)
    return day


def parse_time(value: str) -> TimeOfDay:
    try:
        return TimeOfDay.parse(value)
    except ValueError:
        raise InvalidTimeError(value) from None


def parse_interval(start_time: str, end_time: str, all_day: bool = False) -> TimeInterval:
    if all_day:
        return TimeInterval.full_day()
    start, end = parse_time(start_time), parse_time(end_time)
    if end <= start:
        raise InvalidIntervalError()
    return TimeInterval(start=start, end=end)


class SchedulingService:
    """Service for venue scheduling queries."""

    def __init__(self, store: BookingStore) -> None:
        self._store = store

    @property
    def _timeout(self) -> int:
        return getattr(settings, "BOOKINGS_CACHE_TIMEOUT", 300)

    def list_bookings(self) -> list[Booking]:
        """Return all bookings, memoized until a booking or session changes."""
        bookings = cache.get(BOOKINGS_CACHE_KEY)
        if bookings is None:
            logger.debug("Booking cache miss, loading from store")
            bookings = self._store.list_bookings()
            cache.set(BOOKINGS_CACHE_KEY, bookings, self._timeout)
        return bookings

    def list_venues(self) -> list[Venue]:
        venues = cache.get(VENUES_CACHE_KEY)
        if venues is None:
            venues = self._store.list_venues()
            cache.set(VENUES_CACHE_KEY, venues, self._timeout)
        return venues

    def get_booking(self, booking_id: str) -> Booking:
        """Return a booking by ID.

        Raises:
            InvalidBookingIdError: If the booking_id is not a valid UUID.
            BookingNotFoundError: If the booking does not exist.
        """
        try:
            parsed = BookingId.from_string(booking_id)
        except (TypeError, ValueError):
            raise InvalidBookingIdError() from None
        booking = self._store.get_booking(parsed)
        if booking is None:
            raise BookingNotFoundError(booking_id)
        return booking

    def validate_session(self, session: Session) -> list[Violation]:
        return validate_session(session)

    def check_conflicts(
        self,
        venue: str,
        day: str,
        start_time: str = "",
        end_time: str = "",
        all_day: bool = False,
        exclude_booking_id: str | None = None,
    ) -> list[ConflictDescriptor]:
        """Return every occupant overlapping the requested venue, day and time.

        Raises:
            InvalidDateError: If day is not a date or ISO datetime.
            InvalidTimeError: If a time is not HH:MM.
            InvalidIntervalError: If end_time is not after start_time.
        """
        parsed_day = parse_day(day)
        interval = parse_interval(start_time, end_time, all_day)

        candidate = ConflictCandidate(venue=venue, day=parsed_day, interval=interval)
        conflicts = find_conflicts(candidate, self.list_bookings(), exclude_booking_id)
        if conflicts:
            logger.info(
                "%d conflict(s) for %s on %s at %s", len(conflicts), venue, parsed_day, interval
            )
        return conflicts

    def check_conflicts_batch(
        self,
        days: Iterable[str],
        venues: Iterable[Mapping],
        exclude_booking_id: str | None = None,
    ) -> list[DatedConflict]:
        """Check every tentative day against every requested venue and time.

        Each venue entry carries ``venue``, ``start_time``, ``end_time`` and an
        optional ``all_day`` flag.

        Raises:
            InvalidDateError: If a day is not a date.
            InvalidTimeError: If a time is not HH:MM.
            InvalidIntervalError: If an end_time is not after its start_time.
        """
        parsed_days = [parse_day(day) for day in days]
        slots = [
            VenueSlot(
                venue=entry["venue"],
                interval=parse_interval(
                    entry.get("start_time", ""), entry.get("end_time", ""), entry.get("all_day", False)
                ),
            )
            for entry in venues
        ]
        conflicts = find_conflicts_for_dates(parsed_days, slots, self.list_bookings(), exclude_booking_id)
        if conflicts:
            logger.info(
                "%d conflict(s) across %d date(s) and %d venue slot(s)",
                len(conflicts),
                len(parsed_days),
                len(slots),
            )
        return conflicts

    def venue_conflicts_for_date(self, day: str) -> list[str]:
        return venue_conflicts_for_date(parse_day(day), self.list_bookings())

    def booking_conflicts(self, booking_id: str) -> list[SessionConflict]:
        booking = self.get_booking(booking_id)
        conflicts = find_booking_conflicts(booking, self.list_bookings())
        if conflicts:
            logger.info("Booking %s has %d conflicting session(s)", booking_id, len(conflicts))
        return conflicts

    def date_conflicts(self, booking_id: str) -> DateRangeConflicts:
        booking = self.get_booking(booking_id)
        return find_overlapping_bookings(booking, self.list_bookings())

    def occurrences(self, booking_id: str) -> list[Occurrence]:
        return expand_to_occurrences(self.get_booking(booking_id))

    def session_days(self, booking_id: str) -> tuple[list[DayGroup], dict[str, int]]:
        """Return the booking's day groups and its session number map."""
        booking = self.get_booking(booking_id)
        return group_sessions_by_day(booking), session_number_map(booking)

    def month(
        self,
        year: int,
        month: int,
        venue: str | None = None,
        status: str | None = None,
        search: str | None = None,
    ) -> list[CalendarCell]:
        """Return the month grid with placements.

        Raises:
            InvalidDateError: If year/month do not name a calendar month.
        """
        if not 1 <= month <= 12 or not 1 < year < 9999:
            raise InvalidDateError(f"{year}-{month}")
        filters = CalendarFilters(venue=venue or None, status=status or None, search=search or None)
        return project_month(year, month, self.list_bookings(), filters)
