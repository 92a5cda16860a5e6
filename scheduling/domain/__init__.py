from scheduling.domain.conflicts import (
    ConflictCandidate,
    ConflictDescriptor,
    DateRangeConflicts,
    DatedConflict,
    SessionConflict,
    VenueSlot,
    find_booking_conflicts,
    find_conflicts,
    find_conflicts_for_dates,
    find_overlapping_bookings,
    overlaps,
    venue_conflicts_for_date,
)
from scheduling.domain.grouping import DayGroup, group_sessions_by_day, session_number_map
from scheduling.domain.models import Booking, BookingStatus, Session, Venue
from scheduling.domain.month_view import CalendarCell, CalendarFilters, project_month
from scheduling.domain.occurrences import (
    Occurrence,
    Role,
    classify_position,
    expand_to_occurrences,
    has_position_conflict,
)
from scheduling.domain.validation import Violation, is_session_complete, validate_session
from scheduling.domain.value_objects import (
    BookingId,
    TimeInterval,
    TimeOfDay,
    normalize_time,
    to_calendar_day,
)

__all__ = [
    "Booking",
    "BookingStatus",
    "Session",
    "Venue",
    "BookingId",
    "TimeOfDay",
    "TimeInterval",
    "to_calendar_day",
    "normalize_time",
    "Violation",
    "validate_session",
    "is_session_complete",
    "ConflictCandidate",
    "ConflictDescriptor",
    "SessionConflict",
    "DateRangeConflicts",
    "DatedConflict",
    "VenueSlot",
    "overlaps",
    "find_conflicts",
    "find_conflicts_for_dates",
    "find_booking_conflicts",
    "find_overlapping_bookings",
    "venue_conflicts_for_date",
    "Occurrence",
    "Role",
    "classify_position",
    "expand_to_occurrences",
    "has_position_conflict",
    "CalendarCell",
    "CalendarFilters",
    "project_month",
    "DayGroup",
    "group_sessions_by_day",
    "session_number_map",
]
