from scheduling.handlers.views import (
    BatchConflictCheckView,
    BookingConflictsView,
    BookingDateConflictsView,
    BookingOccurrencesView,
    BookingSessionDaysView,
    ConflictCheckView,
    MonthCalendarView,
    SessionValidationView,
    VenueConflictsView,
    VenueListView,
)

__all__ = [
    "BatchConflictCheckView",
    "BookingConflictsView",
    "BookingDateConflictsView",
    "BookingOccurrencesView",
    "BookingSessionDaysView",
    "ConflictCheckView",
    "MonthCalendarView",
    "SessionValidationView",
    "VenueConflictsView",
    "VenueListView",
]
