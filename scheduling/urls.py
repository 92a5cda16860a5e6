from django.urls import path

from scheduling.handlers import (
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

urlpatterns = [
    path("venues", VenueListView.as_view(), name="venue-list"),
    path("sessions/validate", SessionValidationView.as_view(), name="session-validate"),
    path("conflicts/check", ConflictCheckView.as_view(), name="conflict-check"),
    path("conflicts/check-batch", BatchConflictCheckView.as_view(), name="conflict-check-batch"),
    path(
        "calendar/<str:day>/venue-conflicts",
        VenueConflictsView.as_view(),
        name="venue-conflicts",
    ),
    path("calendar/<int:year>/<int:month>", MonthCalendarView.as_view(), name="month-calendar"),
    path(
        "bookings/<str:booking_id>/occurrences",
        BookingOccurrencesView.as_view(),
        name="booking-occurrences",
    ),
    path(
        "bookings/<str:booking_id>/session-days",
        BookingSessionDaysView.as_view(),
        name="booking-session-days",
    ),
    path(
        "bookings/<str:booking_id>/conflicts",
        BookingConflictsView.as_view(),
        name="booking-conflicts",
    ),
    path(
        "bookings/<str:booking_id>/date-conflicts",
        BookingDateConflictsView.as_view(),
        name="booking-date-conflicts",
    ),
]
