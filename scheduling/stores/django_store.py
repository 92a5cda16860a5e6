"""Django ORM implementation of the BookingStore."""

from scheduling import models
from scheduling.domain import Booking, BookingId, Session, Venue, normalize_time
from scheduling.stores.interfaces import BookingStore


def _to_session(row: models.BookingSession) -> Session:
    return Session(
        id=str(row.id),
        name=row.session_name,
        venue=row.venue,
        day=row.session_date,
        start_time=normalize_time(row.start_time),
        end_time=normalize_time(row.end_time),
        label=row.session_label,
        all_day=row.all_day,
        pax_count=row.pax_count,
        special_instructions=row.special_instructions,
    )


def _to_booking(row: models.Booking) -> Booking:
    return Booking(
        id=str(row.id),
        client_name=row.client_name,
        booking_number=row.booking_number,
        event_type=row.event_type,
        status=row.status,
        event_date=row.event_date,
        event_end_date=row.event_end_date,
        event_duration=row.event_duration,
        hall=row.hall,
        event_start_time=normalize_time(row.event_start_time),
        event_end_time=normalize_time(row.event_end_time),
        sessions=tuple(_to_session(session) for session in row.sessions.all()),
    )


class DjangoBookingStore(BookingStore):
    """Booking store backed by the Django ORM."""

    def list_bookings(self) -> list[Booking]:
        rows = models.Booking.objects.prefetch_related("sessions").order_by("event_date", "created_at")
        return [_to_booking(row) for row in rows]

    def get_booking(self, booking_id: BookingId) -> Booking | None:
        row = models.Booking.objects.prefetch_related("sessions").filter(pk=booking_id.value).first()
        return _to_booking(row) if row is not None else None

    def list_venues(self) -> list[Venue]:
        return [
            Venue(id=str(row.id), name=row.name, capacity=row.capacity, area=row.area)
            for row in models.Venue.objects.order_by("name")
        ]
