"""Month projection for the split-cell venue calendar."""

import calendar
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, timedelta

from scheduling.domain.models import Booking
from scheduling.domain.occurrences import Role, classify_position, has_position_conflict


@dataclass(frozen=True)
class CalendarFilters:
    venue: str | None = None
    status: str | None = None
    search: str | None = None

    def matches(self, booking: Booking) -> bool:
        if self.venue and self.venue not in _venues_of(booking):
            return False
        if self.status and booking.status != self.status:
            return False
        if self.search:
            query = self.search.lower()
            return query in booking.client_name.lower() or query in booking.booking_number.lower()
        return True


@dataclass(frozen=True)
class Placement:
    booking_id: str
    client_name: str
    role: Role
    day_index: int
    total_days: int
    conflict: bool


@dataclass(frozen=True)
class CalendarCell:
    day: date
    in_month: bool
    placements: tuple[Placement, ...]

    def by_role(self, *roles: Role) -> list[Placement]:
        return [placement for placement in self.placements if placement.role in roles]


def _venues_of(booking: Booking) -> set[str]:
    venues = {session.venue for session in booking.sessions if session.venue}
    if booking.hall:
        venues.add(booking.hall)
    return venues


def month_grid(year: int, month: int) -> list[date]:
    """Days of the month padded to whole Sunday-to-Saturday weeks."""
    first = date(year, month, 1)
    last = date(year, month, calendar.monthrange(year, month)[1])
    # date.weekday() is Monday=0; shift so Sunday starts the week.
    start = first - timedelta(days=(first.weekday() + 1) % 7)
    end = last + timedelta(days=(5 - last.weekday()) % 7)
    return [start + timedelta(days=i) for i in range((end - start).days + 1)]


def project_month(
    year: int,
    month: int,
    bookings: Sequence[Booking],
    filters: CalendarFilters | None = None,
) -> list[CalendarCell]:
    filters = filters or CalendarFilters()
    visible = [booking for booking in bookings if filters.matches(booking)]

    cells = []
    for day in month_grid(year, month):
        placements = []
        for booking in visible:
            role = classify_position(day, booking)
            if role is None:
                continue
            placements.append(
                Placement(
                    booking_id=booking.id,
                    client_name=booking.client_name,
                    role=role,
                    day_index=(day - booking.event_date).days,
                    total_days=booking.total_days,
                    conflict=has_position_conflict(day, booking, visible),
                )
            )
        cells.append(CalendarCell(day=day, in_month=day.month == month, placements=tuple(placements)))
    return cells
