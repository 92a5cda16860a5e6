"""Day grouping, within-day ordering and session numbering for one booking.

Numbering is always computed from the committed session list. A draft being
edited is passed in explicitly and never reshuffles committed numbers.
"""

from dataclasses import dataclass
from datetime import date

from scheduling.domain.models import SESSION_LABELS, Booking, Session
from scheduling.domain.validation import is_session_complete

LABEL_PRIORITY = {label: rank for rank, label in enumerate(SESSION_LABELS)}
UNLABELLED_PRIORITY = len(LABEL_PRIORITY)


def session_sort_key(session: Session) -> tuple:
    """Label priority, then start time (missing last), then name, then id."""
    start = session.start
    return (
        LABEL_PRIORITY.get(session.label, UNLABELLED_PRIORITY),
        (0, start.minutes) if start is not None else (1, 0),
        session.name,
        session.id,
    )


def _global_sort_key(session: Session) -> tuple:
    # Undated sessions trail every dated day.
    return (session.day is None, session.day or date.min, session_sort_key(session))


@dataclass(frozen=True)
class DayGroupEntry:
    session: Session
    number: int | None
    complete: bool


@dataclass(frozen=True)
class DayGroup:
    day: date | None
    day_number: int | None
    entries: tuple[DayGroupEntry, ...]

    @property
    def sessions(self) -> list[Session]:
        return [entry.session for entry in self.entries]

    @property
    def title(self) -> str:
        if self.day is None:
            return ""
        formatted = f"{self.day:%a}, {self.day:%b} {self.day.day}, {self.day.year}"
        if self.day_number and self.day_number > 0:
            return f"Day {self.day_number} • {formatted}"
        return formatted


def session_number_map(booking: Booking, draft: Session | None = None) -> dict[str, int]:
    """1-based display number for each complete committed session.

    A draft that is not yet committed is numbered after every committed
    session; a draft editing a committed session keeps that session's number.
    """
    ordered = sorted(
        (session for session in booking.sessions if is_session_complete(session)),
        key=_global_sort_key,
    )
    numbers = {session.id: index for index, session in enumerate(ordered, start=1)}

    if draft is not None and not any(session.id == draft.id for session in booking.sessions):
        numbers[draft.id] = len(numbers) + 1
    return numbers


def day_number(booking: Booking, day: date) -> int | None:
    if booking.event_date is None:
        return None
    return (day - booking.event_date).days + 1


def group_sessions_by_day(booking: Booking) -> list[DayGroup]:
    """Sessions partitioned by calendar day, ascending, each day in display order.

    Incomplete sessions are kept (unnumbered) so they stay editable.
    """
    numbers = session_number_map(booking)
    buckets: dict[date | None, list[Session]] = {}
    for session in booking.sessions:
        buckets.setdefault(session.day, []).append(session)

    groups = []
    for day in sorted(buckets, key=lambda d: (d is None, d or date.min)):
        entries = tuple(
            DayGroupEntry(
                session=session,
                number=numbers.get(session.id),
                complete=is_session_complete(session),
            )
            for session in sorted(buckets[day], key=session_sort_key)
        )
        groups.append(
            DayGroup(
                day=day,
                day_number=day_number(booking, day) if day is not None else None,
                entries=entries,
            )
        )
    return groups
