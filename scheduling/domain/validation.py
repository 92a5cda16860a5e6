"""Session validation.

Violations are returned as data so callers can render them inline; nothing
here raises.
"""

from dataclasses import dataclass
from enum import Enum

from scheduling.domain.models import Session
from scheduling.domain.value_objects import TIME_PATTERN, TimeOfDay


class ViolationCode(Enum):
    NAME_REQUIRED = "NAME_REQUIRED"
    VENUE_REQUIRED = "VENUE_REQUIRED"
    DATE_REQUIRED = "DATE_REQUIRED"
    START_REQUIRED = "START_REQUIRED"
    START_FORMAT = "START_FORMAT"
    END_REQUIRED = "END_REQUIRED"
    END_FORMAT = "END_FORMAT"
    END_NOT_AFTER_START = "END_NOT_AFTER_START"


@dataclass(frozen=True)
class Violation:
    field: str
    code: ViolationCode
    message: str


def _valid_time(value: str) -> bool:
    return bool(TIME_PATTERN.match(value.strip()))


def validate_session(session: Session) -> list[Violation]:
    """Return every rule the session breaks, or an empty list."""
    violations = []

    if not session.name.strip():
        violations.append(Violation("name", ViolationCode.NAME_REQUIRED, "Session name is required"))
    if not session.venue.strip():
        violations.append(Violation("venue", ViolationCode.VENUE_REQUIRED, "Venue is required"))
    if session.day is None:
        violations.append(Violation("day", ViolationCode.DATE_REQUIRED, "Session date is required"))

    if session.is_all_day:
        return violations

    start, end = session.start_time.strip(), session.end_time.strip()
    if not start:
        violations.append(
            Violation("start_time", ViolationCode.START_REQUIRED, "Start time is required")
        )
    elif not _valid_time(start):
        violations.append(
            Violation(
                "start_time",
                ViolationCode.START_FORMAT,
                "Start time must be in HH:MM format (24-hour)",
            )
        )
    if not end:
        violations.append(Violation("end_time", ViolationCode.END_REQUIRED, "End time is required"))
    elif not _valid_time(end):
        violations.append(
            Violation(
                "end_time",
                ViolationCode.END_FORMAT,
                "End time must be in HH:MM format (24-hour)",
            )
        )

    if start and end and _valid_time(start) and _valid_time(end):
        if TimeOfDay.parse(end) <= TimeOfDay.parse(start):
            violations.append(
                Violation(
                    "end_time",
                    ViolationCode.END_NOT_AFTER_START,
                    "End time must be after start time",
                )
            )

    return violations


def is_session_complete(session: Session) -> bool:
    """Name, venue, date and (start and end, or all-day) are all present."""
    if not (session.name.strip() and session.venue.strip() and session.day is not None):
        return False
    if session.is_all_day:
        return True
    return bool(session.start_time.strip() and session.end_time.strip())


def is_session_schedulable(session: Session) -> bool:
    """Complete and valid: the only sessions that occupy a venue."""
    return is_session_complete(session) and not validate_session(session)
