"""Domain primitives that enforce validity at creation time."""

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Self
from uuid import UUID

TIME_PATTERN = re.compile(r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$")


@dataclass(frozen=True)
class BookingId:
    """Unique identifier for a Booking."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, order=True)
class TimeOfDay:
    """Wall-clock time with minute precision, ordered by minutes since midnight."""

    minutes: int

    def __post_init__(self) -> None:
        if not 0 <= self.minutes < 24 * 60:
            raise ValueError("Time of day must fall within a single day")

    @classmethod
    def parse(cls, value: str) -> Self:
        """Parse ``HH:MM`` (single-digit hours allowed)."""
        if not isinstance(value, str) or not TIME_PATTERN.match(value.strip()):
            raise ValueError(f"Invalid time of day: {value!r}")
        hours, minutes = value.strip().split(":")
        return cls(minutes=int(hours) * 60 + int(minutes))

    def __str__(self) -> str:
        return f"{self.minutes // 60:02d}:{self.minutes % 60:02d}"


MIDNIGHT = TimeOfDay(0)
LAST_MINUTE = TimeOfDay(23 * 60 + 59)


@dataclass(frozen=True)
class TimeInterval:
    """Half-open ``[start, end)`` span within one day."""

    start: TimeOfDay
    end: TimeOfDay

    def __post_init__(self) -> None:
        if self.end <= self.start:
            raise ValueError("Interval end must be after its start")

    @classmethod
    def parse(cls, start: str, end: str) -> Self:
        return cls(start=TimeOfDay.parse(start), end=TimeOfDay.parse(end))

    @classmethod
    def full_day(cls) -> Self:
        return cls(start=MIDNIGHT, end=LAST_MINUTE)

    def overlaps(self, other: "TimeInterval") -> bool:
        return self.start < other.end and other.start < self.end

    @property
    def duration_minutes(self) -> int:
        return self.end.minutes - self.start.minutes

    @property
    def duration_label(self) -> str:
        hours, minutes = divmod(self.duration_minutes, 60)
        if hours == 0:
            return f"{minutes}m"
        if minutes == 0:
            return f"{hours}h"
        return f"{hours}h {minutes}m"

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


def to_calendar_day(value: date | datetime | str | None) -> date | None:
    """Normalize a date-ish value to a calendar day, or None when unusable.

    Strings keep only their ``YYYY-MM-DD`` prefix; no timezone shift is applied.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            return None
    return None


def normalize_time(value: str) -> str:
    """Zero-pad a well-formed ``H:MM`` time; anything else comes back unchanged."""
    try:
        return str(TimeOfDay.parse(value))
    except ValueError:
        return value
