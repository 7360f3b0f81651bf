"""
Domain models for team members, scheduling preferences and time ranges.
"""

from dataclasses import dataclass
from datetime import time
from enum import Enum
from typing import List

from pendulum import DateTime


WORKDAY_HOURS = 8


@dataclass(frozen=True)
class Developer:
    """
    A team member whose workday starts at a civil time in their home city.

    The workday always lasts ``WORKDAY_HOURS`` hours of elapsed time.
    """
    city: str
    work_day_start_time: time
    name: str = ""

    def display_name(self) -> str:
        """Get display name."""
        return self.name or self.city


class PeriodPreference(Enum):
    """Which calendar day the meeting should fall on."""
    TODAY = "today"
    TOMORROW = "tomorrow"
    THIS_WEEK = "this_week"


class InPeriodPreference(Enum):
    """Whether to pick the earliest or the latest feasible start."""
    EARLIEST = "earliest"
    LATEST = "latest"


@dataclass(frozen=True)
class MeetingTimingPreferences:
    """The day to target and which end of the shared window to use."""
    period: PeriodPreference
    in_period: InPeriodPreference


@dataclass(frozen=True)
class TimeRange:
    """
    Represents an immutable time range with start and end datetime.

    Both ends are absolute instants, so ranges built from different time
    zones compare correctly.

    Invariant: start must be before end.
    """
    start: DateTime
    end: DateTime

    def __post_init__(self):
        if self.start >= self.end:
            raise ValueError(f"Start time {self.start} must be before end time {self.end}")

    def duration_minutes(self) -> int:
        """Return the duration in minutes."""
        return int((self.end - self.start).total_seconds() // 60)

    def overlaps(self, other: "TimeRange") -> bool:
        """True if both ranges share a positive stretch of time."""
        return self.start < other.end and other.start < self.end

    def intersect(self, other: "TimeRange") -> "TimeRange | None":
        """
        Return the time covered by both ranges.

        Ranges that only touch (one ends when the other starts) have no
        intersection and give None.
        """
        if not self.overlaps(other):
            return None
        return TimeRange(start=max(self.start, other.start), end=min(self.end, other.end))

    def __str__(self) -> str:
        return f"{self.start.format('DD.MM.YYYY HH:mm')} - {self.end.format('HH:mm')}"


@dataclass
class MeetingSlot:
    """
    Represents a scheduled meeting for a set of developers.
    """
    time_range: TimeRange
    participants: List[Developer]

    @property
    def start(self) -> DateTime:
        return self.time_range.start

    def format_display(self) -> str:
        """
        Format the slot for display.
        Format: Weekday, DD.MM.YYYY | HH:mm – HH:mm UTC (N min)
        """
        start = self.time_range.start.in_timezone("UTC")
        end = self.time_range.end.in_timezone("UTC")

        weekday = start.format("dddd")
        date_str = start.format("DD.MM.YYYY")
        time_str = f"{start.format('HH:mm')} – {end.format('HH:mm')} UTC"
        duration = self.time_range.duration_minutes()

        return f"{weekday}, {date_str} | {time_str} ({duration} min)"

    def format_local(self, timezone: str) -> str:
        """Format the meeting start as seen from ``timezone``."""
        local_start = self.time_range.start.in_timezone(timezone)
        return local_start.format("ddd DD.MM.YYYY HH:mm")
