"""
Core business logic for proposing a meeting start across time zones.

Pure domain logic: no API calls, no I/O, no shared mutable state. Each
``schedule`` call builds and discards its own ranges, so one assistant can
be used from several threads at once.
"""

import logging
from datetime import date, time
from typing import Iterable, List, Sequence, Tuple

import pendulum
from pendulum import Date, DateTime

from .models import (
    WORKDAY_HOURS,
    Developer,
    InPeriodPreference,
    MeetingTimingPreferences,
    PeriodPreference,
    TimeRange,
)
from .zones import zone_for_city


logger = logging.getLogger(__name__)

# Monday=0 ... Saturday=5
LAST_WORKDAY = 5


class SchedulingAssistant:
    """
    Proposes a meeting start for a fixed team relative to a fixed "today".

    Algorithm:
    1. Map the period preference to a target date
    2. Turn every developer's workday on that date into an absolute range
    3. Intersect all ranges into one common window
    4. Pick the earliest or latest start that fits the meeting
    """

    def __init__(self, team: Iterable[Developer], today: date):
        self.team: Tuple[Developer, ...] = tuple(team)
        self.today: Date = pendulum.date(today.year, today.month, today.day)

    @classmethod
    def create(cls, team: Iterable[Developer], today: date) -> "SchedulingAssistant":
        return cls(team, today)

    def schedule(
        self,
        meeting_duration_minutes: int,
        preferences: MeetingTimingPreferences
    ) -> DateTime | None:
        """
        Find a start instant (UTC) for a meeting of the given length.

        Args:
            meeting_duration_minutes: Meeting length, must be positive
            preferences: Target period and earliest/latest choice

        Returns:
            The proposed start in UTC, or None if no slot fits
        """
        if meeting_duration_minutes <= 0:
            raise ValueError(
                f"Meeting duration must be positive, got {meeting_duration_minutes}"
            )

        meeting_date = self.get_target_date(preferences.period)
        workdays = self.get_workday_ranges(meeting_date)
        window = self.find_common_window(workdays)

        start = self.find_meeting_start(
            window,
            meeting_duration_minutes,
            preferences.in_period
        )

        logger.debug(
            "Scheduling %d min on %s for %d developer(s): window=%s, start=%s",
            meeting_duration_minutes,
            meeting_date,
            len(self.team),
            window,
            start,
        )
        return start

    def get_target_date(self, period: PeriodPreference) -> Date:
        """Resolve a period preference to a calendar date."""
        if period is PeriodPreference.TODAY:
            return self.today

        if period is PeriodPreference.TOMORROW:
            return self.today.add(days=1)

        # Saturday of the current week; on Sunday it already lies behind us
        last_workday = self.today.add(days=LAST_WORKDAY - self.today.weekday())
        return self.today if last_workday < self.today else last_workday

    def get_workday_ranges(self, meeting_date: date) -> List[TimeRange]:
        """
        Build each developer's workday on ``meeting_date`` as a UTC range.

        The end is a fixed offset in absolute time, so a workday is always
        exactly WORKDAY_HOURS long, even across a DST change.
        """
        ranges: List[TimeRange] = []

        for developer in self.team:
            zone = zone_for_city(developer.city)
            work_start = developer.work_day_start_time

            local_start = self._localize(meeting_date, work_start, zone)
            start_utc = local_start.in_timezone("UTC")
            end_utc = start_utc.add(hours=WORKDAY_HOURS)

            ranges.append(TimeRange(start=start_utc, end=end_utc))

        return ranges

    @staticmethod
    def _localize(meeting_date: date, work_start: time, zone: str) -> DateTime:
        """
        Combine a civil date and time in ``zone``.

        A time repeated by a backward transition resolves to its earlier
        occurrence; a time skipped by a forward transition is pushed past
        the gap.
        """
        fields = (
            meeting_date.year,
            meeting_date.month,
            meeting_date.day,
            work_start.hour,
            work_start.minute,
            work_start.second,
        )
        local_start = pendulum.datetime(*fields, tz=zone, fold=0)

        if (local_start.hour, local_start.minute, local_start.second) != fields[3:]:
            local_start = pendulum.datetime(*fields, tz=zone, fold=1)
        return local_start

    @staticmethod
    def find_common_window(ranges: Sequence[TimeRange]) -> TimeRange | None:
        """
        Intersect all ranges into the single window everybody shares.

        Returns None for an empty input or when the ranges do not overlap.
        """
        if not ranges:
            return None

        window = ranges[0]

        for time_range in ranges[1:]:
            window = window.intersect(time_range)
            if window is None:
                return None

        return window

    @staticmethod
    def find_meeting_start(
        window: TimeRange | None,
        duration_minutes: int,
        preference: InPeriodPreference
    ) -> DateTime | None:
        """Pick a start inside ``window`` that leaves room for the meeting."""
        if window is None or window.duration_minutes() < duration_minutes:
            return None

        if preference is InPeriodPreference.EARLIEST:
            return window.start
        return window.end.subtract(minutes=duration_minutes)
