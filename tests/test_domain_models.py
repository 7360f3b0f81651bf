"""
Tests for domain models.
"""

from datetime import time

import pendulum
import pytest

from teamslot.domain.models import Developer, MeetingSlot, TimeRange


class TestTimeRange:
    """Tests for TimeRange model."""

    def test_create_valid_time_range(self):
        """Test creating a valid time range."""
        start = pendulum.datetime(2024, 1, 15, 14, 0, tz="UTC")
        end = pendulum.datetime(2024, 1, 15, 22, 0, tz="UTC")

        tr = TimeRange(start=start, end=end)

        assert tr.start == start
        assert tr.end == end
        assert tr.duration_minutes() == 480  # 8 hours

    def test_invalid_time_range_raises_error(self):
        """Test that creating an invalid time range raises ValueError."""
        start = pendulum.datetime(2024, 1, 15, 17, 0, tz="UTC")
        end = pendulum.datetime(2024, 1, 15, 9, 0, tz="UTC")

        with pytest.raises(ValueError, match="Start time .* must be before end time"):
            TimeRange(start=start, end=end)

    def test_empty_time_range_raises_error(self):
        """A range must have a positive length."""
        instant = pendulum.datetime(2024, 1, 15, 9, 0, tz="UTC")

        with pytest.raises(ValueError):
            TimeRange(start=instant, end=instant)

    def test_ranges_from_different_zones_compare_as_instants(self):
        """09:00 in New York and 14:00 in London are the same instant."""
        new_york = TimeRange(
            start=pendulum.datetime(2024, 1, 15, 9, 0, tz="America/New_York"),
            end=pendulum.datetime(2024, 1, 15, 17, 0, tz="America/New_York")
        )
        london = TimeRange(
            start=pendulum.datetime(2024, 1, 15, 9, 0, tz="Europe/London"),
            end=pendulum.datetime(2024, 1, 15, 17, 0, tz="Europe/London")
        )

        intersection = new_york.intersect(london)

        assert intersection is not None
        assert intersection.start == pendulum.datetime(2024, 1, 15, 14, 0, tz="UTC")
        assert intersection.end == pendulum.datetime(2024, 1, 15, 17, 0, tz="UTC")
        assert intersection.duration_minutes() == 180

    def test_intersect_no_overlap(self):
        """Test intersection with no overlap returns None."""
        tr1 = TimeRange(
            start=pendulum.datetime(2024, 1, 15, 9, 0, tz="UTC"),
            end=pendulum.datetime(2024, 1, 15, 12, 0, tz="UTC")
        )
        tr2 = TimeRange(
            start=pendulum.datetime(2024, 1, 15, 12, 0, tz="UTC"),
            end=pendulum.datetime(2024, 1, 15, 17, 0, tz="UTC")
        )

        assert not tr1.overlaps(tr2)
        assert tr1.intersect(tr2) is None


class TestDeveloper:
    """Tests for Developer model."""

    def test_display_name_falls_back_to_city(self):
        assert Developer(city="Paris", work_day_start_time=time(9, 0)).display_name() == "Paris"
        assert Developer(city="Paris", work_day_start_time=time(9, 0), name="zoe").display_name() == "zoe"

    def test_developer_is_immutable(self):
        developer = Developer(city="Paris", work_day_start_time=time(9, 0))

        with pytest.raises(AttributeError):
            developer.city = "London"


class TestMeetingSlot:
    """Tests for MeetingSlot formatting."""

    def _slot(self) -> MeetingSlot:
        time_range = TimeRange(
            start=pendulum.datetime(2024, 1, 15, 14, 0, tz="UTC"),
            end=pendulum.datetime(2024, 1, 15, 15, 0, tz="UTC")
        )
        return MeetingSlot(time_range=time_range, participants=[])

    def test_format_display(self):
        assert self._slot().format_display() == "Monday, 15.01.2024 | 14:00 – 15:00 UTC (60 min)"

    def test_format_local(self):
        slot = self._slot()

        assert slot.format_local("America/New_York") == "Mon 15.01.2024 09:00"
        assert slot.format_local("Asia/Tbilisi") == "Mon 15.01.2024 18:00"
