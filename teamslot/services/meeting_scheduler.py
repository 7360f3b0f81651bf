"""
Application service for proposing a meeting to configured team members.

The service resolves participants from the configuration and delegates the
actual time calculation to the domain-level ``SchedulingAssistant``. This
keeps the CLI thin and lets tests drive scheduling with a plain config
object and a fixed "today".
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

import pendulum

from ..config import AppConfig
from ..domain.models import MeetingSlot, MeetingTimingPreferences, TimeRange
from ..domain.scheduling_assistant import SchedulingAssistant


logger = logging.getLogger(__name__)


class MeetingSchedulerService:
    """Schedules meetings for members of a configured team."""

    def __init__(self, config: AppConfig) -> None:
        self._config = config

    def schedule(
        self,
        *,
        participants: Sequence[str],
        duration_minutes: int,
        preferences: MeetingTimingPreferences,
        today: Optional[date] = None,
    ) -> MeetingSlot | None:
        """
        Propose a meeting for the named participants.

        Args:
            participants: Team member names; empty means the whole team
            duration_minutes: Meeting length in minutes
            preferences: Period and earliest/latest preference
            today: Reference date, defaults to the current UTC date

        Returns:
            The proposed MeetingSlot, or None if no common slot exists

        Raises:
            UnknownDeveloperError: If a participant is not configured
        """
        members = self._config.resolve_team(participants)
        developers = [member.to_developer() for member in members]
        reference_date = today or pendulum.today("UTC").date()

        logger.info(
            "Scheduling %d min meeting (%s, %s) for %s",
            duration_minutes,
            preferences.period.value,
            preferences.in_period.value,
            ", ".join(d.display_name() for d in developers) or "nobody",
        )

        assistant = SchedulingAssistant.create(developers, reference_date)
        start = assistant.schedule(duration_minutes, preferences)

        if start is None:
            logger.info("No common slot found")
            return None

        slot = MeetingSlot(
            time_range=TimeRange(start=start, end=start.add(minutes=duration_minutes)),
            participants=developers,
        )
        logger.info("Proposed slot: %s", slot.format_display())
        return slot
