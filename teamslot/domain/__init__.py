"""
Domain layer - Pure business logic without external dependencies.
"""

from .models import (
    Developer,
    InPeriodPreference,
    MeetingSlot,
    MeetingTimingPreferences,
    PeriodPreference,
    TimeRange,
)
from .scheduling_assistant import SchedulingAssistant
from .zones import zone_for_city

__all__ = [
    "Developer",
    "InPeriodPreference",
    "MeetingSlot",
    "MeetingTimingPreferences",
    "PeriodPreference",
    "SchedulingAssistant",
    "TimeRange",
    "zone_for_city",
]
