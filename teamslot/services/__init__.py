"""
Service layer helpers that orchestrate configuration and domain logic.
"""

from .meeting_scheduler import MeetingSchedulerService

__all__ = ["MeetingSchedulerService"]
