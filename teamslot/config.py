"""
Configuration management using Pydantic models loaded from YAML.
"""

from datetime import time
from pathlib import Path
from typing import List, Optional, Sequence

import yaml
from pydantic import BaseModel, Field, field_validator

from .domain.exceptions import ConfigurationError, UnknownDeveloperError
from .domain.models import (
    WORKDAY_HOURS,
    Developer,
    InPeriodPreference,
    MeetingTimingPreferences,
    PeriodPreference,
)
from .domain.zones import zone_for_city


class DefaultsConfig(BaseModel):
    """Default settings for scheduling."""
    duration_minutes: int = 60
    period: PeriodPreference = PeriodPreference.TODAY
    in_period: InPeriodPreference = InPeriodPreference.EARLIEST

    @field_validator("duration_minutes")
    @classmethod
    def validate_duration(cls, value: int) -> int:
        """Ensure meeting duration is positive and fits into one workday."""
        if value <= 0:
            raise ValueError("duration_minutes must be greater than zero")
        if value > WORKDAY_HOURS * 60:
            raise ValueError(
                f"duration_minutes must not exceed one workday ({WORKDAY_HOURS * 60}), got {value}"
            )
        return value

    @field_validator("period", "in_period", mode="before")
    @classmethod
    def normalize_preference(cls, value):
        """Accept enum names in any case, e.g. 'THIS_WEEK' or 'this_week'."""
        if isinstance(value, str):
            return value.strip().lower()
        return value

    def get_preferences(
        self,
        period: Optional[PeriodPreference] = None,
        in_period: Optional[InPeriodPreference] = None,
    ) -> MeetingTimingPreferences:
        """Build timing preferences; explicit choices override the defaults."""
        return MeetingTimingPreferences(
            period=period or self.period,
            in_period=in_period or self.in_period,
        )


class DeveloperConfig(BaseModel):
    """Team member configuration."""
    name: str  # Used as alias
    city: str = ""
    work_day_start: str = "09:00"

    @field_validator("work_day_start")
    @classmethod
    def validate_work_day_start(cls, value: str) -> str:
        """Validate HH:MM format."""
        try:
            hour_str, minute_str = value.strip().split(":")
            time(hour=int(hour_str), minute=int(minute_str))
        except ValueError as exc:
            raise ValueError(f"work_day_start must be HH:MM, got {value!r}") from exc
        return value.strip()

    def get_start_time(self) -> time:
        """Get workday start as time object."""
        hour_str, minute_str = self.work_day_start.split(":")
        return time(hour=int(hour_str), minute=int(minute_str))

    def get_timezone(self) -> str:
        return zone_for_city(self.city)

    def to_developer(self) -> Developer:
        return Developer(
            city=self.city,
            work_day_start_time=self.get_start_time(),
            name=self.name,
        )


class AppConfig(BaseModel):
    """Application configuration."""
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    team: List[DeveloperConfig] = Field(default_factory=list)

    @field_validator("team")
    @classmethod
    def validate_team(cls, value: List[DeveloperConfig]) -> List[DeveloperConfig]:
        """Ensure team member aliases are unique."""
        seen_names: set[str] = set()
        for member in value:
            name_key = member.name.lower()
            if name_key in seen_names:
                raise ValueError(f"Duplicate team member name detected: {member.name}")
            seen_names.add(name_key)
        return value

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ConfigurationError: If the file is not valid YAML or not a mapping
            pydantic.ValidationError: If a field is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                f"Please create a config.yaml file. See config.example.yaml for reference."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ConfigurationError("Config file must contain a mapping at the root level.")

        return cls(**data)

    def find_developer(self, name: str) -> DeveloperConfig | None:
        """Find a team member by their name (alias)."""
        for member in self.team:
            if member.name.lower() == name.lower():
                return member
        return None

    def resolve_team(self, names: Sequence[str]) -> List[DeveloperConfig]:
        """
        Resolve participant names to team members, ensuring uniqueness.

        An empty selection means the whole team.

        Raises:
            UnknownDeveloperError: If any name is not configured
        """
        if not names:
            return list(self.team)

        resolved: List[DeveloperConfig] = []
        unknown_names: List[str] = []

        for name in names:
            member = self.find_developer(name)
            if member is None:
                unknown_names.append(name)
                continue
            if member not in resolved:
                resolved.append(member)

        if unknown_names:
            missing = ", ".join(sorted(set(unknown_names)))
            raise UnknownDeveloperError(
                f"Unknown team member(s): {missing}. "
                "Ensure they exist in the configuration."
            )

        return resolved


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for config.yaml in current directory
    current_dir = Path.cwd()
    config_path = current_dir / "config.yaml"

    if not config_path.exists():
        # Try in the project root (parent of the package)
        project_root = Path(__file__).parent.parent
        config_path = project_root / "config.yaml"

    return config_path
