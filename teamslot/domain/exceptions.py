"""
Domain-specific exception hierarchy for the teamslot application.
"""


class TeamslotError(Exception):
    """Base class for all application-level errors."""


class ConfigurationError(TeamslotError):
    """Raised when a configuration file cannot be read or parsed."""


class UnknownDeveloperError(TeamslotError):
    """Raised when a participant name is not part of the configured team."""
