"""Exceptions raised by authentic_calendar at caller-facing boundaries.

Malformed recurrence rules are never reported through these; they degrade to
"no occurrences". These cover caller contract violations only.
"""

from typing import Optional


class AuthenticCalendarError(Exception):
    """Base exception for authentic_calendar errors."""

    def __init__(self, message: str, value: Optional[object] = None):
        super().__init__(message)
        self.message = message
        self.value = value


class InvalidViewModeError(AuthenticCalendarError, ValueError):
    """Exception raised when a calendar view mode is not daily, weekly or monthly."""


class InvalidDateError(AuthenticCalendarError, ValueError):
    """Exception raised when a value cannot be read as a calendar date."""


class ConfigError(AuthenticCalendarError, ValueError):
    """Exception raised when a configuration file cannot be used."""
