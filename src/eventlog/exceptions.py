# src/eventlog/exceptions.py
"""
Custom exceptions for the eventlog library.

The event log itself has no fallible operations in normal use. These
exceptions cover the edges: level names that cannot be parsed and
configuration that cannot be loaded.
"""

from typing import Any


class EventLogError(Exception):
    """Base class for all eventlog specific errors."""
    def __init__(self, message: str = "An unspecified error occurred in eventlog."):
        super().__init__(message)

class InvalidLevelError(EventLogError, ValueError):
    """Raised when a value cannot be interpreted as a log level."""
    def __init__(self, value: Any, message: str = "Invalid log level."):
        self.value = value
        super().__init__(f"{message} Got: {value!r}")

class ConfigError(EventLogError):
    """Raised for errors related to configuration loading or validation."""
    def __init__(self, message: str = "Configuration error."):
        super().__init__(message)
