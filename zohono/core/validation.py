from __future__ import annotations

from datetime import date
from pathlib import Path


class TimesheetError(Exception):
    """Base class for every failure that aborts a timesheet run."""


class FormatError(TimesheetError, ValueError):
    """Raised when an explicit date flag does not match the expected format."""

    def __init__(self, flag: str, value: str, expected: str) -> None:
        super().__init__(f"invalid {flag} {value!r}, expected format {expected!r}")
        self.flag = flag
        self.value = value
        self.expected = expected


class RangeError(TimesheetError, ValueError):
    """Raised when the resolved start day falls after the resolved end day."""

    def __init__(self, start: date, end: date) -> None:
        super().__init__(f"start day {start.isoformat()} is after end day {end.isoformat()}")
        self.start = start
        self.end = end


class WriteError(TimesheetError):
    """Raised when the destination cannot be created or rejects a write."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class ConfigError(TimesheetError):
    """Raised when configuration sources hold unusable values."""
