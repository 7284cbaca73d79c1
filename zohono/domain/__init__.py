"""Domain layer definitions."""

from .timesheets import DateRange

__all__ = [
    "DateRange",
]
