"""Application services."""

from .timesheets import GenerationResult, TimesheetService, output_filename

__all__ = [
    "GenerationResult",
    "TimesheetService",
    "output_filename",
]
