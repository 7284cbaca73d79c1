from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_HOURS = 8
DEFAULT_JOB = "Work Time"

COLUMNS = ["Date", "Job Name", "From time", "To time", "Hours"]


class TimesheetConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: str | None = None
    end: str | None = None
    hours: int = DEFAULT_HOURS
    job: str = DEFAULT_JOB
    output_dir: Path = Field(default_factory=Path.cwd)
    output_format: Literal["csv", "xlsx"] = "csv"


class WorkDayRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: str
    job_name: str
    start_time: str
    end_time: str
    hours: int

    def to_row(self) -> dict[str, str | int]:
        return dict(zip(COLUMNS, (self.date, self.job_name, self.start_time, self.end_time, self.hours)))
