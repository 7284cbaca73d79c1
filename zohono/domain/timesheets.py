"""Domain value objects for timesheet generation."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterator

from zohono.core.formats import format_flag_date
from zohono.core.validation import RangeError


@dataclass(frozen=True, slots=True)
class DateRange:
    """Inclusive span of calendar days, ``start`` never after ``end``."""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise RangeError(self.start, self.end)

    def days(self) -> Iterator[date]:
        day = self.start
        while day <= self.end:
            yield day
            day += timedelta(days=1)

    @property
    def stem(self) -> str:
        return f"{format_flag_date(self.start)}.{format_flag_date(self.end)}"
