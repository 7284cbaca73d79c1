from __future__ import annotations

from datetime import date
from typing import Iterator

from zohono.core.formats import BASE_HOUR, format_clock, format_row_date
from zohono.core.schema import TimesheetConfig, WorkDayRecord
from zohono.domain import DateRange

SATURDAY = 5


def is_work_day(day: date) -> bool:
    return day.weekday() < SATURDAY


def count_work_days(date_range: DateRange) -> int:
    return sum(1 for day in date_range.days() if is_work_day(day))


class WorkDayEnumerator:
    """Lazy, restartable sequence of records for every weekday in a range."""

    def __init__(self, date_range: DateRange, config: TimesheetConfig) -> None:
        self.date_range = date_range
        self.job = config.job
        self.hours = config.hours
        self.start_time = format_clock(BASE_HOUR)
        # no bounds check: 8 + hours may roll past midnight
        self.end_time = format_clock(BASE_HOUR + config.hours)

    def __iter__(self) -> Iterator[WorkDayRecord]:
        for day in self.date_range.days():
            if not is_work_day(day):
                continue
            yield WorkDayRecord(
                date=format_row_date(day),
                job_name=self.job,
                start_time=self.start_time,
                end_time=self.end_time,
                hours=self.hours,
            )


def build_records(date_range: DateRange, config: TimesheetConfig) -> list[WorkDayRecord]:
    return list(WorkDayEnumerator(date_range, config))
