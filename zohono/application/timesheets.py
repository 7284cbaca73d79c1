"""Application service tying the resolver, the enumerator and the writers."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from zohono.core.dates import resolve_range
from zohono.core.formats import format_flag_date
from zohono.core.schema import TimesheetConfig, WorkDayRecord
from zohono.core.validation import WriteError
from zohono.domain import DateRange
from zohono.exporters.timesheet_csv import write_timesheet_csv
from zohono.exporters.timesheet_xlsx import export_timesheet_xlsx
from zohono.workers.generator import build_records

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class GenerationResult:
    date_range: DateRange
    path: Path
    rows: int


def output_filename(date_range: DateRange, output_format: str = "csv") -> str:
    return f"{date_range.stem}.{output_format}"


class TimesheetService:
    """Runs one generation: resolve the range, build rows, write the file."""

    def generate(self, config: TimesheetConfig, today: date | None = None) -> GenerationResult:
        date_range = resolve_range(config.start, config.end, today=today)
        logger.info("Start: %s", format_flag_date(date_range.start))
        logger.info("End:   %s", format_flag_date(date_range.end))

        records = build_records(date_range, config)
        path = config.output_dir / output_filename(date_range, config.output_format)

        if config.output_format == "xlsx":
            export_timesheet_xlsx(path, records)
            rows = len(records)
        else:
            rows = self._write_csv(path, records)

        logger.info("Wrote %d days to %s", rows, path.name)
        return GenerationResult(date_range=date_range, path=path, rows=rows)

    @staticmethod
    def _write_csv(path: Path, records: list[WorkDayRecord]) -> int:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fp = path.open("w", encoding="utf-8", newline="")
        except OSError as exc:
            raise WriteError(f"could not create file {str(path)!r}: {exc}", path=path) from exc
        with fp:
            return write_timesheet_csv(fp, records)
