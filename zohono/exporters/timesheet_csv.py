from __future__ import annotations

from pathlib import Path
from typing import Iterable, TextIO

from zohono.core.csvio import write_records_to_csv
from zohono.core.schema import COLUMNS, WorkDayRecord
from zohono.core.validation import WriteError


def write_timesheet_csv(sink: Path | TextIO, records: Iterable[WorkDayRecord]) -> int:
    """Write the header and one row per record; return the number of records."""

    rows = [record.to_row() for record in records]
    try:
        return write_records_to_csv(sink, rows, COLUMNS)
    except OSError as exc:
        path = sink if isinstance(sink, Path) else None
        raise WriteError(f"could not write records: {exc}", path=path) from exc
