from __future__ import annotations

from pathlib import Path
from typing import Iterable

from openpyxl import Workbook

from zohono.core.schema import COLUMNS, WorkDayRecord
from zohono.core.validation import WriteError

SHEET_TITLE = "Timesheet"


def export_timesheet_xlsx(path: Path, records: Iterable[WorkDayRecord]) -> Path:
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = SHEET_TITLE
    sheet.append(COLUMNS)
    for record in records:
        sheet.append(list(record.to_row().values()))

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        workbook.save(path)
    except OSError as exc:
        raise WriteError(f"could not save workbook {str(path)!r}: {exc}", path=path) from exc
    return path
