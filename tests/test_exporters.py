import io
from datetime import date

import pytest
from openpyxl import load_workbook

from zohono.core.schema import TimesheetConfig
from zohono.core.validation import WriteError
from zohono.domain import DateRange
from zohono.exporters.timesheet_csv import write_timesheet_csv
from zohono.exporters.timesheet_xlsx import export_timesheet_xlsx
from zohono.workers.generator import build_records

FIRST_WEEK_CSV = (
    "Date,Job Name,From time,To time,Hours\n"
    "01-Jan-2024,Work Time,08:00 am,04:00 pm,8\n"
    "02-Jan-2024,Work Time,08:00 am,04:00 pm,8\n"
    "03-Jan-2024,Work Time,08:00 am,04:00 pm,8\n"
    "04-Jan-2024,Work Time,08:00 am,04:00 pm,8\n"
    "05-Jan-2024,Work Time,08:00 am,04:00 pm,8\n"
)


@pytest.fixture()
def first_week():
    return build_records(DateRange(date(2024, 1, 1), date(2024, 1, 7)), TimesheetConfig())


class FailingSink(io.StringIO):
    def write(self, s):
        raise OSError("No space left on device")


def test_csv_matches_expected_text(first_week):
    sink = io.StringIO()

    count = write_timesheet_csv(sink, first_week)

    assert count == 5
    assert sink.getvalue() == FIRST_WEEK_CSV


def test_csv_to_path(tmp_path, first_week):
    path = tmp_path / "out" / "week.csv"

    write_timesheet_csv(path, first_week)

    assert path.read_text(encoding="utf-8") == FIRST_WEEK_CSV


def test_empty_records_write_header_only():
    sink = io.StringIO()

    assert write_timesheet_csv(sink, []) == 0
    assert sink.getvalue() == "Date,Job Name,From time,To time,Hours\n"


def test_job_names_with_commas_are_quoted():
    records = build_records(DateRange(date(2024, 1, 1), date(2024, 1, 1)), TimesheetConfig(job="Review, QA"))
    sink = io.StringIO()

    write_timesheet_csv(sink, records)

    assert sink.getvalue().splitlines()[1] == '01-Jan-2024,"Review, QA",08:00 am,04:00 pm,8'


def test_leading_space_job_names_are_written_unquoted():
    records = build_records(DateRange(date(2024, 1, 1), date(2024, 1, 1)), TimesheetConfig(job=" lead"))
    sink = io.StringIO()

    write_timesheet_csv(sink, records)

    assert sink.getvalue().splitlines()[1] == "01-Jan-2024, lead,08:00 am,04:00 pm,8"


def test_rejected_write_raises_write_error(first_week):
    with pytest.raises(WriteError) as excinfo:
        write_timesheet_csv(FailingSink(), first_week)

    assert isinstance(excinfo.value.__cause__, OSError)


def test_xlsx_export(tmp_path, first_week):
    path = export_timesheet_xlsx(tmp_path / "week.xlsx", first_week)

    sheet = load_workbook(path).active
    rows = list(sheet.iter_rows(values_only=True))

    assert sheet.title == "Timesheet"
    assert rows[0] == ("Date", "Job Name", "From time", "To time", "Hours")
    assert rows[1] == ("01-Jan-2024", "Work Time", "08:00 am", "04:00 pm", 8)
    assert len(rows) == 6


def test_xlsx_export_into_blocked_directory(tmp_path, first_week):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")

    with pytest.raises(WriteError):
        export_timesheet_xlsx(blocker / "week.xlsx", first_week)
