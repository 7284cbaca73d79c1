"""Textual formats shared by the resolver, the enumerator and the writers."""

from __future__ import annotations

from datetime import date

FLAG_DATE_FORMAT = "%Y-%m-%d"
FLAG_DATE_LABEL = "YYYY-MM-DD"
ROW_DATE_FORMAT = "%d-%b-%Y"

BASE_HOUR = 8


def format_flag_date(day: date) -> str:
    return day.strftime(FLAG_DATE_FORMAT)


def format_row_date(day: date) -> str:
    return day.strftime(ROW_DATE_FORMAT)


def format_clock(hour_offset: int) -> str:
    """Render ``hour_offset`` hours after midnight as ``hh:mm am``.

    Offsets outside 0-23 roll over into the neighbouring day, so 28 renders
    as ``04:00 am`` and -2 as ``10:00 pm``.
    """

    hour_of_day = hour_offset % 24
    hour = hour_of_day % 12 or 12
    marker = "am" if hour_of_day < 12 else "pm"
    return f"{hour:02d}:00 {marker}"
