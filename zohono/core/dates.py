"""Resolve the effective date range from optional ``--start``/``--end`` flags."""
from __future__ import annotations

import logging
import re
from datetime import date, datetime, timedelta

from zohono.core.formats import FLAG_DATE_FORMAT, FLAG_DATE_LABEL
from zohono.core.validation import FormatError
from zohono.domain import DateRange

logger = logging.getLogger(__name__)

_FLAG_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_flag_date(value: str, flag: str) -> date:
    """Parse a ``YYYY-MM-DD`` flag value, naming ``flag`` on failure."""

    # strptime alone would accept unpadded months and days
    if not _FLAG_DATE_PATTERN.fullmatch(value):
        raise FormatError(flag, value, FLAG_DATE_LABEL)
    try:
        return datetime.strptime(value, FLAG_DATE_FORMAT).date()
    except ValueError as exc:
        raise FormatError(flag, value, FLAG_DATE_LABEL) from exc


def most_recent_monday(day: date) -> date:
    return day - timedelta(days=day.weekday())


def resolve_range(start: str | None, end: str | None, today: date | None = None) -> DateRange:
    """Apply defaults to the optional flags and return the resolved range.

    A missing end falls back to ``today`` (the local calendar day unless one is
    supplied); a missing start falls back to the Monday on or before the end.
    """

    if end:
        end_day = parse_flag_date(end, "--end")
    else:
        end_day = today or date.today()
        logger.debug("No --end given, using %s", end_day.isoformat())

    if start:
        start_day = parse_flag_date(start, "--start")
    else:
        start_day = most_recent_monday(end_day)
        logger.debug("No --start given, using Monday %s", start_day.isoformat())

    return DateRange(start=start_day, end=end_day)
