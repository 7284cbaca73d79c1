from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

from zohono.application import TimesheetService
from zohono.core.schema import DEFAULT_HOURS, DEFAULT_JOB
from zohono.core.settings import build_config, load_settings
from zohono.core.validation import TimesheetError

logger = logging.getLogger("zohono")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zohono",
        description="Generate a CSV timesheet with one row per weekday in a date range",
    )
    parser.add_argument("--start", help="start date in YYYY-MM-DD format, defaults to last Monday")
    parser.add_argument("--end", help="end date in YYYY-MM-DD format, defaults to today")
    parser.add_argument("--hours", type=int, help=f"number of hours per day (default {DEFAULT_HOURS})")
    parser.add_argument("--job", help=f"job name (default {DEFAULT_JOB!r})")
    parser.add_argument("--output-dir", type=Path, help="directory for the output file, defaults to the current one")
    parser.add_argument("--format", dest="output_format", choices=["csv", "xlsx"], help="output format (default csv)")
    parser.add_argument("--config", type=Path, help="YAML file with default job, hours, output_dir and output_format")
    parser.add_argument("-v", "--verbose", action="store_true", help="log resolution details")
    return parser


def main(argv: list[str] | None = None, today: date | None = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(stream=sys.stderr, level=level, format="%(message)s")
    # basicConfig is a no-op once the root logger has handlers
    logger.setLevel(level)

    overrides = {
        "start": args.start,
        "end": args.end,
        "hours": args.hours,
        "job": args.job,
        "output_dir": args.output_dir,
        "output_format": args.output_format,
    }

    try:
        config = build_config(load_settings(args.config), overrides)
        TimesheetService().generate(config, today=today)
    except TimesheetError as exc:
        cause = exc.__cause__
        if cause is not None and str(cause) not in str(exc):
            logger.error("error: %s (%s)", exc, cause)
        else:
            logger.error("error: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
