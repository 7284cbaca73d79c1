from __future__ import annotations

from pathlib import Path
from typing import Iterable, TextIO

import pandas as pd


def write_records_to_csv(sink: Path | TextIO, rows: Iterable[dict], columns: list[str]) -> int:
    """Write ``rows`` under a fixed header to a path or an open text stream."""

    df = pd.DataFrame(list(rows), columns=columns)
    if isinstance(sink, Path):
        sink.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(sink, index=False, lineterminator="\n")
    return len(df)
