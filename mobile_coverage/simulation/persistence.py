"""Arrow persistence helpers for position traces and result rows.

Paths ending in ``.parquet`` are written as Parquet; anything else as CSV.
Each call replaces the file at ``path``.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pyarrow as pa
import pyarrow.csv as pcsv
import pyarrow.parquet as pq

from mobile_coverage.config.types import ResultRow
from mobile_coverage.io.schemas import POSITION_LOG_SCHEMA, RESULT_SCHEMA


def write_table(table: pa.Table, path: Path) -> Path:
    """Write ``table`` to ``path``, choosing the format from the suffix."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix == ".parquet":
        pq.write_table(table, path)
    else:
        pcsv.write_csv(table, path)
    return path


def write_position_log(trace_columns: dict[str, list[int | float]], path: Path) -> Path:
    """Persist one trial's trace columns (``agent_id, step, x, y``)."""
    table = pa.Table.from_pydict(trace_columns, schema=POSITION_LOG_SCHEMA)
    return write_table(table, path)


def write_result_rows(rows: Sequence[ResultRow], path: Path) -> Path:
    """Persist averaged scenario results in the given order."""
    table = pa.Table.from_pylist([row.to_record() for row in rows], schema=RESULT_SCHEMA)
    return write_table(table, path)
