"""Arrow schemas for coverage simulation artifacts.

Result rows and position traces are persisted against these column
contracts so every writer and reader agrees on names and types.
"""

from __future__ import annotations

import pyarrow as pa

# ---------------------------------------------------------------------------
# Per-scenario results
# ---------------------------------------------------------------------------

RESULT_SCHEMA = pa.schema(
    [
        ("model_kind", pa.string()),
        ("final_seed", pa.int64()),
        ("agent_count", pa.int64()),
        ("comm_radius", pa.float64()),
        ("log_path", pa.string()),
        ("average_coverage_percent", pa.string()),
    ]
)

# ---------------------------------------------------------------------------
# Position traces
# ---------------------------------------------------------------------------

POSITION_LOG_SCHEMA = pa.schema(
    [
        ("agent_id", pa.int64()),
        ("step", pa.int64()),
        ("x", pa.float64()),
        ("y", pa.float64()),
    ]
)

POSITION_LOG_COLUMNS = [field.name for field in POSITION_LOG_SCHEMA]
