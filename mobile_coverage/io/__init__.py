"""I/O layer: Arrow schemas for persisted artifacts."""

from mobile_coverage.io.schemas import POSITION_LOG_COLUMNS, POSITION_LOG_SCHEMA, RESULT_SCHEMA

__all__ = [
    "POSITION_LOG_COLUMNS",
    "POSITION_LOG_SCHEMA",
    "RESULT_SCHEMA",
]
