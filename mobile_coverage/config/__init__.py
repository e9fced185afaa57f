"""Configuration layer: constants and typed config dataclasses."""

from mobile_coverage.config.constants import (
    COVERAGE_PERCENT_DECIMALS,
    DEFAULT_MAX_WORKERS,
    DEFAULT_REPETITIONS,
    DIRECTION_CHANGE_SUPPORT_MAX,
    ENTERPRISE_UPDATE_INTERVAL,
    FULL_CIRCLE_DEGREES,
    KMH_PER_MPS,
    REVERSE_HEADING_DEGREES,
    SEED_STRIDE,
    SPEED_CHANGE_SUPPORT_MAX,
)
from mobile_coverage.config.types import BatchConfig, ResultRow, ScenarioConfig

__all__ = [
    "BatchConfig",
    "COVERAGE_PERCENT_DECIMALS",
    "DEFAULT_MAX_WORKERS",
    "DEFAULT_REPETITIONS",
    "DIRECTION_CHANGE_SUPPORT_MAX",
    "ENTERPRISE_UPDATE_INTERVAL",
    "FULL_CIRCLE_DEGREES",
    "KMH_PER_MPS",
    "REVERSE_HEADING_DEGREES",
    "ResultRow",
    "SEED_STRIDE",
    "SPEED_CHANGE_SUPPORT_MAX",
    "ScenarioConfig",
]
