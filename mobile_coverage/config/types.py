"""Configuration dataclasses for coverage scenarios and batch runs.

All frozen dataclasses that parameterise a single scenario, a batch of
scenarios, and the per-scenario result row live here.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path

from mobile_coverage.config.constants import (
    COVERAGE_PERCENT_DECIMALS,
    DEFAULT_MAX_WORKERS,
    DEFAULT_REPETITIONS,
    SEED_STRIDE,
)
from mobile_coverage.domain.geometry import Area

__all__ = [
    "BatchConfig",
    "ResultRow",
    "ScenarioConfig",
]

# ---------------------------------------------------------------------------
# Scenario input
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ScenarioConfig:
    """One parameter set evaluated by the batch runner.

    ``model_kind`` is kept as the raw name handed over by the loader; it is
    resolved when a simulator is built so that an unknown kind fails that
    scenario only. ``history_window_len <= 0`` disables history tracking.
    """

    agent_count: int
    area: Area
    duration: int
    comm_radius: float
    model_kind: str
    min_speed: float
    max_speed: float
    wait_time: int
    seed: int
    history_window_len: int = 0
    log_path: Path | None = None

    def __post_init__(self) -> None:
        if self.agent_count < 0:
            raise ValueError("agent_count must be >= 0")
        if self.area.width < 1 or self.area.height < 1:
            raise ValueError("area dimensions must be >= 1")
        if self.duration < 0:
            raise ValueError("duration must be >= 0")
        if self.comm_radius < 0:
            raise ValueError("comm_radius must be >= 0")
        if self.min_speed < 0:
            raise ValueError("min_speed must be >= 0")
        if self.min_speed > self.max_speed:
            raise ValueError("min_speed must be <= max_speed")
        if self.wait_time < 0:
            raise ValueError("wait_time must be >= 0")

    @property
    def history_enabled(self) -> bool:
        return self.history_window_len > 0

    @property
    def effective_window_len(self) -> int:
        """Number of ring-buffer slots the coverage grid needs."""
        return self.history_window_len if self.history_enabled else 1

    def with_seed(self, seed: int) -> ScenarioConfig:
        return replace(self, seed=seed)


# ---------------------------------------------------------------------------
# Batch settings
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BatchConfig:
    """Runtime knobs for evaluating many scenarios."""

    repetitions: int = DEFAULT_REPETITIONS
    max_workers: int = DEFAULT_MAX_WORKERS
    seed_stride: int = SEED_STRIDE
    use_processes: bool = True

    def __post_init__(self) -> None:
        if self.repetitions < 1:
            raise ValueError("repetitions must be >= 1")
        if self.max_workers < 1:
            raise ValueError("max_workers must be >= 1")


# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ResultRow:
    """Averaged coverage for one scenario after all repetitions."""

    model_kind: str
    final_seed: int
    agent_count: int
    comm_radius: float
    log_path: Path | None
    average_coverage: float

    def to_record(self) -> dict[str, str | int | float]:
        """Render the row as an output record with a fixed-precision percentage."""
        return {
            "model_kind": self.model_kind,
            "final_seed": self.final_seed,
            "agent_count": self.agent_count,
            "comm_radius": self.comm_radius,
            "log_path": "" if self.log_path is None else str(self.log_path),
            "average_coverage_percent": f"{self.average_coverage:.{COVERAGE_PERCENT_DECIMALS}f}",
        }
