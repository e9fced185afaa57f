"""Simulation engine: single trials and Arrow persistence."""

from mobile_coverage.simulation.engine import Simulator, run_trial
from mobile_coverage.simulation.persistence import (
    write_position_log,
    write_result_rows,
    write_table,
)

__all__ = [
    "Simulator",
    "run_trial",
    "write_position_log",
    "write_result_rows",
    "write_table",
]
