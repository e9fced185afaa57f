"""Experiments layer: concurrent batch evaluation of coverage scenarios."""

from mobile_coverage.experiments.batch import run_batch, run_scenario

__all__ = [
    "run_batch",
    "run_scenario",
]
