"""Batch evaluation: many scenarios, each averaged over seeded repetitions.

Scenarios are the unit of concurrency. Each scenario task runs its
repetitions sequentially and owns every piece of state it touches, so tasks
can run in separate processes. Results land in per-submission slots and are
emitted in submission order once every task has joined.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor
from pathlib import Path

from mobile_coverage.config.constants import COVERAGE_PERCENT_DECIMALS
from mobile_coverage.config.types import BatchConfig, ResultRow, ScenarioConfig
from mobile_coverage.simulation.engine import Simulator
from mobile_coverage.simulation.persistence import write_position_log, write_result_rows

logger = logging.getLogger(__name__)


def run_scenario(config: ScenarioConfig, repetitions: int, seed_stride: int) -> ResultRow:
    """Average ``repetitions`` trials of one scenario.

    The seed advances by ``seed_stride`` after each simulator is built; the
    returned row carries the seed after the last advance. When the scenario
    has a log path, the trace of the final repetition is written there.
    """
    if repetitions < 1:
        raise ValueError("repetitions must be >= 1")

    current = config
    total = 0.0
    trace: dict[str, list[int | float]] | None = None
    for _ in range(repetitions):
        simulator = Simulator(current)
        current = current.with_seed(current.seed + seed_stride)
        total += simulator.run()
        trace = simulator.trace

    if config.log_path is not None and trace is not None:
        write_position_log(trace, config.log_path)

    return ResultRow(
        model_kind=config.model_kind,
        final_seed=current.seed,
        agent_count=config.agent_count,
        comm_radius=config.comm_radius,
        log_path=config.log_path,
        average_coverage=round(total / repetitions, COVERAGE_PERCENT_DECIMALS),
    )


def _make_executor(batch_config: BatchConfig) -> Executor:
    if batch_config.use_processes:
        return ProcessPoolExecutor(max_workers=batch_config.max_workers)
    return ThreadPoolExecutor(max_workers=batch_config.max_workers)


def run_batch(
    scenarios: Sequence[ScenarioConfig],
    batch_config: BatchConfig | None = None,
    result_path: Path | None = None,
) -> list[ResultRow]:
    """Evaluate every scenario concurrently and return rows in submission order.

    A scenario that raises is logged with its identifying fields and left out
    of the result; sibling scenarios are unaffected. If ``result_path`` is
    given, the collected rows are written there once after all tasks finish.
    """
    batch_config = batch_config or BatchConfig()
    slots: list[ResultRow | None] = [None] * len(scenarios)

    logger.info(
        "Running %d scenarios x %d repetitions on up to %d workers",
        len(scenarios),
        batch_config.repetitions,
        batch_config.max_workers,
    )
    with _make_executor(batch_config) as executor:
        futures = [
            executor.submit(
                run_scenario, scenario, batch_config.repetitions, batch_config.seed_stride
            )
            for scenario in scenarios
        ]
        for index, (scenario, future) in enumerate(zip(scenarios, futures, strict=True)):
            try:
                slots[index] = future.result()
            except Exception:
                logger.exception(
                    "Simulation failed for %s,%s,%s,%s",
                    scenario.model_kind,
                    scenario.seed,
                    scenario.agent_count,
                    scenario.comm_radius,
                )
                continue
            logger.debug("Scenario %d finished: %s", index, slots[index])

    rows = [row for row in slots if row is not None]
    logger.info("Completed %d of %d scenarios", len(rows), len(scenarios))
    if result_path is not None:
        write_result_rows(rows, result_path)
    return rows
