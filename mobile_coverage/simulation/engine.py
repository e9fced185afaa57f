"""Single-trial simulation engine: agents roaming an area feeding a coverage grid."""

from __future__ import annotations

import random
import statistics

from mobile_coverage.config.types import ScenarioConfig
from mobile_coverage.domain.agent import Agent
from mobile_coverage.domain.coverage import CoverageGrid
from mobile_coverage.domain.geometry import Point
from mobile_coverage.domain.mobility import create_mobility_model
from mobile_coverage.io.schemas import POSITION_LOG_COLUMNS


class Simulator:
    """One repetition of a scenario.

    Construction seeds a private ``Random`` from ``config.seed`` and builds every
    agent from it: position x, position y, then the agent's mobility model.
    Raises :exc:`ValueError` if ``config.model_kind`` is unsupported.
    """

    def __init__(self, config: ScenarioConfig) -> None:
        self.config = config
        self.grid = CoverageGrid(
            config.area,
            radius=int(config.comm_radius),
            history_window_len=config.effective_window_len,
        )
        self.rng = random.Random(config.seed)
        self.agents: list[Agent] = []
        for agent_id in range(config.agent_count):
            position = Point(
                self.rng.random() * config.area.width,
                self.rng.random() * config.area.height,
            )
            mobility = create_mobility_model(
                config.model_kind,
                config.area,
                config.min_speed,
                config.max_speed,
                config.wait_time,
                self.rng,
            )
            self.agents.append(Agent(agent_id=agent_id, position=position, mobility=mobility))
        self.trace: dict[str, list[int | float]] | None = (
            {name: [] for name in POSITION_LOG_COLUMNS} if config.log_path else None
        )

    def run(self) -> float:
        """Simulate ``config.duration`` steps and return the coverage percentage.

        With history enabled the result is the mean of the windowed coverage
        sampled once the window is full (0.0 if no sample was taken). Without
        history every step stamps the same slot and the result is that slot's
        coverage at the end of the run.
        """
        config = self.config
        history_enabled = config.history_enabled
        window = config.effective_window_len
        samples: list[float] = []

        for step in range(config.duration):
            time_value = step if history_enabled else 0
            for agent in self.agents:
                agent.move()
                self.grid.stamp(int(agent.position.x), int(agent.position.y), time_value)
                if self.trace is not None:
                    self.trace["agent_id"].append(agent.agent_id)
                    self.trace["step"].append(step)
                    self.trace["x"].append(agent.position.x)
                    self.trace["y"].append(agent.position.y)
            if history_enabled and step >= window - 1:
                samples.append(self.grid.coverage_across_history())

        if not history_enabled:
            return self.grid.coverage_across_history()
        if not samples:
            return 0.0
        return statistics.fmean(samples)


def run_trial(config: ScenarioConfig) -> float:
    """Build a fresh simulator for ``config`` and return its coverage."""
    return Simulator(config).run()
