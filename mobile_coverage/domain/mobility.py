"""Stochastic per-step mobility models and the model factory.

Every model receives the trial's shared ``Random`` handle; the order in which
models draw from it is part of the seeded-reproducibility contract, so draws
happen exactly where documented on each class.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from enum import Enum
from random import Random
from typing import TYPE_CHECKING

from mobile_coverage.config.constants import FULL_CIRCLE_DEGREES
from mobile_coverage.domain.geometry import Area

if TYPE_CHECKING:
    from mobile_coverage.domain.agent import Agent


class ModelKind(Enum):
    """Supported mobility behaviors, keyed by their scenario-file names."""

    RANDOM_WAYPOINT = "RandomWaypoint"
    RANDOM_DIRECTION = "RandomDirection"
    ENTERPRISE = "Enterprise"


class MobilityModel(ABC):
    """Base class for per-agent movement rules bounded by an area."""

    def __init__(self, area: Area, rng: Random) -> None:
        self.area = area
        self.rng = rng

    @abstractmethod
    def step(self, agent: Agent) -> None:
        """Update ``agent.position`` for one time step."""


def _uniform_speed(rng: Random, min_speed: float, max_speed: float) -> float:
    return min_speed + rng.random() * (max_speed - min_speed)


class RandomWaypoint(MobilityModel):
    """Travel to uniformly random targets, pausing ``wait_time`` steps between trips.

    A trip is planned on a step with no movement: target x, target y, then
    speed are drawn, and the per-step delta is fixed for the whole trip.
    """

    def __init__(
        self,
        area: Area,
        min_speed: float,
        max_speed: float,
        wait_time: int,
        rng: Random,
    ) -> None:
        super().__init__(area, rng)
        self.min_speed = min_speed
        self.max_speed = max_speed
        self.wait_time = wait_time
        self.remaining_steps = 0
        self.remaining_wait = 0
        self.delta_x = 0.0
        self.delta_y = 0.0

    def step(self, agent: Agent) -> None:
        position = agent.position
        if self.remaining_steps > 0:
            self.remaining_steps -= 1
            position.x += self.delta_x
            position.y += self.delta_y
            return
        if self.remaining_wait > 0:
            self.remaining_wait -= 1
            return

        target_x = self.rng.random() * self.area.width
        target_y = self.rng.random() * self.area.height
        speed = _uniform_speed(self.rng, self.min_speed, self.max_speed)
        dx = target_x - position.x
        dy = target_y - position.y
        distance = math.hypot(dx, dy)
        if distance == 0:
            return

        # A trip shorter than one step still counts as an arrival and starts the pause.
        self.remaining_wait = self.wait_time
        step_count = math.floor(distance / speed) if speed > 0 else 0
        if step_count <= 0:
            self.remaining_steps = 0
            self.delta_x = 0.0
            self.delta_y = 0.0
            return

        self.remaining_steps = step_count
        self.delta_x = dx / step_count
        self.delta_y = dy / step_count


class RandomDirection(MobilityModel):
    """Move along a fixed heading until the next step would leave the area.

    On a boundary hit the agent is clamped to the area, pauses for a random
    number of steps in ``[0, max_wait_time]`` and leaves on a fresh heading
    and speed. Initial heading and speed are drawn at construction.
    """

    def __init__(
        self,
        area: Area,
        min_speed: float,
        max_speed: float,
        max_wait_time: int,
        rng: Random,
    ) -> None:
        super().__init__(area, rng)
        self.min_speed = min_speed
        self.max_speed = max_speed
        self.max_wait_time = max_wait_time
        self.heading = rng.random() * FULL_CIRCLE_DEGREES
        self.speed = _uniform_speed(rng, min_speed, max_speed)
        self.remaining_wait = 0

    def step(self, agent: Agent) -> None:
        if self.remaining_wait > 0:
            self.remaining_wait -= 1
            return

        position = agent.position
        radians = math.radians(self.heading)
        next_x = position.x + self.speed * math.cos(radians)
        next_y = position.y + self.speed * math.sin(radians)
        if self.area.contains(next_x, next_y):
            position.x = next_x
            position.y = next_y
            return
        self._handle_boundary_hit(agent)

    def _handle_boundary_hit(self, agent: Agent) -> None:
        position = agent.position
        position.x = min(max(position.x, 0.0), float(self.area.width))
        position.y = min(max(position.y, 0.0), float(self.area.height))
        self.remaining_wait = self.rng.randint(0, self.max_wait_time)
        self.heading = self.rng.random() * FULL_CIRCLE_DEGREES
        self.speed = _uniform_speed(self.rng, self.min_speed, self.max_speed)


def create_mobility_model(
    kind: str | ModelKind,
    area: Area,
    min_speed: float,
    max_speed: float,
    wait_time: int,
    rng: Random,
) -> MobilityModel:
    """Build a fresh model instance for one agent.

    Raises :exc:`ValueError` when ``kind`` names no supported model.
    """
    try:
        model_kind = ModelKind(kind)
    except ValueError as exc:
        valid = ", ".join(k.value for k in ModelKind)
        raise ValueError(f"unsupported mobility model {kind!r}; must be one of {valid}") from exc

    if model_kind == ModelKind.RANDOM_WAYPOINT:
        return RandomWaypoint(area, min_speed, max_speed, wait_time, rng)
    if model_kind == ModelKind.RANDOM_DIRECTION:
        return RandomDirection(area, min_speed, max_speed, wait_time, rng)

    from mobile_coverage.domain.enterprise import Enterprise

    return Enterprise(area, min_speed, max_speed, wait_time, rng)
