"""Enterprise mobility: trace-driven speed and heading changes.

Every ``ENTERPRISE_UPDATE_INTERVAL`` steps an agent proposes a speed change
and a heading change, each drawn from a discretised exponential distribution
fitted per speed class (km/h). The sign of each change is remembered until a
zero-magnitude draw resets it, which produces sustained acceleration and
turning runs instead of jitter.
"""

from __future__ import annotations

import bisect
import itertools
import math
from random import Random
from typing import TYPE_CHECKING

from mobile_coverage.config.constants import (
    DIRECTION_CHANGE_SUPPORT_MAX,
    ENTERPRISE_UPDATE_INTERVAL,
    FULL_CIRCLE_DEGREES,
    KMH_PER_MPS,
    REVERSE_HEADING_DEGREES,
    SPEED_CHANGE_SUPPORT_MAX,
)
from mobile_coverage.domain.geometry import Area
from mobile_coverage.domain.mobility import MobilityModel

if TYPE_CHECKING:
    from mobile_coverage.domain.agent import Agent


class ExponentialClass:
    """Discretised ``a * exp(-b * x)`` over an integer support for one speed band.

    The band covers ``[min_kmh, max_kmh)``.
    """

    def __init__(self, min_kmh: int, max_kmh: int, support: range, a: float, b: float) -> None:
        self.min_kmh = min_kmh
        self.max_kmh = max_kmh
        self.support = tuple(support)
        self.a = a
        self.b = b
        weights = [a * math.exp(-b * x) for x in self.support]
        self.normaliser = sum(weights)
        self.probabilities = tuple(w / self.normaliser for w in weights)
        self._cumulative = tuple(itertools.accumulate(self.probabilities))

    def covers(self, kmh: int) -> bool:
        return self.min_kmh <= kmh < self.max_kmh

    def sample(self, rng: Random) -> int:
        """Inverse-CDF draw; falls back to the last support value on rounding shortfall."""
        draw = rng.random()
        index = bisect.bisect_left(self._cumulative, draw)
        if index >= len(self.support):
            return self.support[-1]
        return self.support[index]


def _speed_change_classes() -> tuple[ExponentialClass, ...]:
    support = range(SPEED_CHANGE_SUPPORT_MAX + 1)
    return (
        ExponentialClass(0, 20, support, 0.7186, 0.0999),
        ExponentialClass(20, 40, support, 0.7443, 0.0999),
        ExponentialClass(40, 60, support, 0.5538, 0.0896),
        ExponentialClass(60, 100, support, 0.5937, 0.0999),
    )


def _direction_change_classes() -> tuple[ExponentialClass, ...]:
    support = range(DIRECTION_CHANGE_SUPPORT_MAX + 1)
    return (
        ExponentialClass(0, 20, support, 0.3679, 0.0647),
        ExponentialClass(20, 40, support, 0.5312, 0.0982),
        ExponentialClass(40, 60, support, 0.7148, 0.0999),
        ExponentialClass(60, 100, support, 0.7830, 0.0999),
    )


# Read-only after import; shared by every Enterprise instance.
SPEED_CHANGE_CLASSES = _speed_change_classes()
DIRECTION_CHANGE_CLASSES = _direction_change_classes()


def mps_to_kmh(speed: int) -> int:
    return int(speed * KMH_PER_MPS)


def kmh_to_mps(speed: int) -> int:
    return int(speed / KMH_PER_MPS)


def select_class(kmh: int, classes: tuple[ExponentialClass, ...]) -> ExponentialClass:
    """Return the band containing ``kmh``; raise :exc:`ValueError` if none does."""
    for params in classes:
        if params.covers(kmh):
            return params
    raise ValueError(f"no speed class covers {kmh} km/h")


def _resolve_sign(magnitude: int, sign: int, rng: Random) -> int:
    if magnitude == 0:
        return 0
    if sign == 0:
        return 1 if rng.random() < 0.5 else -1
    return sign


class Enterprise(MobilityModel):
    """Empirical vehicle mobility with reflecting boundaries.

    Speed and heading are integers. The first call draws the initial speed and
    heading; afterwards the agent moves by its cached velocity each step and
    re-randomizes every ``ENTERPRISE_UPDATE_INTERVAL`` steps. ``wait_time`` is
    accepted for interface parity and unused. Speeds stay within
    ``[ceil(min_speed), floor(max_speed)]``; bounds that admit no integer speed
    raise :exc:`ValueError`.
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
        self.speed_floor = math.ceil(min_speed)
        self.speed_ceiling = math.floor(max_speed)
        if self.speed_floor > self.speed_ceiling:
            raise ValueError(
                f"no integer speed between min_speed={min_speed} and max_speed={max_speed}"
            )
        self.initialised = False
        self.speed = 0
        self.heading = 0
        self.countdown = 0
        self.velocity_x = 0.0
        self.velocity_y = 0.0
        self.speed_sign = 0
        self.heading_sign = 0

    def step(self, agent: Agent) -> None:
        if not self.initialised:
            draw = int(self.min_speed + (self.max_speed - self.min_speed) * self.rng.random())
            self.speed = self._clamp_speed(draw)
            self.heading = self.rng.randrange(FULL_CIRCLE_DEGREES)
            self._update_velocity()
            self.countdown = ENTERPRISE_UPDATE_INTERVAL
            self.initialised = True

        position = agent.position
        # x is fully resolved first; a reflection there changes the y velocity used below.
        position.x += self.velocity_x
        if position.x < 0:
            position.x = -position.x
            self._reverse()
        if position.x > self.area.width:
            position.x = 2 * self.area.width - position.x
            self._reverse()

        position.y += self.velocity_y
        if position.y < 0:
            position.y = -position.y
            self._reverse()
        if position.y > self.area.height:
            position.y = 2 * self.area.height - position.y
            self._reverse()

        self.countdown -= 1
        if self.countdown == 0:
            self._rerandomize()

    def _clamp_speed(self, speed: int) -> int:
        return min(max(speed, self.speed_floor), self.speed_ceiling)

    def _reverse(self) -> None:
        self.heading = (self.heading + REVERSE_HEADING_DEGREES) % FULL_CIRCLE_DEGREES
        self._update_velocity()

    def _update_velocity(self) -> None:
        radians = math.radians(self.heading)
        self.velocity_x = self.speed * math.cos(radians)
        self.velocity_y = self.speed * math.sin(radians)

    def _rerandomize(self) -> None:
        kmh = mps_to_kmh(self.speed)
        speed_change = kmh_to_mps(select_class(kmh, SPEED_CHANGE_CLASSES).sample(self.rng))
        heading_change = select_class(kmh, DIRECTION_CHANGE_CLASSES).sample(self.rng)
        self.countdown = ENTERPRISE_UPDATE_INTERVAL

        self.speed_sign = _resolve_sign(speed_change, self.speed_sign, self.rng)
        self.speed = self._clamp_speed(self.speed + speed_change * self.speed_sign)

        self.heading_sign = _resolve_sign(heading_change, self.heading_sign, self.rng)
        self.heading += heading_change * self.heading_sign

        self._update_velocity()
