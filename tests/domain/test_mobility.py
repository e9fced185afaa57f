"""Tests for mobile_coverage.domain.mobility module."""

from __future__ import annotations

from random import Random

import pytest

from mobile_coverage.domain.agent import Agent
from mobile_coverage.domain.enterprise import Enterprise
from mobile_coverage.domain.geometry import Area, Point
from mobile_coverage.domain.mobility import (
    ModelKind,
    RandomDirection,
    RandomWaypoint,
    create_mobility_model,
)


class ScriptedRandom(Random):
    """Random whose ``random()`` replays fixed values; integer draws stay seeded."""

    def __init__(self, values: list[float]) -> None:
        super().__init__(0)
        self.values = list(values)

    def random(self) -> float:
        return self.values.pop(0)

    def getrandbits(self, k: int) -> int:
        return super().getrandbits(k)


def _agent(model: RandomWaypoint | RandomDirection, x: float, y: float) -> Agent:
    return Agent(agent_id=0, position=Point(x, y), mobility=model)


class TestRandomWaypoint:
    def test_planning_step_does_not_move(self) -> None:
        rng = ScriptedRandom([0.375, 0.5, 0.0])
        model = RandomWaypoint(Area(80, 80), 5.0, 10.0, 0, rng)
        agent = _agent(model, 0.0, 0.0)
        agent.move()
        assert (agent.position.x, agent.position.y) == (0.0, 0.0)
        assert model.remaining_steps == 10
        assert (model.delta_x, model.delta_y) == (3.0, 4.0)

    def test_trip_arrives_at_target(self) -> None:
        rng = ScriptedRandom([0.375, 0.5, 0.0])
        model = RandomWaypoint(Area(80, 80), 5.0, 10.0, 0, rng)
        agent = _agent(model, 0.0, 0.0)
        for _ in range(11):
            agent.move()
        assert agent.position.x == pytest.approx(30.0)
        assert agent.position.y == pytest.approx(40.0)
        assert model.remaining_steps == 0

    def test_zero_wait_starts_next_trip_immediately(self) -> None:
        rng = ScriptedRandom([0.375, 0.5, 0.0, 0.875, 0.5, 0.0])
        model = RandomWaypoint(Area(80, 80), 5.0, 10.0, 0, rng)
        agent = _agent(model, 0.0, 0.0)
        for _ in range(11):
            agent.move()
        agent.move()
        assert model.remaining_steps == 8
        assert model.delta_x == pytest.approx(5.0)
        assert model.delta_y == pytest.approx(0.0)

    def test_wait_time_idles_after_arrival(self) -> None:
        rng = ScriptedRandom([0.375, 0.5, 0.0, 0.875, 0.5, 0.0])
        model = RandomWaypoint(Area(80, 80), 5.0, 10.0, 2, rng)
        agent = _agent(model, 0.0, 0.0)
        for _ in range(11):
            agent.move()
        agent.move()
        agent.move()
        assert model.remaining_steps == 0
        assert model.remaining_wait == 0
        assert rng.values == [0.875, 0.5, 0.0]
        agent.move()
        assert model.remaining_steps > 0

    def test_target_at_current_position_is_noop(self) -> None:
        rng = ScriptedRandom([0.5, 0.5, 0.0])
        model = RandomWaypoint(Area(100, 100), 1.0, 1.0, 3, rng)
        agent = _agent(model, 50.0, 50.0)
        agent.move()
        assert (agent.position.x, agent.position.y) == (50.0, 50.0)
        assert model.remaining_steps == 0
        assert model.remaining_wait == 0

    def test_sub_step_trip_is_noop(self) -> None:
        rng = ScriptedRandom([0.505, 0.5, 0.0])
        model = RandomWaypoint(Area(100, 100), 1.0, 1.0, 0, rng)
        agent = _agent(model, 50.0, 50.0)
        agent.move()
        assert (agent.position.x, agent.position.y) == (50.0, 50.0)
        assert model.remaining_steps == 0

    def test_sub_step_trip_starts_wait(self) -> None:
        rng = ScriptedRandom([0.505, 0.5, 0.0])
        model = RandomWaypoint(Area(100, 100), 1.0, 1.0, 3, rng)
        agent = _agent(model, 50.0, 50.0)
        agent.move()
        assert (agent.position.x, agent.position.y) == (50.0, 50.0)
        assert model.remaining_wait == 3
        for _ in range(3):
            agent.move()
        # The pause consumes no draws.
        assert rng.values == []
        assert model.remaining_wait == 0

    def test_zero_speed_trip_starts_wait(self) -> None:
        rng = ScriptedRandom([0.25, 0.25, 0.0])
        model = RandomWaypoint(Area(100, 100), 0.0, 0.0, 2, rng)
        agent = _agent(model, 50.0, 50.0)
        agent.move()
        assert model.remaining_steps == 0
        assert model.remaining_wait == 2

    def test_zero_speed_never_moves(self) -> None:
        model = RandomWaypoint(Area(100, 100), 0.0, 0.0, 0, Random(3))
        agent = _agent(model, 10.0, 20.0)
        for _ in range(25):
            agent.move()
        assert (agent.position.x, agent.position.y) == (10.0, 20.0)

    def test_stays_inside_area(self) -> None:
        model = RandomWaypoint(Area(30, 20), 0.5, 4.0, 1, Random(11))
        agent = _agent(model, 15.0, 10.0)
        for _ in range(500):
            agent.move()
            assert -1e-9 <= agent.position.x <= 30 + 1e-9
            assert -1e-9 <= agent.position.y <= 20 + 1e-9


class TestRandomDirection:
    def test_construction_draws_heading_then_speed(self) -> None:
        model = RandomDirection(Area(10, 10), 2.0, 4.0, 0, ScriptedRandom([0.25, 0.5]))
        assert model.heading == pytest.approx(90.0)
        assert model.speed == pytest.approx(3.0)

    def test_boundary_hit_redraws_heading_from_unit_draw(self) -> None:
        rng = ScriptedRandom([0.0, 0.0, 0.75, 0.5])
        model = RandomDirection(Area(10, 10), 1.0, 3.0, 0, rng)
        assert (model.heading, model.speed) == (0.0, 1.0)
        agent = _agent(model, 9.5, 5.0)
        agent.move()
        assert (agent.position.x, agent.position.y) == (9.5, 5.0)
        assert model.heading == pytest.approx(270.0)
        assert model.speed == pytest.approx(2.0)
        assert rng.values == []

    def test_in_bounds_candidate_is_committed(self) -> None:
        model = RandomDirection(Area(100, 100), 1.0, 5.0, 3, Random(0))
        model.heading = 0.0
        model.speed = 2.0
        agent = _agent(model, 10.0, 10.0)
        agent.move()
        assert agent.position.x == pytest.approx(12.0)
        assert agent.position.y == pytest.approx(10.0)
        assert model.heading == 0.0
        assert model.speed == 2.0

    def test_exiting_step_clamps_instead_of_moving(self) -> None:
        model = RandomDirection(Area(100, 100), 1.0, 5.0, 4, Random(5))
        model.heading = 225.0
        model.speed = 3.0
        agent = _agent(model, 0.0, 0.0)
        agent.move()
        assert (agent.position.x, agent.position.y) == (0.0, 0.0)
        assert 0 <= model.remaining_wait <= 4
        assert 0.0 <= model.heading < 360.0
        assert 1.0 <= model.speed <= 5.0

    def test_boundary_hit_keeps_position_inside(self) -> None:
        model = RandomDirection(Area(100, 100), 1.0, 5.0, 0, Random(5))
        model.heading = 0.0
        model.speed = 3.0
        agent = _agent(model, 99.0, 40.0)
        agent.move()
        assert (agent.position.x, agent.position.y) == (99.0, 40.0)

    def test_waiting_skips_movement(self) -> None:
        model = RandomDirection(Area(100, 100), 1.0, 5.0, 3, Random(0))
        model.heading = 0.0
        model.speed = 1.0
        model.remaining_wait = 2
        agent = _agent(model, 10.0, 10.0)
        agent.move()
        agent.move()
        assert agent.position.x == 10.0
        agent.move()
        assert agent.position.x == pytest.approx(11.0)

    def test_stays_inside_area(self) -> None:
        model = RandomDirection(Area(25, 15), 1.0, 6.0, 2, Random(8))
        agent = _agent(model, 12.0, 7.0)
        for _ in range(500):
            agent.move()
            assert 0.0 <= agent.position.x <= 25.0
            assert 0.0 <= agent.position.y <= 15.0


class TestCreateMobilityModel:
    @pytest.mark.parametrize(
        ("kind", "expected"),
        [
            ("RandomWaypoint", RandomWaypoint),
            ("RandomDirection", RandomDirection),
            ("Enterprise", Enterprise),
            (ModelKind.ENTERPRISE, Enterprise),
        ],
    )
    def test_builds_requested_model(self, kind: str | ModelKind, expected: type) -> None:
        model = create_mobility_model(kind, Area(10, 10), 1.0, 2.0, 0, Random(0))
        assert isinstance(model, expected)

    def test_unsupported_kind_raises(self) -> None:
        with pytest.raises(ValueError, match="unsupported mobility model"):
            create_mobility_model("Levy", Area(10, 10), 1.0, 2.0, 0, Random(0))

    def test_each_call_returns_fresh_state(self) -> None:
        rng = Random(0)
        first = create_mobility_model("RandomWaypoint", Area(10, 10), 1.0, 2.0, 0, rng)
        second = create_mobility_model("RandomWaypoint", Area(10, 10), 1.0, 2.0, 0, rng)
        assert first is not second
