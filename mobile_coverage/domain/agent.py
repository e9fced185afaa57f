"""Mobile sink entity: an identifier, a position and a private mobility model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mobile_coverage.domain.geometry import Point

if TYPE_CHECKING:
    from mobile_coverage.domain.mobility import MobilityModel


@dataclass
class Agent:
    """A single mobile sink.

    The mobility model instance carries this agent's motion state and must
    not be shared with any other agent.
    """

    agent_id: int
    position: Point
    mobility: MobilityModel

    def move(self) -> None:
        """Advance one time step, mutating ``position`` in place."""
        self.mobility.step(self)
