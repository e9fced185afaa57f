"""Domain layer: geometry, agents, mobility models and the coverage grid."""

from mobile_coverage.domain.agent import Agent
from mobile_coverage.domain.coverage import CoverageGrid, build_disk_mask
from mobile_coverage.domain.enterprise import (
    DIRECTION_CHANGE_CLASSES,
    SPEED_CHANGE_CLASSES,
    Enterprise,
    ExponentialClass,
)
from mobile_coverage.domain.geometry import Area, Point
from mobile_coverage.domain.mobility import (
    MobilityModel,
    ModelKind,
    RandomDirection,
    RandomWaypoint,
    create_mobility_model,
)

__all__ = [
    "Agent",
    "Area",
    "CoverageGrid",
    "DIRECTION_CHANGE_CLASSES",
    "Enterprise",
    "ExponentialClass",
    "MobilityModel",
    "ModelKind",
    "Point",
    "RandomDirection",
    "RandomWaypoint",
    "SPEED_CHANGE_CLASSES",
    "build_disk_mask",
    "create_mobility_model",
]
