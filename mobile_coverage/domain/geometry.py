"""Planar value types shared by agents, mobility models and the coverage grid."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Point:
    """Mutable real-valued position owned by a single agent."""

    x: float
    y: float


@dataclass(frozen=True)
class Area:
    """Rectangular simulation area spanning [0, width] x [0, height]."""

    width: int
    height: int

    @property
    def total_area(self) -> float:
        return float(self.width * self.height)

    def contains(self, x: float, y: float) -> bool:
        """Return True when (x, y) lies inside the closed area bounds."""
        return 0 <= x <= self.width and 0 <= y <= self.height
