"""Centralized domain constants for coverage simulations.

All magic numbers that appear across multiple modules are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

DEFAULT_REPETITIONS = 1_000
"""Number of repetitions averaged per scenario."""

DEFAULT_MAX_WORKERS = 12
"""Upper bound on scenarios evaluated concurrently."""

SEED_STRIDE = 10
"""Seed increment applied between consecutive repetitions of a scenario."""

FULL_CIRCLE_DEGREES = 360
"""Headings are drawn from [0, FULL_CIRCLE_DEGREES)."""

REVERSE_HEADING_DEGREES = 180
"""Heading offset applied on a boundary reflection."""

ENTERPRISE_UPDATE_INTERVAL = 5
"""Steps between speed/direction re-randomizations in the Enterprise model."""

KMH_PER_MPS = 3.6
"""Conversion factor between m/s and km/h."""

SPEED_CHANGE_SUPPORT_MAX = 80
"""Largest speed change (km/h) the Enterprise speed distribution can return."""

DIRECTION_CHANGE_SUPPORT_MAX = 180
"""Largest direction change (degrees) the Enterprise direction distribution can return."""

COVERAGE_PERCENT_DECIMALS = 2
"""Decimal places kept in reported average coverage."""
