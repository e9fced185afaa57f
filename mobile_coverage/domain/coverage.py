"""Coverage accumulator: a ring buffer of boolean grids stamped with a disk mask.

Grids are indexed ``[x, y]``. Each slot of the ring buffer holds the cells
reached during one time value; a slot is cleared lazily, on the first stamp
of a time value that maps onto it, so every agent of a step stamps into the
same slot cumulatively.
"""

from __future__ import annotations

import numpy as np

from mobile_coverage.domain.geometry import Area


def build_disk_mask(radius: int) -> np.ndarray:
    """Square ``(2r+1, 2r+1)`` mask, True where ``(i-r)^2 + (j-r)^2 <= r^2``."""
    if radius < 0:
        raise ValueError("radius must be >= 0")
    offsets = np.arange(-radius, radius + 1)
    return offsets[:, None] ** 2 + offsets[None, :] ** 2 <= radius * radius


class CoverageGrid:
    """Tracks which cells of an area are within ``radius`` of any stamped point."""

    def __init__(self, area: Area, radius: int, history_window_len: int = 1) -> None:
        if history_window_len < 1:
            raise ValueError("history_window_len must be >= 1")
        self.area = area
        self.radius = radius
        self.history_window_len = history_window_len
        self._slots = np.zeros((history_window_len, area.width, area.height), dtype=bool)
        self._disk = build_disk_mask(radius)
        self._disk.flags.writeable = False
        self._last_time_value: int | None = None

    @property
    def disk_mask(self) -> np.ndarray:
        return self._disk

    @property
    def cell_count(self) -> int:
        return self.area.width * self.area.height

    def slot_index(self, time_value: int) -> int:
        return time_value % self.history_window_len

    def stamp(self, cx: int, cy: int, time_value: int) -> None:
        """Mark every in-bounds cell within the disk centred at ``(cx, cy)``."""
        slot = self.slot_index(time_value)
        if time_value != self._last_time_value:
            self._slots[slot].fill(False)
            self._last_time_value = time_value

        r = self.radius
        start_x = max(cx - r, 0)
        start_y = max(cy - r, 0)
        end_x = min(cx + r, self.area.width - 1)
        end_y = min(cy + r, self.area.height - 1)
        if start_x > end_x or start_y > end_y:
            return

        mask_x = start_x - (cx - r)
        mask_y = start_y - (cy - r)
        window = self._disk[
            mask_x : mask_x + end_x - start_x + 1,
            mask_y : mask_y + end_y - start_y + 1,
        ]
        self._slots[slot, start_x : end_x + 1, start_y : end_y + 1] |= window

    def is_covered(self, x: int, y: int, time_value: int) -> bool:
        return bool(self._slots[self.slot_index(time_value), x, y])

    def coverage_at_slot(self, time_value: int) -> float:
        """Percentage of cells covered in the slot ``time_value`` maps to."""
        covered = int(np.count_nonzero(self._slots[self.slot_index(time_value)]))
        return covered / self.cell_count * 100

    def coverage_across_history(self) -> float:
        """Percentage of cells covered in at least one slot of the window."""
        covered = int(np.count_nonzero(self._slots.any(axis=0)))
        return covered / self.cell_count * 100

    def render(self, time_value: int) -> str:
        """Debug view of one slot: one line per x index, ``1`` for covered cells."""
        grid = self._slots[self.slot_index(time_value)]
        return "\n".join(" ".join("1" if cell else "0" for cell in row) for row in grid)
