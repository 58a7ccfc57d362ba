"""PointRegistry - fixed-capacity, wrap-around buffer of touch points."""
from __future__ import annotations

import logging

from curve_paths.types import MAX_POINTS, NO_SLOT, PRIMARY_POINTER, Point

logger = logging.getLogger(__name__)


class PointRegistry:
    """Maps slot indices 0..3 to optional points plus a current-slot cursor.

    Slots fill in increasing order. When the cursor wraps back to 0 every
    slot is cleared before the new point lands, starting a new session.
    """

    def __init__(self) -> None:
        self._slots: list[Point | None] = [None] * MAX_POINTS
        self._current: int = NO_SLOT

    @property
    def current_slot(self) -> int:
        return self._current

    def register_next(self, p: Point) -> int:
        self._current = (self._current + 1) % MAX_POINTS
        if self._current == 0:
            self.clear_points()
        self._slots[self._current] = p
        logger.debug("registered %s at slot %d", p, self._current)
        return self._current

    def update_slot(self, slot: int, p: Point) -> None:
        """Overwrite a slot in place.

        The primary pointer id redirects to the current slot; any other id
        outside 1..3 is ignored.
        """
        if slot == PRIMARY_POINTER:
            if self._current == NO_SLOT:
                return
            self._slots[self._current] = p
        elif 0 < slot < MAX_POINTS:
            self._slots[slot] = p

    def get(self, slot: int) -> Point | None:
        if not 0 <= slot < MAX_POINTS:
            return None
        return self._slots[slot]

    def current_point(self) -> Point | None:
        return self.get(self._current)

    def has(self, *slots: int) -> bool:
        return all(self.get(s) is not None for s in slots)

    def filled_count(self) -> int:
        """Number of leading present slots, checked 0, 1, 2, 3 in order."""
        count = 0
        for p in self._slots:
            if p is None:
                break
            count += 1
        return count

    def points(self) -> list[tuple[int, Point]]:
        return [(i, p) for i, p in enumerate(self._slots) if p is not None]

    def snapshot(self) -> dict[int, Point]:
        return dict(self.points())

    def clear_points(self) -> None:
        for i in range(MAX_POINTS):
            self._slots[i] = None

    def clear(self) -> None:
        """Drop all points and unset the cursor."""
        self.clear_points()
        self._current = NO_SLOT

    def __len__(self) -> int:
        return sum(1 for p in self._slots if p is not None)
