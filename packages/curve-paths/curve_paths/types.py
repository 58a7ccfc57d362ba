"""Shared types and constants for curve-paths."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

MAX_POINTS = 4
NO_SLOT = -1
PRIMARY_POINTER = 0


@dataclass(frozen=True, slots=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True, slots=True)
class Rect:
    left: int
    top: int
    right: int
    bottom: int

    @classmethod
    def around(cls, center: Point, half: int) -> Rect:
        return cls(center.x - half, center.y - half, center.x + half, center.y + half)


class Action(Enum):
    DOWN = "down"
    MOVE = "move"
    POINTER_DOWN = "pointer_down"
    POINTER_UP = "pointer_up"
    UP = "up"
    CANCEL = "cancel"


@dataclass(frozen=True)
class PointerEvent:
    """One pointer notification from the input source.

    pointer_id is 0 for the first finger and 1+ for additional fingers;
    action_index is the index of the pointer that changed.
    """

    action: Action
    x: float
    y: float
    pointer_id: int = PRIMARY_POINTER
    action_index: int = 0

    @property
    def point(self) -> Point:
        return Point(int(self.x), int(self.y))
