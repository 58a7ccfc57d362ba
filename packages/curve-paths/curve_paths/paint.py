"""Path recording and paint styles handed to a drawing surface."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from curve_paths.types import Point

FILL = "fill"
STROKE = "stroke"

PathOp = tuple[str, tuple[Point, ...]]


@dataclass
class Paint:
    color: tuple[int, int, int]
    alpha: int = 255
    style: str = FILL
    width: int = 1


@dataclass
class Path:
    """Recorded sequence of path operations.

    Ops are ("move", (p,)), ("line", (p,)), ("quad", (ctrl, end)) and
    ("cubic", (ctrl1, ctrl2, end)).
    """

    ops: list[PathOp] = field(default_factory=list)

    def rewind(self) -> None:
        self.ops.clear()

    def move_to(self, p: Point) -> None:
        self.ops.append(("move", (p,)))

    def line_to(self, p: Point) -> None:
        self.ops.append(("line", (p,)))

    def quad_to(self, ctrl: Point, end: Point) -> None:
        self.ops.append(("quad", (ctrl, end)))

    def cubic_to(self, ctrl1: Point, ctrl2: Point, end: Point) -> None:
        self.ops.append(("cubic", (ctrl1, ctrl2, end)))

    def is_empty(self) -> bool:
        return not self.ops


class Surface(Protocol):
    def draw_circle(self, center: Point, radius: float, paint: Paint) -> None: ...
    def draw_path(self, path: Path, paint: Paint) -> None: ...


def _quad(p0: Point, p1: Point, p2: Point, t: float) -> tuple[float, float]:
    u = 1 - t
    x = u * u * p0.x + 2 * u * t * p1.x + t * t * p2.x
    y = u * u * p0.y + 2 * u * t * p1.y + t * t * p2.y
    return (x, y)


def _cubic(p0: Point, p1: Point, p2: Point, p3: Point, t: float) -> tuple[float, float]:
    u = 1 - t
    a, b, c, d = u * u * u, 3 * u * u * t, 3 * u * t * t, t * t * t
    x = a * p0.x + b * p1.x + c * p2.x + d * p3.x
    y = a * p0.y + b * p1.y + c * p2.y + d * p3.y
    return (x, y)


def flatten(path: Path, samples: int = 32) -> list[tuple[float, float]]:
    """Approximate a single-contour path as a polyline."""
    points: list[tuple[float, float]] = []
    pen: Point | None = None
    for kind, args in path.ops:
        if kind == "move":
            pen = args[0]
            points = [(pen.x, pen.y)]
            continue
        if pen is None:
            continue
        if kind == "line":
            points.append((args[0].x, args[0].y))
        elif kind == "quad":
            points.extend(_quad(pen, *args, i / samples) for i in range(1, samples + 1))
        elif kind == "cubic":
            points.extend(_cubic(pen, *args, i / samples) for i in range(1, samples + 1))
        pen = args[-1]
    return points
