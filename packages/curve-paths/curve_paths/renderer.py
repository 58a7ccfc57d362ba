"""CurveRenderer - markers plus the highest-degree Bezier the points allow."""
from __future__ import annotations

from enum import Enum

from curve_paths.paint import Path, Surface
from curve_paths.registry import PointRegistry
from curve_paths.state import CanvasState
from curve_paths.types import MAX_POINTS


class CurveKind(Enum):
    NONE = 0
    LINE = 1
    QUADRATIC = 2
    CUBIC = 3


def select_curve(registry: PointRegistry) -> CurveKind:
    """Pick the curve degree from slot presence, highest first."""
    if registry.has(0, 1, 2, 3):
        return CurveKind.CUBIC
    if registry.has(0, 1, 2):
        return CurveKind.QUADRATIC
    if registry.has(0, 1):
        return CurveKind.LINE
    return CurveKind.NONE


def build_path(path: Path, registry: PointRegistry, kind: CurveKind) -> None:
    """Rewind path and record the ops for kind."""
    path.rewind()
    if kind is CurveKind.NONE:
        return

    p0 = registry.get(0)
    p1 = registry.get(1)
    path.move_to(p0)
    if kind is CurveKind.CUBIC:
        path.cubic_to(p1, registry.get(2), registry.get(3))
    elif kind is CurveKind.QUADRATIC:
        path.quad_to(p1, registry.get(2))
    else:
        path.line_to(p1)


class CurveRenderer:
    """Draws point markers, then the curve through the placed points."""

    def draw(self, surface: Surface, state: CanvasState) -> CurveKind:
        self.draw_markers(surface, state)
        return self.draw_curve(surface, state)

    def draw_markers(self, surface: Surface, state: CanvasState) -> None:
        for slot in range(MAX_POINTS):
            p = state.registry.get(slot)
            if p is not None:
                surface.draw_circle(p, state.animated_radius[slot], state.fill_paint)

    def draw_curve(self, surface: Surface, state: CanvasState) -> CurveKind:
        kind = select_curve(state.registry)
        if kind is CurveKind.NONE:
            return kind
        build_path(state.path, state.registry, kind)
        surface.draw_path(state.path, state.curve_paint)
        return kind
