"""Tests for curve selection, path building and drawing."""

import pytest

from curve_paths import (
    CanvasState,
    CurveKind,
    CurveRenderer,
    Path,
    Point,
    PointRegistry,
    build_path,
    flatten,
    select_curve,
)


class RecordingSurface:
    """Surface that records draw calls instead of rasterizing."""

    def __init__(self):
        self.circles = []
        self.paths = []

    def draw_circle(self, center, radius, paint):
        self.circles.append((center, radius, paint.alpha))

    def draw_path(self, path, paint):
        self.paths.append(list(path.ops))


def registry_with(*coords):
    reg = PointRegistry()
    for x, y in coords:
        reg.register_next(Point(x, y))
    return reg


class TestSelectCurve:
    """Test degree selection from slot presence."""

    @pytest.mark.parametrize(
        "count,kind",
        [
            (0, CurveKind.NONE),
            (1, CurveKind.NONE),
            (2, CurveKind.LINE),
            (3, CurveKind.QUADRATIC),
            (4, CurveKind.CUBIC),
        ],
    )
    def test_kind_by_count(self, count, kind):
        reg = registry_with(*[(i * 10, i * 5) for i in range(count)])
        assert select_curve(reg) is kind

    def test_kind_ignores_point_values(self):
        """Coincident points still select the highest degree."""
        reg = registry_with((1, 1), (1, 1), (1, 1), (1, 1))
        assert select_curve(reg) is CurveKind.CUBIC

    def test_missing_leading_slot_means_no_curve(self):
        """Slots must be present starting from slot 0."""
        reg = registry_with((0, 0), (1, 1))
        reg.clear_points()
        reg.update_slot(1, Point(5, 5))
        assert select_curve(reg) is CurveKind.NONE


class TestBuildPath:
    """Test path ops per curve kind."""

    def test_line(self):
        reg = registry_with((10, 10), (20, 10))
        path = Path()
        build_path(path, reg, CurveKind.LINE)
        assert path.ops == [("move", (Point(10, 10),)), ("line", (Point(20, 10),))]

    def test_quadratic(self):
        reg = registry_with((10, 10), (20, 10), (30, 30))
        path = Path()
        build_path(path, reg, CurveKind.QUADRATIC)
        assert path.ops == [
            ("move", (Point(10, 10),)),
            ("quad", (Point(20, 10), Point(30, 30))),
        ]

    def test_cubic(self):
        reg = registry_with((10, 10), (20, 10), (30, 30), (40, 10))
        path = Path()
        build_path(path, reg, CurveKind.CUBIC)
        assert path.ops == [
            ("move", (Point(10, 10),)),
            ("cubic", (Point(20, 10), Point(30, 30), Point(40, 10))),
        ]

    def test_rewinds_previous_ops(self):
        """Building twice leaves only one contour."""
        reg = registry_with((10, 10), (20, 10))
        path = Path()
        build_path(path, reg, CurveKind.LINE)
        build_path(path, reg, CurveKind.LINE)
        assert len(path.ops) == 2


class TestCurveRenderer:
    """Test the full draw pass."""

    def test_markers_for_each_present_slot(self):
        state = CanvasState(registry=registry_with((10, 10), (20, 10)))
        state.animated_radius[1] = 12.0
        surface = RecordingSurface()
        CurveRenderer().draw(surface, state)
        assert [(c, r) for c, r, _ in surface.circles] == [
            (Point(10, 10), 0.0),
            (Point(20, 10), 12.0),
        ]

    def test_no_path_drawn_below_two_points(self):
        state = CanvasState(registry=registry_with((10, 10)))
        surface = RecordingSurface()
        kind = CurveRenderer().draw(surface, state)
        assert kind is CurveKind.NONE
        assert surface.paths == []

    def test_draws_cubic_with_four_points(self):
        state = CanvasState(registry=registry_with((10, 10), (20, 10), (30, 30), (40, 10)))
        surface = RecordingSurface()
        kind = CurveRenderer().draw(surface, state)
        assert kind is CurveKind.CUBIC
        assert surface.paths[0][1][0] == "cubic"

    def test_path_not_accumulated_across_frames(self):
        state = CanvasState(registry=registry_with((10, 10), (20, 10), (30, 30)))
        surface = RecordingSurface()
        renderer = CurveRenderer()
        renderer.draw(surface, state)
        renderer.draw(surface, state)
        assert len(surface.paths[1]) == 2


class TestFlatten:
    """Test polyline approximation used by raster surfaces."""

    def test_line(self):
        path = Path()
        path.move_to(Point(0, 0))
        path.line_to(Point(10, 0))
        assert flatten(path) == [(0, 0), (10, 0)]

    def test_quadratic_endpoints_and_midpoint(self):
        path = Path()
        path.move_to(Point(0, 0))
        path.quad_to(Point(10, 20), Point(20, 0))
        points = flatten(path, samples=2)
        assert points == [(0, 0), (10.0, 10.0), (20.0, 0.0)]

    def test_cubic_ends_on_last_point(self):
        path = Path()
        path.move_to(Point(0, 0))
        path.cubic_to(Point(0, 10), Point(10, 10), Point(10, 0))
        points = flatten(path, samples=8)
        assert len(points) == 9
        assert points[-1] == pytest.approx((10, 0))

    def test_empty_path(self):
        assert flatten(Path()) == []
