"""curve-paths - Touch-placed Bezier curves with fading point markers."""
from __future__ import annotations

from curve_paths.animator import Animator, FloatValues, IntValues
from curve_paths.clock import FrameClock
from curve_paths.config import ViewConfig, dp_to_px
from curve_paths.controller import TouchController
from curve_paths.easing import decelerate
from curve_paths.fade import FadeAnimation
from curve_paths.paint import FILL, STROKE, Paint, Path, Surface, flatten
from curve_paths.registry import PointRegistry
from curve_paths.renderer import CurveKind, CurveRenderer, build_path, select_curve
from curve_paths.state import CanvasState
from curve_paths.types import (
    MAX_POINTS,
    NO_SLOT,
    PRIMARY_POINTER,
    Action,
    Point,
    PointerEvent,
    Rect,
)
from curve_paths.view import CurveView

__all__ = [
    "Action",
    "Animator",
    "CanvasState",
    "CurveKind",
    "CurveRenderer",
    "CurveView",
    "FILL",
    "FadeAnimation",
    "FloatValues",
    "FrameClock",
    "IntValues",
    "MAX_POINTS",
    "NO_SLOT",
    "PRIMARY_POINTER",
    "Paint",
    "Path",
    "Point",
    "PointRegistry",
    "PointerEvent",
    "Rect",
    "STROKE",
    "Surface",
    "TouchController",
    "ViewConfig",
    "build_path",
    "decelerate",
    "dp_to_px",
    "flatten",
    "select_curve",
]
