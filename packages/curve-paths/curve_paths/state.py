"""CanvasState - everything one frame reads, kept in one place."""
from __future__ import annotations

from dataclasses import dataclass, field

from curve_paths.config import ViewConfig
from curve_paths.paint import FILL, STROKE, Paint, Path
from curve_paths.registry import PointRegistry
from curve_paths.types import MAX_POINTS


@dataclass
class CanvasState:
    """Points, animated marker radii and paints for one drawing surface.

    The renderer reads registry and animated_radius together per frame;
    only the fade animation writes animated_radius.
    """

    registry: PointRegistry = field(default_factory=PointRegistry)
    animated_radius: list[float] = field(default_factory=lambda: [0.0] * MAX_POINTS)
    fill_paint: Paint = field(default_factory=lambda: Paint((128, 128, 128), 255, FILL))
    curve_paint: Paint = field(default_factory=lambda: Paint((128, 128, 128), 128, STROKE))
    path: Path = field(default_factory=Path)

    @classmethod
    def from_config(cls, config: ViewConfig) -> CanvasState:
        return cls(
            fill_paint=Paint(config.fill_color, config.alpha_from, FILL),
            curve_paint=Paint(
                config.curve_color, config.curve_alpha, STROKE, config.curve_width
            ),
        )

    def reset_radii(self) -> None:
        for i in range(MAX_POINTS):
            self.animated_radius[i] = 0.0
