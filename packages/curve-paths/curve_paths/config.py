"""View configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

Color = tuple[int, int, int]


def dp_to_px(dp: float, density: float) -> float:
    """Convert density-independent units to device pixels."""
    if density <= 0:
        raise ValueError("density must be positive")
    return dp * density


@dataclass(frozen=True)
class ViewConfig:
    """Immutable configuration for a curve view.

    Attributes:
        marker_radius_dp: Base marker radius in density-independent units.
        touch_slop_dp: Movement below this distance on both axes is jitter.
        density: Device pixels per density-independent unit.
        fade_duration: Marker animation length in milliseconds.
        decelerate_factor: Ease-out strength of the marker animation.
        alpha_from: Marker opacity when the animation starts.
        alpha_to: Marker opacity when the animation ends.
        radius_from: Radius multiplier when the animation starts.
        radius_to: Radius multiplier when the animation ends.
        fill_color: Marker colour.
        curve_color: Curve colour.
        curve_alpha: Curve opacity.
        curve_width: Curve stroke width in device pixels.
    """

    marker_radius_dp: float = 10.0
    touch_slop_dp: float = 8.0
    density: float = 1.0
    fade_duration: int = 500
    decelerate_factor: float = 2.0
    alpha_from: int = 255
    alpha_to: int = 0
    radius_from: float = 0.0
    radius_to: float = 2.0
    fill_color: Color = (128, 128, 128)
    curve_color: Color = (128, 128, 128)
    curve_alpha: int = 128
    curve_width: int = 1

    def __post_init__(self) -> None:
        if self.density <= 0:
            raise ValueError("density must be positive")
        if self.fade_duration <= 0:
            raise ValueError("fade_duration must be positive")

    @property
    def marker_radius_px(self) -> float:
        return dp_to_px(self.marker_radius_dp, self.density)

    @property
    def touch_slop_px(self) -> int:
        return int(dp_to_px(self.touch_slop_dp, self.density) + 0.5)
