"""FadeAnimation - grow-and-fade marker for the most recent point."""
from __future__ import annotations

import logging
from typing import Callable

from curve_paths.animator import Animator, FloatValues, IntValues
from curve_paths.config import ViewConfig
from curve_paths.easing import decelerate
from curve_paths.state import CanvasState
from curve_paths.types import NO_SLOT, Rect

logger = logging.getLogger(__name__)

Invalidate = Callable[[Rect | None], None]


class FadeAnimation:
    """Animates the current slot's marker radius and the fill opacity.

    Every stop, whether completion or cancellation, zeroes the radii of all
    four slots, not just the animated one.
    """

    def __init__(
        self,
        state: CanvasState,
        config: ViewConfig,
        invalidate: Invalidate | None = None,
    ) -> None:
        self._state = state
        self._base_radius = config.marker_radius_px
        self._invalidate = invalidate
        self._alpha = IntValues(config.alpha_from, config.alpha_to)
        self._radius = FloatValues(config.radius_from, config.radius_to)
        self._animator = Animator(
            config.fade_duration,
            decelerate(config.decelerate_factor),
            on_tick=self._on_tick,
            on_cancel=self._on_cancel,
            on_end=self._on_end,
        )

    @property
    def animator(self) -> Animator:
        return self._animator

    def is_active(self) -> bool:
        return self._animator.is_active()

    def restart(self) -> None:
        """Cancel any running cycle, then start a fresh one."""
        if self._animator.is_active():
            self._animator.cancel()
        self._animator.start()

    def cancel(self) -> None:
        self._animator.cancel()

    def advance(self, dt: float) -> None:
        self._animator.advance(dt)

    def set_paint_alpha(self, alpha: int) -> None:
        # The radius update in the same tick already requests the redraw.
        self._state.fill_paint.alpha = alpha

    def set_radius(self, multiplier: float) -> None:
        slot = self._state.registry.current_slot
        if slot == NO_SLOT:
            return
        self._state.animated_radius[slot] = self._base_radius * multiplier
        self._invalidate_current()

    def _invalidate_current(self) -> None:
        p = self._state.registry.current_point()
        if p is None or self._invalidate is None:
            return
        self._invalidate(Rect.around(p, int(self._base_radius) * 2))

    def _on_tick(self, fraction: float) -> None:
        self.set_paint_alpha(self._alpha.evaluate(fraction))
        self.set_radius(self._radius.evaluate(fraction))

    def _on_cancel(self) -> None:
        logger.debug("fade cancelled at %.1f ms", self._animator.elapsed)

    def _on_end(self) -> None:
        self._state.reset_radii()
