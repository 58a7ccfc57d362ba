"""CurveView - wires state, fade, renderer and touch handling together."""
from __future__ import annotations

from curve_paths.clock import FrameClock
from curve_paths.config import ViewConfig
from curve_paths.controller import Fallback, TouchController
from curve_paths.fade import FadeAnimation, Invalidate
from curve_paths.paint import Surface
from curve_paths.registry import PointRegistry
from curve_paths.renderer import CurveKind, CurveRenderer
from curve_paths.state import CanvasState
from curve_paths.types import PointerEvent


class CurveView:
    """A drawing surface for up to four points and the curve through them.

    invalidate is called with None for a full redraw or with a Rect for a
    partial one. fallback stands in for the host widget's default event
    handling.
    """

    def __init__(
        self,
        config: ViewConfig | None = None,
        invalidate: Invalidate | None = None,
        fallback: Fallback | None = None,
    ) -> None:
        self._config = config if config is not None else ViewConfig()
        self._state = CanvasState.from_config(self._config)
        self._fade = FadeAnimation(self._state, self._config, invalidate)
        self._renderer = CurveRenderer()
        self._controller = TouchController(
            self._state.registry,
            self._fade,
            self._config.touch_slop_px,
            invalidate,
            fallback,
        )

    @property
    def config(self) -> ViewConfig:
        return self._config

    @property
    def state(self) -> CanvasState:
        return self._state

    @property
    def registry(self) -> PointRegistry:
        return self._state.registry

    @property
    def fade(self) -> FadeAnimation:
        return self._fade

    def on_touch_event(self, event: PointerEvent) -> bool:
        return self._controller.handle(event)

    def on_draw(self, surface: Surface) -> CurveKind:
        return self._renderer.draw(surface, self._state)

    def advance(self, dt: float) -> None:
        """Feed dt milliseconds of animation time."""
        self._fade.advance(dt)

    def clear(self) -> None:
        """Stop the fade and forget every point."""
        self._fade.cancel()
        self._state.registry.clear()
        self._controller.redraw()

    def advance_frame(self, clock: FrameClock, elapsed_ms: float) -> int:
        """Run the fixed animation steps due after elapsed_ms of real time."""
        steps = clock.accumulate(elapsed_ms)
        for _ in range(steps):
            self._fade.advance(clock.dt)
        return steps
