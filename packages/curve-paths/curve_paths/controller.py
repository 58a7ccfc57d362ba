"""TouchController - turns pointer events into registry mutations."""
from __future__ import annotations

import logging
from typing import Callable

from curve_paths.fade import FadeAnimation, Invalidate
from curve_paths.registry import PointRegistry
from curve_paths.types import Action, PointerEvent

logger = logging.getLogger(__name__)

Fallback = Callable[[PointerEvent], bool]


def _not_consumed(event: PointerEvent) -> bool:
    return False


class TouchController:
    """Pointer-event state machine.

    DOWN always registers a new point and restarts the fade. MOVE updates a
    point only when it clears the touch slop on at least one axis; smaller
    moves are jitter. Every other action is accepted but changes nothing and
    is handed to the fallback, as is a jittery MOVE.
    """

    def __init__(
        self,
        registry: PointRegistry,
        fade: FadeAnimation,
        touch_slop: int,
        invalidate: Invalidate | None = None,
        fallback: Fallback | None = None,
    ) -> None:
        self._registry = registry
        self._fade = fade
        self._touch_slop = touch_slop
        self._invalidate = invalidate
        self._fallback = fallback if fallback is not None else _not_consumed

    @property
    def touch_slop(self) -> int:
        return self._touch_slop

    def handle(self, event: PointerEvent) -> bool:
        """Return True when the event was consumed."""
        if event.action is Action.DOWN:
            self.on_down(event)
            return True
        if event.action is Action.MOVE:
            if self.on_move(event):
                return True
        elif event.action in (
            Action.POINTER_DOWN,
            Action.POINTER_UP,
            Action.UP,
            Action.CANCEL,
        ):
            # No state change yet for these; kept as distinct cases.
            pass
        return self._fallback(event)

    def on_down(self, event: PointerEvent) -> None:
        self._fade.cancel()
        self._registry.register_next(event.point)
        self._fade.restart()
        self.redraw()

    def on_move(self, event: PointerEvent) -> bool:
        prev = self._registry.current_point()
        if prev is None:
            return False

        p = event.point
        if abs(prev.x - p.x) <= self._touch_slop and abs(prev.y - p.y) <= self._touch_slop:
            logger.debug("jitter ignored at %s", p)
            return False

        logger.debug(
            "move pointer_id=%d action_index=%d to %s",
            event.pointer_id,
            event.action_index,
            p,
        )
        self._registry.update_slot(event.pointer_id, p)
        self.redraw()
        return True

    def redraw(self) -> None:
        if self._invalidate is not None:
            self._invalidate(None)
