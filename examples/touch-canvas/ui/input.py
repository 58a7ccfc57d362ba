"""Translate pygame mouse and finger events into PointerEvents."""
from __future__ import annotations

import pygame

from curve_paths import Action, PointerEvent


class PointerMapper:
    """Tracks active fingers and hands out pointer ids 0, 1, 2, ...

    The mouse is always the primary pointer. pygame synthesizes mouse
    events from touches; those are dropped so a touch is seen once.
    """

    def __init__(self, width: int, height: int) -> None:
        self._width = width
        self._height = height
        self._fingers: dict[int, int] = {}

    def translate(self, event: pygame.event.Event) -> PointerEvent | None:
        if event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP, pygame.MOUSEMOTION):
            if getattr(event, "touch", False):
                return None
            return self._from_mouse(event)
        if event.type in (pygame.FINGERDOWN, pygame.FINGERUP, pygame.FINGERMOTION):
            return self._from_finger(event)
        return None

    def _from_mouse(self, event: pygame.event.Event) -> PointerEvent | None:
        x, y = event.pos
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            return PointerEvent(Action.DOWN, x, y)
        if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            return PointerEvent(Action.UP, x, y)
        if event.type == pygame.MOUSEMOTION and event.buttons[0]:
            return PointerEvent(Action.MOVE, x, y)
        return None

    def _from_finger(self, event: pygame.event.Event) -> PointerEvent | None:
        x = event.x * self._width
        y = event.y * self._height

        if event.type == pygame.FINGERDOWN:
            pointer_id = self._next_free_id()
            self._fingers[event.finger_id] = pointer_id
            action = Action.DOWN if len(self._fingers) == 1 else Action.POINTER_DOWN
            return PointerEvent(action, x, y, pointer_id, pointer_id)

        pointer_id = self._fingers.get(event.finger_id)
        if pointer_id is None:
            return None

        if event.type == pygame.FINGERUP:
            del self._fingers[event.finger_id]
            action = Action.UP if not self._fingers else Action.POINTER_UP
            return PointerEvent(action, x, y, pointer_id, pointer_id)

        return PointerEvent(Action.MOVE, x, y, pointer_id, 0)

    def cancel_all(self) -> PointerEvent | None:
        """Drop every tracked finger, e.g. when the window loses focus."""
        if not self._fingers:
            return None
        self._fingers.clear()
        return PointerEvent(Action.CANCEL, 0, 0)

    def _next_free_id(self) -> int:
        used = set(self._fingers.values())
        pointer_id = 0
        while pointer_id in used:
            pointer_id += 1
        return pointer_id
