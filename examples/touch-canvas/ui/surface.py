"""pygame adapter for the curve_paths Surface protocol."""
from __future__ import annotations

import pygame

from curve_paths import STROKE, Paint, Path, Point, flatten

from ui.constants import CURVE_SAMPLES


class PygameSurface:
    """Draws markers and paths onto a pygame surface, honoring paint alpha."""

    def __init__(self, target: pygame.Surface) -> None:
        self._target = target
        self._overlay = pygame.Surface(target.get_size(), pygame.SRCALPHA)

    def begin(self) -> None:
        self._overlay.fill((0, 0, 0, 0))

    def finish(self) -> None:
        self._target.blit(self._overlay, (0, 0))

    def draw_circle(self, center: Point, radius: float, paint: Paint) -> None:
        r = int(radius)
        if r <= 0 or paint.alpha <= 0:
            return
        width = paint.width if paint.style == STROKE else 0
        pygame.draw.circle(
            self._overlay, (*paint.color, paint.alpha), (center.x, center.y), r, width
        )

    def draw_path(self, path: Path, paint: Paint) -> None:
        points = flatten(path, CURVE_SAMPLES)
        if len(points) < 2:
            return
        pygame.draw.lines(
            self._overlay, (*paint.color, paint.alpha), False, points, paint.width
        )
