"""Touch Canvas — place up to four points and watch the Bezier grow.

Exercises curve_paths: PointRegistry, TouchController, FadeAnimation and
CurveRenderer behind a pygame window.

Controls:
  Click / tap   Place the next point (the fifth starts over)
  Drag          Move the most recent point (extra fingers move slots 1-3)
  C             Clear all points
  Esc           Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from curve_paths import CurveView, FrameClock, Rect, ViewConfig

from ui.constants import BG_COLOR, FPS, SCREEN_H, SCREEN_W, STATUS_H
from ui.input import PointerMapper
from ui.status import draw_slot_labels, draw_status_bar
from ui.surface import PygameSurface


class DemoState:
    """Holds the view and redraw bookkeeping."""

    def __init__(self, config: ViewConfig) -> None:
        self.dirty = True
        self.redraws = 0
        self.view = CurveView(config, invalidate=self._invalidate)

    def _invalidate(self, rect: Rect | None) -> None:
        # pygame repaints the whole frame; partial regions only mark dirty.
        self.dirty = True


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--fps", type=int, default=FPS, help="frame rate")
    parser.add_argument(
        "--density", type=float, default=1.0, help="device pixels per dp"
    )
    parser.add_argument("--verbose", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(asctime)s %(name)s %(message)s"
        )

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Touch Canvas — curve_paths demo")
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    frames = FrameClock(args.fps)
    state = DemoState(ViewConfig(density=args.density))
    mapper = PointerMapper(SCREEN_W, SCREEN_H - STATUS_H)
    canvas = PygameSurface(screen)
    running = True

    while running:
        dt = pg_clock.tick(frames.fps)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_c:
                    state.view.clear()

            elif event.type == pygame.WINDOWFOCUSLOST:
                cancel = mapper.cancel_all()
                if cancel is not None:
                    state.view.on_touch_event(cancel)

            else:
                pointer = mapper.translate(event)
                if pointer is not None and pointer.y < SCREEN_H - STATUS_H:
                    state.view.on_touch_event(pointer)

        # --- Animate ---
        state.view.advance_frame(frames, dt)

        # --- Render ---
        if state.dirty:
            state.dirty = False
            state.redraws += 1

            screen.fill(BG_COLOR)
            canvas.begin()
            kind = state.view.on_draw(canvas)
            canvas.finish()
            draw_slot_labels(screen, state.view.registry, font)
            draw_status_bar(screen, font, kind, state.view.registry, state.redraws)

            pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
