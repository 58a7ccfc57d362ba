"""Status bar renderer."""
from __future__ import annotations

import pygame

from curve_paths import CurveKind, PointRegistry

from ui.constants import SCREEN_H, SCREEN_W, SLOT_COLORS, STATUS_BG, STATUS_H, TEXT_COLOR, TEXT_DIM


def draw_slot_labels(
    surface: pygame.Surface, registry: PointRegistry, font: pygame.font.Font
) -> None:
    """Caption each placed point with its slot index."""
    for slot, p in registry.points():
        label = font.render(str(slot), True, SLOT_COLORS.get(slot, TEXT_DIM))
        surface.blit(label, (p.x + 6, p.y - 18))


def draw_status_bar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    kind: CurveKind,
    registry: PointRegistry,
    redraws: int,
) -> None:
    """Draw bottom status bar with curve kind and point count."""
    y = SCREEN_H - STATUS_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))

    text = (
        f"curve: {kind.name.lower():<9}  points: {len(registry)}  "
        f"slot: {registry.current_slot}  redraws: {redraws}"
    )
    surface.blit(font.render(text, True, TEXT_COLOR), (8, y + 7))

    hint = font.render("Click/tap: add point  Drag: move  C: clear  Esc: quit", True, TEXT_DIM)
    surface.blit(hint, (SCREEN_W - hint.get_width() - 8, y + 7))
