"""Bottom status bar."""
from __future__ import annotations

import pygame

from ui.constants import PHASE_COLORS, SCREEN_H, SCREEN_W, STATUS_BG, STATUS_H, TEXT_DIM


def draw_status_bar(
    surface: pygame.Surface, font: pygame.font.Font, phase: str, last_event: str
) -> None:
    y = SCREEN_H - STATUS_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    pygame.draw.line(surface, (50, 50, 70), (0, y), (SCREEN_W, y))

    label = font.render(phase.upper(), True, PHASE_COLORS.get(phase, TEXT_DIM))
    surface.blit(label, (8, y + STATUS_H // 2 - label.get_height() // 2))

    hint = font.render(f"{last_event}  [R] Reset  [Esc] Quit", True, TEXT_DIM)
    surface.blit(hint, (SCREEN_W - hint.get_width() - 8, y + STATUS_H // 2 - hint.get_height() // 2))
