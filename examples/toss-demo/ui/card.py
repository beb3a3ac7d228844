"""Card and anchor marker renderer."""
from __future__ import annotations

import math

import pygame

from tick_toss import Pose
from tick_toss.vec import Vec2
from ui.constants import (
    ANCHOR_COLOR,
    ATTACHED_COLOR,
    CARD_BORDER,
    CARD_COLOR,
    CARD_STRIPE,
    MARKER_SIZE,
)


def make_card_surface(w: int, h: int) -> pygame.Surface:
    """Build the unrotated card picture once; it is rotated per frame."""
    card = pygame.Surface((w, h), pygame.SRCALPHA)
    card.fill(CARD_COLOR)
    for y in range(20, h, 40):
        pygame.draw.line(card, CARD_STRIPE, (12, y), (w - 12, y), 3)
    pygame.draw.rect(card, CARD_BORDER, (0, 0, w, h), 4)
    return card


def draw_card(surface: pygame.Surface, card: pygame.Surface, pose: Pose) -> None:
    w, h = int(pose.size[0]), int(pose.size[1])
    image = card
    if (w, h) != card.get_size():
        image = pygame.transform.smoothscale(card, (max(w, 1), max(h, 1)))
    # pygame rotates counter-clockwise in degrees on a y-down screen.
    image = pygame.transform.rotate(image, -math.degrees(pose.rotation))
    rect = image.get_rect(center=(int(pose.center[0]), int(pose.center[1])))
    surface.blit(image, rect)


def draw_marker(surface: pygame.Surface, point: Vec2 | None, color: tuple[int, int, int]) -> None:
    if point is None:
        return
    half = MARKER_SIZE // 2
    pygame.draw.rect(
        surface, color, (int(point[0]) - half, int(point[1]) - half, MARKER_SIZE, MARKER_SIZE)
    )


def draw_markers(surface: pygame.Surface, anchor: Vec2 | None, attached: Vec2 | None) -> None:
    """Red square on the pointer anchor, blue square on the grabbed point."""
    draw_marker(surface, anchor, ANCHOR_COLOR)
    draw_marker(surface, attached, ATTACHED_COLOR)
