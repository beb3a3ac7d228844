"""Toss Demo - drag a card and fling it off screen.

Exercises tick-toss: engine, scheduler, controller, and signal bus.

Controls:
  Drag    Move the card; it stays pinned where you grabbed it
  Release Fast release tosses the card, slow release snaps it back
  R       Reset the card now
  Esc     Quit
"""
from __future__ import annotations

import sys

import pygame

from game.setup import DemoState
from ui.card import draw_card, draw_markers, make_card_surface
from ui.constants import BG_COLOR, CARD_H, CARD_W, FPS, SCREEN_H, SCREEN_W, TPS
from ui.status import draw_status_bar


def main() -> None:
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Toss Demo - tick-toss")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)
    card = make_card_surface(CARD_W, CARD_H)

    state = DemoState()

    tick_interval = 1.0 / TPS
    accumulator = 0.0
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0
        accumulator += dt
        now = pygame.time.get_ticks() / 1000.0

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r:
                    state.reset_card()

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                state.press(now, event.pos)

            elif event.type == pygame.MOUSEMOTION:
                state.move(now, event.pos)

            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                state.release(now, event.pos)

        # --- Tick ---
        while accumulator >= tick_interval:
            state.engine.step()
            accumulator -= tick_interval

        # --- Render ---
        screen.fill(BG_COLOR)
        draw_card(screen, card, state.controller.pose)
        draw_markers(screen, state.controller.anchor_point, state.controller.attached_point)
        draw_status_bar(screen, font, state.controller.phase, state.trace.last)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
