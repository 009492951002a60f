"""Placeholder main scene shown once settings are applied.

Point `main_scene` at your own `module:callable` to replace it.
"""
from __future__ import annotations

import logging
import os

import pygame

from .theme import Theme


def run(screen: pygame.Surface) -> None:
    """Show the applied mode until Esc/Q or window close."""
    log = logging.getLogger("main_scene")
    theme = Theme()
    clock = pygame.time.Clock()
    width, height = screen.get_size()
    driver = os.environ.get("SDL_RENDER_DRIVER", "default")
    log.info(f"Main scene running at {width}x{height} (render driver: {driver})")

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key in (pygame.K_ESCAPE, pygame.K_q):
                running = False

        screen.fill(theme.bg)
        lines = [f"{width} x {height}", f"Render driver: {driver}", "ESC to quit"]
        y = height // 2 - 40
        for line in lines:
            surf = theme.font_medium.render(line, True, theme.fg)
            screen.blit(surf, ((width - surf.get_width()) // 2, y))
            y += surf.get_height() + 12

        pygame.display.flip()
        clock.tick(30)
