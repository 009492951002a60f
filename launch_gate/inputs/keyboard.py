from __future__ import annotations

import pygame

from .abstraction import InputEvent, InputProvider


class KeyboardInputProvider(InputProvider):
    def translate(self, raw_event):  # type: ignore[no-untyped-def]
        if raw_event.type == pygame.QUIT:
            return InputEvent(InputEvent.Type.QUIT)
        if raw_event.type != pygame.KEYDOWN:
            return None

        key = raw_event.key
        if key in (pygame.K_q, pygame.K_ESCAPE):
            return InputEvent(InputEvent.Type.QUIT)
        if key in (pygame.K_UP, pygame.K_w):
            return InputEvent(InputEvent.Type.NAVIGATE, delta=-1)
        if key in (pygame.K_DOWN, pygame.K_s, pygame.K_TAB):
            return InputEvent(InputEvent.Type.NAVIGATE, delta=1)
        if key in (pygame.K_LEFT, pygame.K_a):
            return InputEvent(InputEvent.Type.ADJUST, delta=-1)
        if key in (pygame.K_RIGHT, pygame.K_d):
            return InputEvent(InputEvent.Type.ADJUST, delta=1)
        if key in (pygame.K_RETURN, pygame.K_SPACE, pygame.K_KP_ENTER):
            return InputEvent(InputEvent.Type.SELECT)
        return None
