from __future__ import annotations

import pygame


class Theme:
    def __init__(self) -> None:
        # Background: #1F191F, Text: #F2E4D9, Action: #5884B1
        self.bg = (31, 25, 31)
        self.fg = (242, 228, 217)
        self.accent = (245, 191, 66)  # gold, headings
        self.action = (88, 132, 177)  # steel blue, selection
        self.error = (234, 58, 39)

        # Dim text derived from fg (approximately 60%)
        self.dim = (150, 140, 135)

        self.font_heading = self._sysfont_fallback(["Orbitron", "Audiowide", "DejaVu Sans Mono"], 26, bold=True)
        self.font_medium = self._sysfont_fallback(["Share Tech Mono", "IBM Plex Mono", "DejaVu Sans Mono"], 20)
        self.font_small = self._sysfont_fallback(["Share Tech Mono", "IBM Plex Mono", "DejaVu Sans Mono"], 14)

    def draw_corner_brackets(self, surface: pygame.Surface, rect: pygame.Rect, color: tuple, bracket_size: int = 12) -> None:
        """Draw decorative corner brackets around `rect`."""
        x, y, w, h = rect.x, rect.y, rect.width, rect.height
        thickness = 2

        pygame.draw.line(surface, color, (x, y + bracket_size), (x, y), thickness)
        pygame.draw.line(surface, color, (x, y), (x + bracket_size, y), thickness)

        pygame.draw.line(surface, color, (x + w - bracket_size, y), (x + w, y), thickness)
        pygame.draw.line(surface, color, (x + w, y), (x + w, y + bracket_size), thickness)

        pygame.draw.line(surface, color, (x, y + h - bracket_size), (x, y + h), thickness)
        pygame.draw.line(surface, color, (x, y + h), (x + bracket_size, y + h), thickness)

        pygame.draw.line(surface, color, (x + w - bracket_size, y + h), (x + w, y + h), thickness)
        pygame.draw.line(surface, color, (x + w, y + h), (x + w, y + h - bracket_size), thickness)

    def _sysfont_fallback(self, names: list[str], size: int, bold: bool = False) -> pygame.font.Font:
        """Attempt to load the first available system font from names.

        Falls back to pygame's default font if none load.
        """
        for name in names:
            try:
                return pygame.font.SysFont(name, size, bold=bold)
            except (OSError, pygame.error):
                continue
        return pygame.font.Font(None, size)
