"""Renderer for the launcher chooser."""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import pygame

if TYPE_CHECKING:
    from .chooser_menu import ChooserMenu
    from .theme import Theme


class ChooserRenderer:
    """Draws the chooser rows centered on the launcher window."""

    def __init__(self, screen_width: int, screen_height: int, title: str = "Launcher"):
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.title = title
        self.item_height = 48

    def render(
        self,
        screen: pygame.Surface,
        menu: ChooserMenu,
        theme: Theme,
        message: Optional[str] = None,
    ) -> None:
        screen.fill(theme.bg)

        # Header (centered) with text-width underline
        header_y = 24
        header_surf = theme.font_heading.render(self.title, True, theme.accent)
        header_x = (self.screen_width - header_surf.get_width()) // 2
        screen.blit(header_surf, (header_x, header_y))
        underline_y = header_y + header_surf.get_height() + 4
        pygame.draw.line(
            screen,
            theme.accent,
            (header_x, underline_y),
            (header_x + header_surf.get_width(), underline_y),
            2,
        )

        y = underline_y + 30
        panel_x = 40
        panel_w = self.screen_width - 80
        for index, item in enumerate(menu.items()):
            is_selected = index == menu.selected_index
            if is_selected:
                highlight = pygame.Surface((panel_w, self.item_height - 8), pygame.SRCALPHA)
                highlight.fill((theme.action[0], theme.action[1], theme.action[2], 50))
                screen.blit(highlight, (panel_x, y - 4))
                theme.draw_corner_brackets(
                    screen, pygame.Rect(panel_x, y - 4, panel_w, self.item_height - 8), theme.action
                )

            color = theme.fg if is_selected else theme.dim
            label_surf = theme.font_medium.render(item.label, True, color)
            screen.blit(label_surf, (panel_x + 16, y + 6))

            if item.value is not None:
                # "< value >" arrows only on the focused row
                value_text = f"< {item.value} >" if is_selected else item.value
                value_surf = theme.font_medium.render(value_text, True, color)
                screen.blit(value_surf, (panel_x + panel_w - value_surf.get_width() - 16, y + 6))

            y += self.item_height

        if message:
            message_surf = theme.font_small.render(message, True, theme.error)
            screen.blit(message_surf, ((self.screen_width - message_surf.get_width()) // 2, self.screen_height - 56))

        hint_surf = theme.font_small.render("UP/DOWN choose  LEFT/RIGHT change  ENTER select", True, theme.dim)
        hint_x = (self.screen_width - hint_surf.get_width()) // 2
        screen.blit(hint_surf, (hint_x, self.screen_height - 30))
