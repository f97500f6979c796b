"""Start-time input field fed by typed digits."""
from __future__ import annotations

import pygame

from worktime.entry import TimeEntry

from ui.constants import (
    CARD_BORDER,
    CONTENT_W,
    ERROR_COLOR,
    HEADER_H,
    INPUT_H,
    PAD,
    PANEL_BG,
    TEXT_COLOR,
    TEXT_DIM,
    TEXT_FAINT,
)


class TimeInput(TimeEntry):
    """TimeEntry drawn as a text box. A stale edit is greyed out next to the active time."""

    def draw(
        self,
        surface: pygame.Surface,
        label_font: pygame.font.Font,
        font: pygame.font.Font,
        label: str,
    ) -> None:
        y = HEADER_H
        surface.blit(label_font.render(label.upper(), True, TEXT_DIM), (PAD, y))
        box = pygame.Rect(PAD, y + 22, CONTENT_W, INPUT_H - 8)
        pygame.draw.rect(surface, PANEL_BG, box, border_radius=10)
        pygame.draw.rect(surface, CARD_BORDER, box, 1, border_radius=10)

        if self.stale:
            color = TEXT_FAINT
        elif self.empty:
            color = TEXT_DIM
        else:
            color = TEXT_COLOR
        text = font.render(self.text, True, color)
        surface.blit(text, (box.x + 18, box.centery - text.get_height() // 2))

        if self.error:
            side = label_font.render(self.error, True, ERROR_COLOR)
        elif self.stale:
            side = label_font.render(f"{self.committed}  [Enter]", True, TEXT_COLOR)
        else:
            return
        surface.blit(side, (box.right - side.get_width() - 14, box.centery - side.get_height() // 2))
