"""Header and bottom status bar."""
from __future__ import annotations

import pygame

from worktime.display import Labels

from ui.constants import SCREEN_H, SCREEN_W, STATUS_BG, STATUS_H, TEXT_COLOR, TEXT_DIM


def draw_header(surface: pygame.Surface, fonts: dict[str, pygame.font.Font], labels: Labels) -> None:
    title = fonts["title"].render(labels.title, True, TEXT_COLOR)
    surface.blit(title, title.get_rect(midtop=(SCREEN_W // 2, 18)))
    sub = fonts["small"].render(labels.subtitle, True, TEXT_DIM)
    surface.blit(sub, sub.get_rect(midtop=(SCREEN_W // 2, 18 + title.get_height() + 6)))


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font, clock_text: str) -> None:
    """Draw bottom key-bindings bar with the current wall-clock time."""
    y = SCREEN_H - STATUS_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    pygame.draw.line(surface, (51, 65, 85), (0, y), (SCREEN_W, y))

    text = "[0-9] Time [Bksp] Edit [Enter] Undo [Del] Clear [M/X] Start [F1/F2] Del [Esc] Quit"
    label = font.render(text, True, TEXT_DIM)
    surface.blit(label, (8, y + STATUS_H // 2 - label.get_height() // 2))
    now = font.render(clock_text, True, TEXT_COLOR)
    surface.blit(now, (SCREEN_W - now.get_width() - 8, y + STATUS_H // 2 - now.get_height() // 2))
