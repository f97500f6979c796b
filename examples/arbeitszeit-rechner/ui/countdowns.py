"""Active countdown cards with delete controls."""
from __future__ import annotations

import pygame

from worktime.display import CountdownCard

from ui.constants import (
    ACCENT_COLORS,
    CARD_BG,
    CARD_BORDER,
    CARD_GAP,
    CONTENT_W,
    COUNTDOWN_H,
    DONE_COLOR,
    PAD,
    PANEL_BG,
    TEXT_COLOR,
    TEXT_DIM,
    TEXT_FAINT,
)

DELETE_SIZE = 30


def draw_countdowns(
    surface: pygame.Surface,
    fonts: dict[str, pygame.font.Font],
    cards: list[CountdownCard],
    title: str,
    y: int,
) -> dict[int, pygame.Rect]:
    """Draw countdown cards side by side. Returns delete rects keyed by countdown id."""
    deletes: dict[int, pygame.Rect] = {}
    if not cards:
        return deletes

    heading = fonts["medium"].render(title, True, TEXT_COLOR)
    surface.blit(heading, heading.get_rect(midtop=(surface.get_width() // 2, y)))
    y += heading.get_height() + 12

    w = (CONTENT_W - CARD_GAP) // 2
    for i, card in enumerate(cards):
        rect = pygame.Rect(PAD + i * (w + CARD_GAP), y, w, COUNTDOWN_H)
        pygame.draw.rect(surface, CARD_BG, rect, border_radius=12)
        pygame.draw.rect(surface, ACCENT_COLORS[card.kind.value], rect, 1, border_radius=12)

        surface.blit(fonts["medium"].render(card.title, True, TEXT_COLOR), (rect.x + 16, rect.y + 12))
        surface.blit(fonts["tiny"].render(card.target_text, True, TEXT_DIM), (rect.x + 16, rect.y + 40))
        surface.blit(fonts["tiny"].render(card.hint, True, TEXT_FAINT), (rect.x + 16, rect.y + 58))

        delete = pygame.Rect(rect.right - DELETE_SIZE - 12, rect.y + 12, DELETE_SIZE, DELETE_SIZE)
        pygame.draw.rect(surface, PANEL_BG, delete, border_radius=6)
        pygame.draw.rect(surface, CARD_BORDER, delete, 1, border_radius=6)
        pygame.draw.line(surface, TEXT_DIM, (delete.x + 9, delete.y + 9), (delete.right - 10, delete.bottom - 10), 2)
        pygame.draw.line(surface, TEXT_DIM, (delete.right - 10, delete.y + 9), (delete.x + 9, delete.bottom - 10), 2)
        deletes[card.countdown_id] = delete

        inner = pygame.Rect(rect.x + 12, rect.y + 84, rect.w - 24, rect.h - 96)
        pygame.draw.rect(surface, PANEL_BG, inner, border_radius=8)
        if card.finished:
            top = fonts["medium"].render(card.headline, True, DONE_COLOR)
            bottom = fonts["tiny"].render(card.body, True, TEXT_DIM)
        else:
            top = fonts["tiny"].render(card.headline.upper(), True, TEXT_DIM)
            bottom = fonts["big"].render(card.body, True, TEXT_COLOR)
        surface.blit(top, top.get_rect(midtop=(inner.centerx, inner.y + 6)))
        surface.blit(bottom, bottom.get_rect(midbottom=(inner.centerx, inner.bottom - 6)))
    return deletes
