"""Threshold cards with end time and start-countdown button."""
from __future__ import annotations

import pygame

from worktime.display import Labels, ThresholdCard

from ui.constants import (
    ACCENT_COLORS,
    BUTTON_H,
    CARD_BG,
    CARD_BORDER,
    CARD_GAP,
    CARD_H,
    CARDS_Y,
    CONTENT_W,
    DISABLED_BG,
    NOTE_H,
    PAD,
    TEXT_COLOR,
    TEXT_DIM,
    TEXT_FAINT,
)


def draw_threshold_cards(
    surface: pygame.Surface,
    fonts: dict[str, pygame.font.Font],
    cards: list[ThresholdCard],
    note: str,
) -> dict[str, pygame.Rect]:
    """Draw both threshold cards. Returns button rects keyed by kind value."""
    buttons: dict[str, pygame.Rect] = {}
    y = CARDS_Y
    for card in cards:
        accent = ACCENT_COLORS[card.kind.value]
        rect = pygame.Rect(PAD, y, CONTENT_W, CARD_H)
        pygame.draw.rect(surface, CARD_BG, rect, border_radius=12)
        pygame.draw.rect(surface, CARD_BORDER, rect, 1, border_radius=12)

        surface.blit(fonts["small"].render(card.title.upper(), True, TEXT_DIM), (rect.x + 18, rect.y + 16))
        surface.blit(fonts["tiny"].render(card.subtitle, True, TEXT_FAINT), (rect.x + 18, rect.y + 38))
        end = fonts["big"].render(card.end_text, True, TEXT_COLOR)
        surface.blit(end, (rect.right - end.get_width() - 18, rect.y + 12))

        button = pygame.Rect(rect.x + 18, rect.bottom - BUTTON_H - 16, rect.w - 36, BUTTON_H)
        pygame.draw.rect(surface, accent if card.button_enabled else DISABLED_BG, button, border_radius=8)
        label = fonts["small"].render(card.button_label, True, TEXT_COLOR)
        surface.blit(label, label.get_rect(center=button.center))
        buttons[card.kind.value] = button
        y += CARD_H + CARD_GAP

    box = pygame.Rect(PAD, y, CONTENT_W, NOTE_H)
    pygame.draw.rect(surface, CARD_BG, box, border_radius=10)
    text = fonts["tiny"].render(note, True, TEXT_DIM)
    surface.blit(text, text.get_rect(center=box.center))
    return buttons


def draw_empty_state(surface: pygame.Surface, font: pygame.font.Font, labels: Labels) -> None:
    text = font.render(labels.empty_prompt, True, TEXT_DIM)
    surface.blit(text, text.get_rect(center=(surface.get_width() // 2, CARDS_Y + CARD_H)))
