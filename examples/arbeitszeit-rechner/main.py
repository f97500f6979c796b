"""Arbeitszeit-Rechner — working-hours calculator with live countdowns.

Enter the time you started work; the window shows when the minimum
(7.6h) and maximum (9h) working time is reached, 30 minutes of break
included. Each threshold can run one countdown toward its end time.

Controls:
  0-9         Type start time (HHMM)
  Backspace   Edit start time
  Enter       Discard an unfinished edit
  Delete      Clear start time and all countdowns
  M / X       Start minimum / maximum countdown
  F1 / F2     Delete first / second countdown card
  Click       Buttons and delete controls
  Escape      Quit
"""
from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime

import pygame

from worktime import (
    Calculator,
    ClockTime,
    CountdownRegistry,
    Countdown,
    InvalidClockTimeError,
    RolloverPolicy,
    ThresholdKind,
    WorktimeConfig,
)
from worktime.display import countdown_card, labels_for, threshold_card
from ui.cards import draw_empty_state, draw_threshold_cards
from ui.constants import (
    BG_COLOR,
    CARD_GAP,
    CARD_H,
    CARDS_Y,
    FPS,
    NOTE_H,
    SCREEN_H,
    SCREEN_W,
    TRANSITION_ALPHA,
)
from ui.countdowns import draw_countdowns
from ui.status import draw_header, draw_status_bar
from ui.time_input import TimeInput

logger = logging.getLogger("arbeitszeit")

KIND_KEYS = {pygame.K_m: ThresholdKind.MINIMUM, pygame.K_x: ThresholdKind.MAXIMUM}


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Arbeitszeit-Rechner — working-hours countdowns")
    p.add_argument("--lang", choices=("de", "en"), default="de", help="UI language (default: de)")
    p.add_argument(
        "--rollover",
        choices=[policy.value for policy in RolloverPolicy],
        default=RolloverPolicy.ANCHORED.value,
        help="Placement of end times past midnight (default: anchored)",
    )
    p.add_argument("--start", type=str, default=None, metavar="HH:MM", help="Preset start time")
    p.add_argument("--fps", type=int, default=FPS, help=f"Frames per second (default: {FPS})")
    p.add_argument("-v", "--verbose", action="store_true", help="Log timer and countdown events")
    args = p.parse_args()
    args.fps = max(5, min(120, args.fps))
    return args


def _on_finish(registry: CountdownRegistry, countdown: Countdown) -> None:
    logger.info("%s countdown reached %s", countdown.kind.value, countdown.target_time)


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    preset = None
    if args.start:
        try:
            preset = ClockTime.parse(args.start)
        except InvalidClockTimeError as exc:
            sys.exit(f"--start: {exc}")

    config = WorktimeConfig(rollover=RolloverPolicy(args.rollover), language=args.lang)
    labels = labels_for(config.language)
    calc = Calculator(config)
    calc.registry.on_finish(_on_finish)
    time_input = TimeInput(preset)
    if preset is not None:
        calc.set_start(preset)

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption(labels.title)
    clock = pygame.time.Clock()
    fonts = {
        "title": pygame.font.SysFont("sans", 34, bold=True),
        "big": pygame.font.SysFont("monospace", 34, bold=True),
        "medium": pygame.font.SysFont("sans", 20, bold=True),
        "small": pygame.font.SysFont("sans", 15),
        "tiny": pygame.font.SysFont("sans", 13),
        "mono": pygame.font.SysFont("monospace", 13),
    }

    buttons: dict[str, pygame.Rect] = {}
    deletes: dict[int, pygame.Rect] = {}
    running = True

    with calc:
        while running:
            dt = clock.tick(args.fps) / 1000.0

            # --- Events ---
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False

                    elif event.unicode and event.unicode in "0123456789":
                        parsed = time_input.type_digit(event.unicode)
                        if parsed is not None:
                            calc.set_start(parsed)

                    elif event.key in (pygame.K_F1, pygame.K_F2):
                        index = 0 if event.key == pygame.K_F1 else 1
                        ids = calc.registry.ids()
                        if index < len(ids):
                            calc.delete_countdown(ids[index])

                    elif event.key == pygame.K_BACKSPACE:
                        time_input.backspace()

                    elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                        time_input.revert()

                    elif event.key == pygame.K_DELETE:
                        time_input.clear()
                        calc.set_start(None)

                    elif event.key in KIND_KEYS:
                        calc.start_countdown(KIND_KEYS[event.key])

                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    for kind in ThresholdKind:
                        rect = buttons.get(kind.value)
                        if rect is not None and rect.collidepoint(event.pos):
                            calc.start_countdown(kind)
                    for cid, rect in list(deletes.items()):
                        if rect.collidepoint(event.pos):
                            calc.delete_countdown(cid)

            # --- Timers ---
            calc.advance(dt)

            # --- Render ---
            screen.fill(BG_COLOR)
            draw_header(screen, fonts, labels)
            time_input.draw(screen, fonts["tiny"], fonts["big"], labels.start_label)

            if calc.start is None:
                buttons = {}
                draw_empty_state(screen, fonts["small"], labels)
            else:
                layer = pygame.Surface((SCREEN_W, SCREEN_H), pygame.SRCALPHA)
                cards = [threshold_card(calc, kind, labels) for kind in ThresholdKind]
                note = labels.break_note.format(minutes=config.break_minutes)
                buttons = draw_threshold_cards(layer, fonts, cards, note)
                if calc.animating:
                    layer.set_alpha(TRANSITION_ALPHA)
                screen.blit(layer, (0, 0))

            y = CARDS_Y + 2 * (CARD_H + CARD_GAP) + NOTE_H + 20
            cd_cards = [countdown_card(calc, cd, labels) for cd in calc.countdowns]
            deletes = draw_countdowns(screen, fonts, cd_cards, labels.active_title, y)

            draw_status_bar(screen, fonts["mono"], datetime.now().strftime("%H:%M:%S"))
            pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
