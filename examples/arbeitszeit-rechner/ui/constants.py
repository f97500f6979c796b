"""Layout constants and color definitions."""

# Timing
FPS = 30

# Layout dimensions
SCREEN_W = 760
SCREEN_H = 820
PAD = 24
HEADER_H = 96
INPUT_H = 64
CARD_H = 132
CARD_GAP = 14
BUTTON_H = 36
NOTE_H = 34
COUNTDOWN_H = 176
STATUS_H = 32

CONTENT_W = SCREEN_W - 2 * PAD
CARDS_Y = HEADER_H + INPUT_H + 40

# Colors
BG_COLOR = (15, 23, 42)
PANEL_BG = (30, 41, 59)
CARD_BG = (22, 31, 48)
CARD_BORDER = (51, 65, 85)
STATUS_BG = (30, 41, 59)
TEXT_COLOR = (241, 245, 249)
TEXT_DIM = (148, 163, 184)
TEXT_FAINT = (100, 116, 139)
ERROR_COLOR = (248, 113, 113)
DONE_COLOR = (74, 222, 128)
DISABLED_BG = (51, 65, 85)

# Threshold kind value -> accent color
ACCENT_COLORS: dict[str, tuple[int, int, int]] = {
    "min": (37, 99, 235),
    "max": (147, 51, 234),
}

# Alpha of the result area while the start-time transition runs
TRANSITION_ALPHA = 70
