"""Layout constants and color definitions."""

# Timing
FPS = 60
TPS = 60

# Layout dimensions
SCREEN_W = 480
SCREEN_H = 800
STATUS_H = 36

# Card (stands in for the image view)
CARD_W = 200
CARD_H = 260
CARD_CENTER = (SCREEN_W / 2, (SCREEN_H - STATUS_H) / 2)

# Markers
MARKER_SIZE = 10

# Colors
BG_COLOR = (20, 20, 30)
CARD_COLOR = (230, 190, 90)
CARD_BORDER = (120, 90, 30)
CARD_STRIPE = (200, 150, 60)
ANCHOR_COLOR = (230, 60, 60)
ATTACHED_COLOR = (60, 110, 230)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)

# Phase -> status color
PHASE_COLORS: dict[str, tuple[int, int, int]] = {
    "idle": (120, 120, 140),
    "dragging": (0, 220, 220),
    "tossing": (255, 160, 40),
    "resetting": (220, 80, 220),
}
