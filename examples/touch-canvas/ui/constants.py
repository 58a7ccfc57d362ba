"""Layout constants and color definitions."""

# Timing
FPS = 60

# Layout dimensions
SCREEN_W = 800
SCREEN_H = 600
STATUS_H = 28

# Curve flattening
CURVE_SAMPLES = 48

# Colors
BG_COLOR = (20, 20, 30)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)

# Slot index -> label color for the point markers' captions
SLOT_COLORS: dict[int, tuple[int, int, int]] = {
    0: (0, 220, 220),
    1: (255, 160, 40),
    2: (60, 220, 80),
    3: (220, 80, 220),
}
