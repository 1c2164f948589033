"""
Configuration constants for the Jazz HUD.

Vitals defaults, damage-step settings, and the geometry and palette
used when the heart row is drawn with pygame.
"""

# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------
SCREEN_WIDTH: int = 320
SCREEN_HEIGHT: int = 180
UPDATE_RATE: int = 60  # Hz

# ---------------------------------------------------------------------------
# Vitals defaults (applied by init)
# ---------------------------------------------------------------------------
DEFAULT_SCORE: int = 0
DEFAULT_LIVES: int = 3
DEFAULT_LEVEL: int = 1
DEFAULT_PARTIAL_DAMAGE: int = 0

# Hits needed to consume one heart.  Partial damage runs 0..DAMAGE_STEPS-1.
DAMAGE_STEPS: int = 4

# ---------------------------------------------------------------------------
# Heart icons
# ---------------------------------------------------------------------------
# Fraction of the heart still filled, keyed by damage-class tag.
HEART_FILL: dict[str, float] = {
    "full": 1.0,
    "threequarter": 0.75,
    "half": 0.5,
    "quarter": 0.25,
    "empty": 0.0,
}

HEART_SIZE: int = 16      # icon width / height at scale 1
HEART_SPACING: int = 4    # gap between icons

# HUD layout (top-left origin, game coordinates)
HUD_MARGIN: int = 8
HUD_FONT_SIZE: int = 16

# ---------------------------------------------------------------------------
# Colors (RGB)
# ---------------------------------------------------------------------------
COLOR_BACKGROUND: tuple[int, int, int] = (18, 16, 32)
COLOR_HEART_FILL: tuple[int, int, int] = (230, 48, 72)
COLOR_HEART_EMPTY: tuple[int, int, int] = (90, 80, 100)
COLOR_TEXT: tuple[int, int, int] = (255, 255, 255)
