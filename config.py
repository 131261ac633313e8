import os
import pygame

# =========================
# Core settings
# =========================
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
WINDOW_TITLE = "Interactive Risk Map"
FPS = 60

# Map data
MAP_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data", "territories.json")
MIN_VERTICES = 3

# Colors
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
YELLOW = (253, 249, 0)
BLUE = (0, 121, 241)
GREEN = (0, 228, 48)
GRAY = (130, 130, 130)
DARK_GRAY = (80, 80, 80)

BACKGROUND_COLOR = WHITE

# Territory outline colors
HIGHLIGHT_COLOR = YELLOW  # Selected territory
OWNER_COLORS = {
    0: BLUE,
    1: GREEN,
}
FALLBACK_OWNER_COLOR = GRAY  # Any other owner
TERRITORY_LINE_WIDTH = 2

# Selection overlay
FONT_SIZE = 30
FONT_CANDIDATES = ["dejavusans", "arial", "liberationsans", None]
OVERLAY_ORIGIN = (10, 10)
OVERLAY_LINE_SPACING = 30
OVERLAY_TEXT_COLOR = DARK_GRAY

# Mouse buttons (pygame numbering)
PRIMARY_BUTTON = pygame.BUTTON_LEFT
