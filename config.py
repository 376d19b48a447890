import os
from pathlib import Path

import pygame

# Grid
TILE_SIZE = 20
GRID_WIDTH = 30
GRID_HEIGHT = 30

SCREEN_WIDTH = GRID_WIDTH * TILE_SIZE
PLAYFIELD_HEIGHT = GRID_HEIGHT * TILE_SIZE
HUD_HEIGHT = 50
DPAD_HEIGHT = 110
SCREEN_HEIGHT = HUD_HEIGHT + PLAYFIELD_HEIGHT + DPAD_HEIGHT

FPS = 60

# Gameplay
INITIAL_SNAKE_LENGTH = 3
FOOD_POINTS = 1
POWERUP_POINTS = 5
POWERUP_EXTRA_SEGMENTS = 2
POWERUP_SPAWN_CHANCE = 0.01
POWERUP_LIFETIME_MS = 10_000

# Switch from rejection sampling to a free-cell scan past this occupancy
PLACEMENT_SCAN_THRESHOLD = 0.5

# Tick periods in milliseconds
TICK_PERIODS_MS = {
    "easy": 150,
    "medium": 100,
    "hard": 70,
}
DEFAULT_DIFFICULTY = "medium"

# Input
SWIPE_THRESHOLD = 50
DOUBLE_TAP_MS = 300

# Colors
COLOR_BG = (44, 62, 80)
COLOR_GRID = (255, 255, 255, 13)
COLOR_SNAKE_HEAD = (46, 204, 113)
COLOR_SNAKE_BORDER = (39, 174, 96)
COLOR_FOOD = (231, 76, 60)
COLOR_POWERUP = (243, 156, 18)
COLOR_STAR = (241, 196, 15)
COLOR_HUD = (236, 240, 241)
COLOR_MUTED = (127, 140, 141)
COLOR_HINT = (189, 195, 199)
COLOR_BUTTON = (52, 152, 219)
COLOR_DIFFICULTY = {
    "easy": (46, 204, 113),
    "medium": (243, 156, 18),
    "hard": (231, 76, 60),
}

# Persistence
HIGHSCORE_KEY = "snakeHighScore"
HIGHSCORE_FILE = Path(
    os.environ.get("SNAKE_HIGHSCORE_FILE", Path.home() / ".snake_arcade" / "highscore.json")
)

# Assets
ASSET_DIR = Path(__file__).parent / "assets"
FALLBACK_ASSET_DIR = Path(__file__).parent

FONT_NAMES = (
    "Arial",
    "Helvetica",
    "DejaVu Sans",
)


def load_font(size: int) -> pygame.font.Font:
    """Load the UI font with graceful fallbacks."""
    for name in FONT_NAMES:
        font = pygame.font.SysFont(name, size)
        if font:
            return font

    return pygame.font.Font(None, size)


def load_scaled_image(filename: str, size: tuple[int, int]):
    """Load a PNG from the assets folder and scale it to the given size.

    Returns ``None`` when the file is missing or invalid so callers can
    gracefully fall back to procedural drawing.
    """

    search_dirs = (ASSET_DIR, FALLBACK_ASSET_DIR)
    image = None
    for base_dir in search_dirs:
        path = base_dir / filename
        if not path.exists():
            continue
        try:
            image = pygame.image.load(path).convert_alpha()
        except (FileNotFoundError, pygame.error):
            image = None
        if image is not None:
            break

    if image is None:
        return None

    return pygame.transform.smoothscale(image, size)
