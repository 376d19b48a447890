"""Translate keys, clicks and touch gestures into game intents."""

from enum import Enum

import pygame
from config import (
    SCREEN_WIDTH,
    SCREEN_HEIGHT,
    HUD_HEIGHT,
    PLAYFIELD_HEIGHT,
    DPAD_HEIGHT,
    SWIPE_THRESHOLD,
    DOUBLE_TAP_MS,
)
from session import Difficulty, Phase
from snake import Direction


class Action(Enum):
    START = "start"
    RESTART = "restart"
    PAUSE = "pause"
    MENU = "menu"
    PREVIOUS_DIFFICULTY = "previous_difficulty"
    NEXT_DIFFICULTY = "next_difficulty"
    QUIT = "quit"


KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}


def translate_key(key: int, phase: Phase):
    """Map a key press to an ``Action``, a ``Direction`` or ``None``."""
    if key == pygame.K_ESCAPE:
        return Action.QUIT

    if phase is Phase.MENU:
        if key in (pygame.K_UP, pygame.K_w):
            return Action.PREVIOUS_DIFFICULTY
        if key in (pygame.K_DOWN, pygame.K_s):
            return Action.NEXT_DIFFICULTY
        if key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE):
            return Action.START
        return None

    if phase is Phase.GAME_OVER:
        if key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            return Action.RESTART
        if key == pygame.K_m:
            return Action.MENU
        return None

    if key == pygame.K_p:
        return Action.PAUSE
    if key == pygame.K_m:
        return Action.MENU
    if phase is Phase.PLAYING:
        return KEY_DIRECTIONS.get(key)
    return None


def swipe_direction(start: tuple[float, float], end: tuple[float, float], threshold: float = SWIPE_THRESHOLD):
    """Direction of a swipe from ``start`` to ``end``, or ``None`` if too short.

    The axis with the larger displacement wins; the displacement along it must
    exceed ``threshold`` pixels.
    """
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    if abs(dx) > abs(dy):
        if dx > threshold:
            return Direction.RIGHT
        if dx < -threshold:
            return Direction.LEFT
    else:
        if dy > threshold:
            return Direction.DOWN
        if dy < -threshold:
            return Direction.UP
    return None


class DoubleTapDetector:
    """Reports a double tap when two taps land within ``window_ms``."""

    def __init__(self, window_ms: int = DOUBLE_TAP_MS):
        self.window_ms = window_ms
        self.last_tap_ms: int | None = None

    def tap(self, now_ms: int) -> bool:
        last = self.last_tap_ms
        self.last_tap_ms = now_ms
        if last is None:
            return False
        elapsed = now_ms - last
        if 0 < elapsed < self.window_ms:
            self.last_tap_ms = None
            return True
        return False


def menu_layout(width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT) -> dict:
    """Clickable regions of the start menu, shared by drawing and hit testing."""
    left = width // 2 - 100
    top = height // 2 - 20
    spacing = 40
    layout = {}
    for index, difficulty in enumerate(Difficulty):
        layout[difficulty] = pygame.Rect(left, top + index * spacing, 200, 30)
    layout[Action.START] = pygame.Rect(left, top + spacing * 3 + 20, 200, 40)
    return layout


def menu_hit(pos: tuple[int, int], layout: dict | None = None):
    """Return the ``Difficulty`` or ``Action.START`` under ``pos``."""
    layout = layout or menu_layout()
    for target, rect in layout.items():
        if rect.collidepoint(pos):
            return target
    return None


def dpad_layout(width: int = SCREEN_WIDTH, top: int = HUD_HEIGHT + PLAYFIELD_HEIGHT, height: int = DPAD_HEIGHT) -> dict:
    """On-screen direction buttons arranged as a cross in the bottom strip."""
    size = (height - 10) // 3
    cx = width // 2
    cy = top + height // 2
    half = size // 2
    return {
        Direction.UP: pygame.Rect(cx - half, cy - half - size, size, size),
        Direction.DOWN: pygame.Rect(cx - half, cy + half, size, size),
        Direction.LEFT: pygame.Rect(cx - half - size, cy - half, size, size),
        Direction.RIGHT: pygame.Rect(cx + half, cy - half, size, size),
    }


def dpad_hit(pos: tuple[int, int], layout: dict | None = None):
    layout = layout or dpad_layout()
    for direction, rect in layout.items():
        if rect.collidepoint(pos):
            return direction
    return None
