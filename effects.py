import random
from dataclasses import dataclass

import pygame
from config import TILE_SIZE, COLOR_FOOD, COLOR_POWERUP, COLOR_STAR, load_font
from state import EventKind

PARTICLE_COUNTS = {
    EventKind.ATE_FOOD: (15, COLOR_FOOD),
    EventKind.ATE_POWERUP: (25, COLOR_POWERUP),
}
POPUP_SIZES = {
    EventKind.ATE_FOOD: 24,
    EventKind.ATE_POWERUP: 30,
}


@dataclass
class Particle:
    x: float
    y: float
    size: float
    color: tuple[int, int, int]
    speed_x: float
    speed_y: float
    life: float = 1.0

    @property
    def alive(self) -> bool:
        return self.life > 0 and self.size > 0


@dataclass
class ScorePopup:
    text: str
    x: float
    y: float
    size: float
    alpha: float = 1.0


class Effects:
    """Particle bursts and "+N" popups for eat events.

    Runs on its own per-frame lifecycle, independent of game ticks.
    """

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()
        self.particles: list[Particle] = []
        self.popup: ScorePopup | None = None
        self._fonts: dict[int, pygame.font.Font] = {}

    def __call__(self, event):
        if event.kind not in PARTICLE_COUNTS:
            return
        count, color = PARTICLE_COUNTS[event.kind]
        x, y = event.cell
        self.burst(x * TILE_SIZE, y * TILE_SIZE, count, color)
        self.popup = ScorePopup(f"+{event.points}", x * TILE_SIZE, y * TILE_SIZE, POPUP_SIZES[event.kind])

    def burst(self, x: float, y: float, count: int, color):
        for _ in range(count):
            self.particles.append(
                Particle(
                    x=x + TILE_SIZE / 2,
                    y=y + TILE_SIZE / 2,
                    size=self.rng.random() * 5 + 2,
                    color=color,
                    speed_x=(self.rng.random() - 0.5) * 4,
                    speed_y=(self.rng.random() - 0.5) * 4,
                )
            )

    def clear(self):
        self.particles = []
        self.popup = None

    def update(self):
        for p in self.particles:
            p.x += p.speed_x
            p.y += p.speed_y
            p.life -= 0.02
            p.size -= 0.1
        self.particles = [p for p in self.particles if p.alive]

        if self.popup:
            self.popup.y -= 1
            self.popup.size -= 0.2
            self.popup.alpha -= 0.02
            if self.popup.alpha <= 0:
                self.popup = None

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            self._fonts[size] = load_font(size)
        return self._fonts[size]

    def draw(self, surface: pygame.Surface, offset_y: int = 0):
        for p in self.particles:
            side = int(p.size * 2) + 2
            dot = pygame.Surface((side, side), pygame.SRCALPHA)
            alpha = int(255 * max(0.0, min(1.0, p.life)))
            pygame.draw.circle(dot, (*p.color, alpha), (side // 2, side // 2), p.size)
            surface.blit(dot, (p.x - side // 2, p.y - side // 2 + offset_y))

        if self.popup:
            text = self._font(max(1, int(self.popup.size))).render(self.popup.text, True, COLOR_STAR)
            text.set_alpha(int(255 * max(0.0, self.popup.alpha)))
            surface.blit(text, (self.popup.x, self.popup.y + offset_y))
