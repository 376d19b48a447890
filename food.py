import math
from dataclasses import dataclass

import pygame
from config import TILE_SIZE, COLOR_FOOD, COLOR_POWERUP, COLOR_STAR, POWERUP_LIFETIME_MS, load_scaled_image
from grid import Cell


@dataclass(frozen=True)
class Powerup:
    cell: Cell
    spawned_ms: int

    def expired(self, now_ms: int) -> bool:
        return now_ms - self.spawned_ms >= POWERUP_LIFETIME_MS


def star_points(cx: float, cy: float, spikes: int, outer: float, inner: float):
    """Vertices of a star polygon, starting at the top spike."""
    points = []
    step = math.pi / spikes
    rot = math.pi / 2 * 3
    for _ in range(spikes):
        points.append((cx + math.cos(rot) * outer, cy + math.sin(rot) * outer))
        rot += step
        points.append((cx + math.cos(rot) * inner, cy + math.sin(rot) * inner))
        rot += step
    return points


class FoodRenderer:
    def __init__(self):
        self.food_image = load_scaled_image("food.png", (TILE_SIZE, TILE_SIZE))
        self.powerup_image = load_scaled_image("powerup.png", (TILE_SIZE, TILE_SIZE))

    def draw_food(self, surface: pygame.Surface, cell: Cell, now_ms: int, offset_y: int = 0):
        x, y = cell
        dest = (x * TILE_SIZE, y * TILE_SIZE + offset_y)

        if self.food_image:
            surface.blit(self.food_image, dest)
            return

        pulse = 1 + 0.1 * math.sin(now_ms / 200)
        center = (dest[0] + TILE_SIZE / 2, dest[1] + TILE_SIZE / 2)
        pygame.draw.circle(surface, COLOR_FOOD, center, TILE_SIZE * pulse / 2)

    def draw_powerup(self, surface: pygame.Surface, powerup: Powerup, now_ms: int, offset_y: int = 0):
        x, y = powerup.cell
        dest = (x * TILE_SIZE, y * TILE_SIZE + offset_y)

        if self.powerup_image:
            surface.blit(self.powerup_image, dest)
            return

        pulse = 1 + 0.15 * math.sin(now_ms / 150)
        cx, cy = dest[0] + TILE_SIZE / 2, dest[1] + TILE_SIZE / 2
        pygame.draw.circle(surface, COLOR_POWERUP, (cx, cy), TILE_SIZE * pulse / 2)
        pygame.draw.polygon(surface, COLOR_STAR, star_points(cx, cy, 5, TILE_SIZE / 4, TILE_SIZE / 2.5))
