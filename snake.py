from enum import Enum

import pygame
from config import TILE_SIZE, COLOR_SNAKE_HEAD, COLOR_SNAKE_BORDER, load_scaled_image
from grid import Cell, Grid


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def vector(self) -> tuple[int, int]:
        return self.value

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))


def is_reversal(current: Direction, requested: Direction) -> bool:
    return requested is current.opposite


def step_head(head: Cell, direction: Direction, grid: Grid) -> Cell:
    """Return the wrapped cell one step from ``head`` towards ``direction``."""
    head_x, head_y = head
    dx, dy = direction.vector
    return grid.wrap((head_x + dx, head_y + dy))


def initial_body(grid: Grid, length: int) -> tuple[Cell, ...]:
    """Lay out a snake at the grid centre, head first, tail extending left."""
    start_x, start_y = grid.center
    return tuple(grid.wrap((start_x - i, start_y)) for i in range(length))


class SnakeRenderer:
    """Draws a snake from its cells; sprites are optional."""

    def __init__(self):
        self.head_image = load_scaled_image("head.png", (TILE_SIZE, TILE_SIZE))
        self.body_image = load_scaled_image("segment.png", (TILE_SIZE, TILE_SIZE))

    def draw(self, surface: pygame.Surface, cells, direction: Direction, offset_y: int = 0):
        for index, (x, y) in enumerate(cells):
            rect = pygame.Rect(x * TILE_SIZE, y * TILE_SIZE + offset_y, TILE_SIZE, TILE_SIZE)

            if index == 0:
                if self.head_image:
                    angle = self._direction_to_angle(direction)
                    surface.blit(pygame.transform.rotate(self.head_image, angle), rect)
                else:
                    pygame.draw.rect(surface, COLOR_SNAKE_HEAD, rect)
                    self._draw_eyes(surface, rect, direction)
            elif self.body_image:
                surface.blit(self.body_image, rect)
            else:
                pygame.draw.rect(surface, self.body_color(index), rect)

            pygame.draw.rect(surface, COLOR_SNAKE_BORDER, rect, width=1)

    @staticmethod
    def body_color(index: int) -> tuple[int, int, int]:
        """Fade the body from bright to darker green towards the tail."""
        return 46, max(255 - index * 5, 100), 113

    @staticmethod
    def _draw_eyes(surface: pygame.Surface, rect: pygame.Rect, direction: Direction):
        size = TILE_SIZE // 5
        inset = TILE_SIZE // 3
        near = inset
        far = TILE_SIZE - inset - size
        if direction is Direction.RIGHT:
            spots = [(TILE_SIZE - inset, near), (TILE_SIZE - inset, far)]
        elif direction is Direction.LEFT:
            spots = [(inset - size, near), (inset - size, far)]
        elif direction is Direction.UP:
            spots = [(near, inset - size), (far, inset - size)]
        else:
            spots = [(near, TILE_SIZE - inset), (far, TILE_SIZE - inset)]

        for ex, ey in spots:
            pygame.draw.rect(surface, (0, 0, 0), (rect.x + ex, rect.y + ey, size, size))

    @staticmethod
    def _direction_to_angle(direction: Direction) -> int:
        if direction is Direction.RIGHT:
            return 0
        if direction is Direction.LEFT:
            return 180
        if direction is Direction.UP:
            return 90
        return -90
