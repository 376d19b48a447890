import random
from dataclasses import dataclass

import pygame
from config import (
    SCREEN_WIDTH,
    TILE_SIZE,
    COLOR_GRID,
    COLOR_BG,
    PLACEMENT_SCAN_THRESHOLD,
)

Cell = tuple[int, int]


class NoFreeCellError(Exception):
    """Raised when every cell of the grid is occupied."""


@dataclass(frozen=True)
class Grid:
    width: int
    height: int

    @property
    def size(self) -> int:
        return self.width * self.height

    def contains(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def wrap(self, cell: Cell) -> Cell:
        """Map a cell onto the torus so leaving one edge re-enters the other."""
        x, y = cell
        return x % self.width, y % self.height

    def cells(self):
        for y in range(self.height):
            for x in range(self.width):
                yield x, y

    @property
    def center(self) -> Cell:
        return self.width // 2, self.height // 2


def place_random_cell(grid: Grid, excluded, rng: random.Random | None = None) -> Cell:
    """Pick a uniformly random cell that is not in ``excluded``.

    Rejection sampling is used while the grid is mostly empty. Once the
    occupancy passes ``PLACEMENT_SCAN_THRESHOLD`` the free cells are listed
    explicitly. Sampling also gives up after one draw per cell and falls
    back to the scan, so placement always terminates.
    """
    rng = rng or random
    excluded = {cell for cell in excluded if grid.contains(cell)}

    if len(excluded) < grid.size * PLACEMENT_SCAN_THRESHOLD:
        for _ in range(grid.size):
            candidate = (rng.randrange(grid.width), rng.randrange(grid.height))
            if candidate not in excluded:
                return candidate

    free = [cell for cell in grid.cells() if cell not in excluded]
    if not free:
        raise NoFreeCellError(f"no free cell on a {grid.width}x{grid.height} grid")
    return rng.choice(free)


def build_background(height: int) -> pygame.Surface:
    """Pre-render the flat background with a faint grid overlay."""

    surface = pygame.Surface((SCREEN_WIDTH, height))
    surface.fill(COLOR_BG)
    draw_grid(surface, height)
    return surface


def draw_grid(surface: pygame.Surface, height: int, offset_y: int = 0):
    """Draw the faint cell lines over ``height`` pixels starting at ``offset_y``."""

    overlay = pygame.Surface((SCREEN_WIDTH, height), pygame.SRCALPHA)
    for x in range(0, SCREEN_WIDTH + 1, TILE_SIZE):
        pygame.draw.line(overlay, COLOR_GRID, (x, 0), (x, height))
    for y in range(0, height + 1, TILE_SIZE):
        pygame.draw.line(overlay, COLOR_GRID, (0, y), (SCREEN_WIDTH, y))
    surface.blit(overlay, (0, offset_y))
