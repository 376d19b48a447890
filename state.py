"""Snake game state and the fixed-timestep update.

Everything here is pure: ``tick`` and ``steer`` take a ``GameState`` and
return a new one, leaving drawing, audio and timers to the caller.
"""

import logging
import random
from dataclasses import dataclass, replace
from enum import Enum

from config import (
    GRID_WIDTH,
    GRID_HEIGHT,
    INITIAL_SNAKE_LENGTH,
    FOOD_POINTS,
    POWERUP_POINTS,
    POWERUP_EXTRA_SEGMENTS,
    POWERUP_SPAWN_CHANCE,
)
from food import Powerup
from grid import Cell, Grid, NoFreeCellError, place_random_cell
from snake import Direction, initial_body, is_reversal, step_head

logger = logging.getLogger(__name__)

DEFAULT_GRID = Grid(GRID_WIDTH, GRID_HEIGHT)


class EventKind(Enum):
    ATE_FOOD = "ate_food"
    ATE_POWERUP = "ate_powerup"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class TickEvent:
    kind: EventKind
    cell: Cell
    points: int = 0


@dataclass(frozen=True)
class GameState:
    grid: Grid
    snake: tuple[Cell, ...]
    direction: Direction
    food: Cell
    powerup: Powerup | None = None
    score: int = 0
    high_score: int = 0
    direction_locked: bool = False
    crashed: bool = False

    @property
    def head(self) -> Cell:
        return self.snake[0]

    def occupied(self) -> set[Cell]:
        cells = set(self.snake)
        cells.add(self.food)
        if self.powerup is not None:
            cells.add(self.powerup.cell)
        return cells


def new_game(grid: Grid = DEFAULT_GRID, high_score: int = 0, rng: random.Random | None = None) -> GameState:
    """Build the opening state: a short snake at the centre heading right."""
    body = initial_body(grid, INITIAL_SNAKE_LENGTH)
    food = place_random_cell(grid, body, rng)
    return GameState(grid=grid, snake=body, direction=Direction.RIGHT, food=food, high_score=high_score)


def steer(state: GameState, direction: Direction) -> GameState:
    """Apply a direction change, at most once per tick and never a reversal."""
    if state.crashed or state.direction_locked:
        return state
    if is_reversal(state.direction, direction):
        return state
    return replace(state, direction=direction, direction_locked=True)


def _add_points(state: GameState, points: int) -> GameState:
    score = state.score + points
    return replace(state, score=score, high_score=max(state.high_score, score))


def tick(state: GameState, now_ms: int, rng: random.Random | None = None):
    """Advance the game one step.

    Returns ``(next_state, events)``. A crashed state is returned unchanged
    with no events.
    """
    if state.crashed:
        return state, []

    rng = rng or random
    events: list[TickEvent] = []
    state = replace(state, direction_locked=False)

    new_head = step_head(state.head, state.direction, state.grid)
    body = (new_head,) + state.snake

    if new_head == state.food:
        state = _add_points(replace(state, snake=body), FOOD_POINTS)
        events.append(TickEvent(EventKind.ATE_FOOD, new_head, FOOD_POINTS))
        excluded = set(body)
        if state.powerup is not None:
            excluded.add(state.powerup.cell)
        try:
            state = replace(state, food=place_random_cell(state.grid, excluded, rng))
        except NoFreeCellError:
            logger.info("Board is full at length %d", len(body))
            events.append(TickEvent(EventKind.GAME_OVER, new_head))
            return replace(state, crashed=True), events
    elif state.powerup is not None and new_head == state.powerup.cell:
        body = body + (body[-1],) * POWERUP_EXTRA_SEGMENTS
        state = _add_points(replace(state, snake=body, powerup=None), POWERUP_POINTS)
        events.append(TickEvent(EventKind.ATE_POWERUP, new_head, POWERUP_POINTS))
    else:
        state = replace(state, snake=body[:-1])

    if new_head in state.snake[1:]:
        state = replace(state, crashed=True)
        events.append(TickEvent(EventKind.GAME_OVER, new_head))

    if state.powerup is None and rng.random() < POWERUP_SPAWN_CHANCE:
        excluded = set(state.snake)
        excluded.add(state.food)
        try:
            cell = place_random_cell(state.grid, excluded, rng)
        except NoFreeCellError:
            logger.debug("No room for a powerup")
        else:
            state = replace(state, powerup=Powerup(cell, now_ms))

    if state.powerup is not None and state.powerup.expired(now_ms):
        state = replace(state, powerup=None)

    return state, events
