"""Menu / play / pause / game-over state machine.

The session owns the current ``GameState``, the tick timer and the high score
store. Input handlers and the tick event all go through it, so all mutation
happens on the one pygame event loop.
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum

import pygame
from config import TICK_PERIODS_MS, DEFAULT_DIFFICULTY
from food import Powerup
from grid import Cell
from highscore import HighScoreStore
from snake import Direction
from state import DEFAULT_GRID, GameState, TickEvent, new_game, steer, tick

logger = logging.getLogger(__name__)


class Phase(Enum):
    MENU = "menu"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def period_ms(self) -> int:
        return TICK_PERIODS_MS[self.value]

    @property
    def label(self) -> str:
        return self.value.capitalize()

    def cycled(self, step: int) -> "Difficulty":
        levels = list(Difficulty)
        return levels[(levels.index(self) + step) % len(levels)]


@dataclass(frozen=True)
class Snapshot:
    """Read-only view handed to the renderer each frame."""

    phase: Phase
    difficulty: Difficulty
    snake: tuple[Cell, ...]
    direction: Direction
    food: Cell | None
    powerup: Powerup | None
    score: int
    high_score: int
    new_best: bool = False


class Session:
    def __init__(
        self,
        timer,
        store: HighScoreStore,
        difficulty: Difficulty = Difficulty(DEFAULT_DIFFICULTY),
        grid=DEFAULT_GRID,
        rng: random.Random | None = None,
        clock=None,
    ):
        self.timer = timer
        self.store = store
        self.difficulty = difficulty
        self.grid = grid
        self.rng = rng or random.Random()
        self.clock = clock or pygame.time.get_ticks
        self.phase = Phase.MENU
        self.state: GameState | None = None
        self.high_score = store.load()
        self.new_best = False
        self.listeners = []

    def subscribe(self, listener):
        """Register ``listener(event)`` for every tick event."""
        self.listeners.append(listener)

    def _ignore(self, action: str):
        logger.debug("Ignoring %s while %s", action, self.phase.value)

    def start(self):
        """Begin a fresh run from the menu or after a game over."""
        if self.phase not in (Phase.MENU, Phase.GAME_OVER):
            self._ignore("start")
            return
        self.high_score = max(self.high_score, self.store.load())
        self.state = new_game(self.grid, self.high_score, self.rng)
        self.new_best = False
        self.phase = Phase.PLAYING
        self.timer.start(self.difficulty.period_ms)
        logger.info("Game started on %s", self.difficulty.label)

    restart = start

    def toggle_pause(self):
        if self.phase is Phase.PLAYING:
            self.timer.stop()
            self.phase = Phase.PAUSED
            logger.info("Paused")
        elif self.phase is Phase.PAUSED:
            self.timer.start(self.difficulty.period_ms)
            self.phase = Phase.PLAYING
            logger.info("Resumed")
        else:
            self._ignore("pause")

    def return_to_menu(self):
        if self.phase is Phase.MENU:
            self._ignore("menu")
            return
        self.timer.stop()
        self.phase = Phase.MENU
        logger.info("Back to menu")

    def cycle_difficulty(self, step: int):
        if self.phase is not Phase.MENU:
            self._ignore("difficulty change")
            return
        self.difficulty = self.difficulty.cycled(step)

    def select_difficulty(self, difficulty: Difficulty):
        if self.phase is not Phase.MENU:
            self._ignore("difficulty change")
            return
        self.difficulty = difficulty

    def steer(self, direction: Direction):
        if self.phase is not Phase.PLAYING:
            return
        self.state = steer(self.state, direction)

    def tick(self):
        """Run one update; called for each timer event."""
        if self.phase is not Phase.PLAYING:
            return []

        previous_best = self.state.high_score
        self.state, events = tick(self.state, self.clock(), self.rng)

        if self.state.high_score > previous_best:
            self.high_score = self.state.high_score
            self.new_best = True
            self.store.save(self.high_score)

        if self.state.crashed:
            self.timer.stop()
            self.phase = Phase.GAME_OVER
            logger.info("Game over with score %d", self.state.score)

        self._publish(events)
        return events

    def _publish(self, events: list[TickEvent]):
        for event in events:
            for listener in self.listeners:
                listener(event)

    def snapshot(self) -> Snapshot:
        state = self.state
        if state is None:
            return Snapshot(
                phase=self.phase,
                difficulty=self.difficulty,
                snake=(),
                direction=Direction.RIGHT,
                food=None,
                powerup=None,
                score=0,
                high_score=self.high_score,
            )
        return Snapshot(
            phase=self.phase,
            difficulty=self.difficulty,
            snake=state.snake,
            direction=state.direction,
            food=state.food,
            powerup=state.powerup,
            score=state.score,
            high_score=max(self.high_score, state.high_score),
            new_best=self.new_best,
        )
