import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from grid import Grid  # noqa: E402
from snake import Direction  # noqa: E402
from state import GameState  # noqa: E402


class FakeTimer:
    """Records start/stop calls instead of posting pygame events."""

    def __init__(self):
        self.period_ms = None
        self.starts = []
        self.stops = 0

    @property
    def active(self):
        return self.period_ms is not None

    def start(self, period_ms):
        if self.active:
            self.stop()
        self.period_ms = period_ms
        self.starts.append(period_ms)

    def stop(self):
        if self.active:
            self.stops += 1
        self.period_ms = None

    def reset(self, period_ms):
        self.stop()
        self.start(period_ms)


class NeverRandom(random.Random):
    """Random source whose ``random()`` never triggers a powerup spawn."""

    getrandbits = random.Random.getrandbits

    def random(self):
        return 0.99


class AlwaysRandom(random.Random):
    """Random source whose ``random()`` always triggers a powerup spawn."""

    getrandbits = random.Random.getrandbits

    def random(self):
        return 0.0


@pytest.fixture
def timer():
    return FakeTimer()


@pytest.fixture
def rng():
    return NeverRandom(1234)


@pytest.fixture
def make_state():
    def _make(snake, direction=Direction.RIGHT, food=(0, 0), grid=Grid(20, 20), **kwargs):
        return GameState(grid=grid, snake=tuple(snake), direction=direction, food=food, **kwargs)

    return _make


class ScriptedRandom(NeverRandom):
    """Returns queued ``randrange`` results first, then draws normally."""

    draws: list = []

    def randrange(self, *args, **kwargs):
        if self.draws:
            return self.draws.pop(0)
        return super().randrange(*args, **kwargs)


def scripted_random(draws, seed=0):
    rng = ScriptedRandom(seed)
    rng.draws = list(draws)
    return rng
