import pygame
import pytest

import timer as timer_module
from timer import TICK_EVENT, TickTimer


@pytest.fixture
def set_timer_calls(monkeypatch):
    calls = []
    monkeypatch.setattr(pygame.time, "set_timer", lambda event, millis: calls.append((event, millis)))
    monkeypatch.setattr(pygame, "get_init", lambda: False)
    return calls


def test_start_arms_pygame_timer(set_timer_calls):
    driver = TickTimer()
    driver.start(100)
    assert driver.active
    assert set_timer_calls == [(TICK_EVENT, 100)]


def test_restart_cancels_previous_timer(set_timer_calls):
    driver = TickTimer()
    driver.start(100)
    driver.start(70)
    assert set_timer_calls == [(TICK_EVENT, 100), (TICK_EVENT, 0), (TICK_EVENT, 70)]
    assert driver.period_ms == 70


def test_stop_is_idempotent(set_timer_calls):
    driver = TickTimer()
    driver.stop()
    driver.start(150)
    driver.stop()
    driver.stop()
    assert set_timer_calls == [(TICK_EVENT, 150), (TICK_EVENT, 0)]
    assert not driver.active


def test_reset(set_timer_calls):
    driver = TickTimer()
    driver.start(150)
    driver.reset(100)
    assert set_timer_calls[-1] == (TICK_EVENT, 100)
    assert driver.period_ms == 100


def test_tick_event_is_a_custom_type():
    assert timer_module.TICK_EVENT >= pygame.USEREVENT
