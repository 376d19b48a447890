import random

import pytest

from audio import CUES, SAMPLE_RATE, synthesize
from effects import Effects
from state import EventKind, TickEvent


class TestSynthesis:
    @pytest.mark.parametrize("kind", list(CUES))
    def test_length_matches_duration(self, kind):
        duration = CUES[kind][3]
        samples = synthesize(kind)
        assert len(samples) == int(SAMPLE_RATE * duration)

    def test_stereo_interleaves(self):
        mono = synthesize(EventKind.ATE_FOOD)
        stereo = synthesize(EventKind.ATE_FOOD, channels=2)
        assert len(stereo) == 2 * len(mono)
        assert stereo[0::2] == stereo[1::2]

    def test_gain_decays(self):
        samples = synthesize(EventKind.GAME_OVER)
        quarter = len(samples) // 4
        head = max(abs(s) for s in samples[:quarter])
        tail = max(abs(s) for s in samples[-quarter:])
        assert tail < head

    def test_within_16_bit_range(self):
        for kind in CUES:
            assert max(abs(s) for s in synthesize(kind)) <= 32767


class TestEffects:
    def test_food_burst_and_popup(self):
        fx = Effects(random.Random(0))
        fx(TickEvent(EventKind.ATE_FOOD, (3, 4), 1))
        assert len(fx.particles) == 15
        assert fx.popup.text == "+1"

    def test_powerup_burst(self):
        fx = Effects(random.Random(0))
        fx(TickEvent(EventKind.ATE_POWERUP, (3, 4), 5))
        assert len(fx.particles) == 25
        assert fx.popup.text == "+5"

    def test_game_over_has_no_effect(self):
        fx = Effects(random.Random(0))
        fx(TickEvent(EventKind.GAME_OVER, (3, 4)))
        assert fx.particles == []
        assert fx.popup is None

    def test_everything_decays(self):
        fx = Effects(random.Random(0))
        fx(TickEvent(EventKind.ATE_POWERUP, (3, 4), 5))
        for _ in range(80):
            fx.update()
        assert fx.particles == []
        assert fx.popup is None

    def test_popup_rises_and_fades(self):
        fx = Effects(random.Random(0))
        fx(TickEvent(EventKind.ATE_FOOD, (3, 4), 1))
        y = fx.popup.y
        fx.update()
        assert fx.popup.y == y - 1
        assert fx.popup.alpha == pytest.approx(0.98)
