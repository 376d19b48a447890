import logging
import math
from array import array

import pygame
from state import EventKind

logger = logging.getLogger(__name__)

SAMPLE_RATE = 22050
AMPLITUDE = 32767

# waveform, frequency breakpoints (seconds, hz), start gain, duration
CUES = {
    EventKind.ATE_FOOD: ("sine", [(0.0, 880), (0.1, 440)], 0.1, 0.1),
    EventKind.ATE_POWERUP: ("square", [(0.0, 440), (0.1, 880), (0.2, 1320)], 0.1, 0.2),
    EventKind.GAME_OVER: ("sawtooth", [(0.0, 220), (0.5, 110)], 0.2, 0.5),
}

END_GAIN = 0.01


def _exp_ramp(start: float, end: float, t: float) -> float:
    """Exponential interpolation between ``start`` and ``end`` for t in [0, 1]."""
    return start * (end / start) ** t


def _frequency_at(breakpoints, t: float) -> float:
    for (t0, f0), (t1, f1) in zip(breakpoints, breakpoints[1:]):
        if t <= t1:
            return _exp_ramp(f0, f1, (t - t0) / (t1 - t0))
    return breakpoints[-1][1]


def _oscillator(waveform: str, phase: float) -> float:
    cycle = phase % 1.0
    if waveform == "sine":
        return math.sin(2 * math.pi * cycle)
    if waveform == "square":
        return 1.0 if cycle < 0.5 else -1.0
    if waveform == "sawtooth":
        return 2.0 * cycle - 1.0
    raise ValueError(f"unknown waveform {waveform!r}")


def synthesize(kind: EventKind, sample_rate: int = SAMPLE_RATE, channels: int = 1) -> array:
    """Render a cue as signed 16-bit samples, interleaved over ``channels``."""
    waveform, breakpoints, gain, duration = CUES[kind]
    length = int(sample_rate * duration)
    samples = array("h")
    phase = 0.0
    for i in range(length):
        t = i / sample_rate
        phase += _frequency_at(breakpoints, t) / sample_rate
        level = _exp_ramp(gain, END_GAIN, t / duration)
        value = int(_oscillator(waveform, phase) * level * AMPLITUDE)
        samples.extend([value] * channels)
    return samples


class AudioCues:
    """Plays a short synthesized cue for each tick event.

    Stays silent when the mixer cannot be opened.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = False
        self.sounds: dict[EventKind, pygame.mixer.Sound] = {}
        if enabled:
            self._init_mixer()

    def _init_mixer(self):
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1)
            frequency, size, channels = pygame.mixer.get_init()
            if size != -16:
                logger.warning("Mixer opened with unsupported sample size %d, sound disabled", size)
                return
            for kind in CUES:
                buffer = synthesize(kind, frequency, channels).tobytes()
                self.sounds[kind] = pygame.mixer.Sound(buffer=buffer)
        except pygame.error as exc:
            logger.warning("Audio unavailable: %s", exc)
            self.sounds = {}
            return
        self.enabled = True

    def __call__(self, event):
        if not self.enabled:
            return
        sound = self.sounds.get(event.kind)
        if sound is None:
            return
        try:
            sound.play()
        except pygame.error as exc:
            logger.debug("Could not play %s: %s", event.kind.value, exc)
