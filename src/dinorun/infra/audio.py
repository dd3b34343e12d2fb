"""
Synthesized sound cues played through pygame.mixer.

The three cues are generated once at startup from small oscillator recipes,
so no audio files are needed. Every failure here is logged and swallowed:
no sound is never a reason to stop the game.
"""

from __future__ import annotations

import array
import logging
import math
from dataclasses import dataclass
from typing import Any

import pygame

from dinorun.domain.events import SimEvent

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100
_SILENCE = 0.001  # exponential ramps cannot reach zero


@dataclass(frozen=True)
class ToneSpec:
    wave: str          # "sine" | "triangle"
    frequency: float   # Hz
    peak: float        # gain at the end of the attack
    attack: float      # seconds of linear ramp from 0 to peak
    decay_end: float   # time (s) at which the exponential decay reaches silence
    length: float      # total duration (s)


CUES: dict[SimEvent, ToneSpec] = {
    SimEvent.JUMP: ToneSpec("sine", 600.0, 0.18, 0.01, 0.25, 0.3),
    SimEvent.COLLISION: ToneSpec("triangle", 150.0, 0.2, 0.01, 0.5, 0.6),
    SimEvent.MILESTONE: ToneSpec("sine", 900.0, 0.12, 0.01, 0.15, 0.2),
}


def oscillator(wave: str, t: float, freq: float) -> float:
    if wave == "sine":
        return math.sin(2 * math.pi * freq * t)
    if wave == "triangle":
        p = (t * freq) % 1
        return 4 * abs(p - 0.5) - 1
    raise ValueError(f"unknown waveform: {wave}")


def envelope(spec: ToneSpec, t: float) -> float:
    if t < spec.attack:
        return spec.peak * (t / spec.attack)
    if t < spec.decay_end:
        frac = (t - spec.attack) / (spec.decay_end - spec.attack)
        return spec.peak * (_SILENCE / spec.peak) ** frac
    return _SILENCE


def synthesize(spec: ToneSpec, sample_rate: int = SAMPLE_RATE) -> array.array:
    """Mono signed 16-bit samples for one cue."""
    samples = array.array("h")
    for i in range(round(sample_rate * spec.length)):
        t = i / sample_rate
        value = oscillator(spec.wave, t, spec.frequency) * envelope(spec, t)
        samples.append(int(max(-32767, min(32767, value * 32767))))
    return samples


class SynthAudio:
    """Fire-and-forget cue player. `muted` suppresses playback entirely."""

    def __init__(self, *, muted: bool = False, mixer: Any = None) -> None:
        self.muted = muted
        self._mixer = mixer if mixer is not None else pygame.mixer
        self._sounds: dict[SimEvent, Any] = {}
        self._available = False

    @property
    def available(self) -> bool:
        return self._available

    def init(self) -> bool:
        """Open the mixer and build the cues. Returns False (audio disabled) on failure."""
        try:
            if self._mixer.get_init() is None:
                self._mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2, buffer=512)
            rate, _fmt, channels = self._mixer.get_init()
            for event, spec in CUES.items():
                self._sounds[event] = self._make_sound(synthesize(spec, rate), channels)
        except Exception as e:
            logger.warning("Audio disabled, mixer init failed: %s", e)
            self._sounds.clear()
            self._available = False
            return False

        self._available = True
        logger.info("Audio ready (%d cues)", len(self._sounds))
        return True

    def play(self, event: SimEvent) -> None:
        if self.muted or not self._available:
            return
        sound = self._sounds.get(event)
        if sound is None:
            return
        try:
            sound.play()
        except Exception as e:
            logger.warning("Could not play %s cue: %s", event.value, e)

    def close(self) -> None:
        if not self._available:
            return
        self._available = False
        try:
            self._mixer.quit()
        except Exception as e:
            logger.debug("Mixer shutdown failed: %s", e)

    def _make_sound(self, mono: array.array, channels: int) -> Any:
        if channels == 1:
            return self._mixer.Sound(buffer=mono)
        interleaved = array.array("h")
        for s in mono:
            for _ in range(channels):
                interleaved.append(s)
        return self._mixer.Sound(buffer=interleaved)


class NullAudio:
    """Silent sink for headless runs."""

    def __init__(self, *, muted: bool = False) -> None:
        self.muted = muted

    def init(self) -> bool:
        return False

    def play(self, event: SimEvent) -> None:
        pass

    def close(self) -> None:
        pass
