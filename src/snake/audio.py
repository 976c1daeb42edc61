# src/snake/audio.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Sequence, Tuple, Union
import logging

import numpy as np  # type: ignore
import pygame  # type: ignore

from .events import SoundKind

logger = logging.getLogger(__name__)

SAMPLE_RATE = 22050
ATTACK_S = 0.01      # linear fade-in before the exponential decay
DECAY_FLOOR = 0.01   # gain the decay reaches at the end of a tone


# =========================
#  Tone synthesis
# =========================

@dataclass(frozen=True)
class Tone:
    frequency: float
    duration: float          # seconds
    delay: float = 0.0       # seconds from the start of the sound
    waveform: str = "sine"   # "sine" or "square"
    volume: float = 0.1


MOVE_TONES: Tuple[Tone, ...] = (
    Tone(800, 0.02, waveform="square", volume=0.03),
)

EAT_TONES: Tuple[Tone, ...] = (
    Tone(523.25, 0.08, volume=0.15),               # C5
    Tone(659.25, 0.12, delay=0.05, volume=0.15),   # E5
)

GAME_OVER_TONES: Tuple[Tone, ...] = (
    Tone(440.00, 0.15, delay=0.0, volume=0.15),    # A4
    Tone(415.30, 0.15, delay=0.1, volume=0.15),    # G#4
    Tone(392.00, 0.15, delay=0.2, volume=0.15),    # G4
    Tone(349.23, 0.30, delay=0.3, volume=0.15),    # F4
)

SOUNDS: Dict[SoundKind, Tuple[Tone, ...]] = {
    SoundKind.MOVE: MOVE_TONES,
    SoundKind.EAT: EAT_TONES,
    SoundKind.GAME_OVER: GAME_OVER_TONES,
}


def _envelope(t: np.ndarray, duration: float, volume: float) -> np.ndarray:
    """Linear attack to ``volume``, then exponential decay to DECAY_FLOOR at ``duration``."""
    attack = min(ATTACK_S, duration)
    decay_len = max(duration - attack, 1e-9)
    rising = volume * t / attack
    falling = volume * (DECAY_FLOOR / volume) ** ((t - attack) / decay_len)
    return np.where(t < attack, rising, falling)


def _waveform(t: np.ndarray, tone: Tone) -> np.ndarray:
    phase = np.sin(2.0 * np.pi * tone.frequency * t)
    if tone.waveform == "square":
        return np.sign(phase)
    if tone.waveform == "sine":
        return phase
    raise ValueError(f"Unknown waveform: {tone.waveform}")


def synthesize(tones: Sequence[Tone], sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    """
    Mix ``tones`` into one mono 16-bit buffer, each placed at its delay.
    Returns an int16 array of shape [n_samples].
    """
    if not tones:
        return np.zeros(0, dtype=np.int16)

    total_s = max(t.delay + t.duration for t in tones)
    buf = np.zeros(int(np.ceil(total_s * sample_rate)), dtype=np.float64)

    for tone in tones:
        n = int(tone.duration * sample_rate)
        t = np.arange(n, dtype=np.float64) / sample_rate
        start = int(tone.delay * sample_rate)
        end = min(start + n, buf.shape[0])
        buf[start:end] += (_waveform(t, tone) * _envelope(t, tone.duration, tone.volume))[: end - start]

    np.clip(buf, -1.0, 1.0, out=buf)
    return (buf * 32767).astype(np.int16)


# =========================
#  Sound service
# =========================

class SoundService:
    """
    Plays the game's sound effects through pygame.mixer.

    Owned by the driver and passed around explicitly. The mixer is opened
    lazily on the first unmuted play; if audio is unavailable the service
    logs once and stays silent instead of raising.
    """

    def __init__(self, muted: bool = False, sample_rate: int = SAMPLE_RATE):
        self._muted = muted
        self.sample_rate = sample_rate
        self._sounds: Dict[SoundKind, "pygame.mixer.Sound"] = {}
        self._owns_mixer = False
        self._ready = False
        self._unavailable = False

    # ---------- Mute flag ----------

    @property
    def muted(self) -> bool:
        return self._muted

    @muted.setter
    def muted(self, value: bool) -> None:
        self._muted = bool(value)

    # ---------- Lifecycle ----------

    def _ensure_mixer(self) -> bool:
        if self._unavailable:
            return False
        if self._ready:
            return True
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=self.sample_rate, size=-16, channels=1)
                self._owns_mixer = True
            frequency, _size, channels = pygame.mixer.get_init()
            self._sounds = {
                kind: self._make_sound(tones, frequency, channels)
                for kind, tones in SOUNDS.items()
            }
        except pygame.error as exc:
            logger.warning("Audio unavailable, continuing without sound: %s", exc)
            self._unavailable = True
            return False
        self._ready = True
        return True

    @staticmethod
    def _make_sound(tones: Sequence[Tone], frequency: int, channels: int) -> "pygame.mixer.Sound":
        samples = synthesize(tones, frequency)
        if channels > 1:
            samples = np.ascontiguousarray(np.repeat(samples[:, None], channels, axis=1))
        return pygame.sndarray.make_sound(samples)

    def close(self) -> None:
        """Release mixer resources. Safe to call more than once."""
        self._sounds = {}
        self._ready = False
        if self._owns_mixer:
            pygame.mixer.quit()
            self._owns_mixer = False

    def __enter__(self) -> "SoundService":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ---------- Playback ----------

    def play(self, kind: Union[SoundKind, str]) -> None:
        if self._muted:
            return
        kind = SoundKind(kind)
        if not self._ensure_mixer():
            return
        try:
            self._sounds[kind].play()
        except pygame.error as exc:
            logger.warning("Failed to play %s sound: %s", kind.value, exc)
