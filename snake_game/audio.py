"""
Synthesised sound effects and background music played through pygame.mixer.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional

import numpy as np
import pygame

from .hooks import Audio

logger = logging.getLogger(__name__)

SAMPLE_RATE = 22050

# Synthwave arpeggio: (frequency Hz, duration s)
MUSIC_NOTES = [
    (130.81, 0.2),  # C3
    (164.81, 0.2),  # E3
    (196.00, 0.2),  # G3
    (261.63, 0.2),  # C4
    (196.00, 0.2),  # G3
    (164.81, 0.2),  # E3
    (146.83, 0.2),  # D3
    (174.61, 0.2),  # F3
]


def synth_tone(waveform: str, start_hz: float, duration: float, *, end_hz: Optional[float] = None,
               gain: float = 0.3, end_gain: float = 0.01, sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    """
    Render a mono 16-bit tone whose pitch and volume both glide exponentially.

    waveform is one of 'sine', 'square', 'sawtooth' or 'triangle'.
    """
    n = max(1, int(duration * sample_rate))
    end_hz = start_hz if end_hz is None else end_hz
    progress = np.arange(n) / n
    freq = start_hz * (end_hz / start_hz) ** progress
    phase = 2 * np.pi * np.cumsum(freq) / sample_rate
    cycle = (phase / (2 * np.pi)) % 1.0

    if waveform == "sine":
        wave = np.sin(phase)
    elif waveform == "square":
        wave = np.where(cycle < 0.5, 1.0, -1.0)
    elif waveform == "sawtooth":
        wave = 2.0 * cycle - 1.0
    elif waveform == "triangle":
        wave = 2.0 * np.abs(2.0 * cycle - 1.0) - 1.0
    else:
        raise ValueError(f"unknown waveform: {waveform!r}")

    envelope = gain * (end_gain / gain) ** progress
    return (wave * envelope * (2**15 - 1)).astype(np.int16)


class PygameAudio(Audio):
    """Plays the eat and game-over cues and steps through the music loop."""

    def __init__(self, muted: bool = False):
        freq, _size, channels = pygame.mixer.get_init()
        self.channels = channels
        self.sample_rate = freq
        self.sounds: Dict[str, pygame.mixer.Sound] = {
            "eat": self._make_sound(synth_tone("sine", 600, 0.15, end_hz=900, sample_rate=freq)),
            "game_over": self._make_sound(synth_tone("sawtooth", 400, 0.5, end_hz=100, sample_rate=freq)),
        }
        self.notes: List[pygame.mixer.Sound] = [
            self._make_sound(synth_tone("triangle", hz, dur, gain=0.1, sample_rate=freq)) for hz, dur in MUSIC_NOTES
        ]
        self.note_index = 0
        self.music_playing = False
        self.muted = muted

    def _make_sound(self, samples: np.ndarray) -> pygame.mixer.Sound:
        if self.channels > 1:
            samples = np.repeat(samples[:, np.newaxis], self.channels, axis=1)
        return pygame.sndarray.make_sound(np.ascontiguousarray(samples))

    def _play(self, name: str) -> None:
        if not self.muted:
            self.sounds[name].play()

    def on_food_eaten(self) -> None:
        self._play("eat")

    def on_game_over(self) -> None:
        self._play("game_over")

    def on_music_beat(self) -> None:
        if self.muted or not self.music_playing:
            return
        self.notes[self.note_index].play()
        self.note_index = (self.note_index + 1) % len(self.notes)

    def start_music(self) -> None:
        self.music_playing = True

    def stop_music(self) -> None:
        self.music_playing = False

    def toggle_mute(self) -> bool:
        self.muted = not self.muted
        if self.muted:
            self.stop_music()
        else:
            # Test beep so the player hears that sound is back.
            self._play("eat")
            self.start_music()
        return self.muted


def create_audio(muted: bool = False) -> Audio:
    """
    PygameAudio when a mixer is available, otherwise the silent Audio.

    A muted backend still loads its sounds so the player can turn them on.
    """
    try:
        if pygame.mixer.get_init() is None:
            pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1, buffer=512)
        return PygameAudio(muted=muted)
    except pygame.error as e:
        logger.warning(f"Sound disabled, mixer unavailable: {e}")
        audio = Audio()
        audio.muted = muted
        return audio
