"""Sound cues: retro waveforms synthesized with numpy, played through pygame.mixer"""
import logging
import os
import time
from typing import Callable, Dict, Optional

import numpy as np

# Suppress pygame welcome message
os.environ.setdefault('PYGAME_HIDE_SUPPORT_PROMPT', '1')

import pygame
import pygame.sndarray

from .config import CUES

logger = logging.getLogger(__name__)


class Synth:
    """Named sound cues with fire-and-forget playback"""

    def __init__(self, sample_rate: int = 22050):
        self.sample_rate = sample_rate
        self.sounds: Dict[str, pygame.mixer.Sound] = {}
        self.enabled = True
        try:
            pygame.mixer.init(frequency=sample_rate, size=-16, channels=2, buffer=512)
        except pygame.error as exc:
            # No audio device - the game plays silently
            logger.warning("Audio disabled: %s", exc)
            self.enabled = False
        self.recipes: Dict[str, Callable[[], np.ndarray]] = {
            'explode': self._explode_wave,
            'lose': self._lose_wave,
            'move': self._move_wave,
            'pew': self._pew_wave,
            'startup': self._startup_wave,
            'win': self._win_wave,
        }

    def _time(self, duration: float) -> np.ndarray:
        return np.linspace(0, duration, int(self.sample_rate * duration))

    def _square_wave(self, frequency: float, duration: float, volume: float = 0.3) -> np.ndarray:
        """Square wave (classic 8-bit sound)"""
        t = self._time(duration)
        return volume * np.sign(np.sin(2 * np.pi * frequency * t))

    def _sawtooth_wave(self, frequency: float, duration: float, volume: float = 0.3) -> np.ndarray:
        """Sawtooth wave (bright, buzzy)"""
        t = self._time(duration)
        return volume * 2 * ((frequency * t) % 1) - volume

    def _apply_lowpass_filter(self, wave: np.ndarray, cutoff_freq: float = 2000) -> np.ndarray:
        """Moving average lowpass to soften harsh edges"""
        window_size = max(1, int(self.sample_rate / cutoff_freq))
        kernel = np.ones(window_size) / window_size
        return np.convolve(wave, kernel, mode='same')

    def _apply_envelope(self, wave: np.ndarray, attack: float = 0.01, decay: float = 0.1) -> np.ndarray:
        """Linear attack and decay ramps"""
        length = len(wave)
        attack_samples = int(attack * self.sample_rate)
        decay_samples = int(decay * self.sample_rate)

        envelope = np.ones(length)
        if 0 < attack_samples < length:
            envelope[:attack_samples] = np.linspace(0, 1, attack_samples)
        if 0 < decay_samples < length:
            envelope[-decay_samples:] = np.linspace(1, 0, decay_samples)
        return wave * envelope

    def _make_sound(self, wave: np.ndarray) -> pygame.mixer.Sound:
        """Convert numpy array to pygame Sound object"""
        # Normalize and convert to 16-bit integers
        wave = np.clip(wave * 32767, -32767, 32767).astype(np.int16)
        # Create stereo by duplicating mono channel
        stereo = np.ascontiguousarray(np.column_stack((wave, wave)))
        return pygame.sndarray.make_sound(stereo)

    # Cue recipes

    def _pew_wave(self) -> np.ndarray:
        # Square wave with a fast downward pitch sweep
        t = self._time(0.12)
        freq = 1200 - 800 * (t / 0.12)
        wave = 0.25 * np.sign(np.sin(2 * np.pi * freq * t))
        wave = self._apply_lowpass_filter(wave, 5000)
        return self._apply_envelope(wave, 0.002, 0.05)

    def _move_wave(self) -> np.ndarray:
        # Low marching thud
        wave = self._square_wave(110, 0.08, 0.3)
        wave = self._apply_lowpass_filter(wave, 800)
        return self._apply_envelope(wave, 0.002, 0.04)

    def _explode_wave(self) -> np.ndarray:
        # Filtered noise with a descending saw underneath
        t = self._time(0.3)
        freq = 400 - 300 * t / 0.3
        wave = 0.15 * 2 * ((freq * t) % 1) - 0.15
        wave = wave + np.random.uniform(-0.25, 0.25, len(t))
        wave = self._apply_lowpass_filter(wave, 3000)
        return self._apply_envelope(wave, 0.003, 0.2)

    def _startup_wave(self) -> np.ndarray:
        # C-E-G-C arpeggio
        wave = np.concatenate([
            self._square_wave(523, 0.1, 0.15),
            self._square_wave(659, 0.1, 0.15),
            self._square_wave(784, 0.1, 0.15),
            self._square_wave(1047, 0.2, 0.15),
        ])
        wave = self._apply_lowpass_filter(wave, 4000)
        return self._apply_envelope(wave, 0.01, 0.1)

    def _win_wave(self) -> np.ndarray:
        # Rising fanfare
        wave = np.concatenate([
            self._sawtooth_wave(523, 0.12, 0.14),
            self._sawtooth_wave(659, 0.12, 0.14),
            self._sawtooth_wave(784, 0.12, 0.14),
            self._sawtooth_wave(1047, 0.12, 0.14),
            self._sawtooth_wave(1319, 0.4, 0.14),
        ])
        wave = self._apply_lowpass_filter(wave, 4000)
        return self._apply_envelope(wave, 0.01, 0.2)

    def _lose_wave(self) -> np.ndarray:
        # Long descending saw
        t = self._time(0.8)
        freq = 400 - 320 * t / 0.8
        wave = 0.2 * 2 * ((freq * t) % 1) - 0.2
        wave = self._apply_lowpass_filter(wave, 2000)
        return self._apply_envelope(wave, 0.01, 0.3)

    # Playback

    def add(self, name: str, path: Optional[str] = None) -> bool:
        """Register a cue, from path if it loads, otherwise from its recipe. Returns True if registered."""
        if not self.enabled:
            return False
        if path and os.path.exists(path):
            try:
                self.sounds[name] = pygame.mixer.Sound(path)
                return True
            except pygame.error as exc:
                logger.warning("Could not load %s (%s), using synthesized '%s'", path, exc, name)
        recipe = self.recipes.get(name)
        if recipe is None:
            logger.warning("No sound available for cue '%s'", name)
            return False
        try:
            self.sounds[name] = self._make_sound(recipe())
        except pygame.error as exc:
            logger.warning("Could not synthesize cue '%s': %s", name, exc)
            return False
        return True

    def play(self, name: str) -> None:
        """Play a cue without waiting for it"""
        if name in self.sounds:
            self.sounds[name].play()

    def wait(self, timeout: float = 5.0) -> None:
        """Block until every playing cue has finished (or timeout seconds pass)"""
        if not self.enabled:
            return
        deadline = time.monotonic() + timeout
        while pygame.mixer.get_busy() and time.monotonic() < deadline:
            time.sleep(0.01)

    def close(self) -> None:
        if self.enabled:
            pygame.mixer.quit()
            self.enabled = False


def register_cues(synth: Synth, sounds_dir: str) -> None:
    """Register every game cue, preferring <sounds_dir>/<cue>.wav when present"""
    for name in CUES:
        if not synth.add(name, os.path.join(sounds_dir, f"{name}.wav")):
            logger.debug("Cue '%s' not registered", name)
