"""
Tone Emitter - Synthesized button tones through the pygame mixer
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional, Tuple

import numpy as np
import pygame

from game_system.config import AudioConfig


class IToneEmitter(ABC):
    """
    Abstract interface for fire-and-forget button tones.

    play() must never raise: audio is an enhancement and the game keeps
    going silently when it is unavailable.
    """

    @abstractmethod
    def play(self, frequency_hz: float, duration_ms: int) -> None:
        """
        Start a tone and return immediately.

        Args:
            frequency_hz: Tone frequency in Hz
            duration_ms: Tone length in milliseconds
        """
        pass

    def cleanup(self) -> None:
        """Release audio resources (override if needed)"""
        pass


class PygameToneEmitter(IToneEmitter):
    """
    Plays sine tones with an exponential fade, synthesized with numpy.

    The mixer is opened lazily on the first tone. If it cannot be opened, or a
    tone fails to play, the failure is logged once and the emitter disables
    itself. Synthesized sounds are cached per (frequency, duration).
    """

    def __init__(self, audio_config: AudioConfig, logger):
        """
        Args:
            audio_config: Sample rate and gain ramp settings
            logger: ClassLogger instance for logging
        """
        self.audio_config = audio_config
        self.logger = logger
        self.mixer = pygame.mixer
        self._available: Optional[bool] = None
        self._sound_cache: Dict[Tuple[float, int], pygame.mixer.Sound] = {}

    @property
    def available(self) -> bool:
        """True once the mixer is open and no playback error has occurred"""
        return bool(self._available)

    def _ensure_mixer(self) -> bool:
        if self._available is not None:
            return self._available

        try:
            if not self.mixer.get_init():
                self.mixer.pre_init(frequency=self.audio_config.sample_rate_hz, size=-16, channels=1, buffer=512)
                self.mixer.init()
            self._available = True
            self.logger.info(f"Mixer ready: {self.mixer.get_init()}")
        except pygame.error as e:
            self._available = False
            self.logger.warning(f"Audio unavailable, continuing without sound: {e}")
        return self._available

    def synthesize(self, frequency_hz: float, duration_ms: int, sample_rate_hz: int, channels: int = 1) -> np.ndarray:
        """
        Build 16-bit samples for a sine tone fading from start_gain to end_gain.

        Args:
            frequency_hz: Tone frequency in Hz
            duration_ms: Tone length in milliseconds
            sample_rate_hz: Output sample rate
            channels: 1 for mono, 2 for stereo (duplicated)

        Returns:
            int16 array shaped (samples,) or (samples, channels)
        """
        sample_count = max(1, int(sample_rate_hz * duration_ms / 1000))
        t = np.arange(sample_count) / sample_rate_hz
        duration_s = duration_ms / 1000

        start_gain = self.audio_config.start_gain
        end_gain = self.audio_config.end_gain
        envelope = start_gain * np.power(end_gain / start_gain, t / duration_s)

        wave = np.sin(2 * np.pi * frequency_hz * t) * envelope
        samples = (wave * 32767).astype(np.int16)

        if channels > 1:
            samples = np.ascontiguousarray(np.repeat(samples[:, np.newaxis], channels, axis=1))
        return samples

    def _get_sound(self, frequency_hz: float, duration_ms: int) -> pygame.mixer.Sound:
        key = (frequency_hz, duration_ms)
        sound = self._sound_cache.get(key)
        if sound is None:
            mixer_rate, _, mixer_channels = self.mixer.get_init()
            samples = self.synthesize(frequency_hz, duration_ms, mixer_rate, mixer_channels)
            sound = pygame.sndarray.make_sound(samples)
            self._sound_cache[key] = sound
        return sound

    def play(self, frequency_hz: float, duration_ms: int) -> None:
        if duration_ms <= 0:
            self.logger.debug(f"Skipping empty tone {frequency_hz:.2f}Hz")
            return
        if not self._ensure_mixer():
            return

        try:
            self._get_sound(frequency_hz, duration_ms).play()
        except (pygame.error, ValueError, TypeError) as e:
            self._available = False
            self.logger.warning(f"Tone playback failed, disabling audio: {e}")

    def cleanup(self) -> None:
        """Stop playback and close the mixer"""
        self._sound_cache.clear()
        if self._available and self.mixer.get_init():
            self.mixer.quit()
            self.logger.info("Mixer closed")
        self._available = None
