"""
Mock Tone Emitter - No-op implementation for testing without audio hardware
"""

from typing import List, Tuple

from .tone_emitter import IToneEmitter


class MockToneEmitter(IToneEmitter):
    """
    Mock implementation of IToneEmitter that performs no audio operations.

    Records every requested tone so tests and headless runs can inspect them.
    """

    def __init__(self, logger):
        """
        Args:
            logger: ClassLogger instance for logging
        """
        self.logger = logger
        self.played: List[Tuple[float, int]] = []
        self.logger.info("🔇 MockToneEmitter initialized (audio disabled)")

    def play(self, frequency_hz: float, duration_ms: int) -> None:
        """Mock: Record the tone instead of playing it"""
        self.played.append((frequency_hz, duration_ms))
        self.logger.debug(f"Mock: Tone {frequency_hz:.2f}Hz for {duration_ms}ms")

    def cleanup(self) -> None:
        self.logger.debug(f"Mock: {len(self.played)} tones recorded")
