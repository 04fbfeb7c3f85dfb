"""
Audio System Module

Provides button tone synthesis and playback for the Simon Says game.
"""

from .tone_emitter import IToneEmitter, PygameToneEmitter
from .mock_tone_emitter import MockToneEmitter

__all__ = [
    'IToneEmitter',
    'PygameToneEmitter',
    'MockToneEmitter'
]
