"""
Game System - State machine based sequence-memory game

This module provides the core of the Simon Says game: symbol sets, sequence
generation, timed playback, input matching and the state machine that
ties them together.
"""

from .game_types import Difficulty, GameStatus, Verdict, GameSnapshot
from .symbols import Symbol, SYMBOL_SETS, SUPPORTED_SIZES, get_symbol_set
from .sequence_generator import SequenceGenerator, next_symbol, seeded_generator
from .playback_scheduler import PlaybackScheduler, PlaybackToken
from .input_matcher import InputMatcher
from .game_session import GameSession
from .states import GameState, IdleState, ShowingState, WaitingState, FailureState
from .game_manager import GameManager
from .config import GameConfig, TimingConfig, AudioConfig, ScoreConfig

__all__ = [
    # Types
    "Difficulty",
    "GameStatus",
    "Verdict",
    "GameSnapshot",
    # Symbols and generation
    "Symbol",
    "SYMBOL_SETS",
    "SUPPORTED_SIZES",
    "get_symbol_set",
    "SequenceGenerator",
    "next_symbol",
    "seeded_generator",
    # Engine
    "PlaybackScheduler",
    "PlaybackToken",
    "InputMatcher",
    "GameSession",
    "GameManager",
    # States
    "GameState",
    "IdleState",
    "ShowingState",
    "WaitingState",
    "FailureState",
    # Configuration
    "GameConfig",
    "TimingConfig",
    "AudioConfig",
    "ScoreConfig"
]
