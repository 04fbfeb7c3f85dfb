"""
Score System Module

Persists the best completed round count per board size and difficulty.
"""

from .score_store import IScoreStore, MemoryScoreStore, CsvScoreStore, score_key

__all__ = [
    'IScoreStore',
    'MemoryScoreStore',
    'CsvScoreStore',
    'score_key'
]
