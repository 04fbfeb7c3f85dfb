"""
Per-game mutable state owned by the game manager
"""

from dataclasses import dataclass, field
from typing import List

from .input_matcher import InputMatcher


@dataclass
class GameSession:
    """
    Everything that belongs to one game: the round sequence, the player's
    progress through it, round number and score.

    A new GameSession is created for every new game; the old one is
    discarded, never reset in place.
    """
    sequence: List[int] = field(default_factory=list)
    round: int = 0
    score: int = 0
    score_recorded: bool = False

    # Matches against self.sequence by reference, so appends are seen
    matcher: InputMatcher = field(init=False, repr=False)

    def __post_init__(self):
        self.matcher = InputMatcher(self.sequence)

    @property
    def progress(self) -> List[int]:
        return self.matcher.progress

    def extend(self, symbol_id: int) -> None:
        """Append one symbol and move to the next round"""
        self.sequence.append(symbol_id)
        self.round = len(self.sequence)
        self.matcher.reset()
