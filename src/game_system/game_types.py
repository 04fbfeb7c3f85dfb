"""
Core enumerations and the observable game snapshot
"""

import enum
from dataclasses import dataclass
from typing import Optional


class Difficulty(str, enum.Enum):
    """Failure-recovery policy: replay the round or end the game"""
    NORMAL = "normal"
    STRICT = "strict"


class GameStatus(str, enum.Enum):
    """Which phase the game is in; decides which commands are accepted"""
    IDLE = "idle"
    SHOWING = "showing"
    WAITING = "waiting"
    SUCCESS_TRANSITION = "success"
    FAILURE = "failure"

    @property
    def accepts_input(self) -> bool:
        return self is GameStatus.WAITING


class Verdict(enum.Enum):
    """Outcome of one player input checked against the round sequence"""
    ACCEPTED_CONTINUE = "accepted-continue"
    ACCEPTED_ROUND_COMPLETE = "accepted-round-complete"
    REJECTED = "rejected"

    @property
    def accepted(self) -> bool:
        return self is not Verdict.REJECTED


@dataclass(frozen=True)
class GameSnapshot:
    """
    Immutable view of everything a display needs after a transition.

    Usage:
        snapshot = game_manager.snapshot()
        print(snapshot.status_message)
    """
    status: GameStatus
    difficulty: Difficulty
    button_count: int
    round: int
    score: int
    best_score: Optional[int]
    active_symbol: Optional[int]
    progress_length: int
    sequence_length: int

    @property
    def status_message(self) -> str:
        """Short player-facing description of the current phase"""
        if self.status is GameStatus.IDLE:
            return "Press Start to begin."
        if self.status is GameStatus.SHOWING:
            return f"Round {self.round} - Watch"
        if self.status is GameStatus.WAITING:
            return f"Your turn ({self.progress_length + 1}/{self.sequence_length})"
        if self.status is GameStatus.FAILURE:
            return f"Game Over. Score: {self.score}"
        return ""

    def __str__(self) -> str:
        best = "-" if self.best_score is None else str(self.best_score)
        return (
            f"GameSnapshot("
            f"status={self.status.value}, "
            f"round={self.round}, "
            f"score={self.score}, "
            f"best={best}, "
            f"active={self.active_symbol}"
            f")"
        )
