"""
Step-by-step matching of player input against the round sequence
"""

from typing import List, Sequence

from .game_types import Verdict


class InputMatcher:
    """
    Checks each player input against the expected sequence as it arrives.

    A mismatch is resolved the instant it happens: the matcher returns
    REJECTED and locks until reset(). Progress is always a prefix of the
    expected sequence.

    Example:
        matcher = InputMatcher([2, 1, 3])
        matcher.submit(2)  # Verdict.ACCEPTED_CONTINUE
        matcher.submit(1)  # Verdict.ACCEPTED_CONTINUE
        matcher.submit(0)  # Verdict.REJECTED
    """

    def __init__(self, expected: Sequence[int]):
        """
        Args:
            expected: The round sequence to match against (read, never modified)
        """
        self._expected = expected
        self._progress: List[int] = []
        self._locked = False

    @property
    def progress(self) -> List[int]:
        """Copy of the inputs matched so far this round"""
        return list(self._progress)

    @property
    def is_locked(self) -> bool:
        return self._locked

    def submit(self, symbol_id: int) -> Verdict:
        """
        Match one input at index len(progress).

        Args:
            symbol_id: Symbol the player selected

        Returns:
            ACCEPTED_CONTINUE, ACCEPTED_ROUND_COMPLETE or REJECTED

        Raises:
            RuntimeError: If called again after a rejection without reset()
        """
        if self._locked:
            raise RuntimeError("InputMatcher is locked after a rejection; reset() first")

        index = len(self._progress)
        if index >= len(self._expected) or self._expected[index] != symbol_id:
            self._locked = True
            return Verdict.REJECTED

        self._progress.append(symbol_id)
        if len(self._progress) == len(self._expected):
            return Verdict.ACCEPTED_ROUND_COMPLETE
        return Verdict.ACCEPTED_CONTINUE

    def reset(self) -> None:
        """Clear progress and unlock for a new attempt"""
        self._progress = []
        self._locked = False

    def __str__(self) -> str:
        return f"InputMatcher(progress={len(self._progress)}/{len(self._expected)}, locked={self._locked})"
