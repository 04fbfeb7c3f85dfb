"""
Best score persistence keyed by (button count, difficulty)
"""

import csv
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from game_system.game_types import Difficulty

CSV_HEADER = ["Key", "BestScore"]

_LOAD_ERRORS = (OSError, ValueError, KeyError, TypeError, csv.Error)


def score_key(button_count: int, difficulty: Difficulty) -> str:
    """
    Storage key for one board configuration.

    Example:
        score_key(7, Difficulty.STRICT)  # "simonSays-7-strict"
    """
    return f"simonSays-{button_count}-{difficulty.value}"


class IScoreStore(ABC):
    """
    Abstract interface for best score storage.

    Writes have upsert-max semantics: a stored value is only ever raised.
    Implementations must never raise from read() or write(); persistence
    problems are logged and swallowed.
    """

    @abstractmethod
    def read(self, button_count: int, difficulty: Difficulty) -> Optional[int]:
        """
        Read the best score for a configuration.

        Returns:
            Stored best score, or None if absent or unreadable
        """
        pass

    @abstractmethod
    def write(self, button_count: int, difficulty: Difficulty, value: int) -> bool:
        """
        Raise the stored best score to value if it is higher (or absent).

        Returns:
            True if a new value was stored, False otherwise
        """
        pass


class MemoryScoreStore(IScoreStore):
    """In-process score store (no persistence across runs)"""

    def __init__(self, initial: Optional[Dict[str, int]] = None):
        """
        Args:
            initial: Best scores by score_key()
        """
        self._scores: Dict[str, int] = dict(initial or {})
        self.write_count = 0

    def read(self, button_count: int, difficulty: Difficulty) -> Optional[int]:
        return self._scores.get(score_key(button_count, difficulty))

    def write(self, button_count: int, difficulty: Difficulty, value: int) -> bool:
        self.write_count += 1
        key = score_key(button_count, difficulty)
        existing = self._scores.get(key)
        if existing is not None and value <= existing:
            return False
        self._scores[key] = value
        return True


class CsvScoreStore(IScoreStore):
    """
    Score store backed by a small key-value CSV file.

    File layout:
        Key,BestScore
        simonSays-4-normal,7
        simonSays-7-strict,5

    Each write rewrites the whole file through a temporary file and an
    atomic replace, so a crash never leaves a half-written table.
    """

    def __init__(self, scores_path: str, logger):
        """
        Args:
            scores_path: Path to the CSV file (created on first write)
            logger: ClassLogger instance for logging
        """
        self.scores_path = Path(scores_path)
        self.logger = logger

    def _load(self) -> Dict[str, int]:
        """Load all rows; raises on I/O or format errors"""
        scores: Dict[str, int] = {}
        if not self.scores_path.exists():
            return scores

        with open(self.scores_path, 'r', newline='', encoding='utf-8') as csv_file:
            reader = csv.DictReader(csv_file)
            for row in reader:
                key = row["Key"]
                if not key:
                    raise ValueError(f"Empty key in {self.scores_path}: {row}")
                value = int(row["BestScore"])
                if value < 0:
                    raise ValueError(f"Negative best score in {self.scores_path}: {row}")
                scores[key] = max(value, scores.get(key, value))
        return scores

    def _save(self, scores: Dict[str, int]) -> None:
        self.scores_path.parent.mkdir(parents=True, exist_ok=True)

        tmp_path = self.scores_path.with_name(self.scores_path.name + ".tmp")
        try:
            with open(tmp_path, 'w', newline='', encoding='utf-8') as csv_file:
                writer = csv.writer(csv_file)
                writer.writerow(CSV_HEADER)
                for key in sorted(scores):
                    writer.writerow([key, scores[key]])
            os.replace(tmp_path, self.scores_path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise

    def read(self, button_count: int, difficulty: Difficulty) -> Optional[int]:
        try:
            return self._load().get(score_key(button_count, difficulty))
        except _LOAD_ERRORS as e:
            self.logger.warning(f"Unable to load best score from {self.scores_path}: {e}")
            return None

    def write(self, button_count: int, difficulty: Difficulty, value: int) -> bool:
        try:
            scores = self._load()
        except _LOAD_ERRORS as e:
            self.logger.warning(f"Not saving best score, {self.scores_path} is unreadable: {e}")
            return False

        key = score_key(button_count, difficulty)
        existing = scores.get(key)
        if existing is not None and value <= existing:
            self.logger.debug(f"Best score for {key} stays {existing} (got {value})")
            return False

        scores[key] = value
        try:
            self._save(scores)
        except OSError as e:
            self.logger.warning(f"Unable to save best score to {self.scores_path}: {e}")
            return False

        self.logger.info(f"New best score for {key}: {value}")
        return True
