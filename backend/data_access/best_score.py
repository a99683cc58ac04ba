"""
Best score persistence.

The simulation talks to any object with get_best_score() / set_best_score();
two implementations live here: SQLite-backed and in-memory.
"""

import logging
from typing import Optional

from .repositories.best_score_repository import BestScoreRepository

logger = logging.getLogger(__name__)


def _validate(score: int) -> int:
    score = int(score)
    if score < 0:
        raise ValueError(f"Best score must be non-negative, got {score}.")
    return score


class BestScoreStore:
    """
    Interface for best-score persistence.
    """

    def get_best_score(self) -> int:
        raise NotImplementedError

    def set_best_score(self, score: int) -> None:
        raise NotImplementedError


class InMemoryBestScoreStore(BestScoreStore):
    """Keeps the best score for the lifetime of the process only."""

    def __init__(self, initial: int = 0):
        self._score = _validate(initial)

    def get_best_score(self) -> int:
        return self._score

    def set_best_score(self, score: int) -> None:
        self._score = _validate(score)


class SqliteBestScoreStore(BestScoreStore):
    """
    Stores the best score in SQLite so it survives process restarts.

    Args:
        db_path: database file; defaults to SNAKE_DB_PATH.
    """

    def __init__(self, db_path: Optional[str] = None):
        self.repository = BestScoreRepository(db_path)

    def get_best_score(self) -> int:
        return self.repository.get()

    def set_best_score(self, score: int) -> None:
        score = _validate(score)
        self.repository.set(score)
        logger.debug("Stored best score %d", score)

    def clear(self) -> int:
        return self.repository.clear()
