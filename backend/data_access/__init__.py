"""
Data access layer for best-score persistence.
"""

from .best_score import BestScoreStore, InMemoryBestScoreStore, SqliteBestScoreStore

__all__ = [
    'BestScoreStore',
    'InMemoryBestScoreStore',
    'SqliteBestScoreStore',
]
