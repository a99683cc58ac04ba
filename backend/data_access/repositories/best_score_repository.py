"""
Best score repository: the single persisted high score.
"""

from .base import BaseRepository


class BestScoreRepository(BaseRepository):
    """
    Repository for the one-row best_score table.
    """

    def get(self) -> int:
        """Return the stored best score, 0 when nothing was stored yet."""
        with self.read_connection() as (conn, cursor):
            cursor.execute("SELECT score FROM best_score WHERE id = 1")
            row = cursor.fetchone()
            return int(row["score"]) if row is not None else 0

    def set(self, score: int) -> None:
        with self.connection() as (conn, cursor):
            cursor.execute(
                """
                INSERT INTO best_score (id, score, updated_at)
                VALUES (1, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(id) DO UPDATE SET
                    score = excluded.score,
                    updated_at = CURRENT_TIMESTAMP
                """,
                (score,),
            )

    def clear(self) -> int:
        """Delete the stored score. Returns the number of rows removed."""
        with self.connection() as (conn, cursor):
            cursor.execute("DELETE FROM best_score")
            return cursor.rowcount
