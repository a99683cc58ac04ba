"""
Database configuration and schema management for the best-score store.

This module provides SQLite connection management with environment-aware
path selection and schema initialization.
"""

import logging
import os
import sqlite3
from pathlib import Path
from typing import Optional

from config import get_settings

logger = logging.getLogger(__name__)


def get_database_path(db_path: Optional[str] = None) -> str:
    """
    Determine the SQLite database path.

    Args:
        db_path: Explicit path; when omitted SNAKE_DB_PATH (or the default
            backend/snake.db) is used.

    Returns:
        Path to the SQLite database file; its directory is created if missing.
    """
    path = db_path or get_settings().db_path
    os.makedirs(Path(path).parent, exist_ok=True)
    return path


def get_connection(db_path: Optional[str] = None) -> sqlite3.Connection:
    """
    Get a database connection with appropriate settings.

    Returns:
        sqlite3.Connection: Database connection with row factory enabled.
    """
    conn = sqlite3.connect(get_database_path(db_path))
    conn.row_factory = sqlite3.Row  # Enable column access by name
    return conn


def init_database(db_path: Optional[str] = None) -> None:
    """
    Initialize the schema. Safe to call multiple times (uses IF NOT EXISTS).
    """
    path = get_database_path(db_path)
    logger.debug("Initializing database at: %s", path)

    conn = get_connection(path)
    cursor = conn.cursor()

    try:
        # Single-row table: id is pinned to 1
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS best_score (
                id INTEGER PRIMARY KEY CHECK(id = 1),
                score INTEGER NOT NULL DEFAULT 0 CHECK(score >= 0),
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)
        conn.commit()
    except Exception as e:
        conn.rollback()
        logger.error(f"Error initializing database: {e}")
        raise
    finally:
        conn.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    init_database()
    logger.info("Database ready at: %s", get_database_path())
