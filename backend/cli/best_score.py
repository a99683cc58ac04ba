#!/usr/bin/env python3
"""
Show or reset the persisted best score.

Usage:
    python backend/cli/best_score.py show [--db-path PATH]
    python backend/cli/best_score.py reset [--confirm] [--db-path PATH]
"""

import os
import sys
import argparse
import logging
from typing import Callable, Optional

# Add parent directory to path to import backend modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from config import get_settings
from data_access import SqliteBestScoreStore
from database import get_database_path

logger = logging.getLogger(__name__)


def show_best_score(db_path: Optional[str] = None) -> int:
    store = SqliteBestScoreStore(db_path)
    score = store.get_best_score()
    logger.info("Best score: %d (%s)", score, get_database_path(db_path))
    return score


def reset_best_score(
    db_path: Optional[str] = None,
    confirm: bool = False,
    prompt: Callable[[str], str] = input,
) -> bool:
    """
    Delete the stored best score.

    Args:
        db_path: Database file (default: SNAKE_DB_PATH)
        confirm: If True, skip confirmation prompt
        prompt: Function used to ask for confirmation

    Returns:
        True if the score was cleared, False if cancelled
    """
    path = get_database_path(db_path)

    if not confirm:
        response = prompt(f"Type 'RESET' to clear the best score stored in {path}: ")
        if response != 'RESET':
            logger.info("Reset cancelled")
            return False

    deleted = SqliteBestScoreStore(path).clear()
    logger.info("Cleared best score (%d row(s) deleted)", deleted)
    return True


def main() -> None:
    parser = argparse.ArgumentParser(description="Show or reset the persisted best score")
    parser.add_argument("command", choices=["show", "reset"])
    parser.add_argument("--db-path", type=str, default=None,
                        help="SQLite file holding the best score (default: SNAKE_DB_PATH)")
    parser.add_argument("--confirm", action="store_true",
                        help="Skip the confirmation prompt when resetting")
    args = parser.parse_args()

    logging.basicConfig(level=get_settings().log_level, format="%(message)s")

    if args.command == "show":
        show_best_score(args.db_path)
    else:
        if not reset_best_score(args.db_path, confirm=args.confirm):
            sys.exit(1)


if __name__ == "__main__":
    main()
