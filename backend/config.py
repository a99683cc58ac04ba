"""
Runtime settings read from the environment (and a local .env file).

Environment variables:
    SNAKE_DB_PATH: SQLite file holding the best score (default: backend/snake.db)
    SNAKE_LOG_LEVEL: logging level name for CLI entry points (default: INFO)
    SNAKE_FRAME_MS: host frame interval for the headless loop (default: 16)
    SNAKE_SEED: integer seed for item placement (default: unset, random)
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_DB_PATH = str(Path(__file__).parent / 'snake.db')


@dataclass
class Settings:
    db_path: str
    log_level: str
    frame_ms: float
    seed: Optional[int]


def _optional_int(value: Optional[str]) -> Optional[int]:
    if value is None or not value.strip():
        return None
    return int(value)


def get_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings(
        db_path=os.getenv('SNAKE_DB_PATH', DEFAULT_DB_PATH).strip() or DEFAULT_DB_PATH,
        log_level=os.getenv('SNAKE_LOG_LEVEL', 'INFO').upper(),
        frame_ms=float(os.getenv('SNAKE_FRAME_MS', '16')),
        seed=_optional_int(os.getenv('SNAKE_SEED')),
    )
