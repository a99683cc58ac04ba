"""
Domain entities for the wrap-around snake engine.

This module contains the core game entities that are independent of
infrastructure concerns (storage, rendering, input devices).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, STILL, VALID_MOVES, GRID_SIZE,
    IDLE, RUNNING, PAUSED, OVER,
    ITEM_POINTS, START_TICK_MS, TICK_STEP_MS, MIN_TICK_MS,
)
from .snake import Snake
from .game_state import GameState
from .intents import Intent, Start, TogglePause, Reset, Direction

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'STILL', 'VALID_MOVES', 'GRID_SIZE',
    'IDLE', 'RUNNING', 'PAUSED', 'OVER',
    'ITEM_POINTS', 'START_TICK_MS', 'TICK_STEP_MS', 'MIN_TICK_MS',
    'Snake',
    'GameState',
    'Intent', 'Start', 'TogglePause', 'Reset', 'Direction',
]
