"""
Game constants for the wrap-around snake.
"""

# Board
GRID_SIZE = 12

# Movement directions (dx, dy)
UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)
STILL = (0, 0)
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

DIRECTION_NAMES = {
    "UP": UP,
    "DOWN": DOWN,
    "LEFT": LEFT,
    "RIGHT": RIGHT,
}

# Lifecycle phases
IDLE = "idle"
RUNNING = "running"
PAUSED = "paused"
OVER = "over"

# Scoring and difficulty ramp
ITEM_POINTS = 10
START_TICK_MS = 120
TICK_STEP_MS = 2
MIN_TICK_MS = 80
