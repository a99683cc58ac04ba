"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import DIRECTION_NAMES, RUNNING
from domain.game_state import GameState
from domain.intents import Direction
from .base import Player


class RandomPlayer(Player):
    """
    An autopilot that picks a random direction avoiding its own body.

    The board wraps, so only the body can kill the snake.
    """

    def __init__(self, name: str = "autopilot", rng: Optional[random.Random] = None):
        super().__init__(name)
        self.rng = rng if rng is not None else random.Random()

    def get_intent(self, game_state: GameState) -> Optional[Direction]:
        if game_state.phase != RUNNING:
            return None

        body = game_state.body
        head_x, head_y = body[0]
        size = game_state.grid_size
        dx, dy = game_state.heading

        # Filter out moves that:
        # 1. Reverse into the neck
        # 2. Hit the body (the tail counts, it is checked before it moves)
        valid_moves: List[str] = []
        for name, (mx, my) in DIRECTION_NAMES.items():
            if len(body) > 1 and (mx, my) == (-dx, -dy):
                continue
            target = ((head_x + mx) % size, (head_y + my) % size)
            if target in body[1:]:
                continue
            valid_moves.append(name)

        # If no valid moves, keep going (we'll die anyway)
        if not valid_moves:
            return None

        return Direction(self.rng.choice(sorted(valid_moves)))
