"""
Base player interface: an input source for the simulation.
"""

from typing import Optional

from domain.game_state import GameState
from domain.intents import Intent


class Player:
    """
    Base class/interface for input logic.

    Each player is responsible for returning the next intent (or None)
    given the current game state.
    """

    def __init__(self, name: str = "player"):
        self.name = name

    def get_intent(self, game_state: GameState) -> Optional[Intent]:
        """
        Return the next intent given the current game state.

        Args:
            game_state: Current snapshot of the game

        Returns:
            An Intent (Start, TogglePause, Direction, Reset) or None
        """
        raise NotImplementedError
