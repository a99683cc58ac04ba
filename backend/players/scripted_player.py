"""
Scripted player - replays a fixed list of intents, one per poll.
"""

from typing import Iterable, Optional

from domain.game_state import GameState
from domain.intents import Intent
from .base import Player


class ScriptedPlayer(Player):
    """
    Returns the queued intents in order; None entries mean "no input this
    frame". Returns None once the script is exhausted.
    """

    def __init__(self, intents: Iterable[Optional[Intent]], name: str = "script"):
        super().__init__(name)
        self.intents = list(intents)
        self.position = 0

    def get_intent(self, game_state: GameState) -> Optional[Intent]:
        if self.position >= len(self.intents):
            return None
        intent = self.intents[self.position]
        self.position += 1
        return intent

    @property
    def exhausted(self) -> bool:
        return self.position >= len(self.intents)
