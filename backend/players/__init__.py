"""
Player implementations: input sources that feed intents to a game session.
"""

from .base import Player
from .random_player import RandomPlayer
from .scripted_player import ScriptedPlayer

__all__ = [
    'Player',
    'RandomPlayer',
    'ScriptedPlayer',
]
