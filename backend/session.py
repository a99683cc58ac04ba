"""
Game session: routes player intents to the Simulation and Scheduler.
"""

import logging
from typing import Optional

from domain.constants import IDLE
from domain.intents import Direction, Intent, Reset, Start, TogglePause
from scheduler import Scheduler
from simulation import Simulation

logger = logging.getLogger(__name__)


class GameSession:
    """
    Wires one Simulation to one Scheduler and accepts intents from any
    input source (keyboard mapping, Player implementations, tests).
    """

    def __init__(self, simulation: Simulation, scheduler: Scheduler):
        self.simulation = simulation
        self.scheduler = scheduler

    def dispatch(self, intent: Optional[Intent]) -> None:
        if intent is None:
            return
        if isinstance(intent, Start):
            self.start()
        elif isinstance(intent, TogglePause):
            self.simulation.toggle_pause()
        elif isinstance(intent, Direction):
            self.simulation.apply_direction(intent.vector)
        elif isinstance(intent, Reset):
            self.reset()
        else:
            logger.debug("Ignoring unknown intent %r", intent)

    def start(self) -> bool:
        if not self.simulation.start():
            return False
        self.scheduler.start()
        return True

    def reset(self) -> None:
        self.scheduler.cancel()
        self.simulation.reset()

    def press_start_or_pause(self) -> None:
        """Single start/pause control: starts from idle, toggles pause afterwards."""
        if self.simulation.phase == IDLE:
            self.start()
        else:
            self.simulation.toggle_pause()

    def poll(self, player) -> None:
        """Ask an input source for its next intent and apply it."""
        self.dispatch(player.get_intent(self.simulation.snapshot()))

    def run(self, player=None, max_frames: Optional[int] = None) -> int:
        """
        Run the blocking frame loop, polling `player` before every frame.

        Returns:
            Number of frames processed.
        """
        before_frame = (lambda: self.poll(player)) if player is not None else None
        return self.scheduler.run(max_frames=max_frames, before_frame=before_frame)
