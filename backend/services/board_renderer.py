"""
Text renderer for terminal hosts.

Consumes GameState snapshots from the scheduler and prints the board plus a
status line whenever a tick or phase change happened since the last frame.
"""

import sys
from typing import Optional, TextIO

from domain.constants import IDLE, OVER, PAUSED, RUNNING
from domain.game_state import GameState

STATUS_MESSAGES = {
    IDLE: "Press SPACE to start",
    RUNNING: "Game Running - Use arrow keys or WASD",
    PAUSED: "Game Paused - Press SPACE to resume",
    OVER: "Game Over - Press R to play again",
}


def status_line(state: GameState) -> str:
    line = (
        f"{STATUS_MESSAGES.get(state.phase, state.phase)} | "
        f"Score: {state.score}  Best: {state.best_score}  "
        f"Speed: {state.tick_interval_ms}ms"
    )
    if state.phase == OVER:
        line += f"  Final score: {state.score}"
    return line


class BoardRenderer:
    """
    Prints frames that changed the board; frames that only advanced the
    accumulator are skipped.
    """

    def __init__(self, output: Optional[TextIO] = None):
        self.output = output if output is not None else sys.stdout
        self.frames_drawn = 0
        self._last_key = None

    def __call__(self, state: GameState) -> None:
        key = (state.tick_count, state.phase)
        if key == self._last_key:
            return
        self._last_key = key
        self.frames_drawn += 1
        print(state.print_board(), file=self.output)
        print(status_line(state), file=self.output)
        print("", file=self.output)
