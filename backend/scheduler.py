"""
Fixed-timestep scheduler.

Turns a variable-rate host frame callback into one Simulation.advance() per
tick interval using an accumulator, then hands a single snapshot to the
renderer per frame.
"""

import logging
import time
from typing import Callable, Optional

from domain.constants import IDLE, OVER, PAUSED, RUNNING
from domain.game_state import GameState

logger = logging.getLogger(__name__)

Renderer = Callable[[GameState], None]


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class Scheduler:
    """
    Drives a Simulation at its own tick rate.

    Attributes:
        last_time: host time (ms) of the previous frame
        accumulator: elapsed ms not yet consumed by a tick
        active: whether further frames should be requested

    Args:
        simulation: the Simulation to advance
        renderer: called once per frame with a GameState snapshot
        clock: returns the current time in milliseconds
        sleep: blocks for a number of seconds (used by run())
        frame_ms: host frame interval for run()
    """

    def __init__(
        self,
        simulation,
        renderer: Optional[Renderer] = None,
        clock: Callable[[], float] = monotonic_ms,
        sleep: Callable[[float], None] = time.sleep,
        frame_ms: float = 16.0,
    ):
        if frame_ms <= 0:
            raise ValueError("frame_ms must be positive")
        self.simulation = simulation
        self.renderer = renderer
        self.clock = clock
        self.sleep = sleep
        self.frame_ms = frame_ms
        self.last_time: Optional[float] = None
        self.accumulator = 0.0
        self.active = False

    def start(self, now_ms: Optional[float] = None) -> None:
        """Set the timing baseline and begin requesting frames."""
        self.last_time = self.clock() if now_ms is None else now_ms
        self.accumulator = 0.0
        self.active = True

    def cancel(self) -> None:
        self.active = False

    def on_frame(self, now_ms: Optional[float] = None) -> bool:
        """
        Handle one host frame.

        Runs as many ticks as the accumulated time covers (zero, one or
        several), re-reading the tick interval after each one, then renders
        once with the leftover fraction of a tick.

        Returns:
            True if the host should schedule another frame.
        """
        if not self.active:
            return False
        if now_ms is None:
            now_ms = self.clock()

        elapsed = max(0.0, now_ms - self.last_time)
        self.last_time = now_ms
        self.accumulator += elapsed

        sim = self.simulation
        ticks = 0
        # Input threads must not change phase or interval between the check,
        # the tick and the subtraction
        with sim.lock:
            while self.accumulator >= sim.tick_interval_ms:
                if sim.phase not in (RUNNING, PAUSED):
                    self.accumulator = 0.0
                    break
                sim.advance()
                self.accumulator -= sim.tick_interval_ms
                ticks += 1
            state = sim.snapshot(self.accumulator / sim.tick_interval_ms)

        if ticks > 1:
            logger.debug("Caught up %d ticks after a %.1fms frame", ticks, elapsed)

        if self.renderer is not None:
            self.renderer(state)

        if state.phase in (OVER, IDLE):
            self.active = False
        return self.active

    def run(
        self,
        max_frames: Optional[int] = None,
        before_frame: Optional[Callable[[], None]] = None,
    ) -> int:
        """
        Blocking frame loop for hosts without their own render callback.

        Args:
            max_frames: stop after this many frames (None = until inactive)
            before_frame: called at the start of every frame, e.g. to poll input

        Returns:
            Number of frames processed.
        """
        frames = 0
        while self.active:
            frame_start = self.clock()
            if before_frame is not None:
                before_frame()
            self.on_frame(frame_start)
            frames += 1
            if max_frames is not None and frames >= max_frames:
                break
            if not self.active:
                break
            delay = self.frame_ms - (self.clock() - frame_start)
            if delay > 0:
                self.sleep(delay / 1000.0)
        return frames
