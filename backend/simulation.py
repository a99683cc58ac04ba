"""
Simulation engine for the wrap-around snake.

Owns the board state (body, heading, item, score, tick interval, phase) and
applies exactly one rule step per call to advance(). Timing lives in
scheduler.Scheduler; drawing lives in whatever renderer consumes snapshot().
"""

import logging
import random
import threading
from typing import List, Optional, Tuple

from domain.constants import (
    GRID_SIZE,
    IDLE,
    ITEM_POINTS,
    MIN_TICK_MS,
    OVER,
    PAUSED,
    RUNNING,
    START_TICK_MS,
    STILL,
    TICK_STEP_MS,
    VALID_MOVES,
)
from domain.game_state import GameState
from domain.snake import Cell, Snake

logger = logging.getLogger(__name__)


class NoFreeCellError(RuntimeError):
    """Raised when the snake covers every cell and no item can be placed."""


class Simulation:
    """
    Manages:
      - The snake body and its heading
      - The item
      - Score, best score and the tick interval (difficulty ramp)
      - The lifecycle phase: idle -> running <-> paused, running -> over

    The four commands and advance() share one re-entrant lock, so input may
    arrive from a different thread than the frame loop. Callers that need
    several reads to agree (the scheduler's catch-up loop) hold `lock` too.

    Args:
        persistence: object with get_best_score() / set_best_score(); None
            keeps the best score in memory only.
        rng: random source used for item placement.
        seed: seed for a fresh random.Random when rng is not given.
    """

    def __init__(
        self,
        persistence=None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ):
        self.grid_size = GRID_SIZE
        self.persistence = persistence
        self.rng = rng if rng is not None else random.Random(seed)
        self._lock = threading.RLock()
        self.best_score = self._load_best_score()
        self._init_state()

    @property
    def lock(self):
        return self._lock

    def _init_state(self) -> None:
        center = self.grid_size // 2
        self.snake = Snake([(center, center)])
        self.heading: Tuple[int, int] = STILL
        self.pending_heading: Tuple[int, int] = STILL
        self.score = 0
        self.tick_interval_ms = START_TICK_MS
        self.phase = IDLE
        self.items_eaten = 0
        self.tick_count = 0
        self.item: Optional[Cell] = None
        self.item = self._random_free_cell()

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def start(self) -> bool:
        """Leave the idle phase. Returns True if the game started."""
        with self._lock:
            if self.phase != IDLE:
                logger.debug("Ignoring start while %s", self.phase)
                return False
            self.phase = RUNNING
            logger.info("Game started (best score %d)", self.best_score)
            return True

    def toggle_pause(self) -> bool:
        """Flip between running and paused. Returns True if the phase changed."""
        with self._lock:
            if self.phase == RUNNING:
                self.phase = PAUSED
            elif self.phase == PAUSED:
                self.phase = RUNNING
            else:
                logger.debug("Ignoring pause toggle while %s", self.phase)
                return False
            logger.info("Game %s", self.phase)
            return True

    def apply_direction(self, direction: Tuple[int, int]) -> bool:
        """
        Request a new heading for the next tick.

        Only honoured while running; in any other phase the request is dropped
        before it is looked at. A request that points straight back into
        the neck (antiparallel to the current heading with a body longer than
        one cell) is dropped. Later requests before the next tick overwrite
        earlier ones.

        Returns:
            True if the direction was accepted.

        Raises:
            ValueError: if `direction` is not one of the four cardinal vectors
                while running.
        """
        direction = tuple(direction)

        with self._lock:
            if self.phase != RUNNING:
                logger.debug("Ignoring direction %s while %s", direction, self.phase)
                return False
            if direction not in VALID_MOVES:
                raise ValueError(f"Invalid direction {direction}.")

            dx, dy = self.heading
            if len(self.snake) > 1 and direction == (-dx, -dy):
                return False

            self.pending_heading = direction
            return True

    def reset(self) -> None:
        """Restore the initial idle state. The best score is kept."""
        with self._lock:
            self._init_state()
            logger.info("Game reset")

    # -------------------------------------------------------------------------
    # Rules
    # -------------------------------------------------------------------------

    def advance(self) -> bool:
        """
        Apply one tick:
          1) Commit the pending heading and compute the wrapped next head
          2) End the game if the head runs into the body (no other change)
          3) Move the head forward
          4) On the item: score, grow, speed up, place a new item;
             otherwise drop the tail
          5) Record a new best score

        Returns:
            True if an item was consumed on this tick.
        """
        with self._lock:
            if self.phase != RUNNING:
                return False

            self.heading = self.pending_heading
            new_head = self.snake.next_head(self.heading, self.grid_size)

            # Checked against the body before the new head goes in
            if self.snake.hits_body(new_head):
                self.phase = OVER
                logger.info(
                    "Game over: ran into itself at %s with score %d", new_head, self.score
                )
                return False

            ate = new_head == self.item
            self.snake.move_to(new_head, grow=ate)
            self.tick_count += 1

            if ate:
                self.score += ITEM_POINTS
                self.items_eaten += 1
                self.tick_interval_ms = max(MIN_TICK_MS, self.tick_interval_ms - TICK_STEP_MS)
                self._record_best_score()
                self.item = None
                self.item = self._random_free_cell()
                logger.debug(
                    "Ate item: score=%d length=%d interval=%dms",
                    self.score, len(self.snake), self.tick_interval_ms,
                )
            return ate

    def _random_free_cell(self) -> Cell:
        """
        Return a cell chosen uniformly among those not covered by the snake.

        Raises:
            NoFreeCellError: if the snake fills the board.
        """
        occupied = set(self.snake.positions)
        free: List[Cell] = [
            (x, y)
            for y in range(self.grid_size)
            for x in range(self.grid_size)
            if (x, y) not in occupied
        ]
        if not free:
            raise NoFreeCellError(
                f"No free cell left for the item (snake length {len(self.snake)})."
            )
        return self.rng.choice(free)

    # -------------------------------------------------------------------------
    # Best score
    # -------------------------------------------------------------------------

    def _load_best_score(self) -> int:
        if self.persistence is None:
            return 0
        try:
            return int(self.persistence.get_best_score())
        except Exception as e:
            logger.warning(f"Could not read best score, starting from 0: {e}")
            return 0

    def _record_best_score(self) -> None:
        if self.score <= self.best_score:
            return
        self.best_score = self.score
        if self.persistence is None:
            return
        try:
            self.persistence.set_best_score(self.best_score)
        except Exception as e:
            # Storage problems never stop the game
            logger.warning(f"Could not store best score {self.best_score}: {e}")

    # -------------------------------------------------------------------------
    # Setup helpers and read access
    # -------------------------------------------------------------------------

    def place_snake(self, positions: List[Cell], heading: Tuple[int, int] = STILL) -> None:
        """Replace the body and heading, e.g. to set up a scenario."""
        with self._lock:
            for (x, y) in positions:
                self._check_bounds((x, y))
            self.snake = Snake(list(positions))
            self.heading = tuple(heading)
            self.pending_heading = tuple(heading)

    def set_item(self, cell: Cell) -> None:
        """Put the item on a specific cell."""
        with self._lock:
            self._check_bounds(cell)
            self.item = tuple(cell)

    def _check_bounds(self, cell: Cell) -> None:
        x, y = cell
        if not (0 <= x < self.grid_size and 0 <= y < self.grid_size):
            raise ValueError(f"Cell out of bounds at {cell}.")

    def snapshot(self, accumulator_fraction: float = 0.0) -> GameState:
        """Return a copy of the current state for renderers."""
        with self._lock:
            return GameState(
                body=list(self.snake.positions),
                heading=self.heading,
                pending_heading=self.pending_heading,
                item=self.item,
                score=self.score,
                best_score=self.best_score,
                phase=self.phase,
                tick_interval_ms=self.tick_interval_ms,
                accumulator_fraction=accumulator_fraction,
                items_eaten=self.items_eaten,
                tick_count=self.tick_count,
                grid_size=self.grid_size,
            )

    def __repr__(self):
        return (
            f"<Simulation phase={self.phase}, snake={self.snake!r}, item={self.item}, "
            f"score={self.score}, interval={self.tick_interval_ms}ms>"
        )
