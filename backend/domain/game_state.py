"""
GameState entity - a read-only snapshot of the simulation at a point in time.
"""

from typing import List, Optional, Tuple

from .constants import GRID_SIZE, STILL


class GameState:
    """
    A snapshot handed to renderers after each scheduler frame.

    Attributes:
        body: list of (x, y) from head to tail
        heading: committed (dx, dy) step applied on the last tick
        pending_heading: direction that the next tick will apply
        item: (x, y) of the consumable, or None if it could not be placed
        score: current score
        best_score: best score known to persistence
        phase: one of idle / running / paused / over
        tick_interval_ms: current logical tick length
        accumulator_fraction: leftover scheduler time as a fraction of a tick
        items_eaten: consumptions since the last reset
        tick_count: ticks applied since the last reset
        grid_size: board side length
    """

    def __init__(
        self,
        body: List[Tuple[int, int]],
        heading: Tuple[int, int],
        item: Optional[Tuple[int, int]],
        score: int,
        best_score: int,
        phase: str,
        tick_interval_ms: int,
        accumulator_fraction: float = 0.0,
        items_eaten: int = 0,
        tick_count: int = 0,
        pending_heading: Optional[Tuple[int, int]] = None,
        grid_size: int = GRID_SIZE,
    ):
        self.body = body
        self.heading = heading
        self.pending_heading = heading if pending_heading is None else pending_heading
        self.item = item
        self.score = score
        self.best_score = best_score
        self.phase = phase
        self.tick_interval_ms = tick_interval_ms
        self.accumulator_fraction = accumulator_fraction
        self.items_eaten = items_eaten
        self.tick_count = tick_count
        self.grid_size = grid_size

    @property
    def head(self) -> Tuple[int, int]:
        return self.body[0]

    def interpolated_head(self) -> Tuple[float, float]:
        """
        Head position pushed forward along the heading by the accumulator
        fraction, for drawing motion between ticks.
        """
        hx, hy = self.head
        if self.heading == STILL:
            return (float(hx), float(hy))
        dx, dy = self.heading
        return (hx + dx * self.accumulator_fraction, hy + dy * self.accumulator_fraction)

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        A = item
        T = snake body
        H = snake head
        (0,0) is the top left corner, y grows downwards.
        """
        board = [['.' for _ in range(self.grid_size)] for _ in range(self.grid_size)]

        if self.item is not None:
            ix, iy = self.item
            board[iy][ix] = 'A'

        for pos_idx, (x, y) in enumerate(self.body):
            board[y][x] = 'H' if pos_idx == 0 else 'T'

        result = [f"{y:2d} {' '.join(board[y])}" for y in range(self.grid_size)]
        result.append("   " + " ".join(str(i % 10) for i in range(self.grid_size)))
        return "\n".join(result)

    def to_dict(self) -> dict:
        return {
            "body": [list(cell) for cell in self.body],
            "heading": list(self.heading),
            "item": list(self.item) if self.item is not None else None,
            "score": self.score,
            "best_score": self.best_score,
            "phase": self.phase,
            "tick_interval_ms": self.tick_interval_ms,
            "items_eaten": self.items_eaten,
            "tick_count": self.tick_count,
        }

    def __repr__(self):
        return (
            f"<GameState phase={self.phase}, head={self.head}, length={len(self.body)}, "
            f"item={self.item}, score={self.score}>"
        )
