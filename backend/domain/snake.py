"""
Snake entity for the simulation engine.
"""

from collections import deque
from typing import List, Tuple

from .constants import GRID_SIZE

Cell = Tuple[int, int]


class Snake:
    """
    Represents the creature on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
    """

    def __init__(self, positions: List[Cell]):
        if not positions:
            raise ValueError("A snake needs at least one cell.")
        self.positions = deque(positions)

    @property
    def head(self) -> Cell:
        """Return the head position (first element)."""
        return self.positions[0]

    def __len__(self) -> int:
        return len(self.positions)

    def next_head(self, heading: Tuple[int, int], grid_size: int = GRID_SIZE) -> Cell:
        """
        Return the cell the head moves into, wrapping each axis independently.
        """
        hx, hy = self.head
        dx, dy = heading
        return ((hx + dx) % grid_size, (hy + dy) % grid_size)

    def hits_body(self, cell: Cell) -> bool:
        """True if `cell` lies on any segment behind the head."""
        return any(segment == cell for i, segment in enumerate(self.positions) if i > 0)

    def move_to(self, cell: Cell, grow: bool = False) -> None:
        self.positions.appendleft(cell)
        if not grow:
            self.positions.pop()

    def __repr__(self):
        return f"<Snake head={self.head}, length={len(self.positions)}>"
