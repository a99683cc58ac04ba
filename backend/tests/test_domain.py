"""
Tests for the domain entities: Snake, GameState and intents.
"""

import pytest
import sys
import os
from collections import deque

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import (
    Snake,
    GameState,
    Direction,
    UP, DOWN, LEFT, RIGHT, STILL,
    GRID_SIZE,
    RUNNING,
)


class TestSnake:
    """Tests for the Snake class."""

    def test_snake_initialization_with_single_position(self):
        """Snake initializes with a single position."""
        snake = Snake([(6, 6)])
        assert list(snake.positions) == [(6, 6)]
        assert len(snake) == 1

    def test_snake_requires_a_cell(self):
        with pytest.raises(ValueError):
            Snake([])

    def test_snake_positions_is_deque(self):
        """Snake positions are stored as a deque for efficient operations."""
        snake = Snake([(5, 5)])
        assert isinstance(snake.positions, deque)

    def test_snake_head_property(self):
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        assert snake.head == (5, 5)

    @pytest.mark.parametrize("head,heading,expected", [
        ((GRID_SIZE - 1, 4), RIGHT, (0, 4)),
        ((0, 4), LEFT, (GRID_SIZE - 1, 4)),
        ((4, GRID_SIZE - 1), DOWN, (4, 0)),
        ((4, 0), UP, (4, GRID_SIZE - 1)),
        ((4, 4), STILL, (4, 4)),
    ])
    def test_next_head_wraps_each_axis(self, head, heading, expected):
        snake = Snake([head])
        assert snake.next_head(heading) == expected

    def test_hits_body_ignores_head(self):
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        assert snake.hits_body((5, 5)) is False
        assert snake.hits_body((4, 5)) is True
        assert snake.hits_body((3, 5)) is True
        assert snake.hits_body((9, 9)) is False

    def test_move_to_conserves_length(self):
        snake = Snake([(5, 5), (4, 5)])
        snake.move_to((6, 5))
        assert list(snake.positions) == [(6, 5), (5, 5)]

    def test_move_to_grow_keeps_tail(self):
        snake = Snake([(5, 5), (4, 5)])
        snake.move_to((6, 5), grow=True)
        assert list(snake.positions) == [(6, 5), (5, 5), (4, 5)]


def _state(**overrides):
    values = dict(
        body=[(5, 5), (4, 5)],
        heading=RIGHT,
        item=(2, 3),
        score=10,
        best_score=30,
        phase=RUNNING,
        tick_interval_ms=118,
    )
    values.update(overrides)
    return GameState(**values)


class TestGameState:
    """Tests for the GameState snapshot."""

    def test_pending_heading_defaults_to_heading(self):
        state = _state()
        assert state.pending_heading == RIGHT

    def test_print_board_marks_head_body_and_item(self):
        board = _state().print_board()
        lines = board.split("\n")
        # One line per row plus the x-axis labels
        assert len(lines) == GRID_SIZE + 1
        assert lines[5].split()[1:][5] == 'H'
        assert lines[5].split()[1:][4] == 'T'
        assert lines[3].split()[1:][2] == 'A'

    def test_print_board_without_item(self):
        board = _state(item=None).print_board()
        assert 'A' not in board

    def test_interpolated_head_moves_along_heading(self):
        state = _state(accumulator_fraction=0.5)
        assert state.interpolated_head() == (5.5, 5.0)

    def test_interpolated_head_when_still(self):
        state = _state(heading=STILL, accumulator_fraction=0.75)
        assert state.interpolated_head() == (5.0, 5.0)

    def test_to_dict(self):
        data = _state().to_dict()
        assert data["body"] == [[5, 5], [4, 5]]
        assert data["item"] == [2, 3]
        assert data["phase"] == RUNNING
        assert data["best_score"] == 30


class TestIntents:
    """Tests for the intent vocabulary."""

    def test_direction_vectors(self):
        assert Direction("UP").vector == UP
        assert Direction("DOWN").vector == DOWN
        assert Direction("LEFT").vector == LEFT
        assert Direction("RIGHT").vector == RIGHT

    def test_unknown_direction_rejected(self):
        with pytest.raises(ValueError):
            Direction("NORTH")

    def test_intents_compare_by_value(self):
        assert Direction("UP") == Direction("UP")
