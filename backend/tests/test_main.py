"""
Tests for main.py - the headless runner - and the best score CLI.
"""

import importlib
import io
import json

import pytest
import sys
import os

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from main import run_game, main
import services.board_renderer as board_renderer_module
from data_access import InMemoryBestScoreStore, SqliteBestScoreStore
from services.board_renderer import BoardRenderer, status_line, STATUS_MESSAGES
from domain import GameState, RIGHT, IDLE, RUNNING, OVER
from cli.best_score import show_best_score, reset_best_score


class TestRunGame:
    """Tests for run_game."""

    def test_runs_requested_frames(self, fake_clock):
        states = []
        result = run_game(
            frames=50,
            seed=3,
            frame_ms=16,
            store=InMemoryBestScoreStore(),
            renderer=states.append,
            clock=fake_clock,
            sleep=fake_clock.sleep,
        )

        assert result["frames"] == 50
        assert result["phase"] == RUNNING
        # 49 * 16 = 784ms of game time at 120ms or faster per tick
        assert result["ticks"] >= 6
        assert result["score"] == 10 * result["items_eaten"]
        assert result["length"] == 1 + result["items_eaten"]
        assert len(states) == 50

    def test_same_seed_same_game(self, clock_factory):
        def play():
            clock = clock_factory()
            return run_game(
                frames=200, seed=9, frame_ms=16, store=InMemoryBestScoreStore(),
                renderer=lambda state: None, clock=clock, sleep=clock.sleep,
            )

        assert play() == play()

    def test_best_score_written_to_store(self, fake_clock):
        store = InMemoryBestScoreStore()
        result = run_game(
            frames=2000, seed=4, frame_ms=16, store=store,
            renderer=lambda state: None, clock=fake_clock, sleep=fake_clock.sleep,
        )
        assert store.get_best_score() == result["best_score"]
        assert result["best_score"] >= result["score"]

    def test_board_renderer_output(self, fake_clock):
        output = io.StringIO()
        run_game(
            frames=20, seed=1, frame_ms=16, store=InMemoryBestScoreStore(),
            renderer=BoardRenderer(output), clock=fake_clock, sleep=fake_clock.sleep,
        )
        text = output.getvalue()
        assert "Score:" in text
        assert "H" in text

    def test_cli_main(self, monkeypatch, capsys, tmp_path):
        db_path = str(tmp_path / "cli.db")
        monkeypatch.setattr(sys, "argv", [
            "main.py", "--frames", "3", "--quiet", "--frame-ms", "1",
            "--seed", "5", "--db-path", db_path,
        ])
        main()
        out = capsys.readouterr().out
        summary = json.loads(out.split("Game Summary:")[1])
        assert summary["frames"] == 3
        assert summary["phase"] == RUNNING


class TestBoardRenderer:
    """Tests for the text renderer."""

    def _state(self, **overrides):
        values = dict(
            body=[(5, 5)], heading=RIGHT, item=(1, 1), score=20, best_score=50,
            phase=RUNNING, tick_interval_ms=116, tick_count=3,
        )
        values.update(overrides)
        return GameState(**values)

    def test_skips_unchanged_frames(self):
        output = io.StringIO()
        renderer = BoardRenderer(output)
        renderer(self._state())
        renderer(self._state(accumulator_fraction=0.5))
        renderer(self._state(tick_count=4))
        assert renderer.frames_drawn == 2

    def test_phase_change_is_drawn(self):
        renderer = BoardRenderer(io.StringIO())
        renderer(self._state())
        renderer(self._state(phase=OVER))
        assert renderer.frames_drawn == 2

    def test_status_line(self):
        line = status_line(self._state())
        assert line.startswith(STATUS_MESSAGES[RUNNING])
        assert "Score: 20" in line
        assert "Best: 50" in line
        assert "116ms" in line

    def test_status_line_game_over(self):
        assert "Final score: 20" in status_line(self._state(phase=OVER))
        assert status_line(self._state(phase=IDLE)).startswith("Press SPACE")

    def test_import_leaves_sys_path_alone(self, monkeypatch):
        backend = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
        monkeypatch.setattr(sys, "path", [p for p in sys.path if p != backend])
        importlib.reload(board_renderer_module)
        assert backend not in sys.path


class TestBestScoreCli:
    """Tests for cli/best_score.py."""

    def test_show(self, tmp_path):
        db_path = str(tmp_path / "best.db")
        assert show_best_score(db_path) == 0
        SqliteBestScoreStore(db_path).set_best_score(90)
        assert show_best_score(db_path) == 90

    def test_reset_cancelled(self, tmp_path):
        db_path = str(tmp_path / "best.db")
        SqliteBestScoreStore(db_path).set_best_score(90)
        assert reset_best_score(db_path, prompt=lambda message: "no") is False
        assert SqliteBestScoreStore(db_path).get_best_score() == 90

    def test_reset_confirmed(self, tmp_path):
        db_path = str(tmp_path / "best.db")
        SqliteBestScoreStore(db_path).set_best_score(90)
        assert reset_best_score(db_path, confirm=True) is True
        assert SqliteBestScoreStore(db_path).get_best_score() == 0

    def test_reset_typed_confirmation(self, tmp_path):
        db_path = str(tmp_path / "best.db")
        SqliteBestScoreStore(db_path).set_best_score(90)
        assert reset_best_score(db_path, prompt=lambda message: "RESET") is True
        assert SqliteBestScoreStore(db_path).get_best_score() == 0
