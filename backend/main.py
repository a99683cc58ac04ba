import argparse
import json
import logging
import random
import time
from typing import Any, Callable, Dict, Optional

from config import get_settings
from data_access import SqliteBestScoreStore
from domain.intents import Start
from players import RandomPlayer
from scheduler import Scheduler, monotonic_ms
from services.board_renderer import BoardRenderer
from session import GameSession
from simulation import Simulation

logger = logging.getLogger(__name__)


# -------------------------------
# Game Runner
# -------------------------------

def run_game(
    frames: Optional[int] = None,
    seed: Optional[int] = None,
    frame_ms: Optional[float] = None,
    store=None,
    renderer=None,
    clock: Callable[[], float] = monotonic_ms,
    sleep: Callable[[float], None] = time.sleep,
) -> Dict[str, Any]:
    """
    Runs one headless game steered by the random autopilot.

    Args:
        frames: Stop after this many host frames (None = until game over).
        seed: Seed for item placement and the autopilot.
        frame_ms: Host frame interval in milliseconds.
        store: Best-score persistence (defaults to the SQLite store).
        renderer: Called once per frame with a GameState (defaults to BoardRenderer).
        clock, sleep: Time source and sleeper, injectable for tests.

    Returns:
        A dictionary summarizing the game (score, best_score, phase, ...).
    """
    settings = get_settings()
    if seed is None:
        seed = settings.seed
    if frame_ms is None:
        frame_ms = settings.frame_ms
    if store is None:
        store = SqliteBestScoreStore(settings.db_path)
    if renderer is None:
        renderer = BoardRenderer()

    simulation = Simulation(persistence=store, rng=random.Random(seed))
    scheduler = Scheduler(simulation, renderer=renderer, clock=clock, sleep=sleep, frame_ms=frame_ms)
    session = GameSession(simulation, scheduler)
    player = RandomPlayer(rng=random.Random(seed))

    session.dispatch(Start())
    frames_run = session.run(player=player, max_frames=frames)

    state = simulation.snapshot()
    logger.info(
        "Finished after %d frames and %d ticks: phase=%s score=%d best=%d",
        frames_run, state.tick_count, state.phase, state.score, state.best_score,
    )

    return {
        "phase": state.phase,
        "score": state.score,
        "best_score": state.best_score,
        "items_eaten": state.items_eaten,
        "length": len(state.body),
        "ticks": state.tick_count,
        "frames": frames_run,
        "tick_interval_ms": state.tick_interval_ms,
    }


# -------------------------------
# Example Usage (Main Entry Point)
# -------------------------------
def main():
    parser = argparse.ArgumentParser(
        description="Run a headless wrap-around snake game steered by a random autopilot."
    )
    parser.add_argument("--frames", type=int, required=False, default=None,
                        help="Stop after this many frames (default: run until game over)")
    parser.add_argument("--seed", type=int, required=False, default=None,
                        help="Seed for item placement and the autopilot")
    parser.add_argument("--frame-ms", type=float, required=False, default=None,
                        help="Host frame interval in milliseconds (default: SNAKE_FRAME_MS or 16)")
    parser.add_argument("--db-path", type=str, required=False, default=None,
                        help="SQLite file for the best score (default: SNAKE_DB_PATH)")
    parser.add_argument("--quiet", action="store_true",
                        help="Do not draw the board")

    args = parser.parse_args()

    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format="%(message)s")

    store = SqliteBestScoreStore(args.db_path or settings.db_path)
    renderer = (lambda state: None) if args.quiet else None

    result = run_game(
        frames=args.frames,
        seed=args.seed,
        frame_ms=args.frame_ms,
        store=store,
        renderer=renderer,
    )

    print("\nGame Summary:")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
