"""Hand-off of finished generations from a simulation thread to readers.

The simulation thread owns the board it is stepping. Only completed boards are
published, by swapping a single reference under a short-held lock; readers
get that immutable snapshot and never see a board that is still being built.
"""

from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import Executor, ThreadPoolExecutor

from life_kernel.config.constants import MAX_GENERATIONS_PER_SECOND
from life_kernel.domain.board import Board
from life_kernel.domain.parallel import tick_parallel

logger = logging.getLogger(__name__)


class BoardExchange:
    """Latest published board plus its generation number."""

    def __init__(self, board: Board, generation: int = 0) -> None:
        self._lock = threading.Lock()
        self._board = board
        self._generation = generation

    def publish(self, board: Board, generation: int) -> None:
        with self._lock:
            self._board = board
            self._generation = generation

    def latest(self) -> tuple[Board, int]:
        with self._lock:
            return self._board, self._generation


class SimulationThread(threading.Thread):
    """Daemon thread that ticks a board and publishes each generation.

    ``max_rate`` caps generations per second (None runs unpaced). ``steps``
    bounds the number of generations (None runs until ``stop()``). Boards are
    never recycled here since readers may still hold published snapshots.
    """

    def __init__(
        self,
        board: Board,
        exchange: BoardExchange,
        max_rate: float | None = MAX_GENERATIONS_PER_SECOND,
        steps: int | None = None,
        workers: int = 1,
    ) -> None:
        super().__init__(name="life-simulation", daemon=True)
        if max_rate is not None and max_rate <= 0:
            raise ValueError("max_rate must be > 0")
        if steps is not None and steps < 0:
            raise ValueError("steps must be >= 0")
        if workers < 1:
            raise ValueError("workers must be >= 1")
        self._board = board
        self._exchange = exchange
        self._interval = 1.0 / max_rate if max_rate is not None else 0.0
        self._steps = steps
        self._workers = workers
        self._stop_event = threading.Event()

    def stop(self) -> None:
        """Ask the thread to finish after the current generation."""
        self._stop_event.set()

    @property
    def stopped(self) -> bool:
        return self._stop_event.is_set()

    def run(self) -> None:
        logger.debug("simulation thread started (%dx%d)", self._board.width, self._board.height)
        if self._workers > 1:
            with ThreadPoolExecutor(max_workers=self._workers) as executor:
                generation = self._step_loop(executor)
        else:
            generation = self._step_loop(None)
        logger.debug("simulation thread stopped at generation %d", generation)

    def _step_loop(self, executor: Executor | None) -> int:
        generation = 0
        while not self._stop_event.is_set():
            if self._steps is not None and generation >= self._steps:
                break
            started = time.monotonic()
            if executor is not None:
                self._board = tick_parallel(
                    self._board, workers=self._workers, executor=executor
                )
            else:
                self._board = self._board.tick()
            generation += 1
            self._exchange.publish(self._board, generation)
            if self._interval:
                remaining = self._interval - (time.monotonic() - started)
                if remaining > 0:
                    self._stop_event.wait(remaining)
        return generation
