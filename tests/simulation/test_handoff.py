"""Tests for life_kernel.simulation.handoff module."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from life_kernel.domain.board import Board
from life_kernel.simulation import handoff
from life_kernel.simulation.handoff import BoardExchange, SimulationThread

BLINKER = [(2, 1), (2, 2), (2, 3)]


class TestBoardExchange:
    def test_latest_returns_initial_board(self) -> None:
        board = Board.new(3, 3)
        exchange = BoardExchange(board)
        assert exchange.latest() == (board, 0)

    def test_publish_swaps_reference(self) -> None:
        first = Board.new(3, 3)
        second = Board.full(3, 3)
        exchange = BoardExchange(first)
        exchange.publish(second, 1)
        latest, generation = exchange.latest()
        assert latest is second
        assert generation == 1


class TestSimulationThread:
    def test_runs_bounded_number_of_generations(self) -> None:
        board = Board.from_coordinates(BLINKER, 5, 5)
        exchange = BoardExchange(board)
        thread = SimulationThread(board, exchange, steps=5)
        thread.start()
        thread.join(timeout=10)
        assert not thread.is_alive()
        latest, generation = exchange.latest()
        assert generation == 5
        assert set(latest) == {(1, 2), (2, 2), (3, 2)}

    def test_published_snapshots_are_not_mutated(self) -> None:
        board = Board.from_coordinates(BLINKER, 5, 5)
        exchange = BoardExchange(board)
        thread = SimulationThread(board, exchange, steps=3, workers=2)
        thread.start()
        thread.join(timeout=10)
        assert set(board) == set(BLINKER)
        latest, generation = exchange.latest()
        assert generation == 3
        assert latest == board.tick()

    def test_parallel_run_shares_one_executor(self, monkeypatch: pytest.MonkeyPatch) -> None:
        created: list[ThreadPoolExecutor] = []

        class CountingExecutor(ThreadPoolExecutor):
            def __init__(self, *args: object, **kwargs: object) -> None:
                super().__init__(*args, **kwargs)  # type: ignore[arg-type]
                created.append(self)

        monkeypatch.setattr(handoff, "ThreadPoolExecutor", CountingExecutor)
        board = Board.from_coordinates(BLINKER, 5, 5)
        exchange = BoardExchange(board)
        thread = SimulationThread(board, exchange, max_rate=None, steps=6, workers=2)
        thread.start()
        thread.join(timeout=10)
        assert len(created) == 1
        latest, generation = exchange.latest()
        assert generation == 6
        assert latest == board

    def test_stop_ends_unbounded_run(self) -> None:
        board = Board.from_coordinates(BLINKER, 5, 5)
        exchange = BoardExchange(board)
        thread = SimulationThread(board, exchange, max_rate=1000)
        thread.start()
        thread.stop()
        thread.join(timeout=10)
        assert thread.stopped
        assert not thread.is_alive()

    @pytest.mark.parametrize(
        "kwargs",
        [{"max_rate": 0}, {"steps": -1}, {"workers": 0}],
    )
    def test_invalid_arguments(self, kwargs: dict[str, object]) -> None:
        board = Board.new(2, 2)
        with pytest.raises(ValueError):
            SimulationThread(board, BoardExchange(board), **kwargs)  # type: ignore[arg-type]
