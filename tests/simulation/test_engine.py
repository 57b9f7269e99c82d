"""Tests for life_kernel.simulation.engine module."""

from __future__ import annotations

import json
from pathlib import Path
from random import Random

import pyarrow.parquet as pq
import pytest

from life_kernel.config.types import BoardConfig, RunConfig, SeedMode
from life_kernel.domain.board import Board
from life_kernel.domain.filters import TerminationReason
from life_kernel.io.schemas import GENERATION_METRICS_SCHEMA, RUNS_SCHEMA
from life_kernel.simulation.engine import iter_generations, run_batch, run_simulation

BLINKER = [(2, 1), (2, 2), (2, 3)]


class TestIterGenerations:
    def test_yields_tick_chain(self) -> None:
        board = Board.rand(12, 12, 0.4, Random(1))
        expected = []
        current = board
        for _ in range(5):
            current = current.tick()
            expected.append(set(current))
        assert [set(b) for b in iter_generations(board, 5)] == expected

    def test_recycle_gives_same_generations_and_keeps_seed(self) -> None:
        board = Board.rand(12, 12, 0.4, Random(2))
        seed_alive = set(board)
        plain = [set(b) for b in iter_generations(board, 6)]
        recycled = [set(b) for b in iter_generations(board, 6, recycle=True)]
        assert recycled == plain
        assert set(board) == seed_alive

    def test_parallel_workers_give_same_generations(self) -> None:
        board = Board.rand(12, 12, 0.4, Random(3))
        plain = [set(b) for b in iter_generations(board, 4)]
        parallel = [set(b) for b in iter_generations(board, 4, workers=3)]
        assert parallel == plain

    def test_zero_steps_yields_nothing(self) -> None:
        assert list(iter_generations(Board.new(2, 2), 0)) == []

    def test_invalid_arguments(self) -> None:
        with pytest.raises(ValueError):
            list(iter_generations(Board.new(2, 2), -1))
        with pytest.raises(ValueError):
            list(iter_generations(Board.new(2, 2), 1, workers=0))


class TestRunSimulation:
    def test_blinker_terminates_as_short_period(self) -> None:
        board = Board.from_coordinates(BLINKER, 5, 5)
        config = RunConfig(steps=20, filter_short_period=True)
        result, rows = run_simulation(board, "blinker", config)
        assert result.survived is False
        assert result.termination_reason == TerminationReason.SHORT_PERIOD.value
        assert result.terminated_at == 4
        assert result.final_population == 3
        assert len(rows) == 4

    def test_block_terminates_as_halt(self) -> None:
        board = Board.from_cells([[1, 1], [1, 1]], width=4, height=4)
        result, _ = run_simulation(board, "block", RunConfig(steps=20, halt_window=2))
        assert result.termination_reason == TerminationReason.HALT.value
        assert result.terminated_at == 3

    def test_lone_cell_goes_extinct(self) -> None:
        board = Board.from_coordinates([(1, 1)], 3, 3)
        result, rows = run_simulation(board, "lone", RunConfig(steps=5))
        assert result.termination_reason == TerminationReason.EXTINCT.value
        assert result.terminated_at == 1
        assert result.final_population == 0
        assert rows[0]["population"] == 0
        assert rows[0]["deaths"] == 1

    def test_filters_disabled_runs_every_step(self) -> None:
        board = Board.from_coordinates([(1, 1)], 3, 3)
        config = RunConfig(steps=7, enable_termination_filters=False)
        result, rows = run_simulation(board, "lone", config)
        assert result.survived is True
        assert result.terminated_at is None
        assert result.generations == 7
        assert [row["generation"] for row in rows] == list(range(1, 8))

    def test_rows_carry_every_metric_column(self) -> None:
        board = Board.from_coordinates(BLINKER, 5, 5)
        _, rows = run_simulation(board, "r", RunConfig(steps=2))
        expected = {field.name for field in GENERATION_METRICS_SCHEMA}
        for row in rows:
            assert set(row) == expected
        assert rows[0]["births"] == 2
        assert rows[0]["cluster_count"] == 1

    def test_skip_cluster_metrics(self) -> None:
        board = Board.from_coordinates(BLINKER, 5, 5)
        _, rows = run_simulation(board, "r", RunConfig(steps=1, skip_cluster_metrics=True))
        assert rows[0]["cluster_count"] is None
        assert rows[0]["largest_cluster_size"] is None


class TestRunBatch:
    def test_writes_json_and_parquet(self, tmp_path: Path) -> None:
        results = run_batch(
            n_runs=2,
            out_dir=tmp_path,
            base_seed=7,
            board_config=BoardConfig(width=10, height=10, probability=0.4),
            config=RunConfig(steps=6),
        )
        assert len(results) == 2
        assert [r.run_id for r in results] == ["random_w10_h10_s7", "random_w10_h10_s8"]

        json_files = sorted(path.stem for path in (tmp_path / "runs").glob("*.json"))
        assert json_files == ["random_w10_h10_s7", "random_w10_h10_s8"]
        payload = json.loads((tmp_path / "runs" / "random_w10_h10_s7.json").read_text())
        assert payload["metadata"]["seed"] == 7
        assert payload["metadata"]["width"] == 10

        metrics = pq.read_table(tmp_path / "logs" / "generation_metrics.parquet")
        assert metrics.schema.names == GENERATION_METRICS_SCHEMA.names
        assert metrics.num_rows == sum(r.generations for r in results)

        runs = pq.read_table(tmp_path / "logs" / "runs.parquet")
        assert runs.schema.names == RUNS_SCHEMA.names
        assert runs.column("run_id").to_pylist() == [r.run_id for r in results]

    def test_is_deterministic_for_same_seed(self, tmp_path: Path) -> None:
        board_config = BoardConfig(width=12, height=12, probability=0.35)
        config = RunConfig(steps=10)
        a = run_batch(1, tmp_path / "a", base_seed=3, board_config=board_config, config=config)
        b = run_batch(1, tmp_path / "b", base_seed=3, board_config=board_config, config=config)
        assert a == b

    def test_pattern_seed_mode(self, tmp_path: Path) -> None:
        board_config = BoardConfig(
            width=8,
            height=8,
            seed_mode=SeedMode.PATTERN,
            pattern="glider",
            pattern_offset=(1, 1),
        )
        results = run_batch(1, tmp_path, board_config=board_config, config=RunConfig(steps=8))
        assert results[0].survived is True
        assert results[0].final_population == 5

    def test_oversized_pattern_fails_before_output_dirs(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="does not fit"):
            run_batch(
                1,
                tmp_path / "out",
                board_config=BoardConfig(
                    width=2, height=2, seed_mode=SeedMode.PATTERN, pattern="glider"
                ),
            )
        assert not (tmp_path / "out").exists()

    def test_rejects_zero_runs(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError):
            run_batch(0, tmp_path)

    def test_rejects_oversized_workload(self, tmp_path: Path) -> None:
        board_config = BoardConfig(width=1000, height=1000)
        with pytest.raises(ValueError, match="safety threshold"):
            run_batch(2, tmp_path, board_config=board_config, config=RunConfig(steps=100))
