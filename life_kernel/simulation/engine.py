"""Simulation engine: generation stepping, termination filters, and batch runs."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from random import Random

import pyarrow as pa
import pyarrow.parquet as pq

from life_kernel.config.constants import FLUSH_THRESHOLD, MAX_WORK_UNITS
from life_kernel.config.types import BoardConfig, RunConfig, SimulationResult
from life_kernel.domain.board import Board
from life_kernel.domain.filters import (
    ExtinctionDetector,
    HaltDetector,
    ShortPeriodDetector,
    TerminationReason,
)
from life_kernel.domain.parallel import tick_parallel
from life_kernel.io.paths import (
    generation_metrics_path,
    logs_dir,
    run_payload_path,
    runs_dir,
    runs_summary_path,
)
from life_kernel.io.schemas import RUN_PAYLOAD_SCHEMA_VERSION, RUNS_SCHEMA, RUNS_SCHEMA_VERSION
from life_kernel.simulation.persistence import flush_metric_columns, new_metric_columns
from life_kernel.simulation.step import compute_generation_metrics

logger = logging.getLogger(__name__)


def _deterministic_run_id(board_config: BoardConfig, seed: int) -> str:
    """Build reproducible run ID stable across runs for identical seeds."""
    return (
        f"{board_config.seed_mode.value}_w{board_config.width}_h{board_config.height}_s{seed}"
    )


def iter_generations(
    board: Board, steps: int, workers: int = 1, recycle: bool = False
) -> Iterator[Board]:
    """Yield the ``steps`` generations following ``board``.

    With ``recycle`` the storage of the generation two back is reused, so only
    the two most recently yielded boards stay valid; ``board`` itself is left
    intact. Recycling is ignored when ``workers > 1``.
    """
    if steps < 0:
        raise ValueError("steps must be >= 0")
    if workers < 1:
        raise ValueError("workers must be >= 1")
    if workers > 1:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            for _ in range(steps):
                board = tick_parallel(board, workers=workers, executor=executor)
                yield board
        return

    spare: Board | None = None
    for step in range(steps):
        next_board = board.tick(reuse=spare)
        # The caller's seed board is never recycled.
        if recycle and step > 0:
            spare = board
        board = next_board
        yield board


def run_simulation(
    board: Board, run_id: str, config: RunConfig | None = None
) -> tuple[SimulationResult, list[dict[str, int | str | float | None]]]:
    """Step one board, applying termination filters and collecting metric rows."""
    config = config or RunConfig()
    extinction_detector = ExtinctionDetector()
    halt_detector = HaltDetector(window=config.halt_window)
    short_period_detector = (
        ShortPeriodDetector(
            max_period=config.short_period_max_period,
            history_size=config.short_period_history_size,
        )
        if config.filter_short_period
        else None
    )

    rows: list[dict[str, int | str | float | None]] = []
    terminated_at: int | None = None
    termination_reason: str | None = None
    previous = board
    current = board
    generation = 0
    for generation, current in enumerate(
        iter_generations(board, config.steps, config.workers, config.recycle_boards), start=1
    ):
        row: dict[str, int | str | float | None] = {"run_id": run_id, "generation": generation}
        row.update(
            compute_generation_metrics(
                previous=previous,
                current=current,
                skip_cluster_metrics=config.skip_cluster_metrics,
            )
        )
        rows.append(row)

        snapshot = frozenset(current.alive_cells())
        extinct = extinction_detector.observe(len(current))
        halted = halt_detector.observe(snapshot)
        short_period = (
            short_period_detector.observe(snapshot) if short_period_detector is not None else False
        )
        if config.enable_termination_filters:
            if extinct:
                termination_reason = TerminationReason.EXTINCT.value
            elif halted:
                termination_reason = TerminationReason.HALT.value
            elif short_period:
                termination_reason = TerminationReason.SHORT_PERIOD.value
            if termination_reason is not None:
                terminated_at = generation
                logger.debug(
                    "run %s terminated at generation %d (%s)",
                    run_id,
                    generation,
                    termination_reason,
                )
                break
        previous = current

    result = SimulationResult(
        run_id=run_id,
        survived=termination_reason is None,
        terminated_at=terminated_at,
        termination_reason=termination_reason,
        final_population=len(current),
        generations=generation,
    )
    return result, rows


def run_batch(
    n_runs: int,
    out_dir: Path,
    base_seed: int = 0,
    board_config: BoardConfig | None = None,
    config: RunConfig | None = None,
) -> list[SimulationResult]:
    """Run seeded simulations and persist JSON/Parquet outputs."""
    if n_runs < 1:
        raise ValueError("n_runs must be >= 1")
    board_config = board_config or BoardConfig()
    config = config or RunConfig()

    total_work_units = n_runs * config.steps * board_config.width * board_config.height
    if total_work_units > MAX_WORK_UNITS:
        raise ValueError("batch workload exceeds safety threshold; reduce runs/steps/extent")

    out_dir = Path(out_dir)
    runs_dir(out_dir).mkdir(parents=True, exist_ok=True)
    logs_dir(out_dir).mkdir(parents=True, exist_ok=True)
    metrics_path = generation_metrics_path(out_dir)

    metric_writer: pq.ParquetWriter | None = None
    metric_columns = new_metric_columns()
    run_rows: list[dict[str, int | str | bool | None]] = []
    results: list[SimulationResult] = []

    try:
        for i in range(n_runs):
            seed = base_seed + i
            run_id = _deterministic_run_id(board_config, seed)
            board = board_config.build(Random(seed))
            initial_population = len(board)
            logger.info(
                "run %s: %d live cells on %dx%d board",
                run_id,
                initial_population,
                board.width,
                board.height,
            )

            result, rows = run_simulation(board, run_id, config)
            for row in rows:
                for key, value in row.items():
                    metric_columns[key].append(value)
            if len(metric_columns["run_id"]) >= FLUSH_THRESHOLD:
                metric_writer = flush_metric_columns(metric_columns, metrics_path, metric_writer)

            payload = {
                "run_id": run_id,
                "survived": result.survived,
                "metadata": {
                    "seed": seed,
                    "width": board_config.width,
                    "height": board_config.height,
                    "seed_mode": board_config.seed_mode.value,
                    "probability": board_config.probability,
                    "pattern": board_config.pattern,
                    "steps": config.steps,
                    "halt_window": config.halt_window,
                    "enable_termination_filters": config.enable_termination_filters,
                    "filter_short_period": config.filter_short_period,
                    "initial_population": initial_population,
                    "final_population": result.final_population,
                    "generations": result.generations,
                    "terminated_at": result.terminated_at,
                    "termination_reason": result.termination_reason,
                    "schema_version": RUN_PAYLOAD_SCHEMA_VERSION,
                },
            }
            run_payload_path(out_dir, run_id).write_text(
                json.dumps(payload, ensure_ascii=False, indent=2)
            )
            run_rows.append(
                {
                    "schema_version": RUNS_SCHEMA_VERSION,
                    "run_id": run_id,
                    "seed": seed,
                    "width": board_config.width,
                    "height": board_config.height,
                    "seed_mode": board_config.seed_mode.value,
                    "initial_population": initial_population,
                    "final_population": result.final_population,
                    "generations": result.generations,
                    "survived": result.survived,
                    "termination_reason": result.termination_reason,
                    "terminated_at": result.terminated_at,
                }
            )
            results.append(result)
            logger.info(
                "run %s finished after %d generations (population %d, reason %s)",
                run_id,
                result.generations,
                result.final_population,
                result.termination_reason,
            )

        metric_writer = flush_metric_columns(metric_columns, metrics_path, metric_writer)
    finally:
        if metric_writer is not None:
            metric_writer.close()

    pq.write_table(pa.Table.from_pylist(run_rows, schema=RUNS_SCHEMA), runs_summary_path(out_dir))
    return results
