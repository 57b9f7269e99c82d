"""Parquet persistence helpers for the generation-metrics stream."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from life_kernel.io.schemas import GENERATION_METRICS_SCHEMA


def new_metric_columns() -> dict[str, list[int | str | float | None]]:
    """Empty column buffers matching ``GENERATION_METRICS_SCHEMA``."""
    return {field.name: [] for field in GENERATION_METRICS_SCHEMA}


def flush_metric_columns(
    metric_columns: dict[str, list[int | str | float | None]],
    metrics_path: Path,
    metric_writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated metric rows to Parquet and clear in-memory buffers."""
    if not metric_columns["run_id"]:
        return metric_writer
    table = pa.Table.from_pydict(metric_columns, schema=GENERATION_METRICS_SCHEMA)
    if metric_writer is None:
        metric_writer = pq.ParquetWriter(metrics_path, GENERATION_METRICS_SCHEMA)
    metric_writer.write_table(table)
    for values in metric_columns.values():
        values.clear()
    return metric_writer
