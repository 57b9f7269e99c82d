"""Parquet schema definitions for simulation artifacts.

All Arrow schemas used for persisting per-generation metrics and run
summaries are centralised here so that every module works against the same
column contracts.
"""

from __future__ import annotations

import pyarrow as pa

# ---------------------------------------------------------------------------
# Schema version constants
# ---------------------------------------------------------------------------

RUN_PAYLOAD_SCHEMA_VERSION = 1
RUNS_SCHEMA_VERSION = 1

# ---------------------------------------------------------------------------
# Per-generation metrics
# ---------------------------------------------------------------------------

GENERATION_METRICS_SCHEMA = pa.schema(
    [
        ("run_id", pa.string()),
        ("generation", pa.int64()),
        ("population", pa.int64()),
        ("density", pa.float64()),
        ("births", pa.int64()),
        ("deaths", pa.int64()),
        ("min_x", pa.int64()),
        ("min_y", pa.int64()),
        ("max_x", pa.int64()),
        ("max_y", pa.int64()),
        ("cluster_count", pa.int64()),
        ("largest_cluster_size", pa.int64()),
    ]
)

GENERATION_METRIC_NAMES = [field.name for field in GENERATION_METRICS_SCHEMA][2:]
"""Metric columns produced per generation (excludes the run_id/generation keys)."""

# ---------------------------------------------------------------------------
# Run summaries
# ---------------------------------------------------------------------------

RUNS_SCHEMA = pa.schema(
    [
        ("schema_version", pa.int64()),
        ("run_id", pa.string()),
        ("seed", pa.int64()),
        ("width", pa.int64()),
        ("height", pa.int64()),
        ("seed_mode", pa.string()),
        ("initial_population", pa.int64()),
        ("final_population", pa.int64()),
        ("generations", pa.int64()),
        ("survived", pa.bool_()),
        ("termination_reason", pa.string()),
        ("terminated_at", pa.int64()),
    ]
)
