"""I/O layer: Parquet schemas and output path conventions."""

from life_kernel.io.paths import (
    generation_metrics_path,
    logs_dir,
    run_payload_path,
    runs_dir,
    runs_summary_path,
)
from life_kernel.io.schemas import (
    GENERATION_METRIC_NAMES,
    GENERATION_METRICS_SCHEMA,
    RUN_PAYLOAD_SCHEMA_VERSION,
    RUNS_SCHEMA,
    RUNS_SCHEMA_VERSION,
)

__all__ = [
    "GENERATION_METRICS_SCHEMA",
    "GENERATION_METRIC_NAMES",
    "RUNS_SCHEMA",
    "RUNS_SCHEMA_VERSION",
    "RUN_PAYLOAD_SCHEMA_VERSION",
    "generation_metrics_path",
    "logs_dir",
    "run_payload_path",
    "runs_dir",
    "runs_summary_path",
]
