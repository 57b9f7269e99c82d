"""Path construction helpers for simulation output directories."""

from __future__ import annotations

from pathlib import Path


def runs_dir(out_dir: Path) -> Path:
    """Return path to the per-run JSON metadata directory."""
    return out_dir / "runs"


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def generation_metrics_path(out_dir: Path) -> Path:
    """Return path to the per-generation metrics Parquet file."""
    return logs_dir(out_dir) / "generation_metrics.parquet"


def runs_summary_path(out_dir: Path) -> Path:
    """Return path to the run summary Parquet file."""
    return logs_dir(out_dir) / "runs.parquet"


def run_payload_path(out_dir: Path, run_id: str) -> Path:
    """Return path to one run's JSON metadata file."""
    return runs_dir(out_dir) / f"{run_id}.json"
