"""Per-generation metric computation helpers for the simulation engine."""

from __future__ import annotations

from life_kernel.domain.board import Board
from life_kernel.metrics.population import births_and_deaths, bounding_box, density
from life_kernel.metrics.spatial import cluster_count, largest_cluster_size


def compute_generation_metrics(
    *,
    previous: Board,
    current: Board,
    skip_cluster_metrics: bool = False,
) -> dict[str, float | int | None]:
    """Compute metric values for ``current``, the generation after ``previous``.

    Bounding-box columns are None for an empty board; cluster columns are None
    when ``skip_cluster_metrics`` is set.
    """
    births, deaths = births_and_deaths(previous, current)
    box = bounding_box(current)
    min_x, min_y, max_x, max_y = box if box is not None else (None, None, None, None)
    return {
        "population": len(current),
        "density": density(current),
        "births": births,
        "deaths": deaths,
        "min_x": min_x,
        "min_y": min_y,
        "max_x": max_x,
        "max_y": max_y,
        "cluster_count": None if skip_cluster_metrics else cluster_count(current),
        "largest_cluster_size": (
            None if skip_cluster_metrics else largest_cluster_size(current)
        ),
    }
