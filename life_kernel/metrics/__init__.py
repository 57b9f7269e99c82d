"""Metrics layer: population and spatial statistics of a board."""

from life_kernel.metrics.population import (
    births_and_deaths,
    bounding_box,
    density,
    population,
)
from life_kernel.metrics.spatial import cluster_count, largest_cluster_size, live_cell_graph

__all__ = [
    "births_and_deaths",
    "bounding_box",
    "cluster_count",
    "density",
    "largest_cluster_size",
    "live_cell_graph",
    "population",
]
