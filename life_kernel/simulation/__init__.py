"""Simulation layer: generation stepping, batch runs, persistence, and hand-off."""

from life_kernel.simulation.engine import iter_generations, run_batch, run_simulation
from life_kernel.simulation.handoff import BoardExchange, SimulationThread
from life_kernel.simulation.persistence import flush_metric_columns, new_metric_columns
from life_kernel.simulation.step import compute_generation_metrics

__all__ = [
    "BoardExchange",
    "SimulationThread",
    "compute_generation_metrics",
    "flush_metric_columns",
    "iter_generations",
    "new_metric_columns",
    "run_batch",
    "run_simulation",
]
