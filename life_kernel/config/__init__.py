"""Configuration layer: constants and typed config dataclasses."""

from life_kernel.config.constants import (
    FLUSH_THRESHOLD,
    GRID_HEIGHT,
    GRID_WIDTH,
    HALT_WINDOW,
    MAX_GENERATIONS_PER_SECOND,
    MAX_NEIGHBOURS,
    MAX_WORK_UNITS,
    NUM_STEPS,
    SEED_PROBABILITY,
)
from life_kernel.config.types import (
    BoardConfig,
    RunConfig,
    SeedMode,
    SimulationResult,
)

__all__ = [
    "BoardConfig",
    "FLUSH_THRESHOLD",
    "GRID_HEIGHT",
    "GRID_WIDTH",
    "HALT_WINDOW",
    "MAX_GENERATIONS_PER_SECOND",
    "MAX_NEIGHBOURS",
    "MAX_WORK_UNITS",
    "NUM_STEPS",
    "RunConfig",
    "SEED_PROBABILITY",
    "SeedMode",
    "SimulationResult",
]
