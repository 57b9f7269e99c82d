"""Configuration dataclasses for board seeding and simulation runs.

All frozen dataclasses that parameterise a run live here. Validation happens
in ``__post_init__`` so an invalid config can never be constructed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from random import Random
from typing import TYPE_CHECKING

from life_kernel.config.constants import (
    GRID_HEIGHT,
    GRID_WIDTH,
    HALT_WINDOW,
    NUM_STEPS,
    SEED_PROBABILITY,
)

if TYPE_CHECKING:
    from life_kernel.domain.board import Board

__all__ = [
    "SimulationResult",
    "SeedMode",
    "BoardConfig",
    "RunConfig",
]

# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SimulationResult:
    """Top-level result for one simulated run."""

    run_id: str
    survived: bool
    terminated_at: int | None
    termination_reason: str | None
    final_population: int
    generations: int


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


class SeedMode(Enum):
    """How the initial board of a run is populated."""

    RANDOM = "random"
    FULL = "full"
    EMPTY = "empty"
    PATTERN = "pattern"


@dataclass(frozen=True)
class BoardConfig:
    """Extent and seeding of the initial board."""

    width: int = GRID_WIDTH
    height: int = GRID_HEIGHT
    seed_mode: SeedMode = SeedMode.RANDOM
    probability: float = SEED_PROBABILITY
    pattern: str | None = None
    pattern_offset: tuple[int, int] = (0, 0)

    def __post_init__(self) -> None:
        if self.width < 1:
            raise ValueError("width must be >= 1")
        if self.height < 1:
            raise ValueError("height must be >= 1")
        if not 0.0 <= self.probability <= 1.0:
            raise ValueError("probability must be in [0.0, 1.0]")
        if self.seed_mode == SeedMode.PATTERN and self.pattern is None:
            raise ValueError("pattern is required when seed_mode is 'pattern'")
        if self.pattern_offset[0] < 0 or self.pattern_offset[1] < 0:
            raise ValueError("pattern_offset must be non-negative")
        if self.pattern is not None:
            from life_kernel.domain.patterns import get_pattern

            pattern = get_pattern(self.pattern)
            if self.seed_mode == SeedMode.PATTERN:
                offset_x, offset_y = self.pattern_offset
                pattern_width = max((len(row) for row in pattern), default=0)
                if (
                    offset_x + pattern_width > self.width
                    or offset_y + len(pattern) > self.height
                ):
                    raise ValueError(
                        f"pattern {self.pattern!r} at offset {self.pattern_offset} "
                        f"does not fit a {self.width}x{self.height} board"
                    )

    def build(self, rng: Random) -> Board:
        """Create the initial board for one run."""
        from life_kernel.domain.board import Board
        from life_kernel.domain.patterns import get_pattern, place_pattern

        if self.seed_mode == SeedMode.FULL:
            return Board.full(self.width, self.height)
        if self.seed_mode == SeedMode.EMPTY:
            return Board.new(self.width, self.height)
        if self.seed_mode == SeedMode.PATTERN:
            assert self.pattern is not None
            offset_x, offset_y = self.pattern_offset
            return place_pattern(
                get_pattern(self.pattern), self.width, self.height, offset_x, offset_y
            )
        return Board.rand(self.width, self.height, self.probability, rng)


@dataclass(frozen=True)
class RunConfig:
    """Per-run stepping knobs, termination filters, and metric controls."""

    steps: int = NUM_STEPS
    halt_window: int = HALT_WINDOW
    enable_termination_filters: bool = True
    filter_short_period: bool = False
    short_period_max_period: int = 2
    short_period_history_size: int = 8
    workers: int = 1
    recycle_boards: bool = False
    skip_cluster_metrics: bool = False

    def __post_init__(self) -> None:
        if self.steps < 1:
            raise ValueError("steps must be >= 1")
        if self.halt_window < 1:
            raise ValueError("halt_window must be >= 1")
        if self.short_period_max_period < 2:
            raise ValueError("short_period_max_period must be >= 2")
        if self.short_period_history_size < self.short_period_max_period * 2:
            raise ValueError("short_period_history_size must be >= 2 * short_period_max_period")
        if self.workers < 1:
            raise ValueError("workers must be >= 1")
