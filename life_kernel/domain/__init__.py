"""Domain layer: packed cells, the board, neighbour math, patterns, and filters."""

from life_kernel.domain.board import Board, Coordinate
from life_kernel.domain.cell import LIVE, NEIGHBOUR_MASK, Cell
from life_kernel.domain.filters import (
    ExtinctionDetector,
    HaltDetector,
    ShortPeriodDetector,
    TerminationReason,
)
from life_kernel.domain.neighbors import NEIGHBOUR_OFFSETS, adjacent_coordinates
from life_kernel.domain.parallel import partition, tick_parallel
from life_kernel.domain.patterns import PATTERNS, get_pattern, place_pattern

__all__ = [
    "Board",
    "Cell",
    "Coordinate",
    "ExtinctionDetector",
    "HaltDetector",
    "LIVE",
    "NEIGHBOUR_MASK",
    "NEIGHBOUR_OFFSETS",
    "PATTERNS",
    "ShortPeriodDetector",
    "TerminationReason",
    "adjacent_coordinates",
    "get_pattern",
    "partition",
    "place_pattern",
    "tick_parallel",
]
