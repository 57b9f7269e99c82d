"""Conway's Game of Life kernel with incremental, active-set generation advance."""

from life_kernel.domain.board import Board
from life_kernel.domain.cell import Cell
from life_kernel.domain.parallel import tick_parallel

__all__ = ["Board", "Cell", "tick_parallel"]
