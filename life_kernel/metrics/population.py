"""Population metrics: counts, density, turnover, and extent of live cells."""

from __future__ import annotations

from life_kernel.domain.board import Board


def population(board: Board) -> int:
    """Number of live cells."""
    return len(board)


def density(board: Board) -> float:
    """Fraction of the board that is alive, in [0, 1]."""
    return len(board) / (board.width * board.height)


def births_and_deaths(previous: Board, current: Board) -> tuple[int, int]:
    """Count cells born and cells that died between two consecutive generations."""
    before = set(previous.alive_cells())
    after = set(current.alive_cells())
    return len(after - before), len(before - after)


def bounding_box(board: Board) -> tuple[int, int, int, int] | None:
    """Return ``(min_x, min_y, max_x, max_y)`` of the live cells, or None if empty."""
    alive = board.alive_cells()
    if not alive:
        return None
    xs = [x for x, _ in alive]
    ys = [y for _, y in alive]
    return min(xs), min(ys), max(xs), max(ys)
