"""Partitioned generation advance.

The source board is read-only for the whole computation, so the active set
can be split into chunks and scanned concurrently without locks. Each worker
only reports the coordinates it believes should be alive; the merge applies
them serially, and the "still dead in the destination" check there removes
the duplicates that arise when chunks share a dead neighbour.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import TypeVar

from life_kernel.domain.board import Board, Coordinate
from life_kernel.domain.cell import LIVE, packed_next_alive_state, packed_next_dead_state
from life_kernel.domain.neighbors import adjacent_coordinates

T = TypeVar("T")


def partition(items: Sequence[T], n_chunks: int) -> list[Sequence[T]]:
    """Split ``items`` into at most ``n_chunks`` contiguous, order-preserving chunks."""
    if n_chunks < 1:
        raise ValueError("n_chunks must be >= 1")
    if not items:
        return []
    size, remainder = divmod(len(items), n_chunks)
    chunks: list[Sequence[T]] = []
    start = 0
    for i in range(n_chunks):
        end = start + size + (1 if i < remainder else 0)
        if end > start:
            chunks.append(items[start:end])
        start = end
    return chunks


def _scan_chunk(board: Board, chunk: Sequence[Coordinate]) -> list[Coordinate]:
    """Coordinates that will be alive next generation, as seen from one chunk.

    May contain coordinates also reported by other chunks.
    """
    source = board.cells
    width, height = board.width, board.height
    found: list[Coordinate] = []
    for x, y in chunk:
        if packed_next_alive_state(int(source[y, x])):
            found.append((x, y))
        for nx, ny in adjacent_coordinates(x, y, width, height):
            value = int(source[ny, nx])
            if not value & LIVE and packed_next_dead_state(value):
                found.append((nx, ny))
    return found


def tick_parallel(
    board: Board,
    workers: int | None = None,
    executor: Executor | None = None,
    chunk_size: int | None = None,
) -> Board:
    """Compute ``board.tick()`` by scanning active-set chunks concurrently.

    ``executor`` is used as-is when given (and not shut down); otherwise a
    ``ThreadPoolExecutor`` with ``workers`` threads is created for the call.
    ``chunk_size`` overrides the default of one chunk per worker.
    """
    if workers is None:
        workers = os.cpu_count() or 1
    if workers < 1:
        raise ValueError("workers must be >= 1")
    if chunk_size is not None and chunk_size < 1:
        raise ValueError("chunk_size must be >= 1")

    alive = board.alive_cells()
    if chunk_size is not None:
        n_chunks = max(1, -(-len(alive) // chunk_size))
    else:
        n_chunks = workers
    chunks = partition(alive, n_chunks)

    if executor is not None:
        results = list(executor.map(_scan_chunk, [board] * len(chunks), chunks))
    elif workers == 1 or len(chunks) <= 1:
        results = [_scan_chunk(board, chunk) for chunk in chunks]
    else:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(pool.map(_scan_chunk, [board] * len(chunks), chunks))

    destination = Board(board.width, board.height)
    for found in results:
        for x, y in found:
            if destination.cell(x, y).is_dead():
                destination.make_alive(x, y)
    return destination
