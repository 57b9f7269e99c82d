"""Fixed-extent Game of Life board with an incrementally maintained active set.

Board invariants:

- every cell's cached neighbour count equals the number of alive in-bounds
  neighbours;
- ``alive_cells()`` holds exactly the alive coordinates, each once.

Both are maintained by ``make_alive``, the only mutation. ``tick`` never
touches the source board: it builds the next generation in a fresh (or
recycled) destination, reading transitions from the source only, and visits
just the active set and its one-cell ring.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from random import Random

import numpy as np
from numpy.typing import NDArray

from life_kernel.domain.cell import (
    LIVE,
    Cell,
    packed_next_alive_state,
    packed_next_dead_state,
)
from life_kernel.domain.neighbors import adjacent_coordinates

Coordinate = tuple[int, int]


class Board:
    """A ``width x height`` grid of packed cells plus its active set."""

    __slots__ = ("_width", "_height", "_cells", "_alive")

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"board extent must be >= 1x1, got {width}x{height}")
        self._width = width
        self._height = height
        self._cells: NDArray[np.int8] = np.zeros((height, width), dtype=np.int8)
        self._alive: list[Coordinate] = []

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def new(cls, width: int, height: int) -> Board:
        """All-dead board."""
        return cls(width, height)

    @classmethod
    def full(cls, width: int, height: int) -> Board:
        """Board with every cell alive."""
        board = cls(width, height)
        for y in range(height):
            for x in range(width):
                board.make_alive(x, y)
        return board

    @classmethod
    def rand(
        cls, width: int, height: int, probability: float, rng: Random | None = None
    ) -> Board:
        """Board where each cell is independently alive with ``probability``."""
        if not 0.0 <= probability <= 1.0:
            raise ValueError("probability must be in [0.0, 1.0]")
        rng = rng if rng is not None else Random()
        board = cls(width, height)
        for y in range(height):
            for x in range(width):
                if rng.random() < probability:
                    board.make_alive(x, y)
        return board

    @classmethod
    def from_cells(
        cls,
        pattern: Sequence[Sequence[int]],
        width: int | None = None,
        height: int | None = None,
    ) -> Board:
        """Board alive wherever ``pattern[y][x]`` is non-zero.

        Rows may be ragged. The extent defaults to the pattern's own bounding
        dimensions; an explicit extent must be at least that large.
        """
        rows = [list(row) for row in pattern]
        pattern_height = len(rows)
        pattern_width = max((len(row) for row in rows), default=0)
        width = pattern_width if width is None else width
        height = pattern_height if height is None else height
        if pattern_width > width or pattern_height > height:
            raise ValueError(
                f"pattern of {pattern_width}x{pattern_height} does not fit a "
                f"{width}x{height} board"
            )
        board = cls(width, height)
        for y, row in enumerate(rows):
            for x, value in enumerate(row):
                if value:
                    board.make_alive(x, y)
        return board

    @classmethod
    def from_coordinates(cls, coordinates: Iterable[Coordinate], width: int, height: int) -> Board:
        """Board alive at each listed coordinate; repeated coordinates count once."""
        board = cls(width, height)
        for x, y in coordinates:
            if not board.contains(x, y):
                raise ValueError(f"coordinate {(x, y)} outside {width}x{height} board")
            if not board._cells[y, x] & LIVE:
                board.make_alive(x, y)
        return board

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def make_alive(self, x: int, y: int) -> None:
        """Mark (x, y) alive and bump the cached count of each in-bounds neighbour.

        No duplicate check: each coordinate may be marked at most once per
        board, otherwise the active set gains a duplicate and counts double.
        """
        assert 0 <= x < self._width and 0 <= y < self._height, (
            f"coordinate {(x, y)} outside {self._width}x{self._height} board"
        )
        self._alive.append((x, y))
        cells = self._cells
        # The clipped 3x3 slice covers exactly the in-bounds neighbours plus
        # the cell itself, whose own increment is undone below.
        cells[max(y - 1, 0) : y + 2, max(x - 1, 0) : x + 2] += 1
        cells[y, x] -= 1
        cells[y, x] |= LIVE

    def _clear(self) -> None:
        self._cells.fill(0)
        self._alive.clear()

    # ------------------------------------------------------------------
    # Generation advance
    # ------------------------------------------------------------------

    def tick(self, reuse: Board | None = None) -> Board:
        """Return the next generation as a new board.

        ``reuse`` may supply a spare board of the same extent (typically the
        generation before this one); it is cleared and filled in place of a
        fresh allocation. The source board is never modified.
        """
        if reuse is None:
            board = Board(self._width, self._height)
        else:
            if reuse is self:
                raise ValueError("cannot tick a board into itself")
            if (reuse._width, reuse._height) != (self._width, self._height):
                raise ValueError("reuse board extent does not match")
            reuse._clear()
            board = reuse

        source = self._cells
        destination = board._cells
        width, height = self._width, self._height
        for x, y in self._alive:
            if packed_next_alive_state(int(source[y, x])):
                board.make_alive(x, y)
            for nx, ny in adjacent_coordinates(x, y, width, height):
                value = int(source[ny, nx])
                if value & LIVE or destination[ny, nx] & LIVE:
                    continue
                if packed_next_dead_state(value):
                    board.make_alive(nx, ny)
        return board

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def cells(self) -> NDArray[np.int8]:
        """Read-only view of the packed cell grid, indexed ``[y, x]``."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    @property
    def population(self) -> int:
        return len(self._alive)

    def alive_cells(self) -> tuple[Coordinate, ...]:
        """Alive coordinates in the order they were marked."""
        return tuple(self._alive)

    def alive_mask(self) -> NDArray[np.bool_]:
        """Boolean grid, ``True`` where alive, indexed ``[y, x]``."""
        return (self._cells & LIVE) != 0

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def cell(self, x: int, y: int) -> Cell:
        if not self.contains(x, y):
            raise IndexError(f"coordinate {(x, y)} outside {self._width}x{self._height} board")
        return Cell.from_raw(int(self._cells[y, x]))

    def get(self, x: int, y: int) -> Cell | None:
        """Like ``cell`` but returns None outside the board."""
        if not self.contains(x, y):
            return None
        return Cell.from_raw(int(self._cells[y, x]))

    def is_empty(self) -> bool:
        return not self._alive

    def copy(self) -> Board:
        board = Board(self._width, self._height)
        board._cells[...] = self._cells
        board._alive = list(self._alive)
        return board

    def render_text(self, alive: str = "#", dead: str = ".") -> str:
        """Plain-text picture of the board, one line per row."""
        mask = self.alive_mask()
        return "\n".join("".join(alive if v else dead for v in row) for row in mask)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(tuple(self._alive))

    def __len__(self) -> int:
        return len(self._alive)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and np.array_equal(self._cells, other._cells)
            and set(self._alive) == set(other._alive)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Board(width={self._width}, height={self._height}, population={len(self._alive)})"
