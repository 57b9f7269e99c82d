"""Named seed patterns as 0/1 row lists (``pattern[y][x]``)."""

from __future__ import annotations

from collections.abc import Sequence

from life_kernel.domain.board import Board

Pattern = tuple[tuple[int, ...], ...]

BLOCK: Pattern = (
    (1, 1),
    (1, 1),
)

BLINKER: Pattern = (
    (0, 1, 0),
    (0, 1, 0),
    (0, 1, 0),
)

TOAD: Pattern = (
    (0, 1, 1, 1),
    (1, 1, 1, 0),
)

BEACON: Pattern = (
    (1, 1, 0, 0),
    (1, 1, 0, 0),
    (0, 0, 1, 1),
    (0, 0, 1, 1),
)

GLIDER: Pattern = (
    (0, 1, 0),
    (0, 0, 1),
    (1, 1, 1),
)

LWSS: Pattern = (
    (0, 1, 0, 0, 1),
    (1, 0, 0, 0, 0),
    (1, 0, 0, 0, 1),
    (1, 1, 1, 1, 0),
)

R_PENTOMINO: Pattern = (
    (0, 1, 1),
    (1, 1, 0),
    (0, 1, 0),
)

PATTERNS: dict[str, Pattern] = {
    "block": BLOCK,
    "blinker": BLINKER,
    "toad": TOAD,
    "beacon": BEACON,
    "glider": GLIDER,
    "lwss": LWSS,
    "r_pentomino": R_PENTOMINO,
}


def get_pattern(name: str) -> Pattern:
    """Look up a registered pattern by name."""
    try:
        return PATTERNS[name]
    except KeyError as exc:
        valid = ", ".join(sorted(PATTERNS))
        raise ValueError(f"pattern must be one of {valid}") from exc


def place_pattern(
    pattern: Sequence[Sequence[int]],
    width: int,
    height: int,
    offset_x: int = 0,
    offset_y: int = 0,
) -> Board:
    """Build a ``width x height`` board with ``pattern`` shifted by the offset."""
    if offset_x < 0 or offset_y < 0:
        raise ValueError("pattern offset must be non-negative")
    shifted = [[0] * offset_x + list(row) for row in pattern]
    padded = [[] for _ in range(offset_y)] + shifted
    return Board.from_cells(padded, width=width, height=height)
