"""Moore-neighbourhood enumeration with sharp (non-wrapping) grid edges."""

from __future__ import annotations

from collections.abc import Iterator

NEIGHBOUR_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
)  # fmt: skip
"""(dx, dy) offsets in row-major order; the zero offset is excluded."""


def adjacent_coordinates(
    x: int, y: int, width: int | None = None, height: int | None = None
) -> Iterator[tuple[int, int]]:
    """Yield the in-bounds neighbours of (x, y).

    Negative components are always clipped. Upper bounds are clipped only when
    ``width``/``height`` are given.
    """
    for dx, dy in NEIGHBOUR_OFFSETS:
        nx, ny = x + dx, y + dy
        if nx < 0 or ny < 0:
            continue
        if width is not None and nx >= width:
            continue
        if height is not None and ny >= height:
            continue
        yield nx, ny
