"""Packed Game of Life cell: one signed byte holding alive flag and neighbour count.

Bit layout of the int8 value::

    1 0 0 0 n n n n
    ^       ^^^^^^^
    alive   neighbour count (0..8; the low seven bits are reserved for it)

The board stores these values directly in an ``int8`` array. The
``packed_*`` helpers work on raw ints so hot loops never allocate ``Cell``
objects; ``Cell`` itself is the readable wrapper for callers and tests.
"""

from __future__ import annotations

from life_kernel.config.constants import MAX_NEIGHBOURS

LIVE = -0x80
"""Alive flag: the sign bit of the packed int8 value."""

NEIGHBOUR_MASK = 0x7F
"""Mask selecting the neighbour-count bits."""


def packed_is_alive(value: int) -> bool:
    return value & LIVE != 0


def packed_neighbour_count(value: int) -> int:
    return value & NEIGHBOUR_MASK


def packed_next_alive_state(value: int) -> bool:
    """Survival rule for a live cell: 2 or 3 neighbours."""
    return 2 <= value & NEIGHBOUR_MASK <= 3


def packed_next_dead_state(value: int) -> bool:
    """Birth rule for a dead cell: exactly 3 neighbours."""
    return value & NEIGHBOUR_MASK == 3


def packed_next_state(value: int) -> bool:
    if value & LIVE:
        return packed_next_alive_state(value)
    return packed_next_dead_state(value)


class Cell:
    """A single Game of Life cell.

    The neighbour count is cached, never recomputed. Transition predicates are
    only correct if whoever owns the cell kept that count accurate.
    """

    __slots__ = ("_value",)

    def __init__(self, alive: bool = False, neighbour_count: int = 0) -> None:
        assert neighbour_count <= MAX_NEIGHBOURS, (
            f"neighbour_count overflow: {neighbour_count} > {MAX_NEIGHBOURS}"
        )
        assert neighbour_count & ~NEIGHBOUR_MASK == 0, (
            f"neighbour_count underflow: {neighbour_count} cannot be negative"
        )
        self._value = neighbour_count | (LIVE if alive else 0)

    @classmethod
    def from_raw(cls, value: int) -> Cell:
        """Wrap a packed value read from a board array."""
        cell = cls.__new__(cls)
        cell._value = int(value)
        return cell

    def is_alive(self) -> bool:
        return packed_is_alive(self._value)

    def is_dead(self) -> bool:
        return not self.is_alive()

    def make_alive(self) -> None:
        """Set the alive bit; the neighbour count is left untouched."""
        self._value |= LIVE

    def make_dead(self) -> None:
        """Clear the alive bit; the neighbour count is left untouched."""
        self._value &= ~LIVE

    def neighbour_count(self) -> int:
        return packed_neighbour_count(self._value)

    def next_state(self) -> bool:
        """Whether this cell is alive in the next generation."""
        return packed_next_state(self._value)

    def next_alive_state(self) -> bool:
        """Whether this cell survives, assuming it is alive now."""
        return packed_next_alive_state(self._value)

    def next_dead_state(self) -> bool:
        """Whether this cell is born, assuming it is dead now."""
        return packed_next_dead_state(self._value)

    def __int__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"Cell(alive={self.is_alive()}, neighbour_count={self.neighbour_count()})"
