"""aoc2023.types
=================

Foundational type aliases and small value types shared by the solver modules.
Keeping them in one place means every solver speaks about coordinates and
headings in exactly the same way, which matters once several engines start
exchanging grids in tests.

The module intentionally stays free of puzzle logic: importing it never
triggers runtime side effects.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Tuple, TypeVar

# ---------------------------------------------------------------------------
# Core grid representations
# ---------------------------------------------------------------------------
Cell = TypeVar("Cell")
Grid = List[List[Cell]]
Coord = Tuple[int, int]


class Direction(Enum):
    """Compass heading on a row-major grid.

    The value is the ``(d_row, d_col)`` step taken when moving one cell in
    that heading. Row 0 is the top of the grid, so ``NORTH`` decreases the
    row index.
    """

    NORTH = (-1, 0)
    EAST = (0, 1)
    SOUTH = (1, 0)
    WEST = (0, -1)

    @property
    def delta(self) -> Coord:
        return self.value

    @property
    def opposite(self) -> "Direction":
        d_row, d_col = self.value
        return Direction((-d_row, -d_col))

    def turns(self) -> Tuple["Direction", "Direction"]:
        """Return the two headings reachable by a 90 degree turn."""

        d_row, d_col = self.value
        return Direction((d_col, d_row)), Direction((-d_col, -d_row))

    def step(self, coord: Coord, distance: int = 1) -> Coord:
        row, col = coord
        d_row, d_col = self.value
        return row + d_row * distance, col + d_col * distance


__all__ = ["Cell", "Grid", "Coord", "Direction"]
