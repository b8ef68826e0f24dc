"""aoc2023.polygon
===================

Lattice polygon helpers shared by the pipe-loop and lagoon solvers.
"""

from __future__ import annotations

from typing import Sequence

from .types import Coord


def shoelace_area(vertices: Sequence[Coord]) -> int:
    """Return the area enclosed by a closed polygon, rounded down.

    ``vertices`` may or may not repeat the first vertex at the end; collinear
    intermediate vertices are harmless.
    """

    if len(vertices) < 3:
        return 0
    twice_area = 0
    for index, (row_a, col_a) in enumerate(vertices):
        row_b, col_b = vertices[(index + 1) % len(vertices)]
        twice_area += row_a * col_b - row_b * col_a
    return abs(twice_area) // 2


def interior_points(area: int, boundary: int) -> int:
    """Pick's theorem solved for the number of interior lattice points."""

    return area - boundary // 2 + 1


__all__ = ["shoelace_area", "interior_points"]
