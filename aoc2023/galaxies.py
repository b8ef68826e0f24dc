"""aoc2023.galaxies
====================

Cosmic expansion solver (day 11): the sum of Manhattan distances between every
pair of galaxies after each empty row and column has grown ``factor`` times.
"""

from __future__ import annotations

from itertools import combinations
from typing import List, Optional

from .constants import ADVANCED_EXPANSION, BASIC_EXPANSION
from .grid_utils import CharEnum, find_cells, parse_grid, transpose
from .types import Coord, Grid

EXAMPLE = """...#......
.......#..
#.........
..........
......#...
.#........
.........#
..........
.......#..
#...#....."""


class Space(CharEnum):
    EMPTY = "."
    GALAXY = "#"


def parse_image(text: str) -> Grid:
    return parse_grid(text, Space.parse)


def _expanded_positions(grid: Grid, factor: int) -> List[int]:
    """Map each row index to its position once empty rows are ``factor`` times as tall."""

    positions = []
    offset = 0
    for index, row in enumerate(grid):
        positions.append(index + offset)
        if all(cell is Space.EMPTY for cell in row):
            offset += factor - 1
    return positions


def expanded_galaxies(grid: Grid, factor: int) -> List[Coord]:
    rows = _expanded_positions(grid, factor)
    cols = _expanded_positions(transpose(grid), factor)
    return [(rows[row], cols[col]) for row, col in find_cells(grid, Space.GALAXY)]


def sum_of_distances(grid: Grid, factor: int) -> int:
    return sum(
        abs(row_a - row_b) + abs(col_a - col_b)
        for (row_a, col_a), (row_b, col_b) in combinations(expanded_galaxies(grid, factor), 2)
    )


def solve(data: Optional[str], advanced: bool) -> str:
    grid = parse_image(data if data is not None else EXAMPLE)
    return str(sum_of_distances(grid, ADVANCED_EXPANSION if advanced else BASIC_EXPANSION))


__all__ = ["EXAMPLE", "Space", "parse_image", "expanded_galaxies", "sum_of_distances", "solve"]
