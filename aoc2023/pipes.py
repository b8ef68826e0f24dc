"""aoc2023.pipes
=================

Pipe maze solver (day 10). The maze is a grid of connector tiles with one
marked start cell; exactly one closed loop of pipes passes through the start.

Two questions are answered about that loop:

* basic mode: how far along the loop is the tile farthest from the start;
* advanced mode: how many tiles are strictly enclosed by the loop.

Enclosure is computed by flood-filling an expanded copy of the grid at twice
the linear resolution. In the expanded grid every original tile sits on an
odd coordinate and the gaps between neighbouring tiles get their own cells, so
the fill can squeeze between two adjacent pipes that are not connected to
each other. A shoelace/Pick's theorem count is provided as a cross-check.
"""

from __future__ import annotations

from collections import deque
from typing import FrozenSet, List, Optional

import numpy as np

from .errors import NoSolutionFound, ParseError
from .grid_utils import CharEnum, dims, find_cells, in_bounds, parse_grid
from .polygon import interior_points, shoelace_area
from .types import Coord, Direction, Grid

EXAMPLE = """-L|F7
7S-7|
L|7||
-L-J|
L|-JF"""


class Tile(CharEnum):
    START = "S"
    VERTICAL = "|"
    HORIZONTAL = "-"
    NORTH_EAST = "L"
    NORTH_WEST = "J"
    SOUTH_WEST = "7"
    SOUTH_EAST = "F"
    GROUND = "."

    @property
    def connectors(self) -> FrozenSet[Direction]:
        """Headings through which a pipe can leave (or be entered from) this tile."""

        return _CONNECTORS[self]


_CONNECTORS = {
    Tile.START: frozenset(Direction),
    Tile.VERTICAL: frozenset({Direction.NORTH, Direction.SOUTH}),
    Tile.HORIZONTAL: frozenset({Direction.EAST, Direction.WEST}),
    Tile.NORTH_EAST: frozenset({Direction.NORTH, Direction.EAST}),
    Tile.NORTH_WEST: frozenset({Direction.NORTH, Direction.WEST}),
    Tile.SOUTH_WEST: frozenset({Direction.SOUTH, Direction.WEST}),
    Tile.SOUTH_EAST: frozenset({Direction.SOUTH, Direction.EAST}),
    Tile.GROUND: frozenset(),
}


def parse_maze(text: str) -> Grid:
    return parse_grid(text, Tile.parse)


def find_start(grid: Grid) -> Coord:
    starts = find_cells(grid, Tile.START)
    if len(starts) != 1:
        raise ParseError(f"Expected exactly one start tile, found {len(starts)}", stage="pipes")
    return starts[0]


def _walk(grid: Grid, start: Coord, heading: Direction) -> Optional[List[Coord]]:
    """Follow the pipes leaving ``start`` towards ``heading``.

    Returns the closed path (start repeated at the end) or ``None`` when the
    pipe runs off the grid or into a tile that does not connect back.
    """

    path = [start]
    current = start
    while True:
        target = heading.step(current)
        if not in_bounds(grid, target):
            return None
        if target == start:
            path.append(start)
            return path if len(path) > 3 else None
        tile = grid[target[0]][target[1]]
        entry = heading.opposite
        if entry not in tile.connectors:
            return None
        path.append(target)
        heading = next(direction for direction in tile.connectors if direction != entry)
        current = target


def find_loop(grid: Grid) -> List[Coord]:
    """Return the loop through the start tile as an ordered list of coordinates.

    The first and last element are both the start coordinate. Every tile on
    the loop is entered through one of its connectors and left through the
    other, so the walk never doubles back on the tile it came from.
    """

    start = find_start(grid)
    for heading in Direction:
        path = _walk(grid, start, heading)
        if path is not None:
            return path
    raise NoSolutionFound(f"No pipe loop passes through the start tile at {start}", stage="pipes")


def farthest_distance(loop: List[Coord]) -> int:
    """Number of steps from the start to the farthest tile along the loop."""

    edges = len(loop) - 1
    return (edges + 1) // 2


def enclosed_area(grid: Grid, loop: List[Coord]) -> int:
    """Count the tiles strictly enclosed by ``loop`` using an expanded flood fill.

    Parameters
    ----------
    grid:
        The parsed maze; only its dimensions are used.
    loop:
        Closed loop as returned by :func:`find_loop`.

    Notes
    -----
    Tile ``(r, c)`` maps to ``(2r + 1, 2c + 1)`` in the expanded grid, leaving
    a one-cell ring of padding that is never part of the loop. The fill seeds
    every border cell of that ring, so the outside region is always reached
    regardless of where the loop touches the original border.
    """

    height, width = dims(grid)
    path = np.zeros((2 * height + 1, 2 * width + 1), dtype=bool)
    for (row_a, col_a), (row_b, col_b) in zip(loop, loop[1:]):
        path[2 * row_a + 1, 2 * col_a + 1] = True
        path[row_a + row_b + 1, col_a + col_b + 1] = True

    outside = np.zeros_like(path)
    exp_h, exp_w = path.shape
    border = (
        [(0, col) for col in range(exp_w)]
        + [(exp_h - 1, col) for col in range(exp_w)]
        + [(row, 0) for row in range(1, exp_h - 1)]
        + [(row, exp_w - 1) for row in range(1, exp_h - 1)]
    )
    queue = deque()
    for row, col in border:
        if not path[row, col] and not outside[row, col]:
            outside[row, col] = True
            queue.append((row, col))
    while queue:
        row, col = queue.popleft()
        for d_row, d_col in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            n_row, n_col = row + d_row, col + d_col
            if 0 <= n_row < exp_h and 0 <= n_col < exp_w:
                if not path[n_row, n_col] and not outside[n_row, n_col]:
                    outside[n_row, n_col] = True
                    queue.append((n_row, n_col))

    enclosed = ~path[1::2, 1::2] & ~outside[1::2, 1::2]
    return int(enclosed.sum())


def enclosed_by_shoelace(loop: List[Coord]) -> int:
    """Interior tile count from the shoelace area and Pick's theorem."""

    return interior_points(shoelace_area(loop), len(loop) - 1)


def solve(data: Optional[str], advanced: bool) -> str:
    grid = parse_maze(data if data is not None else EXAMPLE)
    loop = find_loop(grid)
    if advanced:
        return str(enclosed_area(grid, loop))
    return str(farthest_distance(loop))


__all__ = [
    "EXAMPLE",
    "Tile",
    "parse_maze",
    "find_start",
    "find_loop",
    "farthest_distance",
    "enclosed_area",
    "enclosed_by_shoelace",
    "solve",
]
