"""aoc2023.beams
=================

Floor-will-be-lava solver (day 16). A beam enters a contraption of mirrors
(``/`` and ``\\``) and splitters (``|`` and ``-``); every tile the beam passes
through is energised. Basic mode fires the beam from the top-left corner
heading east, advanced mode tries every edge tile and keeps the best.

Beams are followed with an explicit work stack. A ``(tile, heading)`` pair is
processed at most once, which both terminates loops between mirrors and
stops split beams from retracing each other.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Set, Tuple

from .grid_utils import CharEnum, dims, in_bounds, parse_grid
from .types import Coord, Direction, Grid

EXAMPLE = r""".|...\....
|.-.\.....
.....|-...
........|.
..........
.........\
..../.\\..
.-.-/..|..
.|....-|.\
..//.|...."""


class Cell(CharEnum):
    EMPTY = "."
    MIRROR_FORWARD = "/"
    MIRROR_BACKWARD = "\\"
    SPLITTER_HORIZONTAL = "-"
    SPLITTER_VERTICAL = "|"

    def outgoing(self, heading: Direction) -> Tuple[Direction, ...]:
        """Headings a beam travelling ``heading`` leaves this cell with."""

        if self is Cell.MIRROR_FORWARD:
            d_row, d_col = heading.delta
            return (Direction((-d_col, -d_row)),)
        if self is Cell.MIRROR_BACKWARD:
            d_row, d_col = heading.delta
            return (Direction((d_col, d_row)),)
        if self is Cell.SPLITTER_HORIZONTAL and heading in (Direction.NORTH, Direction.SOUTH):
            return (Direction.WEST, Direction.EAST)
        if self is Cell.SPLITTER_VERTICAL and heading in (Direction.EAST, Direction.WEST):
            return (Direction.NORTH, Direction.SOUTH)
        return (heading,)


def parse_contraption(text: str) -> Grid:
    return parse_grid(text, Cell.parse)


def energized(grid: Grid, start: Coord, heading: Direction) -> int:
    """Number of tiles energised by a beam entering ``start`` travelling ``heading``."""

    seen: Set[Tuple[Coord, Direction]] = set()
    stack: List[Tuple[Coord, Direction]] = [(start, heading)]
    while stack:
        coord, direction = stack.pop()
        if not in_bounds(grid, coord) or (coord, direction) in seen:
            continue
        seen.add((coord, direction))
        cell = grid[coord[0]][coord[1]]
        for outgoing in cell.outgoing(direction):
            stack.append((outgoing.step(coord), outgoing))
    return len({coord for coord, _ in seen})


def edge_entries(grid: Grid) -> Iterator[Tuple[Coord, Direction]]:
    height, width = dims(grid)
    for row in range(height):
        yield (row, 0), Direction.EAST
        yield (row, width - 1), Direction.WEST
    for col in range(width):
        yield (0, col), Direction.SOUTH
        yield (height - 1, col), Direction.NORTH


def solve(data: Optional[str], advanced: bool) -> str:
    grid = parse_contraption(data if data is not None else EXAMPLE)
    if advanced:
        return str(max(energized(grid, start, heading) for start, heading in edge_entries(grid)))
    return str(energized(grid, (0, 0), Direction.EAST))


__all__ = ["EXAMPLE", "Cell", "parse_contraption", "energized", "edge_entries", "solve"]
