from __future__ import annotations

from enum import Enum
from typing import Callable, List, Sequence, Tuple

from .errors import ParseError
from .types import Coord, Grid


class CharEnum(Enum):
    """Cell kind whose enum value is the character used in puzzle input."""

    @classmethod
    def parse(cls, char: str):
        try:
            return cls(char)
        except ValueError as exc:
            raise ParseError(f"Unexpected character {char!r} for {cls.__name__}", stage="parse") from exc


# ---------------------------------------------------------------------------
# Parsing / rendering
# ---------------------------------------------------------------------------
def parse_grid(text: str, classify: Callable[[str], object]) -> Grid:
    """Parse ``text`` into a rectangular grid of classified cells.

    Parameters
    ----------
    text:
        Raw puzzle text. Leading and trailing whitespace is ignored and blank
        lines are skipped.
    classify:
        Callable mapping a single character to a cell kind. It is expected to
        raise :class:`~aoc2023.errors.ParseError` for unknown characters.

    Returns
    -------
    Grid
        Row-major list of rows, all of equal length.

    Notes
    -----
    Malformed input is not recovered from. The error message carries the
    line and column of the offending character so the caller can report it.
    """

    lines = [line.strip() for line in text.strip().splitlines() if line.strip()]
    if not lines:
        raise ParseError("Grid input is empty", stage="parse")
    width = len(lines[0])
    grid: Grid = []
    for row_index, line in enumerate(lines):
        if len(line) != width:
            raise ParseError(
                f"Row {row_index} has width {len(line)}, expected {width}",
                stage="parse",
            )
        row = []
        for col_index, char in enumerate(line):
            try:
                row.append(classify(char))
            except ParseError as exc:
                raise ParseError(f"{exc.message} at ({row_index}, {col_index})", stage="parse") from exc
        grid.append(row)
    return grid


def render_grid(grid: Grid) -> str:
    """Inverse of :func:`parse_grid` for grids of :class:`CharEnum` cells."""

    return "\n".join("".join(cell.value for cell in row) for row in grid)


# ---------------------------------------------------------------------------
# Basic geometry helpers
# ---------------------------------------------------------------------------
def dims(grid: Sequence[Sequence[object]]) -> Tuple[int, int]:
    """Return the height and width of a grid. Empty grids return ``(0, 0)``."""

    if not grid:
        return 0, 0
    return len(grid), len(grid[0])


def in_bounds(grid: Sequence[Sequence[object]], coord: Coord) -> bool:
    height, width = dims(grid)
    row, col = coord
    return 0 <= row < height and 0 <= col < width


def deepcopy_grid(grid: Grid) -> Grid:
    """Return a structural copy of ``grid`` safe for mutation by callers."""

    return [row[:] for row in grid]


def transpose(grid: Sequence[Sequence[object]]) -> List[List[object]]:
    return [list(column) for column in zip(*grid)]


def find_cells(grid: Sequence[Sequence[object]], kind: object) -> List[Coord]:
    """Return the coordinates of every cell equal to ``kind`` in row-major order."""

    return [
        (row_index, col_index)
        for row_index, row in enumerate(grid)
        for col_index, cell in enumerate(row)
        if cell == kind
    ]


__all__ = [
    "CharEnum",
    "parse_grid",
    "render_grid",
    "dims",
    "in_bounds",
    "deepcopy_grid",
    "transpose",
    "find_cells",
]
