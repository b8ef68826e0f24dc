"""aoc2023.mirrors
===================

Point of incidence solver (day 13). Each block of ash (``.``) and rocks (``#``)
has a line of reflection between two columns or two rows. A vertical line
scores the number of columns to its left, a horizontal line scores 100 times
the number of rows above it.

In advanced mode exactly one cell of each block is smudged. Fixing it yields a
different reflection line, which is the one scored.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Set, Tuple

from .errors import InvariantViolation, ParseError
from .grid_utils import CharEnum, deepcopy_grid, dims, parse_grid, transpose
from .types import Grid

EXAMPLE = """#.##..##.
..#.##.#.
##......#
##......#
..#.##.#.
..##..##.
#.#.##.#.

#...##..#
#....#..#
..##..###
#####.##.
#####.##.
..##..###
#....#..#"""

# (orientation, position) with orientation "v" for a line between columns
# and "h" for a line between rows.
Reflection = Tuple[str, int]


class Terrain(CharEnum):
    ASH = "."
    ROCK = "#"

    @property
    def flipped(self) -> "Terrain":
        return Terrain.ROCK if self is Terrain.ASH else Terrain.ASH


def parse_blocks(text: str) -> List[Grid]:
    """Split ``text`` on blank lines (whitespace-only lines count as blank)."""

    chunks: List[List[str]] = []
    current: List[str] = []
    for line in text.splitlines():
        if line.strip():
            current.append(line)
        elif current:
            chunks.append(current)
            current = []
    if current:
        chunks.append(current)
    if not chunks:
        raise ParseError("No pattern blocks found", stage="mirrors")
    return [parse_grid("\n".join(chunk), Terrain.parse) for chunk in chunks]


def _row_axes(row: Sequence[Terrain]) -> Set[int]:
    """Positions ``i`` where ``row`` reads the same mirrored around the gap before index ``i``."""

    return {
        index
        for index in range(1, len(row))
        if all(left == right for left, right in zip(reversed(row[:index]), row[index:]))
    }


def _common_axes(grid: Sequence[Sequence[Terrain]]) -> Set[int]:
    axes = _row_axes(grid[0])
    for row in grid[1:]:
        axes &= _row_axes(row)
        if not axes:
            break
    return axes


def reflection_lines(block: Grid) -> Set[Reflection]:
    """Every vertical and horizontal line the block is symmetric about."""

    vertical = {("v", axis) for axis in _common_axes(block)}
    horizontal = {("h", axis) for axis in _common_axes(transpose(block))}
    return vertical | horizontal


def score(line: Reflection) -> int:
    orientation, position = line
    return position if orientation == "v" else 100 * position


def _single(lines: Set[Reflection], what: str) -> Reflection:
    if len(lines) != 1:
        raise InvariantViolation(f"Expected exactly one {what}, found {sorted(lines)}", stage="mirrors")
    return next(iter(lines))


def original_reflection(block: Grid) -> Reflection:
    return _single(reflection_lines(block), "reflection line")


def smudged_reflection(block: Grid) -> Reflection:
    """The reflection line that appears once the single smudge is fixed."""

    original = reflection_lines(block)
    if len(original) > 1:
        raise InvariantViolation(f"Expected at most one reflection line, found {sorted(original)}", stage="mirrors")
    height, width = dims(block)
    candidates: Set[Reflection] = set()
    for row in range(height):
        for col in range(width):
            fixed = deepcopy_grid(block)
            fixed[row][col] = block[row][col].flipped
            candidates |= reflection_lines(fixed) - original
    return _single(candidates, "smudged reflection line")


def solve(data: Optional[str], advanced: bool) -> str:
    blocks = parse_blocks(data if data is not None else EXAMPLE)
    find = smudged_reflection if advanced else original_reflection
    return str(sum(score(find(block)) for block in blocks))


__all__ = [
    "EXAMPLE",
    "Terrain",
    "parse_blocks",
    "reflection_lines",
    "score",
    "original_reflection",
    "smudged_reflection",
    "solve",
]
