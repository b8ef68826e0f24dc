"""aoc2023.lagoon
==================

Lavaduct lagoon solver (day 18). A dig plan traces a closed rectilinear trench
one instruction at a time; the answer is the number of cubic metres dug out,
trench included. In advanced mode the real instructions are hidden in the
hexadecimal colour field: five hex digits of distance followed by one digit
of direction.

Distances in advanced mode are far too large to rasterise, so the volume comes
from the shoelace area and Pick's theorem instead of a flood fill.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from .errors import ParseError
from .polygon import interior_points, shoelace_area
from .types import Coord, Direction

EXAMPLE = """R 6 (#70c710)
D 5 (#0dc571)
L 2 (#5713f0)
D 2 (#d2c081)
R 2 (#59c680)
D 2 (#411b91)
L 5 (#8ceee2)
U 2 (#caa173)
L 1 (#1b58a2)
U 2 (#caa171)
R 2 (#7807d2)
U 3 (#a77fa3)
L 2 (#015232)
U 2 (#7a21e3)"""

LETTER_DIRECTIONS = {
    "U": Direction.NORTH,
    "D": Direction.SOUTH,
    "L": Direction.WEST,
    "R": Direction.EAST,
}
HEX_DIRECTIONS = {
    "0": Direction.EAST,
    "1": Direction.SOUTH,
    "2": Direction.WEST,
    "3": Direction.NORTH,
}


@dataclass(frozen=True)
class Instruction:
    direction: Direction
    steps: int


def parse_hex(colour: str) -> Instruction:
    """Decode an instruction hidden in a ``(#rrggbb)`` colour field."""

    code = colour.strip("()")
    if len(code) != 7 or not code.startswith("#"):
        raise ParseError(f"Invalid colour field: {colour!r}", stage="lagoon")
    try:
        steps = int(code[1:6], 16)
    except ValueError as exc:
        raise ParseError(f"Invalid hex distance in {colour!r}", stage="lagoon") from exc
    if code[6] not in HEX_DIRECTIONS:
        raise ParseError(f"Invalid hex direction in {colour!r}", stage="lagoon")
    return Instruction(HEX_DIRECTIONS[code[6]], steps)


def parse_line(line: str, advanced: bool) -> Instruction:
    parts = line.split()
    if len(parts) != 3 or parts[0] not in LETTER_DIRECTIONS or not parts[1].isdigit():
        raise ParseError(f"Invalid dig plan line: {line!r}", stage="lagoon")
    if advanced:
        return parse_hex(parts[2])
    return Instruction(LETTER_DIRECTIONS[parts[0]], int(parts[1]))


def parse_plan(text: str, advanced: bool) -> List[Instruction]:
    return [parse_line(line, advanced) for line in text.strip().splitlines() if line.strip()]


def trench_vertices(plan: Sequence[Instruction]) -> List[Coord]:
    vertices: List[Coord] = [(0, 0)]
    for instruction in plan:
        vertices.append(instruction.direction.step(vertices[-1], instruction.steps))
    return vertices


def lagoon_volume(plan: Sequence[Instruction]) -> int:
    """Interior lattice points plus the trench itself."""

    boundary = sum(instruction.steps for instruction in plan)
    area = shoelace_area(trench_vertices(plan))
    return interior_points(area, boundary) + boundary


def solve(data: Optional[str], advanced: bool) -> str:
    plan = parse_plan(data if data is not None else EXAMPLE, advanced)
    return str(lagoon_volume(plan))


__all__ = [
    "EXAMPLE",
    "Instruction",
    "parse_hex",
    "parse_line",
    "parse_plan",
    "trench_vertices",
    "lagoon_volume",
    "solve",
]
