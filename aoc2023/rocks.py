"""aoc2023.rocks
=================

Parabolic reflector dish solver (day 14). Round rocks (``O``) roll when the
platform is tilted, cube rocks (``#``) stay put. Basic mode tilts north once;
advanced mode runs a billion spin cycles (north, west, south, east tilts),
which is only feasible because the platform falls into a repeating cycle of
states that can be detected and extrapolated.

The cycle machinery in :func:`extrapolate_cycle` is independent of rocks: it
only needs a deterministic step function, a hashable fingerprint and a score.
"""

from __future__ import annotations

from typing import Callable, Dict, Hashable, List, Optional, Tuple, TypeVar

from .constants import SPIN_CYCLES
from .grid_utils import CharEnum, deepcopy_grid, dims, parse_grid
from .types import Direction, Grid

State = TypeVar("State")

EXAMPLE = """O....#....
O.OO#....#
.....##...
OO.#O....O
.O.....O#.
O.#..O.#.#
..O..#O..O
.......O..
#....###..
#OO..#...."""

SPIN_ORDER = (Direction.NORTH, Direction.WEST, Direction.SOUTH, Direction.EAST)


class Space(CharEnum):
    EMPTY = "."
    ROUND = "O"
    CUBE = "#"


def parse_platform(text: str) -> Grid:
    return parse_grid(text, Space.parse)


def _lines_towards(grid: Grid, direction: Direction) -> List[List[Tuple[int, int]]]:
    """Coordinates of every row/column, ordered from the wall rocks roll into."""

    height, width = dims(grid)
    if direction is Direction.NORTH:
        return [[(row, col) for row in range(height)] for col in range(width)]
    if direction is Direction.SOUTH:
        return [[(row, col) for row in reversed(range(height))] for col in range(width)]
    if direction is Direction.WEST:
        return [[(row, col) for col in range(width)] for row in range(height)]
    return [[(row, col) for col in reversed(range(width))] for row in range(height)]


def tilt(grid: Grid, direction: Direction) -> Grid:
    """Return a copy of ``grid`` with every round rock rolled towards ``direction``.

    Rocks roll until they meet the edge, a cube rock or another rock that
    already stopped, which is the fixed point of repeatedly sliding each
    rock one step at a time.
    """

    out = deepcopy_grid(grid)
    for line in _lines_towards(grid, direction):
        landing = 0
        for index, (row, col) in enumerate(line):
            cell = grid[row][col]
            if cell is Space.CUBE:
                landing = index + 1
            elif cell is Space.ROUND:
                out[row][col] = Space.EMPTY
                land_row, land_col = line[landing]
                out[land_row][land_col] = Space.ROUND
                landing += 1
    return out


def spin_cycle(grid: Grid) -> Grid:
    for direction in SPIN_ORDER:
        grid = tilt(grid, direction)
    return grid


def north_load(grid: Grid) -> int:
    """Total load on the north beams: each round rock weighs its distance to the south edge."""

    height, _ = dims(grid)
    return sum(
        height - row_index
        for row_index, row in enumerate(grid)
        for cell in row
        if cell is Space.ROUND
    )


def fingerprint(grid: Grid) -> Tuple[Tuple[Space, ...], ...]:
    return tuple(tuple(row) for row in grid)


def simulate(
    initial: State,
    step: Callable[[State], State],
    score: Callable[[State], int],
    target: int,
) -> int:
    """Apply ``step`` ``target`` times and score the final state directly."""

    state = initial
    for _ in range(target):
        state = step(state)
    return score(state)


def extrapolate_cycle(
    initial: State,
    step: Callable[[State], State],
    key: Callable[[State], Hashable],
    score: Callable[[State], int],
    target: int,
) -> int:
    """Return the score of the state reached after ``target`` steps.

    Parameters
    ----------
    initial:
        State at iteration 0.
    step:
        Deterministic transformation depending only on the current state.
    key:
        Canonical hashable encoding of a state; equal fingerprints must mean
        equal states.
    score:
        Metric recorded for every visited state.
    target:
        Iteration whose score is wanted, possibly far beyond what can be
        simulated.

    Notes
    -----
    ``seen`` maps each fingerprint to the first iteration it was observed at
    and ``scores`` holds the metric of every iteration so far. When iteration
    ``i`` repeats iteration ``first``, states recur with period
    ``i - first`` from ``first`` onwards and the target is read back from
    history. Targets reached before any repeat are answered directly.
    """

    state = initial
    scores: List[int] = [score(state)]
    seen: Dict[Hashable, int] = {key(state): 0}
    iteration = 0
    while iteration < target:
        state = step(state)
        iteration += 1
        scores.append(score(state))
        fingerprint_now = key(state)
        first: Optional[int] = seen.get(fingerprint_now)
        if first is not None:
            cycle_length = iteration - first
            return scores[first + (target - first) % cycle_length]
        seen[fingerprint_now] = iteration
    return scores[target]


def solve(data: Optional[str], advanced: bool) -> str:
    grid = parse_platform(data if data is not None else EXAMPLE)
    if advanced:
        return str(extrapolate_cycle(grid, spin_cycle, fingerprint, north_load, SPIN_CYCLES))
    return str(north_load(tilt(grid, Direction.NORTH)))


__all__ = [
    "EXAMPLE",
    "SPIN_ORDER",
    "Space",
    "parse_platform",
    "tilt",
    "spin_cycle",
    "north_load",
    "fingerprint",
    "simulate",
    "extrapolate_cycle",
    "solve",
]
