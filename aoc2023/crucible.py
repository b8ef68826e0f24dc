"""aoc2023.crucible
====================

Clumsy crucible solver (day 17). A crucible travels from the top-left to the
bottom-right block of a city map, losing the digit of every block it enters as
heat. It can never reverse, must keep its heading for at least ``min_run``
blocks before turning (or stopping), and may not keep it for more than
``max_run`` blocks.

Because the run-length constraint makes the same block reachable with
different remaining straight budgets, the search state is the triple
``(block, heading, run)`` rather than the block alone. States are expanded in
order of accumulated heat loss, so the first goal state popped is optimal.
"""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from itertools import count
from typing import Dict, Optional, Tuple

import numpy as np

from .constants import ADVANCED_RUN_LIMITS, BASIC_RUN_LIMITS
from .errors import NoSolutionFound, ParseError
from .grid_utils import parse_grid
from .types import Coord, Direction

EXAMPLE = """2413432311323
3215453535623
3255245654254
3446585845452
4546657867536
1438598798454
4457876987766
3637877979653
4654967986887
4564679986453
1224686865563
2546548887735
4322674655533"""

State = Tuple[Coord, Optional[Direction], int]


@dataclass(frozen=True)
class RunLimits:
    """Minimum and maximum number of consecutive blocks in one heading."""

    min_run: int
    max_run: int

    def __post_init__(self) -> None:
        if self.min_run < 0 or self.max_run < max(1, self.min_run):
            raise ValueError(f"Invalid run limits: {self.min_run}..{self.max_run}")


def _heat_loss(char: str) -> int:
    if char not in "0123456789":
        raise ParseError(f"Unexpected character {char!r} in heat-loss map", stage="crucible")
    return int(char)


def parse_costs(text: str) -> np.ndarray:
    """Parse the heat-loss map into an integer array."""

    return np.array(parse_grid(text, _heat_loss), dtype=np.int64)


def _moves(heading: Optional[Direction], run: int, limits: RunLimits):
    """Yield the headings a crucible may take next, with the resulting run length."""

    if heading is None:
        for direction in Direction:
            yield direction, 1
        return
    if run < limits.max_run:
        yield heading, run + 1
    if run >= limits.min_run:
        for direction in heading.turns():
            yield direction, 1


def minimal_heat_loss(
    costs: np.ndarray,
    limits: RunLimits,
    start: Optional[Coord] = None,
    goal: Optional[Coord] = None,
) -> int:
    """Return the least heat loss from ``start`` to ``goal`` under ``limits``.

    Parameters
    ----------
    costs:
        2D integer array of per-block heat loss.
    limits:
        Run-length constraints applied to every heading.
    start, goal:
        Defaults are the top-left and bottom-right blocks.

    Raises
    ------
    NoSolutionFound
        When the goal cannot be reached with a run of at least
        ``limits.min_run``.
    """

    height, width = costs.shape
    start = start if start is not None else (0, 0)
    goal = goal if goal is not None else (height - 1, width - 1)
    if start == goal:
        return 0

    tie = count()
    initial: State = (start, None, 0)
    best: Dict[State, int] = {initial: 0}
    frontier = [(0, next(tie), initial)]
    while frontier:
        cost, _, state = heapq.heappop(frontier)
        if cost > best.get(state, cost):
            continue
        coord, heading, run = state
        if coord == goal and run >= limits.min_run:
            return cost
        for direction, next_run in _moves(heading, run, limits):
            row, col = direction.step(coord)
            if not (0 <= row < height and 0 <= col < width):
                continue
            next_state: State = ((row, col), direction, next_run)
            next_cost = cost + int(costs[row, col])
            if next_cost < best.get(next_state, next_cost + 1):
                best[next_state] = next_cost
                heapq.heappush(frontier, (next_cost, next(tie), next_state))
    raise NoSolutionFound(
        f"Goal {goal} unreachable with run limits {limits.min_run}..{limits.max_run}",
        stage="crucible",
    )


def solve(data: Optional[str], advanced: bool) -> str:
    costs = parse_costs(data if data is not None else EXAMPLE)
    limits = RunLimits(*(ADVANCED_RUN_LIMITS if advanced else BASIC_RUN_LIMITS))
    return str(minimal_heat_loss(costs, limits))


__all__ = ["EXAMPLE", "RunLimits", "parse_costs", "minimal_heat_loss", "solve"]
