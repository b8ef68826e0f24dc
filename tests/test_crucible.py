from __future__ import annotations

import sys
from collections import deque
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import numpy as np
import pytest

from aoc2023.constants import ADVANCED_RUN_LIMITS, BASIC_RUN_LIMITS
from aoc2023.crucible import EXAMPLE, RunLimits, minimal_heat_loss, parse_costs, solve
from aoc2023.errors import NoSolutionFound, ParseError
from aoc2023.types import Direction

UNBALANCED = """111111111111
999999999991
999999999991
999999999991
999999999991"""


def fifo_reference(costs, limits):
    """Queue-ordered exploration with best-known-cost pruning over the same states."""

    height, width = costs.shape
    goal = (height - 1, width - 1)
    initial = ((0, 0), None, 0)
    best = {initial: 0}
    queue = deque([(0, initial)])
    answer = None
    while queue:
        cost, state = queue.popleft()
        if cost > best[state]:
            continue
        coord, heading, run = state
        if coord == goal and run >= limits.min_run:
            answer = cost if answer is None else min(answer, cost)
            continue
        if heading is None:
            moves = [(direction, 1) for direction in Direction]
        else:
            moves = []
            if run < limits.max_run:
                moves.append((heading, run + 1))
            if run >= limits.min_run:
                moves.extend((direction, 1) for direction in heading.turns())
        for direction, next_run in moves:
            row, col = direction.step(coord)
            if not (0 <= row < height and 0 <= col < width):
                continue
            next_state = ((row, col), direction, next_run)
            next_cost = cost + int(costs[row, col])
            if next_cost < best.get(next_state, next_cost + 1):
                best[next_state] = next_cost
                queue.append((next_cost, next_state))
    return answer


def test_example_answers():
    assert solve(None, False) == "102"
    assert solve(None, True) == "94"


def test_advanced_must_run_four_before_stopping():
    assert solve(UNBALANCED, True) == "71"


@pytest.mark.parametrize("limits", [BASIC_RUN_LIMITS, ADVANCED_RUN_LIMITS])
@pytest.mark.parametrize("text", [EXAMPLE, UNBALANCED])
def test_priority_order_matches_fifo_reference(text, limits):
    costs = parse_costs(text)
    run_limits = RunLimits(*limits)
    assert minimal_heat_loss(costs, run_limits) == fifo_reference(costs, run_limits)


def test_zero_cost_grid():
    costs = np.zeros((6, 7), dtype=np.int64)
    assert minimal_heat_loss(costs, RunLimits(1, 3)) == 0


def test_single_block_needs_no_moves():
    assert minimal_heat_loss(parse_costs("5"), RunLimits(4, 10)) == 0


def test_straight_line_within_limits():
    assert minimal_heat_loss(parse_costs("1234"), RunLimits(1, 3)) == 9


def test_goal_unreachable_under_minimum_run():
    with pytest.raises(NoSolutionFound) as info:
        minimal_heat_loss(parse_costs("123"), RunLimits(4, 10))
    assert info.value.stage == "crucible"


def test_goal_unreachable_over_maximum_run():
    with pytest.raises(NoSolutionFound):
        minimal_heat_loss(parse_costs("11111"), RunLimits(1, 3))


def test_run_limits_validation():
    with pytest.raises(ValueError):
        RunLimits(4, 3)
    with pytest.raises(ValueError):
        RunLimits(0, 0)


def test_invalid_digit():
    with pytest.raises(ParseError):
        parse_costs("12\n3a")


def test_solve_is_idempotent():
    assert solve(EXAMPLE, True) == solve(EXAMPLE, True)
