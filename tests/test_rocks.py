from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from aoc2023.errors import ParseError
from aoc2023.grid_utils import deepcopy_grid, render_grid
from aoc2023.rocks import (
    EXAMPLE,
    SPIN_ORDER,
    Space,
    extrapolate_cycle,
    fingerprint,
    north_load,
    parse_platform,
    simulate,
    spin_cycle,
    tilt,
    solve,
)
from aoc2023.types import Direction

SMALL = """O.#
.O.
#.O"""


def slide_one_step_until_still(grid, direction):
    """Reference tilt: move every rock a single step per pass until nothing moves."""

    grid = deepcopy_grid(grid)
    height, width = len(grid), len(grid[0])
    d_row, d_col = direction.delta
    moved = True
    while moved:
        moved = False
        for row in range(height):
            for col in range(width):
                dst_row, dst_col = row + d_row, col + d_col
                if not (0 <= dst_row < height and 0 <= dst_col < width):
                    continue
                if grid[row][col] is Space.ROUND and grid[dst_row][dst_col] is Space.EMPTY:
                    grid[row][col] = Space.EMPTY
                    grid[dst_row][dst_col] = Space.ROUND
                    moved = True
    return grid


def test_tilt_north_example():
    tilted = tilt(parse_platform(EXAMPLE), Direction.NORTH)
    assert render_grid(tilted).splitlines()[0] == "OOOO.#.O.."
    assert north_load(tilted) == 136


@pytest.mark.parametrize("direction", list(Direction))
def test_tilt_matches_single_step_slides(direction):
    grid = parse_platform(EXAMPLE)
    assert tilt(grid, direction) == slide_one_step_until_still(grid, direction)


def test_tilt_does_not_mutate_input():
    grid = parse_platform(EXAMPLE)
    before = render_grid(grid)
    tilt(grid, Direction.SOUTH)
    assert render_grid(grid) == before


def test_spin_cycle_order():
    assert SPIN_ORDER == (Direction.NORTH, Direction.WEST, Direction.SOUTH, Direction.EAST)
    grid = parse_platform(EXAMPLE)
    expected = grid
    for direction in SPIN_ORDER:
        expected = slide_one_step_until_still(expected, direction)
    assert spin_cycle(grid) == expected


def test_rock_count_is_preserved():
    grid = parse_platform(EXAMPLE)
    rocks = sum(row.count(Space.ROUND) for row in grid)
    spun = spin_cycle(spin_cycle(grid))
    assert sum(row.count(Space.ROUND) for row in spun) == rocks


@pytest.mark.parametrize("text", [EXAMPLE, SMALL])
def test_extrapolation_matches_direct_simulation(text):
    grid = parse_platform(text)
    for target in range(0, 25):
        assert extrapolate_cycle(grid, spin_cycle, fingerprint, north_load, target) == simulate(
            grid, spin_cycle, north_load, target
        )


@pytest.mark.parametrize("text", [EXAMPLE, SMALL])
def test_extrapolation_to_a_billion(text):
    grid = parse_platform(text)
    # 420 is a multiple of every cycle length up to 7.
    equivalent = 10**9 % 420 + 840
    assert extrapolate_cycle(grid, spin_cycle, fingerprint, north_load, 10**9) == simulate(
        grid, spin_cycle, north_load, equivalent
    )


def test_small_grid_single_step():
    grid = parse_platform(SMALL)
    assert extrapolate_cycle(grid, spin_cycle, fingerprint, north_load, 1) == north_load(spin_cycle(grid))


def test_extrapolate_with_counter_state():
    # Period-3 sequence entered after two warm-up steps.
    def step(value):
        return value + 1 if value < 4 else 2

    assert extrapolate_cycle(0, step, lambda value: value, lambda value: value, 10**9) == simulate(
        0, step, lambda value: value, 2 + (10**9 - 2) % 3
    )


def test_extrapolate_accepts_keyword_arguments():
    grid = parse_platform(EXAMPLE)
    answer = extrapolate_cycle(
        initial=grid, step=spin_cycle, key=fingerprint, score=north_load, target=3
    )
    assert answer == simulate(grid, spin_cycle, north_load, 3)


def test_example_answers():
    assert solve(None, False) == "136"
    assert solve(None, True) == "64"
    assert solve(EXAMPLE, True) == solve(EXAMPLE, True)


def test_invalid_character():
    with pytest.raises(ParseError):
        parse_platform("O.X\n...")
