from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from aoc2023.errors import ParseError
from aoc2023.springs import EXAMPLE, Spring, count_arrangements, parse_record, solve


def arrangements(line: str, repeats: int = 1) -> int:
    springs, groups = parse_record(line, repeats)
    return count_arrangements(springs, groups)


def test_parse_record_unfolds():
    springs, groups = parse_record(".# 1", 5)
    assert "".join(spring.value for spring in springs) == ".#?.#?.#?.#?.#"
    assert groups == [1, 1, 1, 1, 1]


def test_parse_record_basic():
    springs, groups = parse_record("???.### 1,1,3")
    assert springs[:4] == [Spring.UNKNOWN, Spring.UNKNOWN, Spring.UNKNOWN, Spring.OPERATIONAL]
    assert groups == [1, 1, 3]


@pytest.mark.parametrize(
    "line, basic, unfolded",
    [
        ("???.### 1,1,3", 1, 1),
        (".??..??...?##. 1,1,3", 4, 16384),
        ("?#?#?#?#?#?#?#? 1,3,1,6", 1, 1),
        ("????.#...#... 4,1,1", 1, 16),
        ("????.######..#####. 1,6,5", 4, 2500),
        ("?###???????? 3,2,1", 10, 506250),
    ],
)
def test_example_lines(line, basic, unfolded):
    assert arrangements(line) == basic
    assert arrangements(line, 5) == unfolded


def test_group_filling_whole_record():
    assert arrangements("???### 5") == 1


def test_damaged_spring_left_over():
    assert arrangements("#.# 1") == 0


def test_not_enough_springs():
    assert arrangements("?? 3") == 0


def test_example_totals():
    assert solve(None, False) == "21"
    assert solve(None, True) == "525152"
    assert solve(EXAMPLE, True) == solve(EXAMPLE, True)


def test_invalid_record():
    with pytest.raises(ParseError):
        parse_record("???.###")
    with pytest.raises(ParseError):
        parse_record("???.### 1,x")
    with pytest.raises(ParseError):
        parse_record("??a 1")


def test_long_record_does_not_hit_recursion_limit():
    springs, groups = parse_record("." * 400 + "?# 1", 5)
    assert count_arrangements(springs, groups) == 1
    assert arrangements("?" * 1000 + " 1") == 1000
