"""aoc2023.springs
===================

Hot springs solver (day 12). Each record lists springs that are operational
(``.``), damaged (``#``) or unknown (``?``) followed by the sizes of the
contiguous damaged groups. The answer is the number of ways the unknown
springs can be resolved so the damaged groups match, summed over records.

Counting splits on the first remaining spring and memoises on the remaining
springs and the remaining groups. Both are suffixes of the record's
sequences, so a pair of offsets identifies a subproblem exactly and serves as
the table index. Each record gets its own table.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .constants import UNFOLD_REPEATS
from .errors import InvariantViolation, ParseError
from .grid_utils import CharEnum

EXAMPLE = """???.### 1,1,3
.??..??...?##. 1,1,3
?#?#?#?#?#?#?#? 1,3,1,6
????.#...#... 4,1,1
????.######..#####. 1,6,5
?###???????? 3,2,1"""


class Spring(CharEnum):
    OPERATIONAL = "."
    DAMAGED = "#"
    UNKNOWN = "?"


Record = Tuple[List[Spring], List[int]]


def parse_record(line: str, repeats: int = 1) -> Record:
    """Parse one record, unfolding it ``repeats`` times.

    The spring pattern is repeated with a single unknown spring between copies,
    and the group list is repeated as is.
    """

    parts = line.split()
    if len(parts) != 2:
        raise ParseError(f"Invalid record line: {line!r}", stage="springs")
    pattern, groups_text = parts
    try:
        groups = [int(size) for size in groups_text.split(",")]
    except ValueError as exc:
        raise ParseError(f"Invalid group sizes in record: {line!r}", stage="springs") from exc
    if any(size <= 0 for size in groups):
        raise ParseError(f"Group sizes must be positive: {line!r}", stage="springs")
    springs = [Spring.parse(char) for char in "?".join([pattern] * repeats)]
    return springs, groups * repeats


def count_arrangements(springs: Sequence[Spring], groups: Sequence[int]) -> int:
    """Count the resolutions of ``springs`` whose damaged runs equal ``groups``.

    ``ways[position][group_index]`` holds the count for the suffix
    ``springs[position:]`` against ``groups[group_index:]``. Every case only
    refers to later positions, so the table is filled from the end of the
    record backwards and no recursion depth is involved.
    """

    springs = tuple(springs)
    groups = tuple(groups)
    total = len(springs)
    group_count = len(groups)

    # suffix_damaged[i] is True when a damaged spring remains at or after i.
    suffix_damaged = [False] * (total + 1)
    # operational_before[i] counts operational springs in springs[:i].
    operational_before = [0] * (total + 1)
    for index in range(total - 1, -1, -1):
        suffix_damaged[index] = suffix_damaged[index + 1] or springs[index] is Spring.DAMAGED
    for index, spring in enumerate(springs):
        operational_before[index + 1] = operational_before[index] + (spring is Spring.OPERATIONAL)

    ways = [[0] * (group_count + 1) for _ in range(total + 1)]

    def place_group(position: int, group_index: int) -> int:
        """Treat ``position`` as the first damaged spring of the next group."""

        end = position + groups[group_index]
        if end > total:
            return 0
        if operational_before[end] - operational_before[position]:
            return 0
        if end < total and springs[end] is Spring.DAMAGED:
            return 0
        # Skip the separator as well; it is operational or unknown here.
        return ways[min(end + 1, total)][group_index + 1]

    for position in range(total, -1, -1):
        ways[position][group_count] = 0 if suffix_damaged[position] else 1
        if position == total:
            continue
        spring = springs[position]
        for group_index in range(group_count):
            if spring is Spring.OPERATIONAL:
                count = ways[position + 1][group_index]
            elif spring is Spring.DAMAGED:
                count = place_group(position, group_index)
            elif spring is Spring.UNKNOWN:
                count = ways[position + 1][group_index] + place_group(position, group_index)
            else:
                raise InvariantViolation(f"Unhandled spring state {spring!r}", stage="springs")
            ways[position][group_index] = count

    return ways[0][0]


def solve(data: Optional[str], advanced: bool) -> str:
    text = data if data is not None else EXAMPLE
    repeats = UNFOLD_REPEATS if advanced else 1
    records = [parse_record(line, repeats) for line in text.strip().splitlines() if line.strip()]
    return str(sum(count_arrangements(springs, groups) for springs, groups in records))


__all__ = ["EXAMPLE", "Spring", "parse_record", "count_arrangements", "solve"]
