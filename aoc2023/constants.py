"""aoc2023.constants
=====================

Global constants used across the solvers. Keeping them here avoids import
cycles between modules and makes it easier to discover the numbers each
puzzle variant depends on.
"""

from __future__ import annotations

FAIL_LOG = "failed_runs.jsonl"
UNKNOWN_DAY = "Unknown day"

# Crucible run-length limits as (min_run, max_run).
BASIC_RUN_LIMITS = (1, 3)
ADVANCED_RUN_LIMITS = (4, 10)

SPIN_CYCLES = 1_000_000_000
UNFOLD_REPEATS = 5

BASIC_EXPANSION = 2
ADVANCED_EXPANSION = 1_000_000

__all__ = [
    "FAIL_LOG",
    "UNKNOWN_DAY",
    "BASIC_RUN_LIMITS",
    "ADVANCED_RUN_LIMITS",
    "SPIN_CYCLES",
    "UNFOLD_REPEATS",
    "BASIC_EXPANSION",
    "ADVANCED_EXPANSION",
]
