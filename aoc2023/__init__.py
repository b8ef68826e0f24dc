"""Public package interface for the aoc2023 grid puzzle solvers."""

from .solver import run_batch, solve_for_day

__all__ = ["run_batch", "solve_for_day"]
