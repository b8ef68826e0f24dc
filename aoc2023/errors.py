"""aoc2023.errors
==================

Exception hierarchy shared by every solver. Puzzle input is static, so none of
these are retried: a failure is terminal for the invocation that raised it and
the ``stage`` attribute records which engine gave up.
"""

from __future__ import annotations

from typing import Optional


class SolverError(Exception):
    """Base class for failures raised while solving a puzzle."""

    def __init__(self, message: str, stage: Optional[str] = None) -> None:
        super().__init__(message, stage)
        self.message = message
        self.stage = stage

    def __str__(self) -> str:
        if self.stage:
            return f"[{self.stage}] {self.message}"
        return self.message


class ParseError(SolverError, ValueError):
    """Raised for an unrecognised character or a structurally invalid line."""


class NoSolutionFound(SolverError):
    """Raised when a search exhausts its frontier without reaching its goal."""


class InvariantViolation(SolverError):
    """Raised when the input breaks an assumption the puzzle guarantees."""


__all__ = ["SolverError", "ParseError", "NoSolutionFound", "InvariantViolation"]
