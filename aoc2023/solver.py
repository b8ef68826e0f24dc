"""aoc2023.solver
==================

Day-number dispatch and the batch driver. Every solver is an independent pure
function of its input text and mode, so a batch simply fans the jobs out to a
process pool with no coordination between them.
"""

from __future__ import annotations

from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass
from time import perf_counter
from typing import Callable, Dict, List, Optional, Sequence

from . import beams, crucible, galaxies, lagoon, mirrors, pipes, rocks, springs
from .constants import UNKNOWN_DAY
from .logging_utils import log_failure

Solver = Callable[[Optional[str], bool], str]

SOLVER_REGISTRY: Dict[int, Solver] = {
    10: pipes.solve,
    11: galaxies.solve,
    12: springs.solve,
    13: mirrors.solve,
    14: rocks.solve,
    16: beams.solve,
    17: crucible.solve,
    18: lagoon.solve,
}


def get_solver(day: int) -> Solver:
    """Lookup ``day`` in :data:`SOLVER_REGISTRY` with a helpful error."""

    try:
        return SOLVER_REGISTRY[day]
    except KeyError as exc:
        raise KeyError(f"No solver for day {day!r}. Registered days: {sorted(SOLVER_REGISTRY)}") from exc


def solve_for_day(day: int, data: Optional[str] = None, advanced: bool = False) -> str:
    """Run the solver registered for ``day``; unknown days yield :data:`UNKNOWN_DAY`."""

    solver = SOLVER_REGISTRY.get(day)
    if solver is None:
        return UNKNOWN_DAY
    return solver(data, advanced)


@dataclass(frozen=True)
class BatchJob:
    day: int
    data: Optional[str] = None
    advanced: bool = False


@dataclass
class BatchResult:
    job: BatchJob
    answer: Optional[str] = None
    error: Optional[str] = None
    elapsed: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error is None


def run_job(job: BatchJob) -> BatchResult:
    """Worker function executed in subprocesses."""

    start = perf_counter()
    answer = solve_for_day(job.day, job.data, job.advanced)
    return BatchResult(job=job, answer=answer, elapsed=perf_counter() - start)


def run_batch(
    jobs: Sequence[BatchJob],
    max_workers: int = 1,
    fail_log: Optional[str] = None,
    verbose: bool = True,
) -> List[BatchResult]:
    """Solve ``jobs`` in a process pool and return results in submission order.

    A failing job is reported, appended to the failure log and kept in the
    results with its error message; the remaining jobs are unaffected.
    """

    results: List[Optional[BatchResult]] = [None] * len(jobs)
    with ProcessPoolExecutor(max_workers=max_workers) as executor:
        futures = {executor.submit(run_job, job): index for index, job in enumerate(jobs)}
        for done, future in enumerate(as_completed(futures), start=1):
            index = futures[future]
            job = jobs[index]
            mode = "advanced" if job.advanced else "basic"
            try:
                result = future.result()
            except Exception as exc:
                if verbose:
                    print(f"[{done}/{len(jobs)}] Day {job.day} ({mode}) failed: {exc}")
                log_failure(job.day, job.advanced, exc, path=fail_log)
                results[index] = BatchResult(job=job, error=str(exc))
                continue
            if verbose:
                print(f"[{done}/{len(jobs)}] Day {job.day} ({mode}) = {result.answer} in {result.elapsed:.2f}s")
            results[index] = result
    return results


__all__ = [
    "SOLVER_REGISTRY",
    "get_solver",
    "solve_for_day",
    "BatchJob",
    "BatchResult",
    "run_job",
    "run_batch",
]
