"""Correctness checks and timing runs for minimum-distance functions."""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence

from closestpair.brute_force import Point, bruteforce_min_dist

__all__ = [
    "CaseResult",
    "MinDistFunction",
    "get_time",
    "generate_points",
    "check_correctness",
    "test_time",
]

logger = logging.getLogger(__name__)

MinDistFunction = Callable[[Sequence[Point]], float]

CSV_HEADER = "test_name,n,time_ns\n"
DEFAULT_SEED = 5489
CASES_PER_PATTERN = 20
TIMING_RANGE = (0, 100)


@dataclass(frozen=True)
class CaseResult:
    """Outcome of one correctness case: the brute-force value and the tested one."""

    expected: float
    actual: float

    @property
    def passed(self) -> bool:
        return self.actual == self.expected


def get_time(points: Sequence[Point], function: MinDistFunction) -> int:
    """Return the nanoseconds taken by one call of ``function(points)``."""
    start = time.perf_counter_ns()
    function(points)
    return time.perf_counter_ns() - start


def generate_points(
    n: int, low: float, high: float, rng: random.Random | None = None
) -> list[Point]:
    """Return ``n`` distinct points drawn uniformly from ``[low, high]^2``.

    The points come back in (x, y) lexicographic order. Without an explicit
    generator, a freshly seeded one is used, so repeated calls agree.
    """
    if rng is None:
        rng = random.Random(DEFAULT_SEED)
    point_set: set[Point] = set()
    while len(point_set) < n:
        x = rng.uniform(low, high)
        y = rng.uniform(low, high)
        point_set.add((x, y))
    return sorted(point_set)


def _same_x_case(n: int, low: float, high: float, rng: random.Random) -> list[Point]:
    fixed_x = rng.uniform(low, high)
    point_set: set[Point] = set()
    while len(point_set) < n:
        point_set.add((fixed_x, rng.uniform(low, high)))
    return sorted(point_set)


def _same_y_case(n: int, low: float, high: float, rng: random.Random) -> list[Point]:
    fixed_y = rng.uniform(low, high)
    point_set: set[Point] = set()
    while len(point_set) < n:
        point_set.add((rng.uniform(low, high), fixed_y))
    return sorted(point_set)


def _cross_case(n: int, low: int, high: int, rng: random.Random) -> list[Point]:
    x = rng.uniform(low, high)
    y = rng.uniform(low, high)
    threshold = (high + low) // 2
    point_set: set[Point] = set()
    while len(point_set) < n:
        if rng.uniform(low, high) >= threshold:
            point_set.add((rng.uniform(low, high), y))
        else:
            point_set.add((x, rng.uniform(low, high)))
    return sorted(point_set)


def _correctness_cases(n: int, low: int, high: int):
    yield [(1, 4), (-1, 0), (3, 4), (7, 8), (6, -2), (3, 2), (-2, 0), (3, 7)]
    yield [(1, 4)]
    yield [(1, 4), (5, 7)]
    for _ in range(CASES_PER_PATTERN):
        yield generate_points(n, low, high)
    rng = random.Random(DEFAULT_SEED)
    for make_case in (_same_x_case, _same_y_case, _cross_case):
        for _ in range(CASES_PER_PATTERN):
            yield make_case(n, low, high, rng)


def check_correctness(
    function: MinDistFunction, n: int, low: int, high: int
) -> list[CaseResult]:
    """Compare ``function`` with the brute-force result on fixed and random cases.

    Cases include small hand-picked sets, random sets, and sets whose points
    share an x coordinate, a y coordinate, or lie on a cross. Checking stops
    at the first mismatch, which is the last entry of the returned list.
    """
    results: list[CaseResult] = []
    for points in _correctness_cases(n, low, high):
        result = CaseResult(bruteforce_min_dist(points), function(points))
        logger.info("bf_min=%s, testing_func_min=%s", result.expected, result.actual)
        results.append(result)
        if not result.passed:
            logger.info("Failed")
            break
    return results


def test_time(
    function: MinDistFunction,
    filename: str,
    testname: str,
    min_points: int,
    max_points: int,
    step: int,
    iterations: int,
    directory: str | Path = "tests",
) -> Path:
    """Time ``function`` over growing random inputs and append rows to a CSV file.

    For every size from ``min_points`` to ``max_points`` (inclusive, by
    ``step``), ``iterations`` timings are recorded as ``test_name,n,time_ns``.
    The header is written only when the file is empty. Returns the file path.
    """
    if step <= 0:
        raise ValueError("step must be positive")
    filepath = Path(directory) / filename
    with filepath.open("a", encoding="utf-8", newline="") as file:
        if file.tell() == 0:
            file.write(CSV_HEADER)
        for size in range(min_points, max_points + 1, step):
            for _ in range(iterations):
                points = generate_points(size, *TIMING_RANGE)
                elapsed = get_time(points, function)
                file.write(f"{testname},{size},{elapsed}\n")
    return filepath