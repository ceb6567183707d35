"""Quadratic and linear baselines for the minimum pairwise distance problem."""

from __future__ import annotations

import math
from itertools import combinations
from typing import Iterable, Tuple

Point = Tuple[float, float]

__all__ = [
    "Point",
    "calculate_distance",
    "bruteforce_min_dist",
    "bruteforce_min_dist_upgraded",
    "bruteforce_min_dist_upgraded2",
    "linear",
]


def calculate_distance(p1: Point, p2: Point) -> float:
    """Return the Euclidean distance between two points."""
    return math.sqrt((p1[0] - p2[0]) ** 2 + (p1[1] - p2[1]) ** 2)


def _as_points(points: Iterable[Point]) -> list[Point]:
    return [(x, y) for x, y in points]


def bruteforce_min_dist(points: Iterable[Point]) -> float:
    """Return the minimum distance by comparing each point with those before it.

    For every point, the scan over the set stops at the first point equal to
    it, so coincident points are never measured against each other.
    Returns infinity when no pair is measured.
    """
    pts = _as_points(points)
    min_dist = math.inf
    for p1 in pts:
        for p2 in pts:
            if p1 == p2:
                break
            min_dist = min(min_dist, calculate_distance(p1, p2))
    return min_dist


def bruteforce_min_dist_upgraded(points: Iterable[Point]) -> float:
    """Return the minimum distance over every unordered pair of points."""
    return min(
        (calculate_distance(p1, p2) for p1, p2 in combinations(_as_points(points), 2)),
        default=math.inf,
    )


def bruteforce_min_dist_upgraded2(points: Iterable[Point]) -> float:
    """Return the minimum distance, pruning pairs too far apart along x.

    Points are sorted lexicographically by (x, y); the inner scan for a point
    stops once the x gap to the current candidate exceeds the best distance.
    """
    pts = sorted(_as_points(points), key=lambda p: (p[0], p[1]))
    min_dist = math.inf
    for i, p1 in enumerate(pts):
        for p2 in pts[i + 1:]:
            min_dist = min(min_dist, calculate_distance(p1, p2))
            if p2[0] - p1[0] > min_dist:
                break
    return min_dist


def linear(points: Iterable[Point]) -> float:
    """Return the smallest distance from any point to the origin."""
    return min(
        (calculate_distance(p, (0, 0)) for p in _as_points(points)),
        default=math.inf,
    )