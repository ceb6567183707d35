"""Divide-and-conquer closest pair of points in O(n log n)."""

from __future__ import annotations

import logging
import math
from typing import Iterable, Sequence

from closestpair.brute_force import Point, bruteforce_min_dist, calculate_distance

__all__ = ["divide_conquer_min_dist", "compare_x", "compare_y", "format_points"]

logger = logging.getLogger(__name__)

BASE_CASE_SIZE = 4
STRIP_WINDOW = 8


def compare_x(p1: Point, p2: Point) -> bool:
    """Return True if p1 precedes p2 in (x, y) lexicographic order."""
    if p1[0] < p2[0]:
        return True
    if p1[0] == p2[0]:
        return p1[1] < p2[1]
    return False


def compare_y(p1: Point, p2: Point) -> bool:
    """Return True if p1 precedes p2 in (y, x) lexicographic order."""
    if p1[1] < p2[1]:
        return True
    if p1[1] == p2[1]:
        return p1[0] < p2[0]
    return False


def format_points(points: Iterable[Point]) -> str:
    """Render a point set as a single line of text."""
    return "Points set: " + "".join(f"({x:g},{y:g}) " for x, y in points)


def divide_conquer_min_dist(points: Iterable[Point]) -> float:
    """Return the minimum distance between any two of the given points."""
    pts = [(x, y) for x, y in points]
    by_x = sorted(pts, key=lambda p: (p[0], p[1]))
    by_y = sorted(pts, key=lambda p: (p[1], p[0]))
    return _min_dist(pts, by_x, by_y)


def _min_dist(
    pts: Sequence[Point], by_x: Sequence[Point], by_y: Sequence[Point]
) -> float:
    if len(pts) <= BASE_CASE_SIZE:
        return bruteforce_min_dist(pts)

    half = len(pts) // 2
    x_left, x_right = list(by_x[:half]), list(by_x[half:])
    median = x_right[0]

    y_left: list[Point] = []
    y_right: list[Point] = []
    for p in by_y:
        if p[0] > median[0] or (p[0] == median[0] and p[1] >= median[1]):
            y_right.append(p)
        else:
            y_left.append(p)

    if logger.isEnabledFor(logging.DEBUG):
        for label, group in (
            ("X", by_x), ("Y", by_y), ("X_L", x_left),
            ("X_R", x_right), ("Y_L", y_left), ("Y_R", y_right),
        ):
            logger.debug("%s: %s", label, format_points(group))

    d1 = _min_dist(x_left, x_left, y_left)
    d2 = _min_dist(x_right, x_right, y_right)
    dist = min(d1, d2)
    logger.debug("d1=%s, d2=%s delta=%s", d1, d2, dist)

    strip = [p for p in by_y if abs(median[0] - p[0]) < dist]
    for i, p in enumerate(strip):
        for q in strip[i + 1:i + STRIP_WINDOW]:
            d = calculate_distance(p, q)
            if d < dist:
                dist = d
    if math.isnan(dist):
        return dist
    return dist