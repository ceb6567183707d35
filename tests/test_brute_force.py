import math
import random

import pytest

from closestpair.brute_force import (
    bruteforce_min_dist,
    bruteforce_min_dist_upgraded,
    bruteforce_min_dist_upgraded2,
    calculate_distance,
    linear,
)

NICE_POINTS = [(1, 4), (-1, 0), (3, 4), (7, 8), (6, -2), (3, 2), (-2, 0), (3, 7)]


def _random_points(seed, n):
    rng = random.Random(seed)
    pts = set()
    while len(pts) < n:
        pts.add((rng.uniform(0, 100), rng.uniform(0, 100)))
    return sorted(pts)


def test_distance_three_four_five():
    assert calculate_distance((0, 0), (3, 4)) == 5.0


def test_distance_symmetric_and_zero_on_self():
    a, b = (1.5, -2.0), (7.25, 3.0)
    assert calculate_distance(a, b) == calculate_distance(b, a)
    assert calculate_distance(a, a) == 0.0


@pytest.mark.parametrize(
    "func",
    [bruteforce_min_dist, bruteforce_min_dist_upgraded, bruteforce_min_dist_upgraded2],
)
def test_fewer_than_two_points_is_infinite(func):
    assert func([]) == math.inf
    assert func([(1, 4)]) == math.inf


@pytest.mark.parametrize(
    "func",
    [bruteforce_min_dist, bruteforce_min_dist_upgraded, bruteforce_min_dist_upgraded2],
)
def test_pair_gives_their_distance(func):
    assert func([(1, 4), (5, 7)]) == calculate_distance((1, 4), (5, 7))


@pytest.mark.parametrize(
    "func",
    [bruteforce_min_dist, bruteforce_min_dist_upgraded, bruteforce_min_dist_upgraded2],
)
def test_nice_points(func):
    assert func(NICE_POINTS) == calculate_distance((-1, 0), (-2, 0))


@pytest.mark.parametrize("seed", range(10))
def test_variants_agree_on_random_points(seed):
    pts = _random_points(seed, 60)
    expected = bruteforce_min_dist_upgraded(pts)
    assert bruteforce_min_dist(pts) == expected
    assert bruteforce_min_dist_upgraded2(pts) == expected


def test_result_is_attained_by_some_pair():
    pts = _random_points(42, 30)
    best = bruteforce_min_dist_upgraded2(pts)
    dists = [calculate_distance(p, q) for p in pts for q in pts if p != q]
    assert best in dists
    assert all(best <= d for d in dists)


def test_bruteforce_skips_coincident_points():
    assert bruteforce_min_dist([(1, 1), (1, 1)]) == math.inf
    assert bruteforce_min_dist_upgraded([(1, 1), (1, 1)]) == 0.0


def test_upgraded2_does_not_depend_on_input_order():
    pts = _random_points(3, 40)
    shuffled = list(pts)
    random.Random(9).shuffle(shuffled)
    assert bruteforce_min_dist_upgraded2(shuffled) == bruteforce_min_dist_upgraded2(pts)


def test_linear_is_distance_to_origin():
    assert linear([]) == math.inf
    assert linear([(3, 4)]) == calculate_distance((3, 4), (0, 0))
    pts = _random_points(5, 20)
    assert linear(pts) == min(calculate_distance(p, (0, 0)) for p in pts)