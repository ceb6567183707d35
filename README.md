# closestpair

Find the smallest distance between any two points in a set of points in the
plane, and measure how long different algorithms take to do it.

Points are plain `(x, y)` tuples of numbers. The package has no third-party
dependencies.

## Algorithms

`closestpair.brute_force`

- `calculate_distance(p1, p2)` – Euclidean distance between two points.
- `bruteforce_min_dist(points)` – O(n²) search: each point is measured
  against the points before it, and the scan stops at the first point equal
  to it, so coincident points are never measured against each other.
- `bruteforce_min_dist_upgraded(points)` – measures every unordered pair
  exactly once.
- `bruteforce_min_dist_upgraded2(points)` – sorts by `(x, y)` first and stops
  the inner scan once the gap in x exceeds the best distance found so far.
- `linear(points)` – smallest distance from any point to the origin; a
  linear-time baseline for timing comparisons.

`closestpair.divide_and_conquer`

- `divide_conquer_min_dist(points)` – the O(n log n) divide-and-conquer
  algorithm: points are presorted by x and by y, split at the median,
  solved recursively (sets of four or fewer points go to
  `bruteforce_min_dist`), and each point in the strip around the dividing
  line is checked against the next seven points in y order.
- `compare_x(p1, p2)` / `compare_y(p1, p2)` – lexicographic x-then-y and
  y-then-x "less than" tests.
- `format_points(points)` – a one-line text rendering of a point set, such
  as `Points set: (1,4) (5,7) `.

The pairwise functions return `math.inf` when fewer than two points are
given; `linear` returns `math.inf` only for an empty input.

```python
from closestpair.divide_and_conquer import divide_conquer_min_dist

divide_conquer_min_dist([(1, 4), (-1, 0), (3, 4), (7, 8), (6, -2), (3, 2), (-2, 0), (3, 7)])
# 1.0
```

When the `closestpair.divide_and_conquer` logger is set to `DEBUG`, the
recursion logs its sorted subsets and partial distances.

## Benchmarks

`closestpair.benchmark` holds the tooling for comparing the algorithms:

- `generate_points(n, low, high, rng=None)` – `n` distinct random points
  with coordinates drawn uniformly from `[low, high]`, returned in `(x, y)`
  order. Without an explicit `random.Random`, a freshly seeded one is used,
  so repeated calls return the same points.
- `get_time(points, function)` – nanoseconds taken by one call of
  `function(points)`.
- `check_correctness(function, n, low, high)` – compares a function with
  `bruteforce_min_dist` on hand-picked sets and on random, equal-x, equal-y
  and cross-shaped sets of `n` points. It returns a list of `CaseResult`
  objects (`expected`, `actual`, `passed`) and stops at the first mismatch.
  Each comparison is also logged at `INFO` level.
- `test_time(function, filename, testname, min_points, max_points, step,
  iterations, directory="tests")` – for every size from `min_points` to
  `max_points` inclusive, records `iterations` timings on random points in
  `[0, 100]` and appends `test_name,n,time_ns` rows to `directory/filename`,
  writing the header when the file is new or empty. It returns the file's
  path and raises `ValueError` if `step` is not positive. The directory must
  already exist.

## Command line

```
closestpair
```

times `divide_conquer_min_dist` for 8 to 512 points, 20 runs per size, and
appends the results to `all.csv` and `DaCvsDaCUP.csv` in the `tests/`
directory, printing the path of each file written. Options:

- `--directory DIR` – where the CSV files go (default `tests`)
- `--min N`, `--max N` – smallest and largest number of points (8 and 512)
- `--step N` – increase in points between sizes (1)
- `--iterations N` – timings per size (20)

The command only records timings; it does not plot or summarise them.