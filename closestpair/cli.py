"""Command that appends divide-and-conquer timings to CSV files."""

from __future__ import annotations

import argparse
from typing import Sequence

from closestpair import benchmark
from closestpair.divide_and_conquer import divide_conquer_min_dist

__all__ = ["main"]

TEST_NAME = "Dividir y conquistar con mejora trivial"
OUTPUT_FILES = ("all.csv", "DaCvsDaCUP.csv")


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="closestpair",
        description="Time the divide-and-conquer closest-pair search.",
    )
    parser.add_argument("--directory", default="tests", help="where CSV files go")
    parser.add_argument("--min", dest="min_points", type=int, default=8)
    parser.add_argument("--max", dest="max_points", type=int, default=512)
    parser.add_argument("--step", type=int, default=1)
    parser.add_argument("--iterations", type=int, default=20)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the timing benchmarks and report where results were saved."""
    args = _parse_args(argv)
    print("Inició el test")
    for filename in OUTPUT_FILES:
        path = benchmark.test_time(
            divide_conquer_min_dist,
            filename,
            TEST_NAME,
            args.min_points,
            args.max_points,
            args.step,
            args.iterations,
            args.directory,
        )
        print(f"Archivo guardado en {path}")
    print("Finalizó el test")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())