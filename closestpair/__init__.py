"""Closest pair of points: brute force and divide-and-conquer algorithms with benchmarks."""

__version__ = "0.1.0"

__all__ = ["brute_force", "divide_and_conquer", "benchmark", "cli"]