"""
Optimal Location Search

Fixed-step scan of [0, 1] for the location minimizing the maximum group cost.

- Default grid: step 0.00001, i.e. 100,001 samples including both endpoints
- The best value is seeded at n (total agent count); a sample replaces the
  current best only when strictly smaller, so the first minimizer in
  ascending order wins ties
- If no sample beats the seed the location stays 0

The scan is evaluated in ascending chunks with numpy; each chunk's first
minimizer is folded into the running best in order, which keeps the
first-minimizer rule of a plain left-to-right loop.
"""

import numpy as np
from dataclasses import dataclass

from data_models import ProblemInstance
from group_cost import group_cost_tables, max_group_cost, max_group_cost_curve

DEFAULT_RESOLUTION = 100000   # Steps over [0, 1]
DEFAULT_CHUNK_SIZE = 10000    # Samples evaluated per numpy batch


@dataclass(frozen=True)
class OptimalLocation:
    """Result of the domain scan."""
    location: float
    cost: float


def sample_points(resolution: int = DEFAULT_RESOLUTION) -> np.ndarray:
    """
    Sample grid over [0, 1].

    Args:
        resolution: Number of steps; the grid has resolution + 1 points

    Returns:
        Ascending array k / resolution for k = 0..resolution
    """
    if resolution < 1:
        raise ValueError(f"resolution must be at least 1, got {resolution}")
    return np.linspace(0.0, 1.0, resolution + 1)


def find_optimal(instance: ProblemInstance,
                 resolution: int = DEFAULT_RESOLUTION,
                 chunk_size: int = DEFAULT_CHUNK_SIZE) -> float:
    """
    Approximate the minimizer of the maximum group cost.

    Args:
        instance: Problem instance
        resolution: Number of steps over [0, 1]
        chunk_size: Samples per vectorized batch (does not affect the result)

    Returns:
        First sample location achieving the smallest maximum group cost
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be at least 1, got {chunk_size}")

    xs = sample_points(resolution)
    tables = group_cost_tables(instance)
    best_value = float(instance.num_agents)
    best_location = 0.0

    for start in range(0, xs.size, chunk_size):
        chunk = xs[start:start + chunk_size]
        values = max_group_cost_curve(instance, chunk, tables)
        idx = int(np.argmin(values))
        if values[idx] < best_value:
            best_value = float(values[idx])
            best_location = float(chunk[idx])

    return best_location


def solve_optimal(instance: ProblemInstance,
                  resolution: int = DEFAULT_RESOLUTION,
                  chunk_size: int = DEFAULT_CHUNK_SIZE) -> OptimalLocation:
    """Optimal location together with its maximum group cost."""
    location = find_optimal(instance, resolution, chunk_size)
    return OptimalLocation(location=location, cost=max_group_cost(instance, location))
