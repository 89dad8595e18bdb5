"""
Approximation Ratio

Expected cost of a randomized placement versus the scanned optimum:
- expected cost = p * max_group_cost(0) + (1 - p) * max_group_cost(1)
- opt = max_group_cost(x*) with x* from the optimal location search

Classification (tolerance 1e-10 absorbs the scan's floating-point error):
- opt ~ 0 and expected cost not ~ 0 -> unbounded ratio (INF)
- opt ~ 0 and expected cost ~ 0     -> ratio exactly 1
- otherwise                         -> expected cost / opt
"""

import math
from dataclasses import dataclass
from typing import Optional

from data_models import ProblemInstance
from group_cost import max_group_cost
from optimal_location import DEFAULT_RESOLUTION, OptimalLocation, solve_optimal

ZERO_TOLERANCE = 1e-10


@dataclass(frozen=True)
class ApproximationResult:
    """Expected cost, optimum and their ratio for one placement probability."""
    probability: float
    expected_cost: float
    optimal_location: float
    optimal_cost: float
    ratio: float          # math.inf when unbounded

    @property
    def is_unbounded(self) -> bool:
        return math.isinf(self.ratio)


def expected_cost(instance: ProblemInstance, p: float) -> float:
    """
    Expected maximum group cost of placing at 0 with probability p, else at 1.

    Args:
        instance: Problem instance
        p: Probability of placing the facility at 0

    Returns:
        p * max_group_cost(0) + (1 - p) * max_group_cost(1)
    """
    return p * max_group_cost(instance, 0.0) + (1 - p) * max_group_cost(instance, 1.0)


def classify_ratio(exp_cost: float, opt: float) -> float:
    """Ratio of expected cost to optimum with the zero-optimum special cases."""
    if opt <= ZERO_TOLERANCE and exp_cost >= ZERO_TOLERANCE:
        return math.inf
    elif opt <= ZERO_TOLERANCE and exp_cost <= ZERO_TOLERANCE:
        return 1.0
    return exp_cost / opt


def approximation_ratio(instance: ProblemInstance,
                        p: float,
                        resolution: int = DEFAULT_RESOLUTION,
                        optimum: Optional[OptimalLocation] = None) -> ApproximationResult:
    """
    Compute the approximation ratio of a placement probability.

    Args:
        instance: Problem instance
        p: Probability of placing the facility at 0
        resolution: Scan resolution for the optimum
        optimum: Precomputed optimum to reuse across strategies (optional)

    Returns:
        ApproximationResult
    """
    if optimum is None:
        optimum = solve_optimal(instance, resolution)

    exp_cost = expected_cost(instance, p)

    return ApproximationResult(
        probability=p,
        expected_cost=exp_cost,
        optimal_location=optimum.location,
        optimal_cost=optimum.cost,
        ratio=classify_ratio(exp_cost, optimum.cost),
    )


def format_ratio(result: ApproximationResult) -> str:
    """Text form of the ratio: "INF", "1" or the decimal value."""
    if result.is_unbounded:
        return "INF"
    if result.optimal_cost <= ZERO_TOLERANCE:
        return "1"
    return f"{result.ratio:g}"


def describe_ratio(result: ApproximationResult) -> str:
    return f"The approximation ratio is {format_ratio(result)}."
