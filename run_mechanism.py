"""
Run Placement Strategies on One Instance

Reads an instance (file argument or stdin), runs the chosen strategy and
reports, for each strategy:
- the placement sentence (probability of 0 and of 1)
- the approximation ratio sentence (INF, 1 or the decimal ratio)

The optimum is scanned once and shared when several strategies are run.

Usage:
    python run_mechanism.py instance.txt --strategy all
    python run_mechanism.py < instance.txt
"""

import sys
import argparse
from typing import List, Optional, Tuple

from approximation_ratio import ApproximationResult, approximation_ratio, describe_ratio
from data_models import InstanceError, ProblemInstance
from facility_problem import print_instance_summary, read_instance
from optimal_location import DEFAULT_RESOLUTION, OptimalLocation, solve_optimal
from placement_strategies import STRATEGIES, StrategyResult, describe_placement, run_strategy


def evaluate_strategy(name: str,
                      instance: ProblemInstance,
                      resolution: int = DEFAULT_RESOLUTION,
                      optimum: Optional[OptimalLocation] = None) -> Tuple[StrategyResult, ApproximationResult]:
    """
    Run one strategy and compute its approximation ratio.

    Args:
        name: Strategy name (PEPM or LGRV)
        instance: Problem instance
        resolution: Scan resolution for the optimum
        optimum: Precomputed optimum (optional)

    Returns:
        Tuple of (strategy result, approximation result)
    """
    placement = run_strategy(name, instance)
    ratio = approximation_ratio(instance, placement.probability, resolution=resolution, optimum=optimum)
    return placement, ratio


def strategy_names(choice: str) -> List[str]:
    if choice == 'all':
        return list(STRATEGIES)
    return [choice]


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Compute PEPM / LGRV placement probabilities and approximation ratios"
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Instance file (default: read stdin)"
    )
    parser.add_argument(
        "--strategy",
        choices=sorted(STRATEGIES) + ['all'],
        default='PEPM',
        help="Strategy to run (default: PEPM)"
    )
    parser.add_argument(
        "--resolution",
        type=int,
        default=DEFAULT_RESOLUTION,
        help=f"Steps of the optimal location scan over [0, 1] (default: {DEFAULT_RESOLUTION})"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print the instance and the optimal location"
    )

    args = parser.parse_args(argv)

    try:
        instance = read_instance(args.input)
    except (InstanceError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.verbose:
        print_instance_summary(instance)

    optimum = solve_optimal(instance, args.resolution)
    if args.verbose:
        print(f"Optimal location: {optimum.location:g} (maximum group cost {optimum.cost:g})")

    for name in strategy_names(args.strategy):
        placement, ratio = evaluate_strategy(name, instance, args.resolution, optimum)
        print(describe_placement(placement))
        print(describe_ratio(ratio))

    return 0


if __name__ == "__main__":
    sys.exit(main())
