"""
Maximum Total Group Cost Overview Plot

Draws, over [0, 1]:
- each group's total cost (dashed, piecewise linear through its breakpoints)
- the maximum total group cost envelope sampled on the scan grid
- a gold star at the optimal location with dashed guides to both axes

Group curves are exact at their breakpoints: a group's cost is linear between
consecutive agent positions, so plotting the distinct positions plus the
endpoints 0 and 1 (when no agent sits there) reproduces the whole curve.
"""

import os
import sys
import argparse
import matplotlib.pyplot as plt
from typing import Dict, List, Optional, Tuple

from data_models import InstanceError, ProblemInstance
from exact_fraction import to_real
from facility_problem import read_instance
from group_cost import group_cost, max_group_cost_curve
from optimal_location import DEFAULT_RESOLUTION, OptimalLocation, sample_points, solve_optimal

TITLE = "The maximum total group cost at different locations"


def group_breakpoints(group) -> List[float]:
    """
    Locations at which a group's cost curve changes slope, plus the endpoints.

    Args:
        group: Sorted agent positions of one group

    Returns:
        Ascending list of locations (empty for an empty group)
    """
    if not group:
        return []

    points = []
    if group[0] != 0:
        points.append(0.0)
    for position in dict.fromkeys(group):
        points.append(to_real(position))
    if group[-1] != 1:
        points.append(1.0)
    return points


def group_curve(group) -> Tuple[List[float], List[float]]:
    """(xs, ys) of a group's total cost at its breakpoints."""
    xs = group_breakpoints(group)
    return xs, [group_cost(group, x) for x in xs]


def overview_series(instance: ProblemInstance,
                    resolution: int = DEFAULT_RESOLUTION,
                    optimum: Optional[OptimalLocation] = None) -> Dict:
    """
    Compute everything the overview plot draws.

    Args:
        instance: Problem instance
        resolution: Scan resolution for the envelope and the optimum
        optimum: Precomputed optimum (optional)

    Returns:
        Dict with:
        - groups: {group index: (xs, ys)} for every non-empty group 1..m
        - envelope: (xs, ys) numpy arrays of the maximum group cost
        - optimum: OptimalLocation
        - max_cost: largest envelope value (for the y-limit)
    """
    if optimum is None:
        optimum = solve_optimal(instance, resolution)

    xs = sample_points(resolution)
    envelope = max_group_cost_curve(instance, xs)

    groups = {}
    for index, members in instance.real_groups():
        if members:
            groups[index] = group_curve(members)

    return {
        'groups': groups,
        'envelope': (xs, envelope),
        'optimum': optimum,
        'max_cost': float(envelope.max()) if envelope.size else 0.0,
    }


def plot_cost_overview(instance: ProblemInstance,
                       output_path: str = "fig.svg",
                       resolution: int = DEFAULT_RESOLUTION) -> str:
    """
    Render the overview figure and save it.

    Args:
        instance: Problem instance
        output_path: Image file to write (format from the extension)
        resolution: Scan resolution

    Returns:
        Path of the saved figure
    """
    series = overview_series(instance, resolution)

    fig, ax = plt.subplots(figsize=(10, 6))
    draw_cost_overview(ax, series)

    directory = os.path.dirname(output_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    plt.tight_layout()
    plt.savefig(output_path, bbox_inches='tight')
    plt.close(fig)

    return output_path


def draw_cost_overview(ax, series: Dict) -> None:
    """
    Draw the overview onto an axes.

    Args:
        ax: Matplotlib axes
        series: Output of overview_series
    """
    for index, (xs, ys) in series['groups'].items():
        ax.plot(xs, ys, linestyle='--', label=f"Group ${index}$'s total cost")

    env_xs, env_ys = series['envelope']
    ax.plot(env_xs, env_ys, label="Maximum total group cost")

    opt = series['optimum']
    ax.plot([opt.location], [opt.cost], marker='*', markersize=20, color='gold',
            linestyle='--', label="Optimal solution location")
    ax.plot([opt.location, 0], [opt.cost, opt.cost], color='gold', linestyle='--')
    ax.plot([opt.location, opt.location], [opt.cost, 0], color='gold', linestyle='--')

    ax.legend(loc='lower right')
    ax.set_title(TITLE, loc='center')

    # Flat zero envelope (no groups) still needs a non-degenerate y-range
    top = series['max_cost'] * 1.1 if series['max_cost'] > 0 else 1.0
    ax.set_xlim(0, 1)
    ax.set_ylim(0, top)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Plot the per-group and maximum total group cost over [0, 1]"
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Instance file (default: read stdin)"
    )
    parser.add_argument(
        "--output",
        default="fig.svg",
        help="Output image path (default: fig.svg)"
    )
    parser.add_argument(
        "--resolution",
        type=int,
        default=DEFAULT_RESOLUTION,
        help=f"Steps of the scan over [0, 1] (default: {DEFAULT_RESOLUTION})"
    )

    args = parser.parse_args(argv)

    try:
        instance = read_instance(args.input)
    except (InstanceError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    path = plot_cost_overview(instance, args.output, args.resolution)
    print(f"Saved: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
