"""
Benchmark: PEPM vs LGRV on Random Instances

For each random instance:
- scan the optimal location once
- run every strategy and compute its approximation ratio against that optimum

Summary per strategy:
- mean / std / max of the finite ratios
- number of unbounded (INF) ratios
- number of instances where the strategy matches the optimum (ratio ~ 1)

Plots (saved to the output directory):
1. Mean approximation ratio per strategy
2. Approximation ratio per instance
"""

import os
import sys
import argparse
import math
import numpy as np
import matplotlib.pyplot as plt
from typing import Dict, List

from facility_problem import create_random_instance
from optimal_location import solve_optimal
from placement_strategies import STRATEGIES
from run_mechanism import evaluate_strategy

RATIO_MATCH_TOLERANCE = 1e-6


def summarize_ratios(ratios: List[float]) -> Dict:
    """
    Aggregate a strategy's approximation ratios.

    Args:
        ratios: One ratio per instance (math.inf for unbounded)

    Returns:
        Dict with num_instances, num_unbounded, num_optimal, mean_ratio,
        std_ratio and max_ratio (finite ratios only, nan when there are none)
    """
    finite = [r for r in ratios if not math.isinf(r)]
    return {
        'num_instances': len(ratios),
        'num_unbounded': len(ratios) - len(finite),
        'num_optimal': sum(1 for r in finite if abs(r - 1.0) <= RATIO_MATCH_TOLERANCE),
        'mean_ratio': float(np.mean(finite)) if finite else math.nan,
        'std_ratio': float(np.std(finite)) if finite else math.nan,
        'max_ratio': float(np.max(finite)) if finite else math.nan,
    }


class MechanismBenchmark:
    """Benchmark every placement strategy against the scanned optimum."""

    def __init__(self,
                 num_instances: int = 20,
                 num_agents: int = 20,
                 num_groups: int = 3,
                 max_denominator: int = 10,
                 seed: int = 42,
                 resolution: int = 10000,
                 output_dir: str = "benchmark_results",
                 verbose: bool = True):
        """
        Initialize benchmark.

        Args:
            num_instances: Number of random instances
            num_agents: Agents per instance
            num_groups: Groups per instance
            max_denominator: Largest position denominator
            seed: Base random seed (instance i uses seed + i)
            resolution: Steps of the optimal location scan
            output_dir: Directory for plots
            verbose: Print per-instance progress
        """
        self.num_instances = num_instances
        self.num_agents = num_agents
        self.num_groups = num_groups
        self.max_denominator = max_denominator
        self.seed = seed
        self.resolution = resolution
        self.output_dir = output_dir
        self.verbose = verbose

    def run_instance(self, instance_idx: int) -> Dict[str, Dict]:
        """
        Evaluate every strategy on one random instance.

        Args:
            instance_idx: Index of the instance (offsets the seed)

        Returns:
            {strategy name: {'probability', 'ratio', 'expected_cost', 'optimal_cost'}}
        """
        instance = create_random_instance(
            num_agents=self.num_agents,
            num_groups=self.num_groups,
            max_denominator=self.max_denominator,
            seed=self.seed + instance_idx
        )
        optimum = solve_optimal(instance, self.resolution)

        outcome = {}
        for name in STRATEGIES:
            placement, result = evaluate_strategy(name, instance, self.resolution, optimum)
            outcome[name] = {
                'probability': placement.probability,
                'ratio': result.ratio,
                'expected_cost': result.expected_cost,
                'optimal_cost': result.optimal_cost,
            }
        return outcome

    def run_all_benchmarks(self, plot: bool = True) -> Dict[str, Dict]:
        """
        Run the benchmark suite.

        Args:
            plot: Generate and save plots

        Returns:
            {strategy name: {'probabilities': [...], 'ratios': [...], 'summary': {...}}}
        """
        print("\n" + "=" * 100)
        print("PLACEMENT STRATEGY BENCHMARK: APPROXIMATION RATIO VS OPTIMUM")
        print("=" * 100)
        print(f"\nInstances: {self.num_instances}, agents: {self.num_agents}, "
              f"groups: {self.num_groups}, scan steps: {self.resolution}")

        results = {name: {'probabilities': [], 'ratios': []} for name in STRATEGIES}

        for instance_idx in range(self.num_instances):
            outcome = self.run_instance(instance_idx)
            for name, values in outcome.items():
                results[name]['probabilities'].append(values['probability'])
                results[name]['ratios'].append(values['ratio'])

            if self.verbose:
                line = ", ".join(f"{name} p={values['probability']:.3f} ratio={values['ratio']:.3f}"
                                 for name, values in outcome.items())
                print(f"  [OK] Instance {instance_idx + 1}/{self.num_instances}: {line}")

        for name in STRATEGIES:
            results[name]['summary'] = summarize_ratios(results[name]['ratios'])

        self._print_summary(results)

        if plot:
            self._generate_plots(results)

        return results

    def _print_summary(self, results):
        """Print benchmark summary."""
        print("\n" + "=" * 100)
        print("BENCHMARK SUMMARY")
        print("=" * 100)

        for name, data in results.items():
            summary = data['summary']
            print(f"\n{name}:")
            print(f"  Mean ratio (finite):  {summary['mean_ratio']:.4f} ± {summary['std_ratio']:.4f}")
            print(f"  Worst ratio (finite): {summary['max_ratio']:.4f}")
            print(f"  Unbounded (INF):      {summary['num_unbounded']}/{summary['num_instances']}")
            print(f"  Matches optimum:      {summary['num_optimal']}/{summary['num_instances']}")

    def _generate_plots(self, results):
        """Generate and save plots."""
        os.makedirs(self.output_dir, exist_ok=True)

        print("\n" + "=" * 100)
        print("GENERATING PLOTS")
        print("=" * 100)

        self._plot_mean_ratios(results)
        self._plot_ratio_per_instance(results)

        print(f"\nPlots saved to {self.output_dir}/")

    def _plot_mean_ratios(self, results):
        """Bar plot of the mean finite ratio per strategy."""
        fig, ax = plt.subplots(figsize=(10, 6))

        names = list(results)
        means = [results[name]['summary']['mean_ratio'] for name in names]
        stds = [results[name]['summary']['std_ratio'] for name in names]
        colors = ['green', 'orange']

        x_pos = np.arange(len(names))
        ax.bar(x_pos, means, yerr=stds, capsize=10, alpha=0.8, color=colors[:len(names)])
        ax.axhline(y=1, color='gray', linestyle='--', linewidth=2, label='Optimum (1)')

        ax.set_ylabel('Mean Approximation Ratio', fontsize=12, fontweight='bold')
        ax.set_title('Approximation Ratio by Strategy', fontsize=14, fontweight='bold')
        ax.set_xticks(x_pos)
        ax.set_xticklabels(names, fontsize=10)
        ax.grid(axis='y', alpha=0.3)
        ax.legend(fontsize=10)

        for i, (mean, std) in enumerate(zip(means, stds)):
            if not math.isnan(mean):
                ax.text(i, mean + std + 0.02, f'{mean:.3f}', ha='center', fontsize=10, fontweight='bold')

        plt.tight_layout()
        plt.savefig(os.path.join(self.output_dir, '01_mean_ratios.png'), dpi=150, bbox_inches='tight')
        print("  Saved: 01_mean_ratios.png")
        plt.close(fig)

    def _plot_ratio_per_instance(self, results):
        """Line plot of each strategy's ratio across instances (INF omitted)."""
        fig, ax = plt.subplots(figsize=(12, 6))

        colors = {'PEPM': 'green', 'LGRV': 'orange'}

        for name, data in results.items():
            ratios = np.array(data['ratios'], dtype=float)
            ratios[np.isinf(ratios)] = np.nan
            instances = np.arange(1, len(ratios) + 1)
            ax.plot(instances, ratios, marker='o', label=name, color=colors.get(name),
                    linewidth=2, markersize=4, alpha=0.8)

        ax.axhline(y=1, color='gray', linestyle='--', linewidth=2, label='Optimum')

        ax.set_xlabel('Instance', fontsize=12, fontweight='bold')
        ax.set_ylabel('Approximation Ratio', fontsize=12, fontweight='bold')
        ax.set_title('Approximation Ratio per Instance', fontsize=14, fontweight='bold')
        ax.legend(fontsize=11, loc='best')
        ax.grid(True, alpha=0.3)

        plt.tight_layout()
        plt.savefig(os.path.join(self.output_dir, '02_ratio_per_instance.png'), dpi=150, bbox_inches='tight')
        print("  Saved: 02_ratio_per_instance.png")
        plt.close(fig)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Benchmark PEPM and LGRV approximation ratios on random instances"
    )
    parser.add_argument("--num-instances", type=int, default=20,
                        help="Number of random instances (default: 20)")
    parser.add_argument("--num-agents", type=int, default=20,
                        help="Agents per instance (default: 20)")
    parser.add_argument("--num-groups", type=int, default=3,
                        help="Groups per instance (default: 3)")
    parser.add_argument("--max-denominator", type=int, default=10,
                        help="Largest position denominator (default: 10)")
    parser.add_argument("--seed", type=int, default=42,
                        help="Base random seed (default: 42)")
    parser.add_argument("--resolution", type=int, default=10000,
                        help="Steps of the optimal location scan (default: 10000)")
    parser.add_argument("--output-dir", default="benchmark_results",
                        help="Directory for plots (default: benchmark_results)")
    parser.add_argument("--no-plots", action="store_true",
                        help="Skip plot generation")
    parser.add_argument("--quiet", action="store_true",
                        help="Suppress per-instance progress lines")

    args = parser.parse_args(argv)

    benchmark = MechanismBenchmark(
        num_instances=args.num_instances,
        num_agents=args.num_agents,
        num_groups=args.num_groups,
        max_denominator=args.max_denominator,
        seed=args.seed,
        resolution=args.resolution,
        output_dir=args.output_dir,
        verbose=not args.quiet
    )
    benchmark.run_all_benchmarks(plot=not args.no_plots)
    return 0


if __name__ == "__main__":
    sys.exit(main())
