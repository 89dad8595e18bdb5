"""
Group Cost Evaluator

Cost of one group at a candidate location x:
- each agent contributes 1 - |position - x| (no clamping)
- group cost: sum over the group's agents
- maximum group cost: max over groups 1..m, starting at 0 (so 0 when m == 0)

Scalar functions are used for single evaluations (endpoints, reported optimum);
the *_curve functions evaluate a whole numpy array of locations at once for the
domain scan and the plots. Everything here is read-only over the instance.
"""

import numpy as np
from fractions import Fraction
from typing import List, Optional, Sequence

from data_models import ProblemInstance
from exact_fraction import to_real


def group_cost(group: Sequence[Fraction], x: float) -> float:
    """
    Total cost of a group at location x.

    Args:
        group: Agent positions of the group
        x: Candidate facility location

    Returns:
        Sum of 1 - |position - x| over the group (0.0 for an empty group)
    """
    total = 0.0
    for position in group:
        total += 1 - abs(to_real(position) - x)
    return total


def max_group_cost(instance: ProblemInstance, x: float) -> float:
    """
    Maximum total group cost at location x over groups 1..m.

    Args:
        instance: Problem instance
        x: Candidate facility location

    Returns:
        Largest group cost, or 0.0 when there are no groups
    """
    best = 0.0
    for _, members in instance.real_groups():
        best = max(best, group_cost(members, x))
    return best


def group_positions(group: Sequence[Fraction]) -> np.ndarray:
    """Float array of a group's positions."""
    return np.array([to_real(p) for p in group], dtype=float)


class GroupCostTable:
    """
    Prefix sums of one sorted group for evaluating its cost at many locations.

    With positions p_1 <= ... <= p_k and L of them at or left of x:
        sum |p - x| = x*L - P[L] + (P[k] - P[L]) - x*(k - L)
    where P is the prefix sum of positions. Memory is O(k + len(xs)).
    """

    def __init__(self, group: Sequence[Fraction]):
        self.positions = group_positions(group)
        self.prefix = np.concatenate(([0.0], np.cumsum(self.positions)))

    @property
    def size(self) -> int:
        return self.positions.size

    def curve(self, xs: np.ndarray) -> np.ndarray:
        """Group cost at every location in xs."""
        xs = np.asarray(xs, dtype=float)
        k = self.size
        if k == 0:
            return np.zeros_like(xs)
        left = np.searchsorted(self.positions, xs, side='right')
        left_sum = self.prefix[left]
        distance = xs * left - left_sum + (self.prefix[k] - left_sum) - xs * (k - left)
        return k - distance


def group_cost_tables(instance: ProblemInstance) -> List[GroupCostTable]:
    """One table per real group (1..m), in group order."""
    return [GroupCostTable(members) for _, members in instance.real_groups()]


def group_cost_curve(group: Sequence[Fraction], xs: np.ndarray) -> np.ndarray:
    """Vectorized group_cost over an array of locations."""
    return GroupCostTable(group).curve(xs)


def max_group_cost_curve(instance: ProblemInstance,
                         xs: np.ndarray,
                         tables: Optional[List[GroupCostTable]] = None) -> np.ndarray:
    """
    Vectorized max_group_cost over an array of locations.

    Args:
        instance: Problem instance
        xs: Locations to evaluate
        tables: Precomputed group_cost_tables(instance), reused across chunks

    Returns:
        Array of maximum group costs, 0 where there are no groups
    """
    if tables is None:
        tables = group_cost_tables(instance)
    xs = np.asarray(xs, dtype=float)
    envelope = np.zeros_like(xs)
    for table in tables:
        np.maximum(envelope, table.curve(xs), out=envelope)
    return envelope
