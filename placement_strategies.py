"""
Randomized Placement Strategies

Both strategies see only the near/far split of every group 1..m
(n1 = agents left of 1/2, n2 = agents at or right of 1/2, compared exactly)
and return p, the probability of placing the facility at 0.

PEPM:
- a = max(n1 + 2*n2), b = max(n1), c = max(2*n1 + n2), d = max(n2)
- b == 0 -> p = 1; otherwise d == 0 -> p = 0
- otherwise p = (a/b - 1) / (a/b + c/d - 2)

LGRV:
- scan groups in order keeping the largest count seen so far (cur_max);
  a strictly larger n1 sets p = 0, then a strictly larger n2 sets p = 1
- ties never update p
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence

from data_models import GroupSplit, ProblemInstance
from exact_fraction import is_near_zero


def split_group(group) -> GroupSplit:
    """Count a group's agents on each side of the midpoint."""
    near_zero = sum(1 for position in group if is_near_zero(position))
    return GroupSplit(near_zero=near_zero, near_one=len(group) - near_zero)


def group_splits(instance: ProblemInstance) -> List[GroupSplit]:
    """Near/far split of groups 1..m, in group order."""
    return [split_group(members) for _, members in instance.real_groups()]


def pepm_probability(splits: Sequence[GroupSplit]) -> float:
    """
    PEPM probability of placing the facility at 0.

    Args:
        splits: Near/far split of every real group

    Returns:
        Probability p in [0, 1]
    """
    a = b = c = d = 0
    for split in splits:
        a = max(a, split.near_zero + 2 * split.near_one)
        b = max(b, split.near_zero)
        c = max(c, 2 * split.near_zero + split.near_one)
        d = max(d, split.near_one)

    if b == 0:
        return 1.0
    elif d == 0:
        return 0.0
    return (a / b - 1) / (a / b + c / d - 2)


def lgrv_probability(splits: Sequence[GroupSplit]) -> float:
    """
    LGRV probability of placing the facility at 0.

    Args:
        splits: Near/far split of every real group, in scan order

    Returns:
        0.0 or 1.0, set by the last strict increase of the running maximum
    """
    cur_max = 0
    p = 0.0
    for split in splits:
        if split.near_zero > cur_max:
            cur_max = split.near_zero
            p = 0.0
        if split.near_one > cur_max:
            cur_max = split.near_one
            p = 1.0
    return p


STRATEGIES: Dict[str, Callable[[Sequence[GroupSplit]], float]] = {
    'PEPM': pepm_probability,
    'LGRV': lgrv_probability,
}


@dataclass(frozen=True)
class StrategyResult:
    """Placement decided by one strategy."""
    name: str
    probability: float   # Probability of placing at 0

    @property
    def complement(self) -> float:
        """Probability of placing at 1."""
        return 1 - self.probability


def run_strategy(name: str, instance: ProblemInstance) -> StrategyResult:
    """
    Run a strategy by name on an instance.

    Args:
        name: Strategy name, one of STRATEGIES
        instance: Problem instance

    Returns:
        StrategyResult with the placement probability
    """
    if name not in STRATEGIES:
        raise ValueError(f"Unknown strategy {name!r}, expected one of {sorted(STRATEGIES)}")
    probability = STRATEGIES[name](group_splits(instance))
    return StrategyResult(name=name, probability=probability)


def describe_placement(result: StrategyResult) -> str:
    return (f"{result.name} puts the facility at 0 (resp. 1) with probability "
            f"{result.probability:g} (resp. {result.complement:g}).")
