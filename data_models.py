"""
Data Models - Agents, groups and problem instances

A problem instance is built once from validated input and never mutated:
- Agent: exact position in [0, 1] plus a group index in [0, m]
- ProblemInstance: n, m, the agents in input order and the sorted groups
- GroupSplit: per-group count of agents left of 1/2 and at-or-right of 1/2

Group 0 is the discard group: it is kept in the instance but no cost or
split is ever computed for it.
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import Tuple


class InstanceError(ValueError):
    """Raised when input breaks a precondition (bad fraction, group or format)."""


@dataclass(frozen=True)
class Agent:
    """An agent on the unit segment."""
    position: Fraction   # Exact location in [0, 1]
    group: int           # 0 = discarded, 1..m = real groups


@dataclass(frozen=True)
class ProblemInstance:
    """Immutable problem instance shared by every evaluator and solver."""
    num_agents: int                        # n, including group-0 agents
    num_groups: int                        # m
    agents: Tuple[Agent, ...]              # Input order
    groups: Tuple[Tuple[Fraction, ...], ...]  # m + 1 entries, each sorted ascending

    def group(self, index: int) -> Tuple[Fraction, ...]:
        """Sorted positions of group `index` (0..m)."""
        return self.groups[index]

    def real_groups(self):
        """Iterate (index, positions) over groups 1..m."""
        for index in range(1, self.num_groups + 1):
            yield index, self.groups[index]


@dataclass(frozen=True)
class GroupSplit:
    """Near/far split of one group around the midpoint 1/2."""
    near_zero: int   # n1: agents with position < 1/2
    near_one: int    # n2: agents with position >= 1/2
