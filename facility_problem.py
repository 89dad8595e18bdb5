"""
Facility Location Problem Setup

Input format (whitespace separated integers):
- n m               total agents, total groups
- n records a b g   agent at position a/b in group g

Preconditions (any violation raises InstanceError, nothing is clamped or skipped):
- b != 0 and a <= b, and the position a/b is not negative
- 0 <= g <= m (group 0 is accepted and ignored by every cost computation)
- exactly n records, every token an integer

Also provides a seeded random instance generator for benchmarking.
"""

import io
import sys
import numpy as np
from numbers import Integral
from typing import List, Sequence, TextIO, Tuple, Union

from data_models import Agent, InstanceError, ProblemInstance
from exact_fraction import make_fraction


Record = Tuple[int, int, int]


def build_instance(num_agents: int, num_groups: int, records: Sequence[Record]) -> ProblemInstance:
    """
    Validate raw (a, b, g) records and build the immutable instance.

    Args:
        num_agents: Declared agent count n
        num_groups: Declared group count m
        records: Sequence of (numerator, denominator, group) triples

    Returns:
        ProblemInstance with every group sorted ascending
    """
    if num_agents < 0 or num_groups < 0:
        raise InstanceError(f"Agent and group counts must be non-negative, got n={num_agents}, m={num_groups}")
    if len(records) != num_agents:
        raise InstanceError(f"Expected {num_agents} agent records, got {len(records)}")

    agents = []
    groups: List[List] = [[] for _ in range(num_groups + 1)]

    for idx, (a, b, g) in enumerate(records):
        position = make_fraction(a, b)
        if a > b:
            raise InstanceError(f"Record {idx + 1}: numerator {a} exceeds denominator {b}")
        if position < 0:
            raise InstanceError(f"Record {idx + 1}: position {a}/{b} is negative")
        if not isinstance(g, Integral) or not 0 <= g <= num_groups:
            raise InstanceError(f"Record {idx + 1}: group {g} outside [0, {num_groups}]")

        agents.append(Agent(position=position, group=int(g)))
        groups[g].append(position)

    return ProblemInstance(
        num_agents=num_agents,
        num_groups=num_groups,
        agents=tuple(agents),
        groups=tuple(tuple(sorted(members)) for members in groups),
    )


def _parse_int(token: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise InstanceError(f"Expected an integer, got {token!r}") from None


def parse_instance(text: str) -> ProblemInstance:
    """
    Parse the whitespace separated input format into a problem instance.

    Args:
        text: Full input text

    Returns:
        Validated ProblemInstance
    """
    tokens = [_parse_int(token) for token in text.split()]
    if len(tokens) < 2:
        raise InstanceError("Input must start with the agent count n and group count m")

    num_agents, num_groups = tokens[0], tokens[1]
    if num_agents < 0:
        raise InstanceError(f"Agent count must be non-negative, got {num_agents}")

    body = tokens[2:]
    if len(body) != 3 * num_agents:
        raise InstanceError(
            f"Expected {num_agents} records ({3 * num_agents} integers) after the header, "
            f"got {len(body)} integers"
        )

    records = [tuple(body[i:i + 3]) for i in range(0, len(body), 3)]
    return build_instance(num_agents, num_groups, records)

def read_instance(source: Union[str, TextIO, None] = None) -> ProblemInstance:
    """
    Read an instance from a file path, an open stream, or stdin.

    Args:
        source: Path, text stream, or None / "-" for stdin

    Returns:
        Validated ProblemInstance
    """
    if source is None or source == "-":
        return parse_instance(sys.stdin.read())
    if isinstance(source, str):
        with open(source) as f:
            return parse_instance(f.read())
    return parse_instance(source.read())


def format_instance(instance: ProblemInstance) -> str:
    """Write an instance back out in the input format."""
    out = io.StringIO()
    out.write(f"{instance.num_agents} {instance.num_groups}\n")
    for agent in instance.agents:
        out.write(f"{agent.position.numerator} {agent.position.denominator} {agent.group}\n")
    return out.getvalue()


def generate_records(
    num_agents: int,
    num_groups: int,
    max_denominator: int = 10,
    seed: int = 42
) -> List[Record]:
    """
    Generate random agent records.

    - Denominator: uniform in 1..max_denominator
    - Numerator: uniform in 0..denominator (so every position is in [0, 1])
    - Group: uniform in 1..num_groups

    Args:
        num_agents: Number of records
        num_groups: Number of real groups (must be >= 1)
        max_denominator: Largest denominator drawn
        seed: Random seed for reproducibility

    Returns:
        List of (numerator, denominator, group) triples
    """
    if num_groups < 1:
        raise InstanceError("Random instances need at least one group")
    if max_denominator < 1:
        raise InstanceError(f"max_denominator must be positive, got {max_denominator}")

    np.random.seed(seed)

    records = []
    for _ in range(num_agents):
        denominator = int(np.random.randint(1, max_denominator + 1))
        numerator = int(np.random.randint(0, denominator + 1))
        group = int(np.random.randint(1, num_groups + 1))
        records.append((numerator, denominator, group))

    return records


def create_random_instance(
    num_agents: int = 20,
    num_groups: int = 3,
    max_denominator: int = 10,
    seed: int = 42
) -> ProblemInstance:
    """
    Create a random problem instance.

    Args:
        num_agents: Number of agents n
        num_groups: Number of groups m
        max_denominator: Largest position denominator
        seed: Random seed

    Returns:
        Validated ProblemInstance
    """
    records = generate_records(num_agents, num_groups, max_denominator, seed)
    return build_instance(num_agents, num_groups, records)


def print_instance_summary(instance: ProblemInstance):
    """Print summary of a problem instance."""
    print("\n" + "=" * 80)
    print("FACILITY LOCATION INSTANCE")
    print("=" * 80)
    print(f"\nAgents: {instance.num_agents}")
    print(f"Groups: {instance.num_groups}")
    print(f"Discarded (group 0): {len(instance.group(0))}")

    for index, members in instance.real_groups():
        positions = ", ".join(str(p) for p in members)
        print(f"  Group {index}: {len(members)} agents [{positions}]")

    print("\n" + "=" * 80)


if __name__ == "__main__":
    # Example usage
    instance = create_random_instance(num_agents=12, num_groups=3, seed=42)
    print_instance_summary(instance)
    print("\nInput format:")
    print(format_instance(instance))
