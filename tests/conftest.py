import matplotlib

matplotlib.use("Agg")

import pytest

from facility_problem import build_instance


@pytest.fixture
def endpoints_instance():
    """n=2, m=1: one agent at 0 and one at 1, both in group 1."""
    return build_instance(2, 1, [(0, 1, 1), (1, 1, 1)])


@pytest.fixture
def single_agent_at_zero():
    return build_instance(1, 1, [(0, 1, 1)])
