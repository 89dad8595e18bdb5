"""Tests for the PEPM and LGRV placement strategies."""

import pytest

from data_models import GroupSplit
from facility_problem import build_instance, parse_instance
from placement_strategies import (
    STRATEGIES,
    StrategyResult,
    describe_placement,
    group_splits,
    lgrv_probability,
    pepm_probability,
    run_strategy,
    split_group,
)


def splits(*pairs):
    return [GroupSplit(near_zero=n1, near_one=n2) for n1, n2 in pairs]


def test_split_counts_midpoint_as_near_one():
    instance = parse_instance("4 1  0 1 1  1 2 1  2 4 1  1 1 1")
    assert group_splits(instance) == [GroupSplit(near_zero=1, near_one=3)]


def test_split_is_exact_near_midpoint():
    instance = parse_instance("2 2  50000 100001 1  50001 100001 2")
    assert group_splits(instance) == splits((1, 0), (0, 1))


def test_split_skips_discard_group():
    instance = build_instance(3, 2, [(0, 1, 0), (1, 4, 2), (3, 4, 2)])
    assert group_splits(instance) == splits((0, 0), (1, 1))


def test_split_empty_group():
    assert split_group([]) == GroupSplit(near_zero=0, near_one=0)


def test_pepm_balanced_group():
    """a = 3, b = 1, c = 3, d = 1 gives p = (3 - 1) / (3 + 3 - 2)."""
    assert pepm_probability(splits((1, 1))) == pytest.approx(0.5)


def test_pepm_general_formula():
    """a = 6, b = 2, c = 5, d = 3."""
    assert pepm_probability(splits((2, 1), (0, 3))) == pytest.approx(0.75)


def test_pepm_no_agent_near_zero():
    """b == 0 places the facility at 0 with certainty."""
    assert pepm_probability(splits((0, 2), (0, 5))) == 1.0


def test_pepm_no_agent_near_one():
    """d == 0 places the facility at 1 with certainty."""
    assert pepm_probability(splits((3, 0), (1, 0))) == 0.0


def test_pepm_without_groups():
    assert pepm_probability([]) == 1.0


def test_lgrv_largest_near_zero_count_wins():
    assert lgrv_probability(splits((1, 2), (3, 1))) == 0.0


def test_lgrv_largest_near_one_count_wins():
    assert lgrv_probability(splits((2, 1), (1, 4))) == 1.0


def test_lgrv_tie_within_group_keeps_near_zero():
    """n2 equal to the running max set by n1 does not update p."""
    assert lgrv_probability(splits((3, 3))) == 0.0


def test_lgrv_tied_groups_keep_first_update():
    """Two (3, 3) groups: only the first strict increase counts."""
    assert lgrv_probability(splits((3, 3), (3, 3))) == 0.0


def test_lgrv_later_tie_does_not_override():
    assert lgrv_probability(splits((0, 4), (4, 0))) == 1.0
    assert lgrv_probability(splits((4, 0), (0, 4))) == 0.0


def test_lgrv_empty_inputs():
    assert lgrv_probability([]) == 0.0
    assert lgrv_probability(splits((0, 0))) == 0.0


def test_run_strategy_by_name(endpoints_instance):
    assert set(STRATEGIES) == {'PEPM', 'LGRV'}
    assert run_strategy('PEPM', endpoints_instance) == StrategyResult('PEPM', 0.5)
    assert run_strategy('LGRV', endpoints_instance) == StrategyResult('LGRV', 0.0)


def test_run_unknown_strategy(endpoints_instance):
    with pytest.raises(ValueError):
        run_strategy('RANDOM', endpoints_instance)


def test_describe_placement():
    assert describe_placement(StrategyResult('PEPM', 0.5)) == \
        "PEPM puts the facility at 0 (resp. 1) with probability 0.5 (resp. 0.5)."
    assert describe_placement(StrategyResult('LGRV', 1.0)) == \
        "LGRV puts the facility at 0 (resp. 1) with probability 1 (resp. 0)."
