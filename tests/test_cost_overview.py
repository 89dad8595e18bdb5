"""Tests for the cost overview plot."""

from fractions import Fraction

import matplotlib.pyplot as plt
import pytest
from matplotlib.colors import to_rgba

from cost_overview import (
    TITLE,
    draw_cost_overview,
    group_breakpoints,
    group_curve,
    main,
    overview_series,
    plot_cost_overview,
)
from facility_problem import build_instance, create_random_instance


def test_breakpoints_add_missing_endpoints():
    assert group_breakpoints((Fraction(1, 4), Fraction(3, 4))) == [0.0, 0.25, 0.75, 1.0]


def test_breakpoints_skip_present_endpoints_and_duplicates():
    group = (Fraction(0), Fraction(1, 2), Fraction(1, 2), Fraction(1))
    assert group_breakpoints(group) == [0.0, 0.5, 1.0]


def test_breakpoints_of_empty_group():
    assert group_breakpoints(()) == []


def test_group_curve_values():
    xs, ys = group_curve((Fraction(1, 2),))
    assert xs == [0.0, 0.5, 1.0]
    assert ys == pytest.approx([0.5, 1.0, 0.5])


def test_overview_series_contents():
    instance = build_instance(3, 3, [(0, 1, 1), (1, 1, 1), (1, 2, 3)])
    series = overview_series(instance, resolution=100)

    assert sorted(series['groups']) == [1, 3]
    xs, envelope = series['envelope']
    assert xs.size == 101
    assert envelope.size == 101
    assert series['max_cost'] == pytest.approx(1.0)
    assert series['optimum'].cost == pytest.approx(1.0)


def test_plot_is_saved(tmp_path):
    instance = create_random_instance(num_agents=10, num_groups=3, seed=2)
    output = tmp_path / "plots" / "fig.svg"

    path = plot_cost_overview(instance, str(output), resolution=200)

    assert path == str(output)
    assert output.exists()
    assert output.stat().st_size > 0


def test_plot_without_groups(tmp_path):
    instance = build_instance(0, 0, [])
    output = tmp_path / "empty.png"
    plot_cost_overview(instance, str(output), resolution=10)
    assert output.exists()


def test_main_writes_figure(tmp_path, capsys):
    source = tmp_path / "instance.txt"
    source.write_text("2 2\n1 3 1\n2 3 2\n")
    output = tmp_path / "overview.svg"

    assert main([str(source), "--output", str(output), "--resolution", "100"]) == 0
    assert output.exists()
    assert "Saved:" in capsys.readouterr().out


def test_main_rejects_invalid_input(tmp_path, capsys):
    source = tmp_path / "instance.txt"
    source.write_text("1 1\n1 2 5\n")
    assert main([str(source), "--output", str(tmp_path / "fig.svg")]) == 1
    assert not (tmp_path / "fig.svg").exists()


def test_draw_cost_overview_contents():
    instance = build_instance(3, 3, [(0, 1, 1), (1, 1, 1), (1, 2, 3)])
    series = overview_series(instance, resolution=100)
    fig, ax = plt.subplots()
    try:
        draw_cost_overview(ax, series)

        lines = ax.get_lines()
        labels = [line.get_label() for line in lines]
        assert len(lines) == len(series['groups']) + 4
        assert labels[:4] == [
            "Group $1$'s total cost",
            "Group $3$'s total cost",
            "Maximum total group cost",
            "Optimal solution location",
        ]
        assert all(line.get_linestyle() == '--' for line in lines[:2])

        star = lines[3]
        opt = series['optimum']
        assert star.get_marker() == '*'
        assert to_rgba(star.get_color()) == to_rgba('gold')
        assert list(star.get_xdata()) == [opt.location]

        guides = lines[4:]
        assert all(line.get_label().startswith('_') for line in guides)
        assert all(to_rgba(line.get_color()) == to_rgba('gold') for line in guides)
        assert list(guides[0].get_xdata()) == [opt.location, 0]
        assert list(guides[1].get_ydata()) == [opt.cost, 0]

        legend = ax.get_legend()
        assert legend._loc == 4
        assert [t.get_text() for t in legend.get_texts()] == labels[:4]
        assert ax.get_title() == TITLE
        assert ax.get_xlim() == (0, 1)
        assert ax.get_ylim() == pytest.approx((0, 1.1 * series['max_cost']))
    finally:
        plt.close(fig)


def test_draw_cost_overview_without_groups():
    series = overview_series(build_instance(0, 0, []), resolution=10)
    fig, ax = plt.subplots()
    try:
        draw_cost_overview(ax, series)
        assert len(ax.get_lines()) == 4
        assert ax.get_ylim() == (0, 1.0)
    finally:
        plt.close(fig)
