"""Tests for yieldlite.visualisation."""

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from yieldlite.visualisation import plot_price_yield


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


def test_plot_price_yield_default_grid():
    ax = plot_price_yield(100, 1000, 10)
    lines = ax.get_lines()
    assert len(lines) == 3
    assert len(lines[0].get_xdata()) == 50


def test_plot_price_yield_existing_axes():
    _, ax = plt.subplots()
    returned = plot_price_yield(50, 1000, 5, prices=[900, 1000, 1100], ax=ax)
    assert returned is ax
    assert list(ax.get_lines()[0].get_xdata()) == [900, 1000, 1100]


def test_plot_price_yield_invalid_prices():
    with pytest.raises(ValueError):
        plot_price_yield(50, 1000, 5, prices=[])
    with pytest.raises(ValueError):
        plot_price_yield(50, 1000, 5, prices=[1000, 0])
