"""Price/yield charts comparing approximate and exact yield to maturity."""

from __future__ import annotations

from collections.abc import Sequence

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes

from .instruments.bond_pricing import bond_yield_to_maturity
from .instruments.yield_to_maturity import yield_to_maturity

__all__ = [
    "PALETTE",
    "plot_price_yield",
]

PALETTE: dict[str, str] = {
    "approx": "#4E79A7",
    "exact": "#F28E2B",
    "grey_mid": "#999999",
}


def plot_price_yield(
    coupon_payment: float,
    face_value: float,
    years_to_maturity: int,
    prices: Sequence[float] | np.ndarray | None = None,
    ax: Axes | None = None,
    figsize: tuple[float, float] = (8, 5),
) -> Axes:
    """Plot approximate and exact yield to maturity against price.

    Args:
        coupon_payment: Annual coupon payment.
        face_value: Par value.
        years_to_maturity: Whole years to maturity.
        prices: Prices to evaluate. Defaults to 50 points between 50% and
            150% of face value.
        ax: Axes to draw on. A new figure is created if ``None``.
        figsize: Figure size in inches when a new figure is created.

    Returns:
        The matplotlib Axes containing the chart.

    Raises:
        ValueError: If *prices* is empty or contains a non-positive price.
    """
    if prices is None:
        prices = np.linspace(0.5 * face_value, 1.5 * face_value, 50)
    grid = np.asarray(prices, dtype=float)
    if grid.size == 0:
        raise ValueError("prices must not be empty")
    if np.any(grid <= 0):
        raise ValueError("prices must be positive")

    approx = [float(yield_to_maturity(coupon_payment, face_value, p, years_to_maturity)) for p in grid]
    exact = [bond_yield_to_maturity(face_value, coupon_payment, p, years_to_maturity) for p in grid]

    if ax is None:
        _, ax = plt.subplots(figsize=figsize)

    ax.plot(grid, approx, color=PALETTE["approx"], lw=2, label="Approximate YTM")
    ax.plot(grid, exact, color=PALETTE["exact"], lw=2, linestyle="--", label="Exact YTM")
    ax.axvline(face_value, color=PALETTE["grey_mid"], lw=0.8, linestyle=":")
    ax.set_xlabel("Price")
    ax.set_ylabel("Yield to maturity")
    ax.set_title(f"Price/yield, coupon {coupon_payment:g}, {years_to_maturity}y")
    ax.grid(axis="y", alpha=0.3)
    ax.legend(frameon=False)
    return ax
