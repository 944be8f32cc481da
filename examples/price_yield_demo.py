#!/usr/bin/env python3
"""Approximate vs exact yield to maturity across a small bond table.

Prints the comparison table and saves a price/yield chart to docs/images/.
"""
from __future__ import annotations

import logging
import os

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pandas as pd

from yieldlite import MonetaryAmount, yield_table, yield_to_maturity
from yieldlite.visualisation import plot_price_yield

OUT = os.path.join(os.path.dirname(__file__), "..", "docs", "images")
os.makedirs(OUT, exist_ok=True)
DPI = 150

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

ytm = yield_to_maturity(
    MonetaryAmount.of(100, "USD"),
    MonetaryAmount.of(1000, "USD"),
    MonetaryAmount.of(920, "USD"),
    10,
)
print(f"10y 10% bond at 920: approximate YTM {ytm}")

bonds = pd.DataFrame(
    {
        "coupon_payment": [100, 50, 80, 0, 45],
        "face_value": [1000, 1000, 1000, 1000, 1000],
        "price": [920, 1000, 1050, 610, 870],
        "years_to_maturity": [10, 5, 4, 10, 0],
    },
    index=["deep_discount", "par", "premium", "zero_coupon", "matured"],
)
print(yield_table(bonds).round(6).to_string())

fig, ax = plt.subplots(figsize=(8, 5))
plot_price_yield(100, 1000, 10, ax=ax)
fig.savefig(os.path.join(OUT, "price_yield.png"), dpi=DPI, bbox_inches="tight")
plt.close(fig)
print(f"Saved chart to {OUT}")
