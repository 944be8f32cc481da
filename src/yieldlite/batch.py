"""Yield calculations over tables of bonds."""

from __future__ import annotations

import logging
import math
import numbers
from decimal import Decimal

import numpy as np
import pandas as pd

from .instruments.bond_pricing import bond_yield_to_maturity, current_yield
from .instruments.yield_to_maturity import yield_to_maturity
from .money import to_decimal
from .precision import DecimalPolicy

__all__ = [
    "yield_to_maturity_frame",
    "yield_table",
]

logger = logging.getLogger(__name__)

_ERROR_MODES = ("raise", "coerce")


def _check_columns(frame: pd.DataFrame, columns: list[str]) -> None:
    missing = [c for c in columns if c not in frame.columns]
    if missing:
        raise ValueError(f"frame is missing required columns: {missing}")


def _whole_years(value: object) -> object:
    """Turn integral floats (from NaN-bearing columns) back into ints."""
    if isinstance(value, (float, np.floating)) and math.isfinite(value) and float(value).is_integer():
        return int(value)
    return value


def yield_to_maturity_frame(
    frame: pd.DataFrame,
    *,
    coupon: str = "coupon_payment",
    face: str = "face_value",
    price: str = "price",
    years: str = "years_to_maturity",
    errors: str = "raise",
    policy: DecimalPolicy | None = None,
) -> pd.Series:
    """Approximate yield to maturity for every row of *frame*.

    Args:
        frame: One bond per row.
        coupon: Column holding the annual coupon payment.
        face: Column holding the face value.
        price: Column holding the market price.
        years: Column holding whole years to maturity.
        errors: ``"raise"`` to propagate the first failure, ``"coerce"``
            to store ``NaN`` for rows that cannot be computed.
        policy: Decimal precision policy forwarded to
            :func:`~yieldlite.instruments.yield_to_maturity.yield_to_maturity`.

    Returns:
        Object Series of ``Decimal`` yields named ``"ytm"``, aligned to
        ``frame.index``.

    Raises:
        ValueError: If a column is missing or *errors* is unknown.
        ZeroDivisionError: With ``errors="raise"``, for a zero divisor.
    """
    if errors not in _ERROR_MODES:
        raise ValueError(f"Unknown errors mode: {errors!r}. Use 'raise' or 'coerce'.")
    _check_columns(frame, [coupon, face, price, years])

    values: list[Decimal | float] = []
    failed: list[object] = []
    rows = frame[[coupon, face, price, years]].itertuples(index=True, name=None)
    for label, c, f, p, n in rows:
        try:
            values.append(yield_to_maturity(c, f, p, _whole_years(n), policy=policy))
        except (ArithmeticError, ValueError, TypeError):
            if errors == "raise":
                raise
            values.append(np.nan)
            failed.append(label)

    if failed:
        logger.warning("Could not compute yield for %d row(s): %s", len(failed), failed)
    return pd.Series(values, index=frame.index, name="ytm", dtype=object)


def _exact_or_nan(c: object, f: object, p: object, n: object) -> float:
    n = _whole_years(n)
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        return np.nan
    try:
        return bond_yield_to_maturity(
            float(to_decimal(f)), float(to_decimal(c)), float(to_decimal(p)), int(n)
        )
    except (ArithmeticError, ValueError, TypeError):
        return np.nan


def _current_or_nan(c: object, p: object) -> float:
    try:
        return current_yield(float(to_decimal(c)), float(to_decimal(p)))
    except (ArithmeticError, ValueError, TypeError):
        return np.nan


def yield_table(
    frame: pd.DataFrame,
    *,
    coupon: str = "coupon_payment",
    face: str = "face_value",
    price: str = "price",
    years: str = "years_to_maturity",
    policy: DecimalPolicy | None = None,
) -> pd.DataFrame:
    """Compare approximate and exact yields for a table of bonds.

    Rows whose yields cannot be computed get ``NaN`` in the yield columns.

    Args:
        frame: One bond per row.
        coupon: Column holding the annual coupon payment.
        face: Column holding the face value.
        price: Column holding the market price.
        years: Column holding whole years to maturity.
        policy: Decimal precision policy for the approximation.

    Returns:
        Copy of *frame* with ``ytm_approx``, ``ytm_exact``,
        ``approx_error`` and ``current_yield`` float columns.
    """
    approx = yield_to_maturity_frame(
        frame, coupon=coupon, face=face, price=price, years=years, errors="coerce", policy=policy
    )
    out = frame.copy()
    out["ytm_approx"] = approx.astype(float)
    cells = list(zip(frame[coupon], frame[face], frame[price], frame[years]))
    out["ytm_exact"] = [_exact_or_nan(c, f, p, n) for c, f, p, n in cells]
    out["approx_error"] = out["ytm_approx"] - out["ytm_exact"]
    out["current_yield"] = [_current_or_nan(c, p) for c, _, p, _ in cells]
    return out
