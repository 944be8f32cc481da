"""Fixed-income pricing: bond price, current yield, and exact yield to maturity."""

from __future__ import annotations

from scipy import optimize

from ..money import Amount, to_decimal
from .yield_to_maturity import yield_to_maturity

__all__ = [
    "bond_price",
    "bond_yield_to_maturity",
    "current_yield",
    "approximation_error",
]


def bond_price(
    face_value: float,
    coupon_payment: float,
    market_rate: float,
    maturity: int,
    payments_per_year: int = 1,
) -> float:
    """Calculate the price of a coupon bond.

    Args:
        face_value: Par value of the bond.
        coupon_payment: Total coupon paid per year.
        market_rate: Annual market discount rate.
        maturity: Years to maturity.
        payments_per_year: Coupon frequency (1=annual, 2=semi-annual).

    Returns:
        Present value of the bond.
    """
    coupon = coupon_payment / payments_per_year
    periods = int(round(maturity * payments_per_year))
    rate = market_rate / payments_per_year

    # Closed-form annuity + principal PV
    if rate == 0:
        return coupon * periods + face_value
    pv_coupons = coupon * (1 - (1 + rate) ** (-periods)) / rate
    pv_face = face_value / (1 + rate) ** periods
    return pv_coupons + pv_face


def bond_yield_to_maturity(
    face_value: float,
    coupon_payment: float,
    current_price: float,
    maturity: int,
    payments_per_year: int = 1,
    low: float = -0.99,
    high: float = 10.0,
    tol: float = 1e-12,
) -> float:
    """Solve for the exact yield to maturity with Brent's method.

    Args:
        face_value: Par value.
        coupon_payment: Total coupon paid per year.
        current_price: Observed market price.
        maturity: Years to maturity.
        payments_per_year: Coupon frequency.
        low: Lower end of the search interval.
        high: Upper end of the search interval.
        tol: Absolute tolerance on the yield.

    Returns:
        Yield to maturity as a decimal.

    Raises:
        ValueError: If price, face value or maturity is non-positive, or
            the interval does not bracket a solution.
    """
    if face_value <= 0 or current_price <= 0:
        raise ValueError("face_value and current_price must be positive")
    if maturity <= 0:
        raise ValueError("maturity must be positive")
    if low <= -payments_per_year:
        raise ValueError(f"low must be greater than {-payments_per_year}")

    def objective(rate: float) -> float:
        return bond_price(face_value, coupon_payment, rate, maturity, payments_per_year) - current_price

    f_low, f_high = objective(low), objective(high)
    if f_low == 0:
        return low
    if f_high == 0:
        return high
    if f_low * f_high > 0:
        raise ValueError(f"No yield in [{low}, {high}] reproduces price {current_price}")
    return float(optimize.brentq(objective, low, high, xtol=tol))


def current_yield(coupon_payment: float, price: float) -> float:
    """Annual coupon divided by market price.

    Raises:
        ValueError: If *price* is not positive.
    """
    if price <= 0:
        raise ValueError("price must be positive")
    return coupon_payment / price


def approximation_error(
    coupon_payment: Amount,
    face_value: Amount,
    price: Amount,
    years_to_maturity: int,
) -> float:
    """Approximate yield minus the exact annual-pay yield.

    Args:
        coupon_payment: Annual coupon payment.
        face_value: Par value.
        price: Market price.
        years_to_maturity: Whole years to maturity.

    Returns:
        Signed error of :func:`~yieldlite.instruments.yield_to_maturity.yield_to_maturity`.
    """
    approx = yield_to_maturity(coupon_payment, face_value, price, years_to_maturity)
    exact = bond_yield_to_maturity(
        float(to_decimal(face_value)),
        float(to_decimal(coupon_payment)),
        float(to_decimal(price)),
        years_to_maturity,
    )
    return float(approx) - exact
