"""Approximate yield to maturity of a coupon bond.

The approximation spreads the pull-to-par (the gap between face value and
price) evenly over the remaining years and divides the resulting annual
income by the average of face value and price::

    ytm ~ (C + (F - P) / n) / ((F + P) / 2)

It needs no iteration and is close to the exact yield for bonds priced near
par. See :func:`~yieldlite.instruments.bond_pricing.bond_yield_to_maturity`
for the exact solution.
"""

from __future__ import annotations

import logging
import numbers
from decimal import Decimal

from ..money import Amount, common_currency, to_decimal
from ..precision import DECIMAL64, DecimalPolicy, exact_context

__all__ = [
    "yield_to_maturity",
]

logger = logging.getLogger(__name__)

_TWO = Decimal(2)


def yield_to_maturity(
    coupon_payment: Amount,
    face_value: Amount,
    price: Amount,
    years_to_maturity: int,
    *,
    policy: DecimalPolicy | None = None,
) -> Decimal:
    """Approximate the annualised yield to maturity of a bond.

    All three amounts are assumed to be in the same currency; only their
    numeric magnitude is used. No range checks are made, so degenerate
    inputs (e.g. a price far above face value) give a meaningless or
    negative yield rather than an error.

    Args:
        coupon_payment: Annual coupon payment.
        face_value: Amount repaid at maturity.
        price: Current market price.
        years_to_maturity: Whole years until maturity.
        policy: Precision applied to each division. Defaults to
            :data:`~yieldlite.precision.DECIMAL64`.

    Returns:
        Yield as a decimal ratio (``Decimal("0.1125")`` for 11.25%).

    Raises:
        ZeroDivisionError: If ``years_to_maturity`` is zero or
            ``face_value + price`` is zero.
        TypeError: If ``years_to_maturity`` is not an integer.
    """
    if isinstance(years_to_maturity, bool) or not isinstance(years_to_maturity, numbers.Integral):
        raise TypeError(
            f"years_to_maturity must be an integer, got {type(years_to_maturity).__name__}"
        )
    policy = policy or DECIMAL64
    common_currency(coupon_payment, face_value, price)

    coupon = to_decimal(coupon_payment)
    face = to_decimal(face_value)
    market = to_decimal(price)

    # Sums are exact; only the divisions round.
    exact = exact_context()
    averaged_difference = policy.divide(exact.subtract(face, market), Decimal(int(years_to_maturity)))
    average_price = policy.divide(exact.add(face, market), _TWO)
    result = policy.divide(exact.add(coupon, averaged_difference), average_price)

    logger.debug(
        "ytm(coupon=%s, face=%s, price=%s, years=%d) = %s",
        coupon, face, market, years_to_maturity, result,
    )
    return result
