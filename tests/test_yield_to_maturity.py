"""Tests for yieldlite.instruments.yield_to_maturity."""

from __future__ import annotations

import decimal
import logging
from decimal import Decimal

import pytest

from yieldlite.instruments.yield_to_maturity import yield_to_maturity
from yieldlite.money import MonetaryAmount
from yieldlite.precision import DecimalPolicy


def test_discount_bond():
    assert yield_to_maturity(100, 1000, 920, 10) == Decimal("0.1125")


def test_returns_decimal():
    assert isinstance(yield_to_maturity(100, 1000, 920, 10), Decimal)


def test_par_bond_equals_current_yield():
    assert yield_to_maturity(50, 1000, 1000, 5) == Decimal("0.05")
    assert yield_to_maturity(60.5, 1000.0, 1000.0, 3) == Decimal("0.0605")


def test_monetary_amounts():
    result = yield_to_maturity(
        MonetaryAmount.of(100, "EUR"),
        MonetaryAmount.of(1000, "EUR"),
        MonetaryAmount.of(920, "EUR"),
        10,
    )
    assert result == Decimal("0.1125")


def test_string_inputs():
    assert yield_to_maturity("100", "1000", "920", 10) == Decimal("0.1125")


def test_rounds_to_sixteen_digits():
    assert yield_to_maturity(1, 3, 3, 1) == Decimal("0.3333333333333333")


def test_custom_policy():
    assert yield_to_maturity(1, 3, 3, 1, policy=DecimalPolicy(precision=4)) == Decimal("0.3333")


def test_zero_years_raises():
    with pytest.raises(ZeroDivisionError):
        yield_to_maturity(100, 1000, 920, 0)


def test_zero_face_and_price_raises():
    with pytest.raises(ZeroDivisionError):
        yield_to_maturity(0, 0, 0, 10)
    with pytest.raises(ZeroDivisionError):
        yield_to_maturity(100, 0, 0, 10)


def test_face_plus_price_zero_raises():
    with pytest.raises(ZeroDivisionError):
        yield_to_maturity(100, 1000, -1000, 10)


def test_tiny_average_price_stays_finite():
    result = yield_to_maturity(10, "1e-999999", "1e-999999", 1)
    assert result.is_finite()
    assert result == Decimal("1E+1000000")


def test_huge_average_price_stays_nonzero():
    result = yield_to_maturity("1e-999999", "1e999999", "1e999999", 1)
    assert not result.is_zero()
    assert result == Decimal("1E-1999998")


def test_non_integer_years_raises():
    with pytest.raises(TypeError):
        yield_to_maturity(100, 1000, 920, 2.5)
    with pytest.raises(TypeError):
        yield_to_maturity(100, 1000, 920, True)


def test_premium_bond_can_go_negative():
    assert yield_to_maturity(0, 1000, 2000, 1) < 0


def test_monotonic_in_coupon():
    yields = [yield_to_maturity(c, 1000, 920, 10) for c in (0, 25, 50, 75, 100)]
    assert all(a < b for a, b in zip(yields, yields[1:]))


def test_idempotent():
    first = yield_to_maturity(73.25, 1000, 987.6, 7)
    second = yield_to_maturity(73.25, 1000, 987.6, 7)
    assert first == second
    assert str(first) == str(second)


def test_ambient_context_untouched():
    before = decimal.getcontext().prec
    expected = yield_to_maturity("100.125", "1000.0625", "920.03125", 10)
    with decimal.localcontext() as ctx:
        ctx.prec = 3
        assert yield_to_maturity("100.125", "1000.0625", "920.03125", 10) == expected
        assert decimal.getcontext().prec == 3
    assert decimal.getcontext().prec == before


def test_mixed_currencies_warn(caplog):
    with caplog.at_level(logging.WARNING, logger="yieldlite.money"):
        result = yield_to_maturity(
            MonetaryAmount.of(100, "USD"),
            MonetaryAmount.of(1000, "EUR"),
            920,
            10,
        )
    assert result == Decimal("0.1125")
    assert "Mixed currencies" in caplog.text
