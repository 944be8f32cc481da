"""Decimal precision policies for yield calculations."""

from __future__ import annotations

import decimal
from dataclasses import dataclass

__all__ = [
    "DECIMAL64",
    "DecimalPolicy",
    "exact_context",
]

_ROUNDING_MODES = frozenset({
    decimal.ROUND_CEILING,
    decimal.ROUND_DOWN,
    decimal.ROUND_FLOOR,
    decimal.ROUND_HALF_DOWN,
    decimal.ROUND_HALF_EVEN,
    decimal.ROUND_HALF_UP,
    decimal.ROUND_UP,
    decimal.ROUND_05UP,
})


@dataclass(frozen=True)
class DecimalPolicy:
    """Precision and rounding applied to every division.

    Attributes:
        precision: Significant decimal digits kept after each division.
        rounding: A :mod:`decimal` rounding mode constant.
    """

    precision: int = 16
    rounding: str = decimal.ROUND_HALF_EVEN

    def __post_init__(self) -> None:
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise ValueError(f"precision must be an int, got {self.precision!r}")
        if self.precision < 1:
            raise ValueError("precision must be >= 1")
        if self.rounding not in _ROUNDING_MODES:
            raise ValueError(f"Unknown rounding mode: {self.rounding!r}")

    def context(self) -> decimal.Context:
        """Build a fresh context that raises instead of returning specials.

        Returns:
            A :class:`decimal.Context` spanning the full exponent range, with
            ``DivisionByZero``, ``InvalidOperation``, ``Overflow`` and
            ``Underflow`` trapped.
        """
        return decimal.Context(
            prec=self.precision,
            rounding=self.rounding,
            Emax=decimal.MAX_EMAX,
            Emin=decimal.MIN_EMIN,
            traps=[
                decimal.DivisionByZero,
                decimal.InvalidOperation,
                decimal.Overflow,
                decimal.Underflow,
            ],
        )

    def divide(self, numerator: decimal.Decimal, denominator: decimal.Decimal) -> decimal.Decimal:
        """Divide two decimals under this policy.

        Raises:
            decimal.DivisionByZero: If *denominator* is zero, including the
                ``0 / 0`` case that :mod:`decimal` would otherwise report as
                ``InvalidOperation``.
        """
        if denominator.is_zero():
            raise decimal.DivisionByZero(f"cannot divide {numerator} by zero")
        return self.context().divide(numerator, denominator)


def exact_context() -> decimal.Context:
    """Context for addition and subtraction that never rounds.

    Returns:
        A :class:`decimal.Context` at maximum precision with ``Inexact``
        trapped, independent of the caller's ambient context.
    """
    return decimal.Context(
        prec=decimal.MAX_PREC,
        Emax=decimal.MAX_EMAX,
        Emin=decimal.MIN_EMIN,
        traps=[decimal.InvalidOperation, decimal.Inexact],
    )


# IEEE 754 decimal64: 16 digits, half-even.
DECIMAL64 = DecimalPolicy()
