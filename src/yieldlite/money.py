"""Monetary amounts and decimal coercion."""

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Union

__all__ = [
    "MonetaryAmount",
    "Amount",
    "common_currency",
    "to_decimal",
]

logger = logging.getLogger(__name__)


def to_decimal(value: Amount) -> Decimal:
    """Convert a numeric or monetary value to :class:`~decimal.Decimal`.

    Floats go through their shortest ``repr`` so that ``0.1`` becomes
    ``Decimal("0.1")`` rather than its binary expansion.

    Args:
        value: A :class:`MonetaryAmount`, ``Decimal``, integer, real
            number (including numpy scalars) or numeric string.

    Returns:
        The numeric magnitude as a ``Decimal``.

    Raises:
        TypeError: If *value* is a ``bool`` or an unsupported type.
        ValueError: If *value* is not finite or cannot be parsed.
    """
    if isinstance(value, MonetaryAmount):
        return value.number
    if isinstance(value, bool):
        raise TypeError("bool is not a monetary value")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, numbers.Integral):
        return Decimal(int(value))
    elif isinstance(value, numbers.Real):
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"Monetary value must be finite, got {value!r}")
        return Decimal(repr(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation:
            raise ValueError(f"Cannot parse {value!r} as a decimal number") from None
    else:
        raise TypeError(f"Unsupported monetary value type: {type(value).__name__}")

    if not result.is_finite():
        raise ValueError(f"Monetary value must be finite, got {value!r}")
    return result


@dataclass(frozen=True)
class MonetaryAmount:
    """A decimal number paired with an ISO 4217 currency code.

    Attributes:
        number: Numeric magnitude, coerced to ``Decimal``.
        currency: Three-letter currency code, stored upper-case.
    """

    number: Decimal
    currency: str

    def __post_init__(self) -> None:
        if isinstance(self.number, MonetaryAmount):
            raise TypeError("number must be a plain numeric value")
        object.__setattr__(self, "number", to_decimal(self.number))
        code = self.currency.strip().upper() if isinstance(self.currency, str) else ""
        if len(code) != 3 or not code.isalpha():
            raise ValueError(f"Invalid currency code: {self.currency!r}")
        object.__setattr__(self, "currency", code)

    @classmethod
    def of(cls, number: int | float | str | Decimal, currency: str) -> MonetaryAmount:
        """Create an amount, e.g. ``MonetaryAmount.of(920, "EUR")``."""
        return cls(number, currency)

    def __str__(self) -> str:
        return f"{self.currency} {self.number}"


Amount = Union[MonetaryAmount, Decimal, int, float, str]


def common_currency(*values: Amount) -> str | None:
    """Return the currency shared by all monetary arguments.

    Plain numbers carry no currency and are skipped.

    Args:
        *values: Amounts to inspect.

    Returns:
        The shared currency code, or ``None`` if there are no monetary
        arguments or their currencies differ.
    """
    currencies = {v.currency for v in values if isinstance(v, MonetaryAmount)}
    if len(currencies) > 1:
        logger.warning("Mixed currencies %s; amounts are used as plain numbers", sorted(currencies))
        return None
    return currencies.pop() if currencies else None
