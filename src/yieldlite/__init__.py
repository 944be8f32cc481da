"""yieldlite: decimal-exact bond yield approximations.

Provides the closed-form yield-to-maturity approximation in decimal
arithmetic, monetary amounts, an exact Brent-method yield solver for
comparison, batch evaluation over pandas frames, and price/yield charts.
"""

__version__ = "0.1.0"

from .batch import yield_table, yield_to_maturity_frame
from .instruments.bond_pricing import (
    approximation_error,
    bond_price,
    bond_yield_to_maturity,
    current_yield,
)
from .instruments.yield_to_maturity import yield_to_maturity
from .money import MonetaryAmount, to_decimal
from .precision import DECIMAL64, DecimalPolicy

__all__ = [
    # Core
    "yield_to_maturity",
    # Money and precision
    "MonetaryAmount",
    "to_decimal",
    "DecimalPolicy",
    "DECIMAL64",
    # Instruments
    "bond_price",
    "bond_yield_to_maturity",
    "current_yield",
    "approximation_error",
    # Batch
    "yield_to_maturity_frame",
    "yield_table",
]
