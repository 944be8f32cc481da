"""Bond yield and pricing instruments."""

from .bond_pricing import approximation_error, bond_price, bond_yield_to_maturity, current_yield
from .yield_to_maturity import yield_to_maturity

__all__ = [
    "yield_to_maturity",
    "bond_price",
    "bond_yield_to_maturity",
    "current_yield",
    "approximation_error",
]
