"""
Pricers package - swap pricing off a calibrated zero curve.
"""

from .swaps import (
    SwapPricer,
    SwapLegCashflow,
    annuity,
    fair_rate,
    price_swap,
)

__all__ = [
    "SwapPricer",
    "SwapLegCashflow",
    "annuity",
    "fair_rate",
    "price_swap",
]
