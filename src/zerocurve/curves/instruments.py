"""
Curve instruments for bootstrapping.

Defines the market quotes used to build the zero curve:
- Deposit: Short-dated simple-interest deposit, used to seed the curve
- SwapQuote: Par swap rate for a maturity in years

Both are immutable values identified only by their fields.
"""

import math
from dataclasses import dataclass

from ..errors import InvalidMaturity


@dataclass(frozen=True)
class SwapQuote:
    """
    Par swap quote.

    Attributes:
        maturity: Swap maturity in years (positive)
        rate: Par swap rate in decimal (0.019 = 1.9%)
    """
    maturity: float
    rate: float

    def __post_init__(self):
        if not self.maturity > 0:
            raise InvalidMaturity(self.maturity)

    @property
    def tenor(self) -> str:
        """Short label such as "2Y" or "4.7Y"."""
        return f"{self.maturity:g}Y"


@dataclass(frozen=True)
class Deposit:
    """
    Money market deposit (zero-coupon).

    The depositor receives (1 + R * tau) at maturity, so
    DF(T) = 1 / (1 + R * tau) with tau = T.
    """
    maturity: float
    rate: float

    def __post_init__(self):
        if not self.maturity > 0:
            raise InvalidMaturity(self.maturity)

    def implied_discount_factor(self) -> float:
        """DF implied by the simple deposit rate."""
        return 1.0 / (1.0 + self.rate * self.maturity)

    def implied_zero_rate(self) -> float:
        """Continuously compounded zero rate r = -ln(DF) / T."""
        df = self.implied_discount_factor()
        if df <= 0:
            raise ValueError(f"Deposit rate {self.rate} implies non-positive discount factor")
        return -math.log(df) / self.maturity


__all__ = [
    "SwapQuote",
    "Deposit",
]
