"""
Interest rate swap pricing engine.

Prices vanilla fixed-float swaps off a single calibrated zero curve,
with unit notional by default and maturities in year fractions.

Pricing formula (single-curve):
    PV_swap = PV_float - PV_fixed

    PV_fixed = K * Annuity,  Annuity = sum(tau_i * DF(t_i))
    PV_float = 1 - DF(T_n)  (par at inception)

The fixed-leg periods come from conventions.fixed_leg_schedule, the same
schedule the bootstrapper solves against, so every calibrated quote
reprices to zero NPV.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..conventions import SwapConventions
from ..curves.curve import Curve
from ..curves.instruments import SwapQuote
from ..errors import DegenerateAnnuity


logger = logging.getLogger(__name__)


@dataclass
class SwapLegCashflow:
    """A single fixed leg cashflow."""
    time: float
    year_fraction: float
    discount_factor: float
    amount: float

    @property
    def present_value(self) -> float:
        return self.amount * self.discount_factor


class SwapPricer:
    """
    Swap pricing engine over a finished curve.

    The pricer only reads the curve.

    Attributes:
        curve: Calibrated zero curve used for discounting and projection
        conventions: Fixed-leg conventions (must match calibration)
    """

    def __init__(self, curve: Curve, conventions: Optional[SwapConventions] = None):
        self.curve = curve
        self.conventions = conventions or SwapConventions()

    def cashflows(
        self,
        maturity: float,
        fixed_rate: float,
        notional: float = 1.0
    ) -> List[SwapLegCashflow]:
        """
        Generate fixed leg cashflows.

        Args:
            maturity: Swap maturity in years
            fixed_rate: Fixed rate (decimal)
            notional: Notional amount

        Returns:
            List of SwapLegCashflow, the last one paid at maturity
        """
        if maturity == 0:
            return []
        return [
            SwapLegCashflow(
                time=t,
                year_fraction=tau,
                discount_factor=self.curve.discount_factor(t),
                amount=notional * fixed_rate * tau,
            )
            for t, tau in self.conventions.schedule(maturity)
        ]

    def annuity(self, maturity: float) -> float:
        """
        PV of the fixed leg per unit rate: sum(tau_i * DF(t_i)).

        A zero maturity has no coupons and an annuity of 0.0.
        """
        if maturity == 0:
            return 0.0
        return sum(
            tau * self.curve.discount_factor(t)
            for t, tau in self.conventions.schedule(maturity)
        )

    def floating_leg_pv(self, maturity: float) -> float:
        """PV of the floating leg per unit notional: 1 - DF(T)."""
        return 1.0 - self.curve.discount_factor(maturity)

    def fair_rate(self, maturity: float, strict: bool = False) -> float:
        """
        Calculate par swap rate (rate at which PV = 0).

        For single-curve: R = (1 - DF(T)) / Annuity

        Args:
            maturity: Swap maturity in years
            strict: Raise DegenerateAnnuity instead of returning 0.0

        Returns:
            Par swap rate (decimal), 0.0 for a degenerate annuity
        """
        A = self.annuity(maturity)
        if A < self.conventions.annuity_epsilon:
            if strict:
                raise DegenerateAnnuity(maturity, A)
            logger.warning("Degenerate annuity %.3e at %gY, fair rate set to 0", A, maturity)
            return 0.0

        return self.floating_leg_pv(maturity) / A

    def price_swap(
        self,
        maturity: float,
        fixed_rate: float,
        notional: float = 1.0,
        pay_receive: str = "PAY"
    ) -> float:
        """
        Calculate swap NPV.

        Args:
            maturity: Swap maturity in years
            fixed_rate: Fixed rate (decimal)
            notional: Notional amount
            pay_receive: "PAY" fixed (receive floating) or "RECEIVE" fixed

        Returns:
            Swap NPV for the given direction
        """
        direction = pay_receive.upper()
        if direction not in ("PAY", "RECEIVE"):
            raise ValueError(f"pay_receive must be PAY or RECEIVE, got {pay_receive}")

        pv_fixed = fixed_rate * self.annuity(maturity)
        pv_float = self.floating_leg_pv(maturity)

        npv = notional * (pv_float - pv_fixed)
        return npv if direction == "PAY" else -npv

    def interpolate_swap_rates(self, maturities: Sequence[float]) -> List[SwapQuote]:
        """Fair swap rates at arbitrary maturities, as quotes."""
        return [SwapQuote(m, self.fair_rate(m)) for m in maturities]


def annuity(
    curve: Curve,
    maturity: float,
    conventions: Optional[SwapConventions] = None
) -> float:
    """Fixed leg annuity of a swap maturing at `maturity`."""
    return SwapPricer(curve, conventions).annuity(maturity)


def fair_rate(
    curve: Curve,
    maturity: float,
    conventions: Optional[SwapConventions] = None
) -> float:
    """Par swap rate; 0.0 when the annuity is degenerate."""
    return SwapPricer(curve, conventions).fair_rate(maturity)


def price_swap(
    curve: Curve,
    maturity: float,
    fixed_rate: float,
    conventions: Optional[SwapConventions] = None,
    notional: float = 1.0,
    pay_receive: str = "PAY"
) -> float:
    """
    Price a vanilla swap.

    Args:
        curve: Calibrated zero curve
        maturity: Swap maturity in years
        fixed_rate: Fixed rate (decimal)
        conventions: Fixed-leg conventions
        notional: Notional amount
        pay_receive: "PAY" or "RECEIVE" fixed

    Returns:
        Swap NPV
    """
    pricer = SwapPricer(curve, conventions)
    return pricer.price_swap(maturity, fixed_rate, notional, pay_receive)


__all__ = [
    "SwapPricer",
    "SwapLegCashflow",
    "annuity",
    "fair_rate",
    "price_swap",
]
