"""
Exceptions raised by curve construction and swap pricing.

All errors derive from CurveError, itself a ValueError, so callers that
already guard numeric input with ``except ValueError`` keep working.
"""

from typing import Optional


class CurveError(ValueError):
    """Base class for zero-curve errors."""


class InvalidMaturity(CurveError):
    """A maturity or query time outside the curve's domain."""

    def __init__(self, maturity: float, message: Optional[str] = None):
        self.maturity = maturity
        super().__init__(message or f"Invalid maturity: {maturity!r} (must be positive)")


class NonPositiveDiscountFactor(CurveError):
    """
    Bootstrapping produced DF(T) <= 0.

    The quote set is arbitrage-inconsistent or malformed; no zero rate
    exists for this pillar.
    """

    def __init__(self, maturity: float, rate: float, discount_factor: float):
        self.maturity = maturity
        self.rate = rate
        self.discount_factor = discount_factor
        super().__init__(
            f"Non-positive discount factor {discount_factor:.10g} at {maturity}Y "
            f"(swap rate {rate:.6%})"
        )


class DegenerateAnnuity(CurveError):
    """Fixed-leg annuity below the numerical threshold."""

    def __init__(self, maturity: float, annuity: float):
        self.maturity = maturity
        self.annuity = annuity
        super().__init__(f"Degenerate annuity {annuity:.3e} at {maturity}Y")


class BootstrapConvergenceError(CurveError):
    """Self-consistent pillar solve did not find a root."""

    def __init__(self, maturity: float, iterations: int):
        self.maturity = maturity
        self.iterations = iterations
        super().__init__(
            f"Pillar at {maturity}Y did not converge after {iterations} iterations"
        )


__all__ = [
    "CurveError",
    "InvalidMaturity",
    "NonPositiveDiscountFactor",
    "DegenerateAnnuity",
    "BootstrapConvergenceError",
]
