"""
ZeroCurve: Swap curve bootstrapping and pricing

A small library for:
- Bootstrapping a continuously compounded zero curve from par swap quotes
- Interpolating zero rates and discount factors at any maturity
- Pricing swaps (annuity, fair rate, NPV) off the calibrated curve
- Exporting quote and curve tables

Scope: single curve, fixed-tenor year fractions, no risk measures.
"""

__version__ = "0.1.0"

# Conventions
from .conventions import SwapConventions, PaymentFrequency, fixed_leg_schedule, stub_period
from .errors import (
    CurveError,
    InvalidMaturity,
    NonPositiveDiscountFactor,
    DegenerateAnnuity,
    BootstrapConvergenceError,
)

# Curves
from .curves import (
    Curve,
    SwapCurveBootstrapper,
    BootstrapConfig,
    BootstrapResult,
    bootstrap_from_quotes,
    SwapQuote,
    Deposit,
)

# Pricers
from .pricers import SwapPricer, annuity, fair_rate, price_swap

# Market data
from .market_data import DEFAULT_DEPOSIT, DEFAULT_SWAP_QUOTES, load_quotes, seed_curve

# Reporting
from .reporting import export_quotes, export_curve, repricing_report

__all__ = [
    # Version
    "__version__",
    # Conventions
    "SwapConventions",
    "PaymentFrequency",
    "fixed_leg_schedule",
    "stub_period",
    # Errors
    "CurveError",
    "InvalidMaturity",
    "NonPositiveDiscountFactor",
    "DegenerateAnnuity",
    "BootstrapConvergenceError",
    # Curves
    "Curve",
    "SwapCurveBootstrapper",
    "BootstrapConfig",
    "BootstrapResult",
    "bootstrap_from_quotes",
    "SwapQuote",
    "Deposit",
    # Pricers
    "SwapPricer",
    "annuity",
    "fair_rate",
    "price_swap",
    # Market data
    "DEFAULT_DEPOSIT",
    "DEFAULT_SWAP_QUOTES",
    "load_quotes",
    "seed_curve",
    # Reporting
    "export_quotes",
    "export_curve",
    "repricing_report",
]
