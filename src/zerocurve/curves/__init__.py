"""
Curves package - zero curve construction.

Provides:
- Curve: Pillars with zero rates, discount factors and interpolation
- SwapCurveBootstrapper: Bootstrap pillars from par swap quotes
- SwapQuote, Deposit: Market quotes used for calibration
"""

from .curve import Curve, CurveNode, create_flat_curve
from .bootstrap import (
    SwapCurveBootstrapper,
    BootstrapConfig,
    BootstrapResult,
    bootstrap_from_quotes,
)
from .interpolation import Interpolator, LinearInterpolator
from .instruments import SwapQuote, Deposit

__all__ = [
    "Curve",
    "CurveNode",
    "create_flat_curve",
    "SwapCurveBootstrapper",
    "BootstrapConfig",
    "BootstrapResult",
    "bootstrap_from_quotes",
    "Interpolator",
    "LinearInterpolator",
    "SwapQuote",
    "Deposit",
]
