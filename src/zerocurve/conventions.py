"""
Fixed-leg conventions and the shared swap period schedule.

Times are plain year fractions: there is no calendar and no day count
beyond the fixed tenor fraction tau. The payment tenor is carried by a
single SwapConventions value which both the bootstrapper and the pricer
receive explicitly.

Schedule rule:
    Full coupon periods end at tau, 2*tau, ... strictly before the
    maturity T. The final period ends at T and accrues
    tau_last = T - floor(T / tau) * tau. When T sits on the tau grid the
    remainder would be zero, so the final period is a full tau instead.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple, Union

from .errors import InvalidMaturity


DEFAULT_FIXED_TAU = 0.5
DEFAULT_ANNUITY_EPSILON = 1e-8
DEFAULT_GRID_TOLERANCE = 1e-9


class PaymentFrequency(Enum):
    """Fixed-leg payments per year."""
    ANNUAL = 1
    SEMI_ANNUAL = 2
    QUARTERLY = 4
    MONTHLY = 12

    @classmethod
    def from_string(cls, s: str) -> "PaymentFrequency":
        """Parse a frequency name such as "SEMI" or "Quarterly"."""
        mapping = {
            "ANNUAL": cls.ANNUAL,
            "A": cls.ANNUAL,
            "SEMI": cls.SEMI_ANNUAL,
            "SEMIANNUAL": cls.SEMI_ANNUAL,
            "S": cls.SEMI_ANNUAL,
            "QUARTERLY": cls.QUARTERLY,
            "Q": cls.QUARTERLY,
            "MONTHLY": cls.MONTHLY,
            "M": cls.MONTHLY,
        }
        key = s.upper().replace(" ", "").replace("-", "").replace("_", "")
        if key in mapping:
            return mapping[key]
        raise ValueError(f"Unknown payment frequency: {s}")


@dataclass(frozen=True)
class SwapConventions:
    """
    Fixed-leg conventions shared by calibration and pricing.

    Attributes:
        fixed_tau: Coupon period length in years (0.5 = semi-annual)
        annuity_epsilon: Annuities below this are treated as degenerate
        grid_tolerance: How close T / tau must be to an integer for T to
            count as a grid date
    """
    fixed_tau: float = DEFAULT_FIXED_TAU
    annuity_epsilon: float = DEFAULT_ANNUITY_EPSILON
    grid_tolerance: float = DEFAULT_GRID_TOLERANCE

    def __post_init__(self):
        if not self.fixed_tau > 0:
            raise ValueError(f"Fixed tenor must be positive, got {self.fixed_tau}")
        if self.annuity_epsilon < 0:
            raise ValueError("Annuity epsilon must be non-negative")
        if self.grid_tolerance < 0:
            raise ValueError("Grid tolerance must be non-negative")

    @property
    def payment_frequency(self) -> float:
        """Payments per year implied by the fixed tenor."""
        return 1.0 / self.fixed_tau

    @classmethod
    def from_frequency(
        cls,
        frequency: Union[int, str, PaymentFrequency],
        **kwargs
    ) -> "SwapConventions":
        """Build conventions from a payment frequency (int, name or enum)."""
        if isinstance(frequency, str):
            frequency = PaymentFrequency.from_string(frequency)
        if isinstance(frequency, PaymentFrequency):
            frequency = frequency.value
        if frequency <= 0:
            raise ValueError(f"Payment frequency must be positive, got {frequency}")
        return cls(fixed_tau=1.0 / frequency, **kwargs)

    @classmethod
    def annual(cls) -> "SwapConventions":
        return cls(fixed_tau=1.0)

    @classmethod
    def semi_annual(cls) -> "SwapConventions":
        return cls(fixed_tau=0.5)

    @classmethod
    def quarterly(cls) -> "SwapConventions":
        return cls(fixed_tau=0.25)

    def schedule(self, maturity: float) -> List[Tuple[float, float]]:
        """Fixed-leg schedule for a swap maturing at `maturity`."""
        return fixed_leg_schedule(maturity, self.fixed_tau, self.grid_tolerance)


def _period_count(maturity: float, tau: float, grid_tolerance: float) -> Tuple[int, float]:
    """Return (number of full periods before T, final accrual)."""
    if not maturity > 0:
        raise InvalidMaturity(maturity)
    if not tau > 0:
        raise ValueError(f"Fixed tenor must be positive, got {tau}")

    n_periods = maturity / tau
    nearest = round(n_periods)

    if nearest >= 1 and abs(n_periods - nearest) <= grid_tolerance:
        # On the grid: the last full period is the final period
        return nearest - 1, tau

    n_full = math.floor(n_periods)
    return n_full, maturity - n_full * tau


def fixed_leg_schedule(
    maturity: float,
    tau: float = DEFAULT_FIXED_TAU,
    grid_tolerance: float = DEFAULT_GRID_TOLERANCE
) -> List[Tuple[float, float]]:
    """
    Generate the fixed-leg payment schedule.

    Args:
        maturity: Swap maturity T in years
        tau: Fixed coupon period length in years
        grid_tolerance: Tolerance for treating T as a multiple of tau

    Returns:
        List of (payment_time, accrual) tuples in ascending time. The last
        entry is always (T, tau_last).

    Raises:
        InvalidMaturity: If maturity is not positive
        ValueError: If tau is not positive
    """
    n_full, last_tau = _period_count(maturity, tau, grid_tolerance)

    schedule = [(i * tau, tau) for i in range(1, n_full + 1)]
    schedule.append((maturity, last_tau))
    return schedule


def stub_period(
    maturity: float,
    tau: float = DEFAULT_FIXED_TAU,
    grid_tolerance: float = DEFAULT_GRID_TOLERANCE
) -> float:
    """Accrual of the final (possibly short) period ending at `maturity`."""
    return _period_count(maturity, tau, grid_tolerance)[1]


__all__ = [
    "DEFAULT_FIXED_TAU",
    "DEFAULT_ANNUITY_EPSILON",
    "DEFAULT_GRID_TOLERANCE",
    "PaymentFrequency",
    "SwapConventions",
    "fixed_leg_schedule",
    "stub_period",
]
