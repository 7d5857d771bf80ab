"""
Interpolation of zero rates between curve pillars.

Provides:
- Interpolator: abstract base
- LinearInterpolator: linear in zero rate, flat extrapolation on both sides

Interpolators work with year fractions as x-coordinates and continuously
compounded zero rates as y-coordinates. Knot points are returned exactly.
"""

from abc import ABC, abstractmethod
from typing import Optional
import numpy as np


class Interpolator(ABC):
    """Abstract base class for curve interpolation."""

    @abstractmethod
    def fit(self, times: np.ndarray, values: np.ndarray) -> None:
        """
        Fit the interpolator to data points.

        Args:
            times: Array of year fractions (must be sorted ascending)
            values: Array of zero rates
        """
        pass

    @abstractmethod
    def interpolate(self, t: float) -> float:
        """
        Interpolate at a single point.

        Args:
            t: Year fraction

        Returns:
            Interpolated value
        """
        pass

    def __call__(self, t: float) -> float:
        """Convenience method to call interpolate."""
        return self.interpolate(t)


class LinearInterpolator(Interpolator):
    """
    Linear interpolation.

    Linear between knot points, flat beyond the first and last knot.
    A single knot gives a flat curve.
    """

    def __init__(self):
        self.times: Optional[np.ndarray] = None
        self.values: Optional[np.ndarray] = None

    def fit(self, times: np.ndarray, values: np.ndarray) -> None:
        """Fit linear interpolator."""
        if len(times) != len(values):
            raise ValueError("Times and values must have same length")
        if len(times) < 1:
            raise ValueError("Need at least 1 point for interpolation")

        idx = np.argsort(times, kind="stable")
        self.times = np.asarray(times, dtype=np.float64)[idx]
        self.values = np.asarray(values, dtype=np.float64)[idx]

    def interpolate(self, t: float) -> float:
        """Linear interpolation with flat extrapolation."""
        if self.times is None:
            raise RuntimeError("Interpolator not fitted")

        if t <= self.times[0]:
            return float(self.values[0])
        if t >= self.times[-1]:
            return float(self.values[-1])

        # Bracket t0 <= t < t1; an exact knot hit lands on t0 with w = 0
        idx = int(np.searchsorted(self.times, t, side='right')) - 1
        idx = max(0, min(idx, len(self.times) - 2))

        t0, t1 = self.times[idx], self.times[idx + 1]
        v0, v1 = self.values[idx], self.values[idx + 1]

        if t == t0:
            return float(v0)

        w = (t - t0) / (t1 - t0)
        return float(v0 + w * (v1 - v0))


def create_interpolator(method: str) -> Interpolator:
    """
    Factory function to create an interpolator by name.

    Args:
        method: "linear"

    Returns:
        Interpolator instance
    """
    method = method.lower().replace("-", "_").replace(" ", "_")

    if method in ("linear", "lin", "linear_zero"):
        return LinearInterpolator()
    raise ValueError(f"Unknown interpolation method: {method}")


__all__ = [
    "Interpolator",
    "LinearInterpolator",
    "create_interpolator",
]
