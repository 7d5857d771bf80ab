"""
Zero-coupon curve representation.

The Curve class provides:
- Zero rate z(t), continuously compounded
- Discount factor P(0,t) = exp(-z(t) * t)
- Ordered pillar enumeration for export and calibration checks

Pillars are (time, zero_rate) pairs keyed by year fraction. Queries
between pillars interpolate linearly in zero rate; queries outside the
pillar range extrapolate flat. An empty curve has zero rate 0.0 and
discount factor 1.0 everywhere.
"""

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np
import pandas as pd

from ..errors import InvalidMaturity
from .interpolation import Interpolator, create_interpolator


# Times closer than this address the same pillar
NODE_TOLERANCE = 1e-12


@dataclass(frozen=True)
class CurveNode:
    """A single pillar on the curve."""
    time: float  # Year fraction
    zero_rate: float  # Continuously compounded

    @property
    def discount_factor(self) -> float:
        return math.exp(-self.zero_rate * self.time)

    @classmethod
    def from_discount_factor(cls, time: float, df: float) -> "CurveNode":
        """Create node from a positive discount factor."""
        if df <= 0:
            raise ValueError(f"Invalid discount factor: {df}")
        return cls(time=time, zero_rate=-math.log(df) / time)


def _check_time(time: float) -> None:
    if not time > 0:
        raise InvalidMaturity(time)


class Curve:
    """
    Zero curve with linear interpolation on zero rates.

    Attributes:
        interpolation_method: Name of interpolation method

    Conventions:
        - Zero rates are continuously compounded
        - Times are year fractions
        - Pillars are kept in strictly increasing time order
    """

    def __init__(self, interpolation_method: str = "linear"):
        self.interpolation_method = interpolation_method

        self._nodes: List[CurveNode] = []
        self._interpolator: Optional[Interpolator] = None
        self._is_fitted = False

    @classmethod
    def from_pillars(
        cls,
        pillars: Iterable[Tuple[float, float]],
        interpolation_method: str = "linear"
    ) -> "Curve":
        """Build a curve from (time, zero_rate) pairs."""
        curve = cls(interpolation_method=interpolation_method)
        for time, rate in pillars:
            curve.add_node(time, rate)
        return curve

    def add_node(self, time: float, zero_rate: float) -> None:
        """
        Insert a pillar, overwriting any pillar already at `time`.

        Args:
            time: Year fraction (must be positive)
            zero_rate: Continuously compounded zero rate (any sign)

        Raises:
            InvalidMaturity: If time is not positive
        """
        _check_time(time)
        node = CurveNode(time=float(time), zero_rate=float(zero_rate))

        # Insert in sorted order by time
        idx = 0
        for i, n in enumerate(self._nodes):
            if abs(n.time - time) < NODE_TOLERANCE:
                self._nodes[i] = node
                self._is_fitted = False
                return
            if n.time > time:
                break
            idx = i + 1

        self._nodes.insert(idx, node)
        self._is_fitted = False

    def add_node_from_discount_factor(self, time: float, discount_factor: float) -> None:
        """Insert a pillar given its discount factor."""
        _check_time(time)
        node = CurveNode.from_discount_factor(time, discount_factor)
        self.add_node(node.time, node.zero_rate)

    def build(self) -> None:
        """Fit the interpolator to the current pillars."""
        times = self.get_node_times()
        rates = self.get_node_rates()

        self._interpolator = create_interpolator(self.interpolation_method)
        self._interpolator.fit(times, rates)
        self._is_fitted = True

    def _ensure_fitted(self) -> None:
        if not self._is_fitted or self._interpolator is None:
            self.build()

    def zero_rate(self, t: float) -> float:
        """
        Get zero rate z(t).

        Args:
            t: Year fraction (non-negative)

        Returns:
            Continuously compounded zero rate; 0.0 on an empty curve
        """
        if not t >= 0:
            raise InvalidMaturity(t, f"Query time must be non-negative, got {t!r}")
        if not self._nodes:
            return 0.0

        self._ensure_fitted()
        return self._interpolator.interpolate(t)

    def discount_factor(self, t: float) -> float:
        """Get discount factor P(0,t) = exp(-z(t) * t)."""
        return math.exp(-self.zero_rate(t) * t)

    def max_maturity(self) -> float:
        """Largest pillar time, or 0.0 for an empty curve."""
        return self._nodes[-1].time if self._nodes else 0.0

    def contains(self, time: float) -> bool:
        """Whether a pillar exists at `time`."""
        return any(abs(n.time - time) < NODE_TOLERANCE for n in self._nodes)

    def __contains__(self, time: float) -> bool:
        return self.contains(time)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Tuple[float, float]]:
        return iter(self.nodes())

    def nodes(self) -> List[Tuple[float, float]]:
        """
        Get all pillars.

        Returns:
            List of (time, zero_rate) tuples in ascending time
        """
        return [(n.time, n.zero_rate) for n in self._nodes]

    def get_node_times(self) -> np.ndarray:
        """Get array of pillar times."""
        return np.array([n.time for n in self._nodes])

    def get_node_rates(self) -> np.ndarray:
        """Get array of pillar zero rates."""
        return np.array([n.zero_rate for n in self._nodes])

    def get_node_dfs(self) -> np.ndarray:
        """Get array of pillar discount factors."""
        return np.array([n.discount_factor for n in self._nodes])

    def to_frame(self) -> pd.DataFrame:
        """Pillars as a DataFrame with Time, ZeroRate, DiscountFactor columns."""
        return pd.DataFrame({
            "Time": self.get_node_times(),
            "ZeroRate": self.get_node_rates(),
            "DiscountFactor": self.get_node_dfs(),
        }, columns=["Time", "ZeroRate", "DiscountFactor"])

    def copy(self) -> "Curve":
        """Create an independent copy of the curve."""
        new_curve = Curve(interpolation_method=self.interpolation_method)
        new_curve._nodes = list(self._nodes)
        return new_curve

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Curve):
            return NotImplemented
        return self.nodes() == other.nodes()

    def __repr__(self) -> str:
        return (f"Curve(nodes={len(self._nodes)}, max_maturity={self.max_maturity()}, "
                f"method={self.interpolation_method})")


def create_flat_curve(
    rate: float,
    max_tenor_years: float = 30.0,
    interpolation_method: str = "linear"
) -> Curve:
    """
    Create a flat zero curve.

    Args:
        rate: Flat continuously compounded rate
        max_tenor_years: Maximum tenor in years

    Returns:
        Flat curve
    """
    curve = Curve(interpolation_method=interpolation_method)

    for t in [0.25, 0.5, 1, 2, 5, 10, 20, max_tenor_years]:
        if t <= max_tenor_years:
            curve.add_node(t, rate)

    return curve


__all__ = [
    "Curve",
    "CurveNode",
    "NODE_TOLERANCE",
    "create_flat_curve",
]
