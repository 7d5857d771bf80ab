"""
Curve bootstrapping engine.

Implements the sequential par-swap bootstrap:
1. Sort quotes by maturity (stable, so input order breaks ties)
2. For each quote, discount the known coupons on the curve built so far
3. Solve the single remaining discount factor in closed form
4. Convert it to a continuously compounded zero rate and add the pillar

Par swap identity for a quote (T, S) on schedule t_1 < ... < t_n = T:

    1 - DF(T) = S * sum(tau_i * DF(t_i))
    DF(T) = (1 - S * sum_{i<n}(tau_i * DF(t_i))) / (1 + S * tau_n)

Coupon dates between the previous pillar and T are discounted by
interpolating towards the new pillar, so they depend on the unknown. In
that case the closed form only gives the starting guess: the pillar zero
rate is then solved with brentq on the par NPV of a trial curve holding
the tentative pillar, so every input swap re-prices to zero on the
finished curve.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple, Union

from scipy.optimize import brentq

from ..conventions import SwapConventions
from ..errors import BootstrapConvergenceError, NonPositiveDiscountFactor
from .curve import Curve
from .instruments import Deposit, SwapQuote


logger = logging.getLogger(__name__)


@dataclass
class BootstrapConfig:
    """
    Configuration for the bootstrap process.

    Attributes:
        self_consistent: Re-solve pillars whose coupons interpolate towards
            the new pillar (False gives the one-pass closed form)
        max_iterations: Root-finder iteration cap per pillar
        tolerance: Absolute tolerance on the pillar zero rate
        verify: Reprice every quote after calibration in bootstrap()
        repricing_tolerance: Maximum allowed |fair rate - quote|
    """
    self_consistent: bool = True
    max_iterations: int = 100
    tolerance: float = 1e-14
    verify: bool = True
    repricing_tolerance: float = 1e-9


@dataclass
class BootstrapResult:
    """Result of curve bootstrap."""
    curve: Curve
    repricing_errors: Dict[float, float] = field(default_factory=dict)
    success: bool = True
    message: str = "Bootstrap successful"

    @property
    def max_error(self) -> float:
        if not self.repricing_errors:
            return 0.0
        return max(abs(e) for e in self.repricing_errors.values())


class SwapCurveBootstrapper:
    """
    Bootstrap a zero curve from par swap quotes.

    The bootstrapper never mutates the curve it is given: calibrate()
    works on a copy and returns it.

    Attributes:
        quotes: Quotes in calibration order (ascending maturity)
        conventions: Fixed-leg conventions shared with the pricer
        config: Bootstrap configuration
    """

    def __init__(
        self,
        quotes: Sequence[SwapQuote],
        conventions: Optional[SwapConventions] = None,
        config: Optional[BootstrapConfig] = None
    ):
        self.quotes: List[SwapQuote] = sorted(quotes, key=lambda q: q.maturity)
        self.conventions = conventions or SwapConventions()
        self.config = config or BootstrapConfig()

    def calibrate(self, seed_curve: Optional[Curve] = None) -> Curve:
        """
        Calibrate one pillar per quote on top of a seed curve.

        Args:
            seed_curve: Curve holding pillars known beforehand (may be empty)

        Returns:
            New curve with the seed pillars plus one pillar per quote

        Raises:
            NonPositiveDiscountFactor: If a quote implies DF(T) <= 0
            BootstrapConvergenceError: If a self-consistent solve fails
        """
        curve = seed_curve.copy() if seed_curve is not None else Curve()
        solved = set()

        for quote in self.quotes:
            if curve.contains(quote.maturity):
                if quote.maturity in solved:
                    logger.warning(
                        "Duplicate quote at %gY (rate %.6f) ignored", quote.maturity, quote.rate
                    )
                else:
                    logger.debug("Pillar %gY already on curve, skipping", quote.maturity)
                continue

            zero_rate = self._solve_pillar(curve, quote)
            curve.add_node(quote.maturity, zero_rate)
            solved.add(quote.maturity)

            logger.info(
                "Calibrated %gY swap: zero rate %.6f%%", quote.maturity, zero_rate * 100
            )

        return curve

    def bootstrap(self, seed_curve: Optional[Curve] = None) -> BootstrapResult:
        """
        Calibrate and, when configured, verify repricing.

        Calibration failures are reported in the result instead of raised.
        """
        try:
            curve = self.calibrate(seed_curve)
        except (NonPositiveDiscountFactor, BootstrapConvergenceError) as e:
            return BootstrapResult(
                curve=seed_curve.copy() if seed_curve is not None else Curve(),
                success=False,
                message=f"Bootstrap failed: {e}"
            )

        repricing_errors = {}
        if self.config.verify:
            repricing_errors = self._verify_repricing(curve)

        result = BootstrapResult(curve=curve, repricing_errors=repricing_errors)
        if result.max_error > self.config.repricing_tolerance:
            result.success = False
            result.message = (
                f"Repricing error {result.max_error:.2e} exceeds tolerance "
                f"{self.config.repricing_tolerance:.2e}"
            )
        return result

    def _solve_pillar(self, curve: Curve, quote: SwapQuote) -> float:
        """Zero rate at quote.maturity that prices the swap at par."""
        schedule = self.conventions.schedule(quote.maturity)
        coupons = schedule[:-1]
        last_tau = schedule[-1][1]

        zero_rate = self._closed_form(curve, quote, coupons, last_tau)

        if not self.config.self_consistent or not _depends_on_pillar(curve, quote.maturity, coupons):
            return zero_rate

        trial = curve.copy()

        def par_npv(r):
            trial.add_node(quote.maturity, r)
            fixed = sum(tau * trial.discount_factor(t) for t, tau in schedule)
            return 1.0 - trial.discount_factor(quote.maturity) - quote.rate * fixed

        lower, upper = _bracket(par_npv, zero_rate)
        if lower is None:
            raise BootstrapConvergenceError(quote.maturity, self.config.max_iterations)

        try:
            solution = brentq(
                par_npv,
                lower,
                upper,
                xtol=self.config.tolerance,
                maxiter=self.config.max_iterations,
            )
        except RuntimeError as e:
            raise BootstrapConvergenceError(quote.maturity, self.config.max_iterations) from e

        logger.debug(
            "Pillar %gY refined from %.10f to %.10f", quote.maturity, zero_rate, solution
        )
        return float(solution)

    @staticmethod
    def _closed_form(
        curve: Curve,
        quote: SwapQuote,
        coupons: List[Tuple[float, float]],
        last_tau: float
    ) -> float:
        """One-pass solve of DF(T) given the coupon discount factors on `curve`."""
        S = quote.rate
        sum_coupons = sum(S * tau * curve.discount_factor(t) for t, tau in coupons)

        df_final = (1.0 - sum_coupons) / (1.0 + last_tau * S)
        if not df_final > 0:
            raise NonPositiveDiscountFactor(quote.maturity, S, df_final)

        return -math.log(df_final) / quote.maturity

    def _verify_repricing(self, curve: Curve) -> Dict[float, float]:
        """
        Verify that quotes reprice to their par rates.

        Returns dict of {maturity: error} where error = fair rate - quote.
        """
        from ..pricers.swaps import SwapPricer

        pricer = SwapPricer(curve, self.conventions)
        errors = {}
        for quote in self.quotes:
            errors[quote.maturity] = pricer.fair_rate(quote.maturity) - quote.rate
        return errors


def _bracket(func, guess: float, width: float = 0.01, max_expansions: int = 10):
    """
    Widen [guess - width, guess + width] until func changes sign.

    Returns (None, None) when no sign change is found, including when a
    trial rate overflows the discount factor.
    """
    lower, upper = guess - width, guess + width
    try:
        f_lower, f_upper = func(lower), func(upper)
        for _ in range(max_expansions):
            if f_lower * f_upper <= 0:
                return lower, upper
            width *= 2.0
            if abs(f_lower) < abs(f_upper):
                lower = guess - width
                f_lower = func(lower)
            else:
                upper = guess + width
                f_upper = func(upper)
    except OverflowError:
        pass

    return None, None


def _depends_on_pillar(
    curve: Curve,
    maturity: float,
    coupons: List[Tuple[float, float]]
) -> bool:
    """Whether any coupon date is discounted off a pillar at `maturity`."""
    if not coupons:
        return False
    times = curve.get_node_times()
    below = times[times < maturity]
    if below.size == 0:
        return True
    return any(t > below[-1] for t, _ in coupons)


def bootstrap_from_quotes(
    quotes,
    seed: Optional[Union[Curve, Deposit]] = None,
    conventions: Optional[SwapConventions] = None,
    config: Optional[BootstrapConfig] = None
) -> Curve:
    """
    Convenience function to bootstrap a curve from raw quotes.

    Args:
        quotes: SwapQuotes, (maturity, rate) pairs, dicts with
            maturity/rate keys, or a DataFrame with Maturity/SwapRate columns
        seed: Seed curve, or a Deposit whose implied zero rate seeds it
        conventions: Fixed-leg conventions
        config: Bootstrap configuration

    Returns:
        Bootstrapped curve

    Example:
        >>> curve = bootstrap_from_quotes(
        ...     [(1.0, 0.015), (2.0, 0.019)], seed=Deposit(0.5, 0.01)
        ... )
    """
    from ..market_data import coerce_quotes, seed_curve

    if isinstance(seed, Deposit):
        seed = seed_curve(seed)

    bootstrapper = SwapCurveBootstrapper(coerce_quotes(quotes), conventions, config)
    result = bootstrapper.bootstrap(seed)

    if not result.success:
        raise RuntimeError(f"Bootstrap failed: {result.message}")

    return result.curve


__all__ = [
    "SwapCurveBootstrapper",
    "BootstrapConfig",
    "BootstrapResult",
    "bootstrap_from_quotes",
]
