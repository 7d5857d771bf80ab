"""
Unit tests for conventions module.
"""

import pytest

from zerocurve.conventions import (
    PaymentFrequency,
    SwapConventions,
    fixed_leg_schedule,
    stub_period,
)
from zerocurve.errors import InvalidMaturity


class TestSchedule:
    """Tests for the shared fixed leg schedule."""

    def test_on_grid_maturity_uses_full_final_period(self):
        """T on the tau grid pays a full tau at maturity, never zero."""
        schedule = fixed_leg_schedule(2.0, 0.5)

        assert schedule == [(0.5, 0.5), (1.0, 0.5), (1.5, 0.5), (2.0, 0.5)]
        assert stub_period(2.0, 0.5) == 0.5

    def test_one_year_semi_annual(self):
        schedule = fixed_leg_schedule(1.0, 0.5)
        assert schedule == [(0.5, 0.5), (1.0, 0.5)]

    def test_off_grid_maturity_has_stub(self):
        """4.7Y semi-annual: nine full periods then a 0.2Y stub."""
        schedule = fixed_leg_schedule(4.7, 0.5)

        assert len(schedule) == 10
        assert [t for t, _ in schedule[:-1]] == [0.5 * i for i in range(1, 10)]
        assert schedule[-1][0] == 4.7
        assert abs(schedule[-1][1] - 0.2) < 1e-12
        assert abs(stub_period(4.7, 0.5) - 0.2) < 1e-12

    def test_maturity_shorter_than_tenor(self):
        assert fixed_leg_schedule(0.3, 0.5) == [(0.3, 0.3)]

    def test_single_period(self):
        assert fixed_leg_schedule(0.5, 0.5) == [(0.5, 0.5)]

    def test_floating_point_grid(self):
        """0.3 / 0.1 is not exactly 3 in floating point but is on the grid."""
        schedule = fixed_leg_schedule(0.3, 0.1)

        assert len(schedule) == 3
        assert schedule[-1] == (0.3, 0.1)

    def test_accruals_sum_to_maturity(self):
        for maturity in [0.25, 1.0, 2.75, 4.7, 5.5, 10.0]:
            total = sum(tau for _, tau in fixed_leg_schedule(maturity, 0.5))
            assert abs(total - maturity) < 1e-12

    def test_payment_times_strictly_increasing(self):
        times = [t for t, _ in fixed_leg_schedule(7.3, 0.25)]
        assert all(b > a for a, b in zip(times, times[1:]))

    @pytest.mark.parametrize("maturity", [0.0, -1.0, float("nan")])
    def test_invalid_maturity(self, maturity):
        with pytest.raises(InvalidMaturity):
            fixed_leg_schedule(maturity, 0.5)

    @pytest.mark.parametrize("tau", [0.0, -0.5])
    def test_invalid_tenor(self, tau):
        with pytest.raises(ValueError):
            fixed_leg_schedule(1.0, tau)


class TestSwapConventions:
    """Tests for SwapConventions."""

    def test_defaults(self):
        conv = SwapConventions()

        assert conv.fixed_tau == 0.5
        assert conv.annuity_epsilon == 1e-8
        assert conv.payment_frequency == 2.0

    def test_named_constructors(self):
        assert SwapConventions.annual().fixed_tau == 1.0
        assert SwapConventions.semi_annual().fixed_tau == 0.5
        assert SwapConventions.quarterly().fixed_tau == 0.25

    def test_from_frequency(self):
        assert SwapConventions.from_frequency(4).fixed_tau == 0.25
        assert SwapConventions.from_frequency("SEMI").fixed_tau == 0.5
        assert SwapConventions.from_frequency(PaymentFrequency.ANNUAL).fixed_tau == 1.0

    def test_schedule_uses_tenor(self):
        conv = SwapConventions.annual()
        assert conv.schedule(3.0) == [(1.0, 1.0), (2.0, 1.0), (3.0, 1.0)]

    @pytest.mark.parametrize("tau", [0.0, -0.25])
    def test_non_positive_tenor_rejected(self, tau):
        with pytest.raises(ValueError):
            SwapConventions(fixed_tau=tau)

    def test_non_positive_frequency_rejected(self):
        with pytest.raises(ValueError):
            SwapConventions.from_frequency(0)


class TestPaymentFrequency:
    """Tests for frequency parsing."""

    def test_from_string(self):
        assert PaymentFrequency.from_string("Semi-Annual") == PaymentFrequency.SEMI_ANNUAL
        assert PaymentFrequency.from_string("quarterly") == PaymentFrequency.QUARTERLY
        assert PaymentFrequency.from_string("A") == PaymentFrequency.ANNUAL

    def test_unknown(self):
        with pytest.raises(ValueError):
            PaymentFrequency.from_string("fortnightly")
