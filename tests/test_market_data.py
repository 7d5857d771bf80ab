"""
Unit tests for quote loading and curve seeding.
"""

import dataclasses
import math

import pandas as pd
import pytest

from zerocurve.curves import Deposit, SwapQuote
from zerocurve.errors import InvalidMaturity
from zerocurve.market_data import (
    DEFAULT_DEPOSIT,
    DEFAULT_SWAP_QUOTES,
    coerce_quotes,
    load_quotes,
    quotes_from_frame,
    quotes_from_records,
    seed_curve,
    seed_summary,
)


class TestQuotes:
    """Tests for quote value objects."""

    def test_swap_quote_immutable(self):
        q = SwapQuote(2.0, 0.019)
        with pytest.raises(dataclasses.FrozenInstanceError):
            q.rate = 0.02

    def test_swap_quote_equality(self):
        assert SwapQuote(2.0, 0.019) == SwapQuote(2.0, 0.019)

    @pytest.mark.parametrize("maturity", [0.0, -2.0])
    def test_swap_quote_invalid_maturity(self, maturity):
        with pytest.raises(InvalidMaturity):
            SwapQuote(maturity, 0.019)

    def test_tenor_label(self):
        assert SwapQuote(2.0, 0.019).tenor == "2Y"
        assert SwapQuote(4.7, 0.03).tenor == "4.7Y"

    def test_deposit_implied_values(self):
        dep = Deposit(0.5, 0.01)

        assert abs(dep.implied_discount_factor() - 1.0 / 1.005) < 1e-15
        assert abs(dep.implied_zero_rate() - 2.0 * math.log(1.005)) < 1e-15

    def test_deposit_invalid_maturity(self):
        with pytest.raises(InvalidMaturity):
            Deposit(0.0, 0.01)


class TestLoading:
    """Tests for CSV and record loading."""

    def test_load_quotes(self, tmp_path):
        path = tmp_path / "quotes.csv"
        path.write_text(
            "# market close\n"
            "Maturity,SwapRate\n"
            "1.0,0.015\n"
            "2.0,0.019\n"
            "3.0,0.024\n"
        )

        quotes = load_quotes(path)

        assert quotes == [SwapQuote(1.0, 0.015), SwapQuote(2.0, 0.019), SwapQuote(3.0, 0.024)]

    def test_load_quotes_keeps_file_order(self, tmp_path):
        path = tmp_path / "quotes.csv"
        path.write_text("Maturity,SwapRate\n5.0,0.0315\n1.0,0.015\n")

        assert [q.maturity for q in load_quotes(path)] == [5.0, 1.0]

    def test_missing_column(self, tmp_path):
        path = tmp_path / "quotes.csv"
        path.write_text("Tenor,Rate\n1.0,0.015\n")

        with pytest.raises(ValueError, match="SwapRate"):
            load_quotes(path)

    def test_quotes_from_frame(self):
        df = pd.DataFrame({"Maturity": [1.0, 2.0], "SwapRate": [0.015, 0.019]})
        assert quotes_from_frame(df) == [SwapQuote(1.0, 0.015), SwapQuote(2.0, 0.019)]

    def test_quotes_from_records(self):
        records = [
            {"maturity": 1.0, "rate": 0.015},
            {"Maturity": 2.0, "SwapRate": 0.019},
        ]
        assert quotes_from_records(records) == [SwapQuote(1.0, 0.015), SwapQuote(2.0, 0.019)]

    def test_record_missing_key(self):
        with pytest.raises(ValueError):
            quotes_from_records([{"maturity": 1.0}])

    def test_coerce_mixed(self):
        quotes = coerce_quotes([SwapQuote(1.0, 0.015), (2.0, 0.019), {"maturity": 3.0, "rate": 0.024}])
        assert [q.maturity for q in quotes] == [1.0, 2.0, 3.0]


class TestSeeding:
    """Tests for curve seeding and defaults."""

    def test_default_market_set(self):
        assert DEFAULT_DEPOSIT == Deposit(0.5, 0.01)
        assert [q.maturity for q in DEFAULT_SWAP_QUOTES] == [0.5, 1.0, 2.0, 3.0, 5.0, 6.0]

    def test_seed_curve(self):
        curve = seed_curve(Deposit(0.5, 0.01))

        assert len(curve) == 1
        assert curve.contains(0.5)
        assert abs(curve.discount_factor(0.5) - 1.0 / 1.005) < 1e-15

    def test_seed_summary(self):
        summary = seed_summary(DEFAULT_DEPOSIT)

        assert summary["deposit_rate"] == 0.01
        assert summary["discount_factor"] == DEFAULT_DEPOSIT.implied_discount_factor()
        assert summary["zero_rate"] == DEFAULT_DEPOSIT.implied_zero_rate()
