"""
Market quote loading and curve seeding.

Quote files are CSV tables with a `Maturity,SwapRate` header (maturity in
years, rate in decimal); lines starting with '#' are comments.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Union

import pandas as pd

from .curves.curve import Curve
from .curves.instruments import Deposit, SwapQuote


logger = logging.getLogger(__name__)


MATURITY_COLUMN = "Maturity"
RATE_COLUMN = "SwapRate"

# 6M zero-coupon deposit used to seed the curve
DEFAULT_DEPOSIT = Deposit(maturity=0.5, rate=0.0100)

DEFAULT_SWAP_QUOTES: List[SwapQuote] = [
    SwapQuote(0.5, 0.0100),
    SwapQuote(1.0, 0.0150),
    SwapQuote(2.0, 0.0190),
    SwapQuote(3.0, 0.0240),
    SwapQuote(5.0, 0.0315),
    SwapQuote(6.0, 0.0400),
]

_MATURITY_KEYS = ("maturity", "Maturity", "tenor_years", "time", "Time")
_RATE_KEYS = ("rate", "SwapRate", "swap_rate", "quote")


def quotes_from_frame(df: pd.DataFrame) -> List[SwapQuote]:
    """Convert a Maturity/SwapRate DataFrame to quotes (row order kept)."""
    missing = [c for c in (MATURITY_COLUMN, RATE_COLUMN) if c not in df.columns]
    if missing:
        raise ValueError(f"Quote table missing columns: {', '.join(missing)}")

    return [
        SwapQuote(float(row[MATURITY_COLUMN]), float(row[RATE_COLUMN]))
        for _, row in df.iterrows()
    ]


def _lookup(record: Mapping[str, Any], keys: Iterable[str]) -> Any:
    for key in keys:
        if key in record:
            return record[key]
    raise ValueError(f"Quote record {dict(record)} has none of the keys {tuple(keys)}")


def quotes_from_records(records: Iterable[Mapping[str, Any]]) -> List[SwapQuote]:
    """
    Convert dict records to quotes.

    Example record format:
        {"maturity": 2.0, "rate": 0.019}
        {"Maturity": 2.0, "SwapRate": 0.019}
    """
    return [
        SwapQuote(float(_lookup(r, _MATURITY_KEYS)), float(_lookup(r, _RATE_KEYS)))
        for r in records
    ]


def coerce_quotes(quotes: Union[pd.DataFrame, Iterable[Any]]) -> List[SwapQuote]:
    """Accept SwapQuotes, (maturity, rate) pairs, dict records or a DataFrame."""
    if isinstance(quotes, pd.DataFrame):
        return quotes_from_frame(quotes)

    result = []
    for q in quotes:
        if isinstance(q, SwapQuote):
            result.append(q)
        elif isinstance(q, Mapping):
            result.extend(quotes_from_records([q]))
        else:
            maturity, rate = q
            result.append(SwapQuote(float(maturity), float(rate)))
    return result


def load_quotes(path: Union[str, Path]) -> List[SwapQuote]:
    """
    Load swap quotes from CSV.

    Args:
        path: CSV file with Maturity and SwapRate columns

    Returns:
        Quotes in file order
    """
    df = pd.read_csv(path, comment="#", skipinitialspace=True)
    quotes = quotes_from_frame(df)
    logger.info("Loaded %d swap quotes from %s", len(quotes), path)
    return quotes


def seed_curve(deposit: Deposit = DEFAULT_DEPOSIT) -> Curve:
    """Curve holding the single pillar implied by a deposit rate."""
    curve = Curve()
    curve.add_node(deposit.maturity, deposit.implied_zero_rate())
    return curve


def seed_summary(deposit: Deposit) -> Dict[str, float]:
    """Deposit rate, implied DF and zero rate, for reporting."""
    return {
        "maturity": deposit.maturity,
        "deposit_rate": deposit.rate,
        "discount_factor": deposit.implied_discount_factor(),
        "zero_rate": deposit.implied_zero_rate(),
    }


__all__ = [
    "MATURITY_COLUMN",
    "RATE_COLUMN",
    "DEFAULT_DEPOSIT",
    "DEFAULT_SWAP_QUOTES",
    "quotes_from_frame",
    "quotes_from_records",
    "coerce_quotes",
    "load_quotes",
    "seed_curve",
    "seed_summary",
]
