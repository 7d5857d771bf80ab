#!/usr/bin/env python
"""
Swap Curve Bootstrap Demo Script

This script runs the full workflow:
1. Seed the curve from the 6M deposit rate
2. Bootstrap zero rates from par swap quotes
3. Verify that every quote reprices to zero NPV
4. Interpolate fair rates for new maturities
5. Export quote and curve tables to CSV

Usage:
    python run_demo.py [--quotes QUOTES_CSV] [--output-dir OUTPUT_DIR]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from zerocurve import (
    Deposit,
    SwapConventions,
    SwapCurveBootstrapper,
    SwapPricer,
    SwapQuote,
)
from zerocurve.market_data import DEFAULT_DEPOSIT, DEFAULT_SWAP_QUOTES, load_quotes, seed_curve, seed_summary
from zerocurve.reporting import build_curve_report, print_report, export_quotes, export_curve


NEW_SWAP_MATURITIES = [4.0, 4.7, 5.5]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Bootstrap a zero curve from par swap quotes")
    parser.add_argument("--quotes", type=Path, default=None,
                        help="CSV with Maturity,SwapRate columns (default: built-in market set)")
    parser.add_argument("--deposit-rate", type=float, default=DEFAULT_DEPOSIT.rate,
                        help="Simple deposit rate used to seed the curve")
    parser.add_argument("--deposit-tenor", type=float, default=DEFAULT_DEPOSIT.maturity,
                        help="Deposit maturity in years")
    parser.add_argument("--tau", type=float, default=0.5,
                        help="Fixed leg period length in years")
    parser.add_argument("--output-dir", type=Path, default=Path("output"),
                        help="Directory for CSV exports")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    quotes: List[SwapQuote] = load_quotes(args.quotes) if args.quotes else list(DEFAULT_SWAP_QUOTES)

    # Bad --tau or --deposit-tenor values and CurveError are both ValueErrors
    try:
        deposit = Deposit(args.deposit_tenor, args.deposit_rate)
        conventions = SwapConventions(fixed_tau=args.tau)
        curve = SwapCurveBootstrapper(quotes, conventions).calibrate(seed_curve(deposit))
    except ValueError as e:
        print(f"Calibration failed: {e}", file=sys.stderr)
        return 1

    pricer = SwapPricer(curve, conventions)
    interpolated = pricer.interpolate_swap_rates(NEW_SWAP_MATURITIES)

    report = build_curve_report(
        curve, quotes, conventions,
        interpolated=interpolated,
        seed=seed_summary(deposit),
    )
    print_report(report)

    output_dir = args.output_dir
    created = [
        export_quotes(quotes, output_dir / "swap_quotes.csv"),
        export_quotes(interpolated, output_dir / "interpolated_swaps.csv"),
        export_curve(curve, output_dir / "zero_curve.csv"),
    ]
    for path in created:
        print(f"  Exported: {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
