"""
Curve calibration reporting.

Provides formatted console output and CSV export for:
- Input swap quotes (Maturity,SwapRate)
- Calibrated zero curve pillars (Time,ZeroRate)
- Repricing check: market vs fair rate and NPV per quote
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

import pandas as pd

from ..conventions import SwapConventions
from ..curves.curve import Curve
from ..curves.instruments import SwapQuote
from ..pricers.swaps import SwapPricer


CSV_FLOAT_FORMAT = "%.8f"


@dataclass
class ReportSection:
    """
    A section of a report.

    Attributes:
        title: Section title
        data: Data (DataFrame or dict)
        notes: Optional notes
    """
    title: str
    data: Union[pd.DataFrame, Dict[str, Any]]
    notes: Optional[str] = None


@dataclass
class CurveReport:
    """Calibration report made of titled sections."""
    title: str
    sections: List[ReportSection] = field(default_factory=list)

    def add_section(
        self,
        title: str,
        data: Union[pd.DataFrame, Dict[str, Any]],
        notes: Optional[str] = None
    ):
        """Add a section to the report."""
        self.sections.append(ReportSection(title, data, notes))


class ReportFormatter:
    """
    Formats reports for console output.
    """

    def __init__(self, width: int = 72, precision: int = 6):
        """
        Initialize formatter.

        Args:
            width: Console width
            precision: Decimal precision for floats
        """
        self.width = width
        self.precision = precision

    def format_number(self, value: float, precision: Optional[int] = None) -> str:
        """Format a number for display."""
        p = precision if precision is not None else self.precision
        return f"{value:.{p}f}"

    def format_percent(self, value: float) -> str:
        """Format as percentage."""
        return f"{value*100:.4f}%"

    def header(self, title: str) -> str:
        """Create a header line."""
        return f"\n{'='*self.width}\n{title.center(self.width)}\n{'='*self.width}\n"

    def subheader(self, title: str) -> str:
        """Create a subheader."""
        return f"\n{'-'*self.width}\n{title}\n{'-'*self.width}\n"

    def format_dict(self, data: Dict[str, Any], indent: int = 2) -> str:
        """Format dictionary as key-value pairs."""
        pad = " " * indent
        lines = []
        for key, value in data.items():
            formatted = self.format_number(value) if isinstance(value, float) else str(value)
            lines.append(f"{pad}{key}: {formatted}")
        return "\n".join(lines)

    def format_dataframe(self, df: pd.DataFrame, max_rows: int = 50) -> str:
        """Format DataFrame for console."""
        with pd.option_context(
            'display.max_rows', max_rows,
            'display.width', self.width,
            'display.float_format', lambda x: self.format_number(x)
        ):
            return df.to_string(index=False)

    def format_report(self, report: CurveReport) -> str:
        """Format entire report for console."""
        lines = [self.header(report.title)]

        for section in report.sections:
            lines.append(self.subheader(section.title))

            if isinstance(section.data, pd.DataFrame):
                lines.append(self.format_dataframe(section.data))
            else:
                lines.append(self.format_dict(section.data))

            if section.notes:
                lines.append(f"\nNote: {section.notes}")

        lines.append(f"\n{'='*self.width}")
        return "\n".join(lines)


def quotes_to_frame(quotes: Sequence[SwapQuote]) -> pd.DataFrame:
    """Quotes as a Maturity/SwapRate table."""
    return pd.DataFrame(
        [(q.maturity, q.rate) for q in quotes],
        columns=["Maturity", "SwapRate"],
    )


def curve_to_frame(curve: Curve) -> pd.DataFrame:
    """Curve pillars as a Time/ZeroRate table."""
    return pd.DataFrame(curve.nodes(), columns=["Time", "ZeroRate"])


def repricing_report(
    curve: Curve,
    quotes: Sequence[SwapQuote],
    conventions: Optional[SwapConventions] = None
) -> pd.DataFrame:
    """
    Reprice each quote on the curve.

    Returns:
        DataFrame with Maturity, MarketRate, FairRate, NPV columns
    """
    pricer = SwapPricer(curve, conventions)
    rows = [
        {
            "Maturity": q.maturity,
            "MarketRate": q.rate,
            "FairRate": pricer.fair_rate(q.maturity),
            "NPV": pricer.price_swap(q.maturity, q.rate),
        }
        for q in quotes
    ]
    return pd.DataFrame(rows, columns=["Maturity", "MarketRate", "FairRate", "NPV"])


def build_curve_report(
    curve: Curve,
    quotes: Sequence[SwapQuote],
    conventions: Optional[SwapConventions] = None,
    interpolated: Optional[Sequence[SwapQuote]] = None,
    seed: Optional[Dict[str, Any]] = None
) -> CurveReport:
    """Assemble the calibration report printed by the demo."""
    report = CurveReport(title="Swap Curve Bootstrap")

    if seed:
        report.add_section("Initialization (deposit)", seed)
    report.add_section("Zero Curve Pillars", curve.to_frame())
    report.add_section(
        "Verification of the NPV",
        repricing_report(curve, quotes, conventions),
        notes="NPV should be near 0 for every calibrated quote",
    )
    if interpolated:
        report.add_section("Interpolated Swaps", quotes_to_frame(interpolated))

    return report


def export_quotes(quotes: Sequence[SwapQuote], path: Union[str, Path]) -> str:
    """
    Write quotes to CSV with a Maturity,SwapRate header.

    Returns:
        Path of the created file
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    quotes_to_frame(quotes).to_csv(path, index=False, float_format=CSV_FLOAT_FORMAT)
    return str(path)


def export_curve(curve: Curve, path: Union[str, Path]) -> str:
    """
    Write curve pillars to CSV with a Time,ZeroRate header.

    An empty curve produces the header only.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    curve_to_frame(curve).to_csv(path, index=False, float_format=CSV_FLOAT_FORMAT)
    return str(path)


def print_report(report: CurveReport, formatter: Optional[ReportFormatter] = None):
    """
    Print report to console.

    Args:
        report: CurveReport to print
        formatter: Optional custom formatter
    """
    fmt = formatter or ReportFormatter()
    print(fmt.format_report(report))


__all__ = [
    "ReportSection",
    "CurveReport",
    "ReportFormatter",
    "CSV_FLOAT_FORMAT",
    "quotes_to_frame",
    "curve_to_frame",
    "repricing_report",
    "build_curve_report",
    "export_quotes",
    "export_curve",
    "print_report",
]
