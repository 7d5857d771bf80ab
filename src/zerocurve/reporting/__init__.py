"""
Reporting module for curve calibration.

Provides:
- Console reports (formatted tables)
- CSV export of quotes and zero curve pillars
"""

from .curve_report import (
    CurveReport,
    ReportFormatter,
    quotes_to_frame,
    curve_to_frame,
    repricing_report,
    build_curve_report,
    export_quotes,
    export_curve,
    print_report,
)


__all__ = [
    "CurveReport",
    "ReportFormatter",
    "quotes_to_frame",
    "curve_to_frame",
    "repricing_report",
    "build_curve_report",
    "export_quotes",
    "export_curve",
    "print_report",
]
