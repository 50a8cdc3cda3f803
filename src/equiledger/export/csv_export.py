"""CSV rendering for monthly and annual reports.

Output is UTF-8 text with a leading BOM, ";" as the delimiter and "," as the
decimal separator so spreadsheet software in pt-BR opens it directly. The
content carries no generation timestamp: the same rows always render to the
same bytes.
"""

import csv
import io
from pathlib import Path
from typing import Sequence

from equiledger.domain.entities import PeriodReport, ReportRow
from equiledger.utils.formatters import format_decimal_br

BOM = "\ufeff"
HEADER = ["Month", "Revenue", "Expenses", "Taxes", "Profit"]


def _write(rows: list[list[str]]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, delimiter=";", lineterminator="\n")
    writer.writerow(HEADER)
    writer.writerows(rows)
    return BOM + buffer.getvalue()


def render_report_csv(rows: Sequence[ReportRow]) -> str:
    """Render report rows (one per month or year) as CSV text."""
    return _write(
        [
            [
                row.label,
                format_decimal_br(row.revenue),
                format_decimal_br(row.expenses),
                format_decimal_br(row.taxes),
                format_decimal_br(row.profit),
            ]
            for row in rows
        ]
    )


def render_period_csv(report: PeriodReport) -> str:
    """Render a single period summary as a one-row CSV."""
    summary = report.summary
    return _write(
        [
            [
                report.label,
                format_decimal_br(summary.revenue),
                format_decimal_br(summary.cost_of_goods + summary.expenses_total),
                format_decimal_br(summary.tax_estimate),
                format_decimal_br(summary.net_balance),
            ]
        ]
    )


def monthly_csv_filename(year: int) -> str:
    """Default download name for a year's monthly report."""
    return f"monthly_report_{year}.csv"


def write_csv(path: str | Path, content: str) -> Path:
    """Write rendered CSV text to a file, returning the path."""
    path = Path(path)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)
    return path
