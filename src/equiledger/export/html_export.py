"""Printable HTML financial report.

The document is self-contained (inline styles) and calls window.print() on
load, so opening it in a browser goes straight to the print dialog.
"""

from datetime import datetime
from html import escape
from typing import Optional, Sequence

from equiledger.domain.entities import PeriodReport, ReportRow
from equiledger.utils.formatters import format_brl

STYLE = """
<style>
  body { font-family: Arial, sans-serif; padding: 24px; }
  h1, h2 { margin: 0 0 8px 0; }
  table { width: 100%; border-collapse: collapse; margin-top: 12px; }
  th, td { border: 1px solid #ddd; padding: 8px; font-size: 12px; text-align: right; }
  th:first-child, td:first-child { text-align: left; }
  .muted { color: #666; font-size: 12px; }
  .section { margin-top: 24px; }
  .negative { color: #b00020; }
</style>
"""


def _money_cell(value) -> str:
    css = ' class="negative"' if value < 0 else ""
    return f"<td{css}>{escape(format_brl(value))}</td>"


def _rows_html(rows: Sequence[ReportRow]) -> str:
    return "".join(
        f"<tr><td>{escape(row.label)}</td>{_money_cell(row.revenue)}{_money_cell(row.expenses)}"
        f"{_money_cell(row.taxes)}{_money_cell(row.profit)}</tr>"
        for row in rows
    )


def _period_section(report: PeriodReport) -> str:
    summary = report.summary
    lines = [
        ("Revenue", summary.revenue),
        ("Cost of goods", summary.cost_of_goods),
        ("Expenses", summary.expenses_total),
        ("Taxes", summary.tax_estimate),
        ("Outflows", summary.outflows),
        ("Balance", summary.net_balance),
    ]
    body = "".join(f"<tr><td>{name}</td>{_money_cell(value)}</tr>" for name, value in lines)
    return f"""
        <div class="section">
          <h2>Period Summary ({escape(report.label)})</h2>
          <table>
            <thead><tr><th>Item</th><th>Value</th></tr></thead>
            <tbody>{body}</tbody>
          </table>
        </div>"""


def _rows_section(title: str, first_column: str, rows: Sequence[ReportRow]) -> str:
    return f"""
        <div class="section">
          <h2>{escape(title)}</h2>
          <table>
            <thead>
              <tr><th>{first_column}</th><th>Revenue</th><th>Expenses</th><th>Taxes</th><th>Profit</th></tr>
            </thead>
            <tbody>{_rows_html(rows)}</tbody>
          </table>
        </div>"""


def build_report_html(
    period: Optional[PeriodReport] = None,
    monthly: Sequence[ReportRow] = (),
    annual: Sequence[ReportRow] = (),
    year: Optional[int] = None,
    generated_at: Optional[datetime] = None,
    auto_print: bool = True,
) -> str:
    """Build the printable report document.

    Args:
        period: Rounded summary of one month, shown first when given
        monthly: Monthly rows for the year
        annual: Annual rows
        year: Year the monthly rows belong to, used in the heading
        generated_at: Timestamp printed under the title; omitted when None
        auto_print: Trigger the browser print dialog on load

    Returns:
        Complete HTML document
    """
    sections = []
    if period is not None:
        sections.append(_period_section(period))
    if monthly:
        title = f"Monthly Report ({year})" if year is not None else "Monthly Report"
        sections.append(_rows_section(title, "Month", monthly))
    if annual:
        sections.append(_rows_section("Annual Report", "Year", annual))

    generated = ""
    if generated_at is not None:
        generated = f'<div class="muted">Generated at {generated_at.strftime("%d/%m/%Y %H:%M:%S")}</div>'
    script = "<script>window.print();</script>" if auto_print else ""

    return f"""<!DOCTYPE html>
<html lang="pt-BR">
  <head>
    <meta charset="utf-8">
    <title>Financial Reports</title>
    {STYLE}
  </head>
  <body>
    <h1>Financial Reports</h1>
    {generated}
    {"".join(sections)}
    {script}
  </body>
</html>
"""
