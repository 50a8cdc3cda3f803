"""Report commands."""

from datetime import date, datetime

import click
from equiledger.cli.month_filters import resolve_cli_month
from equiledger.cli.supplier_resolution import require_supplier
from equiledger.domain.entities import EXPENSE_CATEGORY_LABELS, PeriodReport
from equiledger.domain.ledger import LedgerSession
from equiledger.domain.period import month_label
from equiledger.domain.summary import SummaryService, expenses_by_category
from equiledger.export.csv_export import (
    monthly_csv_filename,
    render_period_csv,
    render_report_csv,
    write_csv,
)
from equiledger.export.html_export import build_report_html
from equiledger.utils.formatters import format_brl, format_percent


@click.group("report")
def report_group():
    """Summaries and exportable reports."""
    pass


@report_group.command("summary")
@click.option("--month", help="Month (YYYY-MM, 'this month', 'last month'); defaults to current")
@click.pass_context
def summary(ctx, month: str | None):
    """Show revenue, outflows and balance for a month."""
    supplier_id = require_supplier(ctx)
    month_key = resolve_cli_month(ctx, month)

    session = LedgerSession(ctx.obj["db"], supplier_id)
    snapshot = session.select_month(month_key)
    totals = snapshot.summary.rounded()

    click.echo(f"\nMonth Summary ({month_label(month_key)}):")
    click.echo("-" * 60)
    click.echo(f"{'Revenue':<40} {format_brl(totals.revenue):>19}")
    click.echo(f"{'Cost of goods':<40} {format_brl(totals.cost_of_goods):>19}")
    click.echo(f"{'Expenses':<40} {format_brl(totals.expenses_total):>19}")
    tax_label = f"Taxes ({format_percent(snapshot.tax_rate_percent)})"
    click.echo(f"{tax_label:<40} {format_brl(totals.tax_estimate):>19}")
    click.echo(f"{'Outflows':<40} {format_brl(totals.outflows):>19}")
    click.echo("=" * 60)
    click.echo(f"{'Balance':<40} {format_brl(totals.net_balance):>19}")

    by_category = expenses_by_category(snapshot.expenses)
    if by_category:
        click.echo("\nExpenses by category:")
        for category, total in sorted(by_category.items(), key=lambda item: -item[1]):
            click.echo(f"    {EXPENSE_CATEGORY_LABELS[category]:<36} {format_brl(total):>19}")


@report_group.command("stats")
@click.option("--month", help="Month (YYYY-MM, 'this month', 'last month'); defaults to current")
@click.pass_context
def stats(ctx, month: str | None):
    """Show sales count, revenue, profit and average margin for a month."""
    supplier_id = require_supplier(ctx)
    month_key = resolve_cli_month(ctx, month)
    result = SummaryService(ctx.obj["db"]).get_sales_stats(supplier_id, month_key)

    click.echo(f"Total sales:    {result.total_sales}")
    click.echo(f"Total revenue:  {format_brl(result.total_revenue)}")
    click.echo(f"Total profit:   {format_brl(result.total_profit)}")
    click.echo(f"Average margin: {format_percent(result.avg_profit_margin)}")


@report_group.command("daily")
@click.option("--month", help="Month (YYYY-MM, 'this month', 'last month'); defaults to current")
@click.option("--all-days", is_flag=True, help="Include days without sales")
@click.pass_context
def daily(ctx, month: str | None, all_days: bool):
    """Show sales per day of a month."""
    supplier_id = require_supplier(ctx)
    month_key = resolve_cli_month(ctx, month)
    points = SummaryService(ctx.obj["db"]).get_daily_sales(supplier_id, month_key)

    if not any(point.count for point in points):
        click.echo(f"No sales registered in {month_key}.")
        return

    click.echo(f"{'Day':>4} {'Sales':>6} {'Value':>15}")
    for point in points:
        if point.count or all_days:
            click.echo(f"{point.day:>4} {point.count:>6} {format_brl(point.value):>15}")
    total_count = sum(point.count for point in points)
    total_value = sum(point.value for point in points)
    click.echo(f"Total: {total_count} sales, {format_brl(total_value)}")


@report_group.command("monthly")
@click.option("--year", type=int, help="Year (defaults to current year)")
@click.pass_context
def monthly(ctx, year: int | None):
    """Show the month-by-month report for a year."""
    supplier_id = require_supplier(ctx)
    year = year or date.today().year
    rows = SummaryService(ctx.obj["db"]).get_monthly_rows(supplier_id, year)

    click.echo(f"\nMonthly Report ({year}):")
    click.echo("-" * 80)
    click.echo(f"{'Month':<10} {'Revenue':>16} {'Expenses':>16} {'Taxes':>16} {'Profit':>16}")
    click.echo("-" * 80)
    for row in rows:
        click.echo(
            f"{row.label:<10} {format_brl(row.revenue):>16} {format_brl(row.expenses):>16} "
            f"{format_brl(row.taxes):>16} {format_brl(row.profit):>16}"
        )


@report_group.command("export-csv")
@click.option("--year", type=int, help="Export the monthly report of this year")
@click.option("--month", help="Export the summary of a single month instead")
@click.option("--annual", is_flag=True, help="Export one row per year instead")
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Output file")
@click.pass_context
def export_csv(ctx, year: int | None, month: str | None, annual: bool, output: str | None):
    """Export a report as semicolon-separated CSV (pt-BR decimals)."""
    supplier_id = require_supplier(ctx)
    if sum(bool(option) for option in (year, month, annual)) > 1:
        click.echo("Error: --year, --month and --annual cannot be combined.", err=True)
        ctx.exit(1)

    service = SummaryService(ctx.obj["db"])
    if month:
        month_key = resolve_cli_month(ctx, month)
        content = render_period_csv(service.build_period_report(supplier_id, month_key))
        default_name = f"report_{month_key}.csv"
    elif annual:
        content = render_report_csv(service.get_annual_rows(supplier_id))
        default_name = "annual_report.csv"
    else:
        year = year or date.today().year
        content = render_report_csv(service.get_monthly_rows(supplier_id, year))
        default_name = monthly_csv_filename(year)

    path = write_csv(output or default_name, content)
    click.echo(f"Wrote {path}")


@report_group.command("export-html")
@click.option("--year", type=int, help="Year of the monthly section (defaults to current year)")
@click.option("--month", help="Also include the summary of this month")
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Output file")
@click.option("--no-print", is_flag=True, help="Do not open the print dialog when viewed")
@click.pass_context
def export_html(ctx, year: int | None, month: str | None, output: str | None, no_print: bool):
    """Export a printable HTML report."""
    supplier_id = require_supplier(ctx)
    service = SummaryService(ctx.obj["db"])
    year = year or date.today().year

    period: PeriodReport | None = None
    if month:
        period = service.build_period_report(supplier_id, resolve_cli_month(ctx, month))

    document = build_report_html(
        period=period,
        monthly=service.get_monthly_rows(supplier_id, year),
        annual=service.get_annual_rows(supplier_id),
        year=year,
        generated_at=datetime.now(),
        auto_print=not no_print,
    )
    path = output or f"financial_report_{year}.html"
    with open(path, "w", encoding="utf-8") as f:
        f.write(document)
    click.echo(f"Wrote {path}")


def register_commands(cli):
    """Register report commands with main CLI."""
    cli.add_command(report_group)
