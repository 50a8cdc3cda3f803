"""Ledger aggregation and reporting domain service."""

from collections import defaultdict
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Sequence

from equiledger.database.base import Database
from equiledger.domain.entities import (
    DailySalesPoint,
    Expense,
    ExpenseCategory,
    PeriodReport,
    PeriodSummary,
    ReportRow,
    Sale,
    SalesStats,
)
from equiledger.domain.period import (
    days_in_month,
    expense_date,
    filter_by_month,
    filter_by_year,
    month_label,
    sale_date,
    to_local,
)
from equiledger.domain.settings import FinancialSettingsService

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def summarize(
    sales: Sequence[Sale], expenses: Sequence[Expense], tax_rate_percent
) -> PeriodSummary:
    """Reduce already-filtered sales and expenses into a PeriodSummary.

    Values are returned at full precision. The summary may have a negative
    net balance.
    """
    tax_rate = Decimal(str(tax_rate_percent or 0))
    revenue = sum((sale.sale_value for sale in sales), ZERO)
    cost_of_goods = sum((sale.sale_value - sale.profit for sale in sales), ZERO)
    expenses_total = sum((expense.amount for expense in expenses), ZERO)
    tax_estimate = revenue * tax_rate / HUNDRED
    outflows = cost_of_goods + expenses_total + tax_estimate
    return PeriodSummary(
        revenue=revenue,
        cost_of_goods=cost_of_goods,
        expenses_total=expenses_total,
        tax_estimate=tax_estimate,
        outflows=outflows,
        net_balance=revenue - outflows,
    )


def expenses_by_category(expenses: Sequence[Expense]) -> dict[ExpenseCategory, Decimal]:
    """Total expense amount per category, only for categories present."""
    totals: dict[ExpenseCategory, Decimal] = defaultdict(lambda: ZERO)
    for expense in expenses:
        totals[expense.category] += expense.amount
    return dict(totals)


def sale_margin_percent(sale: Sale) -> Decimal:
    """Profit as a percentage of the sale value (denominator at least 1)."""
    return sale.profit / max(Decimal(1), sale.sale_value) * HUNDRED


def sales_stats(sales: Sequence[Sale]) -> SalesStats:
    """Count, revenue, profit and average margin for a set of sales."""
    total_revenue = sum((sale.sale_value for sale in sales), ZERO)
    total_profit = sum((sale.profit for sale in sales), ZERO)
    if total_revenue > 0:
        margin = (total_profit / total_revenue * HUNDRED).quantize(
            Decimal("0.1"), rounding=ROUND_HALF_UP
        )
    else:
        margin = ZERO
    return SalesStats(
        total_sales=len(sales),
        total_revenue=total_revenue,
        total_profit=total_profit,
        avg_profit_margin=margin,
    )


def daily_sales(sales: Sequence[Sale], month_key: str) -> list[DailySalesPoint]:
    """One point per day of the month with the sales made that day."""
    month_sales = filter_by_month(sales, month_key, sale_date)
    counts = [0] * days_in_month(month_key)
    values = [ZERO] * days_in_month(month_key)
    for sale in month_sales:
        index = to_local(sale_date(sale)).day - 1
        counts[index] += 1
        values[index] += sale.sale_value
    return [
        DailySalesPoint(day=i + 1, count=counts[i], value=values[i])
        for i in range(len(counts))
    ]


def _report_row(label: str, summary: PeriodSummary) -> ReportRow:
    return ReportRow(
        label=label,
        revenue=summary.revenue,
        expenses=summary.cost_of_goods + summary.expenses_total,
        taxes=summary.tax_estimate,
        profit=summary.net_balance,
    )


def monthly_rows(
    sales: Sequence[Sale], expenses: Sequence[Expense], tax_rate_percent, year: int
) -> list[ReportRow]:
    """Twelve report rows, one per month of the year."""
    rows = []
    for month in range(1, 13):
        key = f"{year:04d}-{month:02d}"
        summary = summarize(
            filter_by_month(sales, key, sale_date),
            filter_by_month(expenses, key, expense_date),
            tax_rate_percent,
        )
        rows.append(_report_row(key, summary))
    return rows


def annual_rows(
    sales: Sequence[Sale], expenses: Sequence[Expense], tax_rate_percent
) -> list[ReportRow]:
    """One report row per year that has any sale or expense, oldest first."""
    years = {to_local(sale_date(sale)).year for sale in sales}
    years.update(to_local(expense_date(expense)).year for expense in expenses)
    rows = []
    for year in sorted(years):
        summary = summarize(
            filter_by_year(sales, year, sale_date),
            filter_by_year(expenses, year, expense_date),
            tax_rate_percent,
        )
        rows.append(_report_row(str(year), summary))
    return rows


class SummaryService:
    """Service that loads a supplier's ledger and builds summaries."""

    def __init__(self, db: Database):
        """Initialize summary service.

        Args:
            db: Database instance
        """
        self.db = db
        self.settings_service = FinancialSettingsService(db)

    def get_tax_rate(self, supplier_id: str) -> Decimal:
        """Tax rate for the supplier, 0 when no settings row exists."""
        return self.settings_service.get_tax_rate(supplier_id)

    def get_month_entries(
        self, supplier_id: str, month_key: str
    ) -> tuple[list[Sale], list[Expense]]:
        """Sales and expenses of one month."""
        sales = filter_by_month(self.db.list_sales(supplier_id), month_key, sale_date)
        expenses = filter_by_month(
            self.db.list_expenses(supplier_id), month_key, expense_date
        )
        return sales, expenses

    def summarize_month(
        self, supplier_id: str, month_key: str, tax_rate_percent: Optional[Decimal] = None
    ) -> PeriodSummary:
        """Summary of one month, using the stored tax rate unless one is given."""
        if tax_rate_percent is None:
            tax_rate_percent = self.get_tax_rate(supplier_id)
        sales, expenses = self.get_month_entries(supplier_id, month_key)
        return summarize(sales, expenses, tax_rate_percent)

    def build_period_report(self, supplier_id: str, month_key: str) -> PeriodReport:
        """Rounded summary plus label, ready for a report renderer."""
        summary = self.summarize_month(supplier_id, month_key)
        return PeriodReport(label=month_label(month_key), summary=summary.rounded())

    def get_sales_stats(self, supplier_id: str, month_key: str) -> SalesStats:
        """Headline sales numbers for one month."""
        sales, _ = self.get_month_entries(supplier_id, month_key)
        return sales_stats(sales)

    def get_daily_sales(self, supplier_id: str, month_key: str) -> list[DailySalesPoint]:
        """Per-day sales series for one month."""
        return daily_sales(self.db.list_sales(supplier_id), month_key)

    def get_monthly_rows(self, supplier_id: str, year: int) -> list[ReportRow]:
        """Monthly report rows for a year."""
        return monthly_rows(
            self.db.list_sales(supplier_id),
            self.db.list_expenses(supplier_id),
            self.get_tax_rate(supplier_id),
            year,
        )

    def get_annual_rows(self, supplier_id: str) -> list[ReportRow]:
        """Annual report rows over all recorded years."""
        return annual_rows(
            self.db.list_sales(supplier_id),
            self.db.list_expenses(supplier_id),
            self.get_tax_rate(supplier_id),
        )

