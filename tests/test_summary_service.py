"""Tests for summary domain service."""

from datetime import date, datetime
from decimal import Decimal

import pytest


@pytest.fixture
def sample_ledger(sale_service, expense_service, settings_service, supplier_id):
    settings_service.set_tax_rate(supplier_id, Decimal("6"))
    sale_service.register_sale(
        supplier_id, "Horseshoe set", Decimal("150"), Decimal("60"),
        created_at=datetime(2024, 1, 15, 10, 0),
    )
    sale_service.register_sale(
        supplier_id, "Trimming", Decimal("200"), Decimal("200"),
        created_at=datetime(2024, 1, 20, 16, 0),
    )
    sale_service.register_sale(
        supplier_id, "Saddle", Decimal("1890"), Decimal("400"),
        created_at=datetime(2023, 12, 2, 9, 0),
    )
    expense_service.add_expense(
        supplier_id, "fuel_travel", Decimal("80.50"), expense_date=date(2024, 1, 10)
    )
    expense_service.add_expense(
        supplier_id, "materials", Decimal("12.25"), expense_date=date(2023, 12, 5)
    )


def test_get_tax_rate(summary_service, settings_service, supplier_id):
    assert summary_service.get_tax_rate(supplier_id) == 0
    settings_service.set_tax_rate(supplier_id, Decimal("4.5"))
    assert summary_service.get_tax_rate(supplier_id) == Decimal("4.5")


def test_summarize_month(summary_service, supplier_id, sample_ledger):
    summary = summary_service.summarize_month(supplier_id, "2024-01")

    assert summary.revenue == Decimal("350")
    assert summary.cost_of_goods == Decimal("90")
    assert summary.expenses_total == Decimal("80.50")
    assert summary.tax_estimate == Decimal("21")
    assert summary.net_balance == Decimal("158.50")


def test_summarize_month_with_explicit_rate(summary_service, supplier_id, sample_ledger):
    summary = summary_service.summarize_month(supplier_id, "2024-01", Decimal("0"))

    assert summary.tax_estimate == 0
    assert summary.net_balance == Decimal("179.50")


def test_build_period_report(summary_service, supplier_id, sample_ledger):
    report = summary_service.build_period_report(supplier_id, "2023-12")

    assert report.label == "12/2023"
    assert report.summary.revenue == Decimal("1890.00")
    assert report.summary.tax_estimate == Decimal("113.40")
    assert report.summary.net_balance == Decimal("274.35")


def test_get_sales_stats(summary_service, supplier_id, sample_ledger):
    stats = summary_service.get_sales_stats(supplier_id, "2024-01")

    assert stats.total_sales == 2
    assert stats.total_revenue == Decimal("350")
    assert stats.total_profit == Decimal("260")
    assert stats.avg_profit_margin == Decimal("74.3")


def test_get_daily_sales(summary_service, supplier_id, sample_ledger):
    points = summary_service.get_daily_sales(supplier_id, "2024-01")

    assert len(points) == 31
    assert points[14].count == 1
    assert points[19].value == Decimal("200")


def test_get_monthly_and_annual_rows(summary_service, supplier_id, sample_ledger):
    monthly = summary_service.get_monthly_rows(supplier_id, 2024)
    annual = summary_service.get_annual_rows(supplier_id)

    assert len(monthly) == 12
    assert monthly[0].revenue == Decimal("350")
    assert monthly[0].expenses == Decimal("170.50")
    assert [row.label for row in annual] == ["2023", "2024"]
    assert annual[1].profit == monthly[0].profit
