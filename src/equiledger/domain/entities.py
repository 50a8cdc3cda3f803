"""Domain model entities for equiledger.

These are pure data classes representing ledger concepts, independent of
database schema. Rows coming out of the store are converted to these once,
in the mappers, so the rest of the code never re-derives defaults.
"""

from dataclasses import dataclass
from datetime import datetime, date
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import Optional

CENT = Decimal("0.01")


class PaymentMethod(str, Enum):
    """How a sale was paid."""

    PIX = "pix"
    CASH = "cash"
    CARD = "card"
    BANK_SLIP = "bank_slip"


class ExpenseCategory(str, Enum):
    """Expense categories."""

    FUEL_TRAVEL = "fuel_travel"
    MATERIALS = "materials"
    FOOD = "food"
    TAXES = "taxes"
    OTHER = "other"


EXPENSE_CATEGORY_LABELS = {
    ExpenseCategory.FUEL_TRAVEL: "Fuel/Travel",
    ExpenseCategory.MATERIALS: "Materials",
    ExpenseCategory.FOOD: "Food",
    ExpenseCategory.TAXES: "Taxes",
    ExpenseCategory.OTHER: "Other",
}


@dataclass(frozen=True)
class Sale:
    """Sale domain entity.

    created_at is an aware UTC timestamp once read back from the store.
    """

    id: str
    supplier_id: str
    product_name: str
    sale_value: Decimal
    profit: Decimal
    payment_method: Optional[PaymentMethod]
    linked_client_id: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class Expense:
    """Expense domain entity."""

    id: str
    supplier_id: str
    category: ExpenseCategory
    amount: Decimal
    description: Optional[str]
    expense_date: date
    created_at: datetime


@dataclass(frozen=True)
class FinancialSettings:
    """Per-supplier financial settings."""

    supplier_id: str
    tax_rate_percent: Decimal
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Product:
    """Catalog product with its pricing fields."""

    id: str
    supplier_id: str
    name: str
    price: Decimal
    original_price: Optional[Decimal]
    discount_percentage: Optional[int]
    max_installments: int
    interest_free_installments: int
    created_at: datetime


@dataclass(frozen=True)
class SupplierClient:
    """A supplier's own customer record."""

    id: str
    supplier_id: str
    name: str
    email: Optional[str]
    phone: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class PeriodSummary:
    """Aggregate of one period's sales and expenses.

    Values are full precision; use rounded() for display.
    """

    revenue: Decimal
    cost_of_goods: Decimal
    expenses_total: Decimal
    tax_estimate: Decimal
    outflows: Decimal
    net_balance: Decimal

    def rounded(self) -> "PeriodSummary":
        """Return a copy with every field quantized to cents."""
        return PeriodSummary(
            revenue=quantize_money(self.revenue),
            cost_of_goods=quantize_money(self.cost_of_goods),
            expenses_total=quantize_money(self.expenses_total),
            tax_estimate=quantize_money(self.tax_estimate),
            outflows=quantize_money(self.outflows),
            net_balance=quantize_money(self.net_balance),
        )

    def __add__(self, other: "PeriodSummary") -> "PeriodSummary":
        return PeriodSummary(
            revenue=self.revenue + other.revenue,
            cost_of_goods=self.cost_of_goods + other.cost_of_goods,
            expenses_total=self.expenses_total + other.expenses_total,
            tax_estimate=self.tax_estimate + other.tax_estimate,
            outflows=self.outflows + other.outflows,
            net_balance=self.net_balance + other.net_balance,
        )


@dataclass(frozen=True)
class SalesStats:
    """Headline numbers for a month of sales."""

    total_sales: int
    total_revenue: Decimal
    total_profit: Decimal
    avg_profit_margin: Decimal


@dataclass(frozen=True)
class DailySalesPoint:
    """Sales count and value for one calendar day."""

    day: int
    count: int
    value: Decimal


@dataclass(frozen=True)
class ReportRow:
    """One line of a monthly or annual report."""

    label: str
    revenue: Decimal
    expenses: Decimal
    taxes: Decimal
    profit: Decimal


@dataclass(frozen=True)
class PeriodReport:
    """Value object handed to report renderers."""

    label: str
    summary: PeriodSummary


@dataclass(frozen=True)
class PriceDisplay:
    """Display values derived from a product's pricing fields."""

    price: Decimal
    display_original: Optional[Decimal]
    display_discount_percent: Optional[int]
    installment_count: int
    installment_value: Decimal
    is_synthetic: bool = False


def quantize_money(value: Decimal) -> Decimal:
    """Round a monetary value to cents, half-up."""
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def has_cent_precision(value) -> bool:
    """True when the value is stored in cents without rounding."""
    value = Decimal(str(value))
    return value == value.quantize(CENT)
