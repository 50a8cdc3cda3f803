"""Mapper functions to convert SQLAlchemy rows into domain entities.

This is the single validation boundary after the store: optional columns are
defaulted here, once, so callers always receive fully-typed entities.
"""

from datetime import datetime, date, UTC
from decimal import Decimal
from typing import Optional

from equiledger.domain import entities as domain
from equiledger.domain.pricing import DEFAULT_INTEREST_FREE_INSTALLMENTS
from equiledger.database.models import (
    Sale as ORMSale,
    Expense as ORMExpense,
    SupplierFinancialSettings as ORMSettings,
    Product as ORMProduct,
    SupplierClient as ORMSupplierClient,
)


def _money(value) -> Decimal:
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _optional_money(value) -> Optional[Decimal]:
    return None if value is None else _money(value)


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite drops the offset; stored timestamps are UTC
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _as_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def sale_to_domain(orm_sale: ORMSale) -> domain.Sale:
    """Convert SQLAlchemy Sale model to domain Sale entity."""
    payment_method = orm_sale.payment_method
    if payment_method is not None and not isinstance(payment_method, domain.PaymentMethod):
        payment_method = domain.PaymentMethod(payment_method)
    return domain.Sale(
        id=orm_sale.id,
        supplier_id=orm_sale.supplier_id,
        product_name=orm_sale.product_name,
        sale_value=_money(orm_sale.sale_value),
        profit=_money(orm_sale.profit),
        payment_method=payment_method,
        linked_client_id=orm_sale.supplier_client_id,
        created_at=_as_utc(orm_sale.created_at),
    )


def expense_to_domain(orm_expense: ORMExpense) -> domain.Expense:
    """Convert SQLAlchemy Expense model to domain Expense entity."""
    category = orm_expense.category
    if not isinstance(category, domain.ExpenseCategory):
        category = domain.ExpenseCategory(category)
    return domain.Expense(
        id=orm_expense.id,
        supplier_id=orm_expense.supplier_id,
        category=category,
        amount=_money(orm_expense.amount),
        description=orm_expense.description or None,
        expense_date=_as_date(orm_expense.expense_date),
        created_at=_as_utc(orm_expense.created_at),
    )


def settings_to_domain(orm_settings: ORMSettings) -> domain.FinancialSettings:
    """Convert SQLAlchemy settings row to domain FinancialSettings entity."""
    return domain.FinancialSettings(
        supplier_id=orm_settings.supplier_id,
        tax_rate_percent=_money(orm_settings.tax_rate),
        created_at=_as_utc(orm_settings.created_at),
        updated_at=_as_utc(orm_settings.updated_at),
    )


def product_to_domain(orm_product: ORMProduct) -> domain.Product:
    """Convert SQLAlchemy Product model to domain Product entity."""
    return domain.Product(
        id=orm_product.id,
        supplier_id=orm_product.supplier_id,
        name=orm_product.name,
        price=_money(orm_product.price),
        original_price=_optional_money(orm_product.original_price),
        discount_percentage=orm_product.discount_percentage,
        max_installments=orm_product.max_installments or DEFAULT_INTEREST_FREE_INSTALLMENTS,
        interest_free_installments=(
            orm_product.interest_free_installments or DEFAULT_INTEREST_FREE_INSTALLMENTS
        ),
        created_at=_as_utc(orm_product.created_at),
    )


def supplier_client_to_domain(orm_client: ORMSupplierClient) -> domain.SupplierClient:
    """Convert SQLAlchemy SupplierClient model to domain SupplierClient entity."""
    return domain.SupplierClient(
        id=orm_client.id,
        supplier_id=orm_client.supplier_id,
        name=orm_client.name,
        email=orm_client.email or None,
        phone=orm_client.phone or None,
        created_at=_as_utc(orm_client.created_at),
    )
