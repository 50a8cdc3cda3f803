"""Tests for the SQLAlchemy ledger store."""

from datetime import date, datetime, UTC
from decimal import Decimal

import pytest

from equiledger.domain import entities
from equiledger.domain.errors import NotFoundError, PersistenceError


class TestLedgerStore:
    """The store returns domain entities and scopes every query by supplier."""

    def test_create_sale_returns_domain_model(self, temp_db):
        sale = temp_db.create_sale(
            supplier_id="supplier-1",
            product_name="Rasp",
            sale_value=Decimal("10.00"),
            profit=Decimal("4.00"),
            payment_method=entities.PaymentMethod.CASH,
        )

        assert isinstance(sale, entities.Sale)
        assert isinstance(sale.sale_value, Decimal)
        assert isinstance(sale.created_at, datetime)
        assert temp_db.get_sale("supplier-1", sale.id) == sale

    def test_timestamps_round_trip_as_utc(self, temp_db, sao_paulo_tz):
        evening = datetime(2024, 3, 31, 21, 45).astimezone()

        sale = temp_db.create_sale(
            "supplier-1", "Rasp", Decimal("10"), Decimal("0"), created_at=evening
        )
        stored = temp_db.list_sales("supplier-1")[0]

        assert stored.created_at == evening
        assert stored.created_at.tzinfo == UTC
        assert stored.created_at.hour == 0
        assert sale == stored

    def test_create_expense_returns_domain_model(self, temp_db):
        expense = temp_db.create_expense(
            supplier_id="supplier-1",
            category=entities.ExpenseCategory.TAXES,
            amount=Decimal("55.10"),
            expense_date=date(2024, 4, 1),
        )

        assert isinstance(expense, entities.Expense)
        assert expense.category == entities.ExpenseCategory.TAXES
        assert temp_db.get_expense("supplier-1", expense.id) == expense
        assert temp_db.get_expense("supplier-2", expense.id) is None

    def test_list_expenses_orders_by_expense_date(self, temp_db):
        food = entities.ExpenseCategory.FOOD
        older = temp_db.create_expense("supplier-1", food, Decimal("1"), date(2024, 1, 1))
        newer = temp_db.create_expense("supplier-1", food, Decimal("2"), date(2024, 3, 1))

        assert [e.id for e in temp_db.list_expenses("supplier-1")] == [newer.id, older.id]

    def test_settings_upsert(self, temp_db):
        assert temp_db.get_settings("supplier-1") is None

        created = temp_db.upsert_settings("supplier-1", Decimal("5"))
        updated = temp_db.upsert_settings("supplier-1", Decimal("7.25"))

        assert isinstance(created, entities.FinancialSettings)
        assert updated.tax_rate_percent == Decimal("7.25")
        assert temp_db.get_settings("supplier-1").tax_rate_percent == Decimal("7.25")

    def test_delete_missing_rows_raise_not_found(self, temp_db):
        with pytest.raises(NotFoundError):
            temp_db.delete_sale("supplier-1", "missing")
        with pytest.raises(NotFoundError):
            temp_db.delete_expense("supplier-1", "missing")
        with pytest.raises(NotFoundError):
            temp_db.delete_product("supplier-1", "missing")

    def test_store_failure_is_wrapped_and_rolled_back(self, temp_db):
        with pytest.raises(PersistenceError, match="Could not insert sale"):
            temp_db.create_sale(
                supplier_id="supplier-1",
                product_name=None,
                sale_value=Decimal("10"),
                profit=Decimal("0"),
            )

        # The session is usable again after the rollback
        sale = temp_db.create_sale("supplier-1", "Rasp", Decimal("10"), Decimal("0"))
        assert [s.id for s in temp_db.list_sales("supplier-1")] == [sale.id]

    def test_persistence_error_is_a_domain_error(self):
        assert issubclass(PersistenceError, ValueError)
