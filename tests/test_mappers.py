"""Tests for database mappers."""

from datetime import date, datetime, UTC
from decimal import Decimal

from equiledger.database.mappers import (
    expense_to_domain,
    product_to_domain,
    sale_to_domain,
    settings_to_domain,
    supplier_client_to_domain,
)
from equiledger.database.models import (
    Expense as ORMExpense,
    Product as ORMProduct,
    Sale as ORMSale,
    SupplierClient as ORMSupplierClient,
    SupplierFinancialSettings as ORMSettings,
)
from equiledger.domain.entities import ExpenseCategory, PaymentMethod


class TestSaleMapper:
    """Tests for Sale mapper."""

    def test_sale_to_domain(self):
        created_at = datetime.now(UTC)
        orm_sale = ORMSale(
            id="s-1",
            supplier_id="supplier-1",
            product_name="Horseshoe set",
            sale_value=Decimal("150.00"),
            profit=Decimal("60.00"),
            payment_method=PaymentMethod.CARD,
            supplier_client_id="c-1",
            created_at=created_at,
        )

        sale = sale_to_domain(orm_sale)

        assert sale.id == "s-1"
        assert sale.sale_value == Decimal("150.00")
        assert sale.profit == Decimal("60.00")
        assert sale.payment_method == PaymentMethod.CARD
        assert sale.linked_client_id == "c-1"
        assert sale.created_at == created_at

    def test_sale_to_domain_coerces_raw_values(self):
        orm_sale = ORMSale(
            id="s-2",
            supplier_id="supplier-1",
            product_name="Trimming",
            sale_value=80,
            profit=None,
            payment_method="pix",
            created_at=datetime(2024, 1, 1),
        )

        sale = sale_to_domain(orm_sale)

        assert sale.sale_value == Decimal("80")
        assert isinstance(sale.sale_value, Decimal)
        assert sale.profit == Decimal("0")
        assert sale.payment_method == PaymentMethod.PIX
        assert sale.linked_client_id is None


class TestExpenseMapper:
    """Tests for Expense mapper."""

    def test_expense_to_domain(self):
        orm_expense = ORMExpense(
            id="e-1",
            supplier_id="supplier-1",
            category="fuel_travel",
            amount=12.5,
            description="",
            expense_date=datetime(2024, 1, 10, 15, 0),
            created_at=datetime(2024, 1, 10, 15, 0),
        )

        expense = expense_to_domain(orm_expense)

        assert expense.category == ExpenseCategory.FUEL_TRAVEL
        assert expense.amount == Decimal("12.5")
        assert expense.description is None
        assert expense.expense_date == date(2024, 1, 10)


class TestSettingsMapper:
    """Tests for FinancialSettings mapper."""

    def test_settings_to_domain(self):
        now = datetime(2024, 1, 1, tzinfo=UTC)
        orm_settings = ORMSettings(
            supplier_id="supplier-1", tax_rate=Decimal("6.00"), created_at=now, updated_at=now
        )

        settings = settings_to_domain(orm_settings)

        assert settings.supplier_id == "supplier-1"
        assert settings.tax_rate_percent == Decimal("6")


class TestProductMapper:
    """Tests for Product mapper."""

    def test_product_installment_defaults(self):
        orm_product = ORMProduct(
            id="p-1",
            supplier_id="supplier-1",
            name="Rasp",
            price=Decimal("129.00"),
            original_price=None,
            discount_percentage=None,
            max_installments=None,
            interest_free_installments=None,
            created_at=datetime(2024, 1, 1),
        )

        product = product_to_domain(orm_product)

        assert product.original_price is None
        assert product.discount_percentage is None
        assert product.max_installments == 3
        assert product.interest_free_installments == 3

    def test_product_with_original_price(self):
        orm_product = ORMProduct(
            id="p-2",
            supplier_id="supplier-1",
            name="Saddle",
            price=Decimal("1890.00"),
            original_price="2200.00",
            discount_percentage=0,
            max_installments=10,
            interest_free_installments=5,
            created_at=datetime(2024, 1, 1),
        )

        product = product_to_domain(orm_product)

        assert product.original_price == Decimal("2200.00")
        assert product.discount_percentage == 0
        assert product.max_installments == 10
        assert product.interest_free_installments == 5


class TestSupplierClientMapper:
    """Tests for SupplierClient mapper."""

    def test_supplier_client_to_domain(self):
        orm_client = ORMSupplierClient(
            id="c-1",
            supplier_id="supplier-1",
            name="Haras Boa Vista",
            email="",
            phone=None,
            created_at=datetime(2024, 1, 1),
        )

        client = supplier_client_to_domain(orm_client)

        assert client.name == "Haras Boa Vista"
        assert client.email is None
        assert client.phone is None
