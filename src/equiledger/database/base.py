"""Abstract ledger store interface.

Every operation is scoped to a supplier. Implementations only return rows
owned by the given supplier and raise NotFoundError when asked to delete a row
the supplier does not own.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from equiledger.domain.entities import (
    Expense,
    ExpenseCategory,
    FinancialSettings,
    PaymentMethod,
    Product,
    Sale,
    SupplierClient,
)


class Database(ABC):
    """Abstract database interface for equiledger."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Sale operations
    @abstractmethod
    def create_sale(
        self,
        supplier_id: str,
        product_name: str,
        sale_value: Decimal,
        profit: Decimal,
        payment_method: Optional[PaymentMethod] = None,
        linked_client_id: Optional[str] = None,
        created_at: Optional[datetime] = None,
    ) -> Sale:
        """Insert a sale and return it."""
        pass

    @abstractmethod
    def get_sale(self, supplier_id: str, sale_id: str) -> Optional[Sale]:
        """Get a sale by ID."""
        pass

    @abstractmethod
    def delete_sale(self, supplier_id: str, sale_id: str) -> None:
        """Delete a sale. Raises NotFoundError if it does not exist."""
        pass

    @abstractmethod
    def list_sales(self, supplier_id: str) -> list[Sale]:
        """List a supplier's sales, newest first."""
        pass

    # Expense operations
    @abstractmethod
    def create_expense(
        self,
        supplier_id: str,
        category: ExpenseCategory,
        amount: Decimal,
        expense_date: date,
        description: Optional[str] = None,
    ) -> Expense:
        """Insert an expense and return it."""
        pass

    @abstractmethod
    def get_expense(self, supplier_id: str, expense_id: str) -> Optional[Expense]:
        """Get an expense by ID."""
        pass

    @abstractmethod
    def delete_expense(self, supplier_id: str, expense_id: str) -> None:
        """Delete an expense. Raises NotFoundError if it does not exist."""
        pass

    @abstractmethod
    def list_expenses(self, supplier_id: str) -> list[Expense]:
        """List a supplier's expenses, newest expense date first."""
        pass

    # Settings operations
    @abstractmethod
    def upsert_settings(self, supplier_id: str, tax_rate_percent: Decimal) -> FinancialSettings:
        """Create or update the supplier's settings row."""
        pass

    @abstractmethod
    def get_settings(self, supplier_id: str) -> Optional[FinancialSettings]:
        """Get the supplier's settings, or None if never saved."""
        pass

    # Product operations
    @abstractmethod
    def create_product(
        self,
        supplier_id: str,
        name: str,
        price: Decimal,
        original_price: Optional[Decimal] = None,
        discount_percentage: Optional[int] = None,
        max_installments: int = 3,
        interest_free_installments: int = 3,
    ) -> Product:
        """Insert a product and return it."""
        pass

    @abstractmethod
    def get_product(self, supplier_id: str, product_id: str) -> Optional[Product]:
        """Get a product by ID."""
        pass

    @abstractmethod
    def delete_product(self, supplier_id: str, product_id: str) -> None:
        """Delete a product. Raises NotFoundError if it does not exist."""
        pass

    @abstractmethod
    def list_products(self, supplier_id: str) -> list[Product]:
        """List a supplier's products by name."""
        pass

    # Supplier client operations
    @abstractmethod
    def create_client(
        self,
        supplier_id: str,
        name: str,
        email: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> SupplierClient:
        """Insert a supplier client and return it."""
        pass

    @abstractmethod
    def get_client(self, supplier_id: str, client_id: str) -> Optional[SupplierClient]:
        """Get a supplier client by ID."""
        pass

    @abstractmethod
    def list_clients(self, supplier_id: str) -> list[SupplierClient]:
        """List a supplier's clients by name."""
        pass
