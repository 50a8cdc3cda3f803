"""Expense domain service."""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from equiledger.database.base import Database
from equiledger.domain import errors
from equiledger.domain.entities import Expense, ExpenseCategory, has_cent_precision
from equiledger.domain.errors import NotFoundError, ValidationError
from equiledger.domain.period import expense_date as expense_date_of, filter_by_month

logger = logging.getLogger(__name__)


def parse_category(category: ExpenseCategory | str) -> ExpenseCategory:
    """Resolve a category value, raising ValidationError for unknown ones."""
    if isinstance(category, ExpenseCategory):
        return category
    try:
        return ExpenseCategory((category or "").strip().lower())
    except ValueError:
        valid = ", ".join(c.value for c in ExpenseCategory)
        raise ValidationError(f"Unknown expense category '{category}'. Valid: {valid}")


class ExpenseService:
    """Service for managing expenses."""

    def __init__(self, db: Database):
        """Initialize expense service.

        Args:
            db: Database instance
        """
        self.db = db

    def add_expense(
        self,
        supplier_id: str,
        category: ExpenseCategory | str,
        amount: Optional[Decimal],
        expense_date: Optional[date] = None,
        description: Optional[str] = None,
    ) -> Expense:
        """Record an expense.

        Args:
            supplier_id: Owning supplier
            category: Expense category
            amount: Amount spent
            expense_date: Day the expense happened (defaults to today)
            description: Optional free text

        Raises:
            ValidationError: If category or amount is missing or invalid
        """
        if not supplier_id:
            raise ValidationError(errors.missing_supplier())
        if not category:
            raise ValidationError("Expense category is required")
        category = parse_category(category)
        if amount is None:
            raise ValidationError("Expense amount is required")
        if amount < 0:
            raise ValidationError(errors.negative_amount("Expense amount", amount))
        if not has_cent_precision(amount):
            raise ValidationError(errors.too_many_decimals("Expense amount", amount))

        expense = self.db.create_expense(
            supplier_id=supplier_id,
            category=category,
            amount=amount,
            expense_date=expense_date or date.today(),
            description=(description or "").strip() or None,
        )
        logger.info("Added %s expense %s for supplier %s", category.value, expense.id, supplier_id)
        return expense

    def delete_expense(self, supplier_id: str, expense_id: str) -> bool:
        """Delete an expense; returns False if it was already gone."""
        try:
            self.db.delete_expense(supplier_id, expense_id)
        except NotFoundError:
            logger.info("Expense %s already deleted", expense_id)
            return False
        logger.info("Deleted expense %s for supplier %s", expense_id, supplier_id)
        return True

    def list_expenses(self, supplier_id: str, month_key: Optional[str] = None) -> list[Expense]:
        """List expenses, newest first, optionally limited to one month."""
        expenses = self.db.list_expenses(supplier_id)
        if month_key is not None:
            expenses = filter_by_month(expenses, month_key, expense_date_of)
        return expenses
