"""Ledger session: the supplier's financial view of one selected month.

The session is an explicit object carrying the supplier ID instead of ambient
state. Month loads are tagged with a monotonic token; a snapshot is only
applied if its token is still the newest, so an older load finishing late
cannot overwrite a newer month selection.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from equiledger.database.base import Database
from equiledger.domain.entities import Expense, PeriodSummary, Sale
from equiledger.domain.errors import ValidationError, missing_supplier
from equiledger.domain.expense import ExpenseService
from equiledger.domain.period import current_month_key, parse_month_key
from equiledger.domain.sale import SaleService
from equiledger.domain.settings import FinancialSettingsService
from equiledger.domain.summary import SummaryService, summarize

logger = logging.getLogger(__name__)


class RequestSequence:
    """Issues increasing tokens and remembers the newest one."""

    def __init__(self) -> None:
        self._latest = 0

    def next(self) -> int:
        self._latest += 1
        return self._latest

    def is_current(self, token: int) -> bool:
        return token == self._latest


@dataclass(frozen=True)
class MonthSnapshot:
    """Everything the financial view shows for one month."""

    month_key: str
    sales: tuple[Sale, ...]
    expenses: tuple[Expense, ...]
    tax_rate_percent: Decimal
    summary: PeriodSummary


class LedgerSession:
    """Financial view state for one supplier."""

    def __init__(self, db: Database, supplier_id: str, month_key: Optional[str] = None):
        if not supplier_id:
            raise ValidationError(missing_supplier())
        self.db = db
        self.supplier_id = supplier_id
        self.month_key = month_key or current_month_key()
        parse_month_key(self.month_key)
        self.snapshot: Optional[MonthSnapshot] = None
        self.sale_service = SaleService(db)
        self.expense_service = ExpenseService(db)
        self.settings_service = FinancialSettingsService(db)
        self.summary_service = SummaryService(db)
        self._sequence = RequestSequence()

    def begin_month_load(self, month_key: str) -> int:
        """Select a month and return the token its load must present."""
        parse_month_key(month_key)
        self.month_key = month_key
        return self._sequence.next()

    def fetch_month_snapshot(self, month_key: str) -> MonthSnapshot:
        """Query the store for one month. Does not touch session state."""
        sales, expenses = self.summary_service.get_month_entries(self.supplier_id, month_key)
        tax_rate = self.settings_service.get_tax_rate(self.supplier_id)
        return MonthSnapshot(
            month_key=month_key,
            sales=tuple(sales),
            expenses=tuple(expenses),
            tax_rate_percent=tax_rate,
            summary=summarize(sales, expenses, tax_rate),
        )

    def apply_month_snapshot(self, token: int, snapshot: MonthSnapshot) -> bool:
        """Apply a loaded snapshot unless a newer load has started since.

        Returns:
            True if applied, False if the snapshot was stale and dropped
        """
        if not self._sequence.is_current(token):
            logger.debug(
                "Dropping stale snapshot for %s (token %s)", snapshot.month_key, token
            )
            return False
        self.snapshot = snapshot
        return True

    def select_month(self, month_key: str) -> MonthSnapshot:
        """Load and apply a month in one step."""
        token = self.begin_month_load(month_key)
        snapshot = self.fetch_month_snapshot(month_key)
        self.apply_month_snapshot(token, snapshot)
        return self.snapshot

    def refresh(self) -> MonthSnapshot:
        """Re-query the currently selected month."""
        return self.select_month(self.month_key)

    # Mutations are completed before the view is re-queried.
    def register_sale(self, **kwargs) -> Sale:
        sale = self.sale_service.register_sale(supplier_id=self.supplier_id, **kwargs)
        self.refresh()
        return sale

    def add_expense(self, **kwargs) -> Expense:
        expense = self.expense_service.add_expense(supplier_id=self.supplier_id, **kwargs)
        self.refresh()
        return expense

    def delete_sale(self, sale_id: str) -> bool:
        deleted = self.sale_service.delete_sale(self.supplier_id, sale_id)
        self.refresh()
        return deleted

    def delete_expense(self, expense_id: str) -> bool:
        deleted = self.expense_service.delete_expense(self.supplier_id, expense_id)
        self.refresh()
        return deleted

    def set_tax_rate(self, tax_rate_percent: Decimal) -> MonthSnapshot:
        self.settings_service.set_tax_rate(self.supplier_id, tax_rate_percent)
        return self.refresh()
