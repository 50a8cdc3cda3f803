"""Sale domain service."""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional

from equiledger.database.base import Database
from equiledger.domain import errors
from equiledger.domain.entities import PaymentMethod, Sale, has_cent_precision
from equiledger.domain.errors import NotFoundError, ValidationError
from equiledger.domain.period import filter_by_month, sale_date

logger = logging.getLogger(__name__)


class SaleService:
    """Service for registering and removing sales."""

    def __init__(self, db: Database):
        """Initialize sale service.

        Args:
            db: Database instance
        """
        self.db = db

    def register_sale(
        self,
        supplier_id: str,
        product_name: str,
        sale_value: Decimal,
        profit: Decimal = Decimal("0"),
        payment_method: Optional[PaymentMethod | str] = None,
        linked_client_id: Optional[str] = None,
        created_at: Optional[datetime] = None,
    ) -> Sale:
        """Register a sale.

        Args:
            supplier_id: Owning supplier
            product_name: Label of the product sold (free text snapshot)
            sale_value: Gross amount charged
            profit: Net margin on this sale
            payment_method: pix, cash, card or bank_slip
            linked_client_id: Optional supplier client the sale was made to
            created_at: Override of the sale timestamp, for back-dated entries

        Returns:
            The stored sale

        Raises:
            ValidationError: If a field is missing or out of range
            NotFoundError: If the linked client does not exist
        """
        if not supplier_id:
            raise ValidationError(errors.missing_supplier())
        product_name = (product_name or "").strip()
        if not product_name:
            raise ValidationError("Product name is required")
        if sale_value < 0:
            raise ValidationError(errors.negative_amount("Sale value", sale_value))
        for field, value in (("Sale value", sale_value), ("Profit", profit)):
            if not has_cent_precision(value):
                raise ValidationError(errors.too_many_decimals(field, value))

        if payment_method is not None and not isinstance(payment_method, PaymentMethod):
            try:
                payment_method = PaymentMethod(payment_method)
            except ValueError:
                valid = ", ".join(m.value for m in PaymentMethod)
                raise ValidationError(
                    f"Unknown payment method '{payment_method}'. Valid: {valid}"
                )

        if linked_client_id is not None:
            if self.db.get_client(supplier_id, linked_client_id) is None:
                raise NotFoundError(errors.client_not_found(linked_client_id))

        sale = self.db.create_sale(
            supplier_id=supplier_id,
            product_name=product_name,
            sale_value=sale_value,
            profit=profit,
            payment_method=payment_method,
            linked_client_id=linked_client_id,
            created_at=created_at,
        )
        logger.info("Registered sale %s for supplier %s", sale.id, supplier_id)
        return sale

    def delete_sale(self, supplier_id: str, sale_id: str) -> bool:
        """Delete a sale.

        Deleting a sale that is already gone is not an error.

        Returns:
            True if a row was deleted, False if it did not exist
        """
        try:
            self.db.delete_sale(supplier_id, sale_id)
        except NotFoundError:
            logger.info("Sale %s already deleted", sale_id)
            return False
        logger.info("Deleted sale %s for supplier %s", sale_id, supplier_id)
        return True

    def get_sale(self, supplier_id: str, sale_id: str) -> Optional[Sale]:
        """Get a sale by ID."""
        return self.db.get_sale(supplier_id, sale_id)

    def list_sales(self, supplier_id: str, month_key: Optional[str] = None) -> list[Sale]:
        """List sales, newest first, optionally limited to one month."""
        sales = self.db.list_sales(supplier_id)
        if month_key is not None:
            sales = filter_by_month(sales, month_key, sale_date)
        return sales
