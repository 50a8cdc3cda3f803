"""Catalog domain service: products and their display prices."""

import logging
from decimal import Decimal
from typing import Optional

from equiledger.database.base import Database
from equiledger.domain import errors
from equiledger.domain.entities import PriceDisplay, Product, has_cent_precision
from equiledger.domain.errors import NotFoundError, ValidationError
from equiledger.domain.pricing import (
    DEFAULT_INTEREST_FREE_INSTALLMENTS,
    clamp_discount,
    derive_price,
    has_discount_signal,
    installment_value,
)

logger = logging.getLogger(__name__)

MAX_INSTALLMENTS = 12


class CatalogService:
    """Service for a supplier's product catalog."""

    def __init__(self, db: Database, synthetic_markdown: bool = True):
        """Initialize catalog service.

        Args:
            db: Database instance
            synthetic_markdown: Show a fictitious "was" price for products
                without a real discount
        """
        self.db = db
        self.synthetic_markdown = synthetic_markdown

    def create_product(
        self,
        supplier_id: str,
        name: str,
        price: Decimal,
        original_price: Optional[Decimal] = None,
        discount_percentage: Optional[int] = None,
        max_installments: int = DEFAULT_INTEREST_FREE_INSTALLMENTS,
        interest_free_installments: int = DEFAULT_INTEREST_FREE_INSTALLMENTS,
    ) -> Product:
        """Add a product to the catalog.

        The discount is clamped to 0-99 and interest-free installments cannot
        exceed the maximum number of installments.

        Raises:
            ValidationError: If name or price is invalid
        """
        if not supplier_id:
            raise ValidationError(errors.missing_supplier())
        name = (name or "").strip()
        if not name:
            raise ValidationError("Product name is required")
        if price < 0:
            raise ValidationError(errors.negative_amount("Price", price))
        if not has_cent_precision(price):
            raise ValidationError(errors.too_many_decimals("Price", price))
        if original_price is not None and original_price < 0:
            raise ValidationError(errors.negative_amount("Original price", original_price))
        if original_price is not None and not has_cent_precision(original_price):
            raise ValidationError(errors.too_many_decimals("Original price", original_price))
        if not 1 <= max_installments <= MAX_INSTALLMENTS:
            raise ValidationError(
                f"Installments must be between 1 and {MAX_INSTALLMENTS}, got {max_installments}"
            )
        interest_free_installments = max(1, min(interest_free_installments, max_installments))

        product = self.db.create_product(
            supplier_id=supplier_id,
            name=name,
            price=price,
            original_price=original_price,
            discount_percentage=clamp_discount(discount_percentage),
            max_installments=max_installments,
            interest_free_installments=interest_free_installments,
        )
        logger.info("Created product %s for supplier %s", product.id, supplier_id)
        return product

    def get_product(self, supplier_id: str, product_id: str) -> Product:
        """Get a product, raising NotFoundError if it does not exist."""
        product = self.db.get_product(supplier_id, product_id)
        if product is None:
            raise NotFoundError(errors.product_not_found(product_id))
        return product

    def list_products(self, supplier_id: str) -> list[Product]:
        """List products by name."""
        return self.db.list_products(supplier_id)

    def delete_product(self, supplier_id: str, product_id: str) -> None:
        """Delete a product.

        Raises:
            NotFoundError: If the product does not exist
        """
        self.db.delete_product(supplier_id, product_id)
        logger.info("Deleted product %s for supplier %s", product_id, supplier_id)

    def price_display(self, product: Product) -> PriceDisplay:
        """Display prices for a product card."""
        count = product.interest_free_installments or DEFAULT_INTEREST_FREE_INSTALLMENTS
        per_installment = installment_value(product.price, count)
        signalled = has_discount_signal(
            product.price, product.original_price, product.discount_percentage
        )
        if not signalled and not self.synthetic_markdown:
            return PriceDisplay(
                price=product.price,
                display_original=None,
                display_discount_percent=None,
                installment_count=max(1, count),
                installment_value=per_installment,
            )

        display_original, discount = derive_price(
            product.price, product.original_price, product.discount_percentage
        )
        return PriceDisplay(
            price=product.price,
            display_original=display_original,
            display_discount_percent=discount,
            installment_count=max(1, count),
            installment_value=per_installment,
            is_synthetic=not signalled,
        )
