"""Opt-in demo data for empty catalogs."""

import logging
import random
from decimal import Decimal

from equiledger.domain.catalog import CatalogService
from equiledger.domain.entities import Product

logger = logging.getLogger(__name__)

DEMO_PRODUCTS = [
    ("Steel horseshoe set", Decimal("89.90")),
    ("Farrier rasp", Decimal("129.00")),
    ("Horseshoe nails (box)", Decimal("45.50")),
    ("Hoof knife", Decimal("74.90")),
    ("Leather saddle", Decimal("1890.00")),
    ("Snaffle bit", Decimal("159.90")),
    ("Stirrup pair", Decimal("210.00")),
    ("Hoof care ointment", Decimal("39.90")),
    ("Trimming service", Decimal("150.00")),
]


def seed_demo_catalog(
    catalog_service: CatalogService,
    supplier_id: str,
    enabled: bool,
    *,
    seed: int = 7,
) -> list[Product]:
    """Create placeholder products when seeding is enabled and the catalog is empty.

    Returns:
        The created products; empty if seeding is disabled or products exist
    """
    if not enabled:
        return []
    if catalog_service.list_products(supplier_id):
        return []

    rng = random.Random(seed)
    created = []
    for name, price in DEMO_PRODUCTS:
        discount = rng.choice([None, None, 10, 15, 20])
        created.append(
            catalog_service.create_product(
                supplier_id=supplier_id,
                name=name,
                price=price,
                discount_percentage=discount,
                max_installments=rng.choice([3, 6, 10]),
                interest_free_installments=3,
            )
        )
    logger.info("Seeded %d demo products for supplier %s", len(created), supplier_id)
    return created
