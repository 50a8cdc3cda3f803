"""Financial settings domain service."""

import logging
from decimal import Decimal

from equiledger.database.base import Database
from equiledger.domain import errors
from equiledger.domain.entities import FinancialSettings, has_cent_precision
from equiledger.domain.errors import ValidationError

logger = logging.getLogger(__name__)


class FinancialSettingsService:
    """Service for the per-supplier tax rate."""

    def __init__(self, db: Database):
        """Initialize settings service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_tax_rate(self, supplier_id: str) -> Decimal:
        """Current tax rate in percent, 0 if never configured."""
        settings = self.db.get_settings(supplier_id)
        if settings is None:
            return Decimal("0")
        return settings.tax_rate_percent

    def set_tax_rate(self, supplier_id: str, tax_rate_percent: Decimal) -> FinancialSettings:
        """Create or update the supplier's tax rate.

        Raises:
            ValidationError: If the rate is outside 0-100
        """
        if not supplier_id:
            raise ValidationError(errors.missing_supplier())
        if tax_rate_percent < 0 or tax_rate_percent > 100:
            raise ValidationError(errors.tax_rate_out_of_range(tax_rate_percent))
        if not has_cent_precision(tax_rate_percent):
            raise ValidationError(errors.too_many_decimals("Tax rate", tax_rate_percent))
        settings = self.db.upsert_settings(supplier_id, tax_rate_percent)
        logger.info("Tax rate for supplier %s set to %s%%", supplier_id, tax_rate_percent)
        return settings
