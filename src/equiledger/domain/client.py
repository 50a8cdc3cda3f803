"""Supplier client domain service."""

import logging
from typing import Optional

from equiledger.database.base import Database
from equiledger.domain import errors
from equiledger.domain.entities import SupplierClient
from equiledger.domain.errors import ConflictError, ValidationError

logger = logging.getLogger(__name__)


class ClientService:
    """Service for a supplier's own customer records."""

    def __init__(self, db: Database):
        """Initialize client service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_client(
        self,
        supplier_id: str,
        name: str,
        email: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> SupplierClient:
        """Create a client.

        Raises:
            ValidationError: If the name is missing
            ConflictError: If the supplier already has a client with this email
        """
        if not supplier_id:
            raise ValidationError(errors.missing_supplier())
        name = (name or "").strip()
        if not name:
            raise ValidationError("Client name is required")
        email = (email or "").strip().lower() or None
        if email is not None:
            for existing in self.db.list_clients(supplier_id):
                if existing.email == email:
                    raise ConflictError(f"Client with email '{email}' already exists")

        client = self.db.create_client(
            supplier_id=supplier_id,
            name=name,
            email=email,
            phone=(phone or "").strip() or None,
        )
        logger.info("Created client %s for supplier %s", client.id, supplier_id)
        return client

    def list_clients(self, supplier_id: str) -> list[SupplierClient]:
        """List clients by name."""
        return self.db.list_clients(supplier_id)
