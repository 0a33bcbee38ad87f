"""Supplier domain service."""

import logging

from supplyledger.database.base import Database
from supplyledger.domain.entities import Supplier as SupplierEntity
from supplyledger.domain.errors import NotFoundError, supplier_not_found

logger = logging.getLogger(__name__)


class SupplierService:
    """Service for managing suppliers."""

    def __init__(self, db: Database):
        """Initialize supplier service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_supplier(
        self,
        name: str,
        name_original: str,
        country: str,
        vat_id: str,
        nace: str,
    ) -> SupplierEntity:
        """Create a supplier.

        The returned entity is built from the submitted fields and the new ID;
        the row is not read back. Submitting the same supplier twice creates
        two rows.

        Args:
            name: Display name
            name_original: Original (native) supplier name
            country: Country code or name
            vat_id: VAT identifier
            nace: NACE industry code

        Returns:
            Supplier entity including its assigned ID

        Raises:
            StoreError: If the database write fails
        """
        supplier_id = self.db.create_supplier(
            name=name,
            name_original=name_original,
            country=country,
            vat_id=vat_id,
            nace=nace,
        )
        logger.info("Created supplier %d (%s)", supplier_id, name)
        return SupplierEntity(
            id=supplier_id,
            name=name,
            name_original=name_original,
            country=country,
            vat_id=vat_id,
            nace=nace,
        )

    def get_supplier(self, supplier_id: int) -> SupplierEntity:
        """Get supplier by ID.

        Raises:
            NotFoundError: If no supplier has this ID
        """
        supplier = self.db.get_supplier(supplier_id)
        if supplier is None:
            raise NotFoundError(supplier_not_found(supplier_id))
        return supplier

    def list_suppliers(self) -> list[SupplierEntity]:
        """List all suppliers."""
        return self.db.list_suppliers()
