"""Transaction domain service."""

import logging
import math
from datetime import datetime
from typing import Optional

from supplyledger.database.base import Database
from supplyledger.domain.entities import Transaction as TransactionEntity
from supplyledger.domain.errors import (
    NotFoundError,
    ValidationError,
    non_finite_value,
    transaction_not_found,
)

logger = logging.getLogger(__name__)


class TransactionService:
    """Service for managing transactions."""

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_transaction(
        self,
        invoice_number: str,
        supplier: str,
        value_nok: float,
        spend_category_l1: str,
        spend_category_l2: str,
        spend_category_l3: str,
        spend_category_l4: str,
        invoice_date: Optional[datetime] = None,
        due_date: Optional[datetime] = None,
    ) -> TransactionEntity:
        """Create a transaction.

        ``supplier`` is stored as given; it is not checked against existing
        suppliers.

        Args:
            invoice_number: Invoice number
            supplier: Supplier display name
            value_nok: Transaction value in NOK
            spend_category_l1: Coarsest spend category
            spend_category_l2: Second-level spend category
            spend_category_l3: Third-level spend category
            spend_category_l4: Finest spend category
            invoice_date: Optional timezone-aware invoice date
            due_date: Optional timezone-aware due date

        Returns:
            Transaction entity including its assigned ID

        Raises:
            ValidationError: If value_nok is not finite or a date has no UTC offset
            StoreError: If the database write fails
        """
        if not math.isfinite(value_nok):
            raise ValidationError(non_finite_value(value_nok))

        transaction_id = self.db.create_transaction(
            invoice_number=invoice_number,
            supplier=supplier,
            invoice_date=invoice_date,
            due_date=due_date,
            value_nok=value_nok,
            spend_category_l1=spend_category_l1,
            spend_category_l2=spend_category_l2,
            spend_category_l3=spend_category_l3,
            spend_category_l4=spend_category_l4,
        )
        logger.info(
            "Created transaction %d (invoice %s, %.2f NOK)", transaction_id, invoice_number, value_nok
        )
        return TransactionEntity(
            id=transaction_id,
            invoice_number=invoice_number,
            supplier=supplier,
            invoice_date=invoice_date,
            due_date=due_date,
            value_nok=value_nok,
            spend_category_l1=spend_category_l1,
            spend_category_l2=spend_category_l2,
            spend_category_l3=spend_category_l3,
            spend_category_l4=spend_category_l4,
        )

    def get_transaction(self, transaction_id: int) -> TransactionEntity:
        """Get transaction by ID.

        Raises:
            NotFoundError: If no transaction has this ID
        """
        transaction = self.db.get_transaction(transaction_id)
        if transaction is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        return transaction

    def list_transactions(self) -> list[TransactionEntity]:
        """List all transactions."""
        return self.db.list_transactions()
