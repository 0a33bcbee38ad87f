"""Mapper functions to convert between SQLAlchemy models and domain models.

Stored dates are text; this layer decodes them so that nothing above the
database sees the storage representation.
"""

from typing import Optional
from datetime import datetime

from supplyledger.domain import entities as domain
from supplyledger.domain.errors import StoreError, ValidationError
from supplyledger.database.models import (
    Supplier as ORMSupplier,
    Transaction as ORMTransaction,
)
from supplyledger.utils.instant_codec import decode_optional_instant


def supplier_to_domain(orm_supplier: ORMSupplier) -> domain.Supplier:
    """Convert SQLAlchemy Supplier model to domain Supplier entity."""
    return domain.Supplier(
        id=orm_supplier.id,
        name=orm_supplier.name,
        name_original=orm_supplier.name_original,
        country=orm_supplier.country,
        vat_id=orm_supplier.vat_id,
        nace=orm_supplier.nace,
    )


def _decode_stored_instant(transaction_id: int, text: Optional[str]) -> Optional[datetime]:
    try:
        return decode_optional_instant(text)
    except ValidationError as e:
        raise StoreError(f"Transaction {transaction_id} has a corrupt stored date") from e


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity.

    Raises:
        StoreError: If a stored date cannot be decoded
    """
    return domain.Transaction(
        id=orm_transaction.id,
        invoice_number=orm_transaction.invoice_number,
        supplier=orm_transaction.supplier,
        invoice_date=_decode_stored_instant(orm_transaction.id, orm_transaction.invoice_date),
        due_date=_decode_stored_instant(orm_transaction.id, orm_transaction.due_date),
        value_nok=orm_transaction.value_nok,
        spend_category_l1=orm_transaction.spend_category_l1,
        spend_category_l2=orm_transaction.spend_category_l2,
        spend_category_l3=orm_transaction.spend_category_l3,
        spend_category_l4=orm_transaction.spend_category_l4,
    )
