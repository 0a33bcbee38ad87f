"""Domain model entities for supplyledger.

These are pure data classes representing business concepts, independent of
database schema and of the JSON field names used on the wire.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Supplier:
    """Supplier master-data entity."""

    id: int
    name: str
    name_original: str
    country: str
    vat_id: str
    nace: str


@dataclass(frozen=True)
class Transaction:
    """Procurement transaction entity.

    ``supplier`` is the supplier's display name, not a reference to
    ``Supplier.id``.
    """

    id: int
    invoice_number: str
    supplier: str
    invoice_date: Optional[datetime]
    due_date: Optional[datetime]
    value_nok: float
    spend_category_l1: str
    spend_category_l2: str
    spend_category_l3: str
    spend_category_l4: str
