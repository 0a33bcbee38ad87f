"""Abstract database interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from supplyledger.domain.entities import Supplier, Transaction


class Database(ABC):
    """Abstract database interface for supplyledger.

    Implementations must be safe to share across concurrent request
    handlers and must raise ``StoreError`` for any storage fault.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Supplier operations
    @abstractmethod
    def create_supplier(
        self,
        name: str,
        name_original: str,
        country: str,
        vat_id: str,
        nace: str,
    ) -> int:
        """Create a supplier. Returns supplier ID."""
        pass

    @abstractmethod
    def get_supplier(self, supplier_id: int) -> Optional[Supplier]:
        """Get supplier by ID."""
        pass

    @abstractmethod
    def list_suppliers(self) -> list[Supplier]:
        """List all suppliers in ID order."""
        pass

    @abstractmethod
    def count_suppliers(self) -> int:
        """Count suppliers. Returns 0 for an empty table."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(
        self,
        invoice_number: str,
        supplier: str,
        invoice_date: Optional[datetime],
        due_date: Optional[datetime],
        value_nok: float,
        spend_category_l1: str,
        spend_category_l2: str,
        spend_category_l3: str,
        spend_category_l4: str,
    ) -> int:
        """Create a transaction. Returns transaction ID."""
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def list_transactions(self) -> list[Transaction]:
        """List all transactions in ID order."""
        pass

    @abstractmethod
    def sum_transaction_values(self) -> float:
        """Sum TransactionValueNOK over all transactions. Returns 0.0 for an empty table."""
        pass
