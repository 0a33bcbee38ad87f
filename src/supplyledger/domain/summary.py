"""Summary domain service for aggregate metrics."""

from supplyledger.database.base import Database


class SummaryService:
    """Service computing totals directly in the database."""

    def __init__(self, db: Database):
        self.db = db

    def total_spent(self) -> float:
        """Total TransactionValueNOK across all transactions (0.0 when none)."""
        return self.db.sum_transaction_values()

    def total_suppliers(self) -> int:
        """Number of stored suppliers (0 when none)."""
        return self.db.count_suppliers()
