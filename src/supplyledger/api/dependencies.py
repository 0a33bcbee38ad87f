"""FastAPI dependencies resolving services from the shared database."""

from fastapi import Depends, Request

from supplyledger.database.base import Database
from supplyledger.domain.summary import SummaryService
from supplyledger.domain.supplier import SupplierService
from supplyledger.domain.transaction import TransactionService


def get_db(request: Request) -> Database:
    """Return the database attached to the application at startup."""
    return request.app.state.db


def get_supplier_service(db: Database = Depends(get_db)) -> SupplierService:
    return SupplierService(db)


def get_transaction_service(db: Database = Depends(get_db)) -> TransactionService:
    return TransactionService(db)


def get_summary_service(db: Database = Depends(get_db)) -> SummaryService:
    return SummaryService(db)
